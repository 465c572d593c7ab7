from typing import Protocol


class Fetcher(Protocol):
    """
    Fetcher stands as a common protocol for anything that
    can retrieve a response body for a given URL.

    Implementations must raise NetworkError on any transport
    failure and release their connections once the body is read.
    """

    async def fetch(self, url: "str") -> "str": ...

    async def close(self) -> "None": ...
