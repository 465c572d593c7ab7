class CostscopeError(Exception):
    """
    base class for every error raised while loading the dataset.
    """


class NetworkError(CostscopeError):
    """
    raised on connection failures, timeouts and
    non-success HTTP statuses.
    """

    def __init__(self, url: "str", reason: "str") -> "None":
        super().__init__(f"request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class MalformedDataError(CostscopeError):
    """
    raised when a response body is not valid JSON or a
    record is missing a required field or has the wrong type.
    """

    def __init__(self, reason: "str", source: "str" = "") -> "None":
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}malformed data: {reason}")
        self.source = source
        self.reason = reason
