import httpx
import structlog

from costscope.errors import NetworkError

logger = structlog.get_logger()

BASE_URL = "https://engineering-task.elancoapps.com/api"

RAW_URL = f"{BASE_URL}/raw"
APPLICATIONS_URL = f"{BASE_URL}/applications"
RESOURCES_URL = f"{BASE_URL}/resources"


class HttpFetcher:
    """
    HttpFetcher implements the Fetcher protocol on top of an
    httpx.AsyncClient. Each call issues a single GET without
    retries and turns every transport failure or non-success
    status into a NetworkError.
    """

    def __init__(self, timeout: "float" = 10.0) -> "None":
        self._client: "httpx.AsyncClient" = httpx.AsyncClient(timeout=timeout)

    async def close(self) -> "None":
        """
        closes the underlying HTTP client.
        """
        await self._client.aclose()

    async def fetch(self, url: "str") -> "str":
        """
        fetches the body of the given URL as text.
        """
        logger.debug("fetch_start", url=url)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            # connection errors, timeouts and protocol errors
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

        logger.debug("fetch_done", url=url, size=len(resp.content))
        return resp.text
