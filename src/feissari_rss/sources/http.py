"""Upstream RSS feed source over HTTP."""

import httpx
import structlog

from feissari_rss.exceptions import FetchError

logger = structlog.get_logger()


class HttpFeedSource:
    """Fetches the upstream RSS document with a single GET.

    Only a final 200 response is accepted. There are no retries; the
    caller treats any failure as fatal.
    """

    def __init__(self, url: str, client: httpx.AsyncClient):
        """Initialize feed source.

        Args:
            url: RSS feed URL.
            client: Shared HTTP client carrying timeout and User-Agent.
        """
        self._url = url
        self._client = client

    @property
    def url(self) -> str:
        """Upstream feed URL."""
        return self._url

    async def fetch_raw(self) -> bytes:
        """Fetch raw RSS XML content.

        Returns:
            Raw response body; the parser decodes it per the XML declaration.

        Raises:
            FetchError: When the request fails or returns a non-200 status.
        """
        try:
            response = await self._client.get(self._url)
        except httpx.TimeoutException as e:
            raise FetchError(self._url, f"Request timed out: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(self._url, f"Request failed: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                self._url,
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        logger.debug("Feed downloaded", url=self._url, size=len(response.content))
        return response.content
