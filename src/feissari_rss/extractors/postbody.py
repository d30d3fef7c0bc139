"""Image extraction from the post body of a Feissarimokat page."""

import httpx
import structlog
from bs4 import BeautifulSoup

from feissari_rss.exceptions import ExtractError
from feissari_rss.models.extraction import ImageExtraction, Outcome

logger = structlog.get_logger()


def normalize_image_url(src: str, base_url: str) -> str:
    """Turn an image ``src`` into an absolute URL.

    Anything not starting with ``http`` is treated as a path on the
    static asset host.

    Example: /img/x.jpg -> https://static.feissarimokat.com/img/x.jpg
    """
    if src.startswith("http"):
        return src
    if not src.startswith("/"):
        src = "/" + src
    return base_url.rstrip("/") + src


class PostBodyImageExtractor:
    """Reads ``<img>`` tags from the main post container of an item page.

    Only images matched by the selector are returned, so navigation,
    ads and other site chrome are ignored.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://static.feissarimokat.com",
        selector: str = "div.postbody img",
    ):
        """Initialize image extractor.

        Args:
            client: Shared HTTP client carrying timeout and User-Agent.
            base_url: Origin prepended to relative image paths.
            selector: CSS selector matching the post images.
        """
        self._client = client
        self._base_url = base_url
        self._selector = selector

    async def extract_images(self, page_url: str) -> list[str]:
        """Fetch an item page and return its post images.

        Args:
            page_url: Item page URL.

        Returns:
            Absolute image URLs in document order.

        Raises:
            ExtractError: When the page request fails or returns non-200.
        """
        try:
            response = await self._client.get(page_url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ExtractError(page_url, f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ExtractError(
                page_url,
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        return self.parse_images(response.text)

    def parse_images(self, html: str) -> list[str]:
        """Return absolute image URLs found in an HTML document."""
        soup = BeautifulSoup(html, "html.parser")
        images = []
        for img in soup.select(self._selector):
            src = (img.get("src") or "").strip()
            if not src:
                continue
            images.append(normalize_image_url(src, self._base_url))
        return images

    async def try_extract(self, page_url: str) -> ImageExtraction:
        """Extract images, turning an ExtractError into a recoverable result."""
        try:
            images = await self.extract_images(page_url)
        except ExtractError as e:
            logger.warning("Image extraction failed", page_url=page_url, error=str(e))
            return ImageExtraction(
                page_url=page_url,
                outcome=Outcome.RECOVERABLE,
                error=str(e),
            )

        logger.debug("Images extracted", page_url=page_url, count=len(images))
        return ImageExtraction(page_url=page_url, images=images)
