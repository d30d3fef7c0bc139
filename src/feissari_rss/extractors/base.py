"""Abstract image extractor interface using Protocol."""

from typing import Protocol

from feissari_rss.models.extraction import ImageExtraction


class ImageExtractor(Protocol):
    """Finds the images belonging to a post on its web page."""

    async def extract_images(self, page_url: str) -> list[str]:
        """Return absolute image URLs in document order.

        Raises:
            ExtractError: On a non-200 response or network failure.
        """
        ...

    async def try_extract(self, page_url: str) -> ImageExtraction:
        """Like extract_images, but report failures as a recoverable result."""
        ...
