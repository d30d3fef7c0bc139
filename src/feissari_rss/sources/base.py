"""Abstract feed source interface using Protocol."""

from typing import Protocol


class FeedSource(Protocol):
    """RSS feed source abstraction protocol."""

    @property
    def url(self) -> str:
        """Upstream feed URL."""
        ...

    async def fetch_raw(self) -> bytes:
        """Fetch raw RSS XML content.

        Returns:
            bytes: Raw XML document, undecoded.

        Raises:
            FetchError: On a non-200 response or network failure.
        """
        ...
