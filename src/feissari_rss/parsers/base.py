"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from feissari_rss.models.feed import Feed


class FeedParser(Protocol):
    """RSS feed parser abstraction protocol."""

    def parse(self, raw_content: bytes, source: str) -> Feed:
        """Parse RSS content into a Feed.

        Args:
            raw_content: Raw XML document from the feed source.
            source: Source identifier used in error messages.

        Returns:
            Parsed Feed with items in document order.

        Raises:
            ParseError: When parsing fails.
        """
        ...
