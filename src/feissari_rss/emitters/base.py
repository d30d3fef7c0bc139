"""Abstract feed emitter interface using Protocol."""

from pathlib import Path
from typing import Protocol

from feissari_rss.models.feed import Feed


class FeedEmitter(Protocol):
    """Output format strategy.

    Each implementation owns one serialization format; choosing between
    them is left to create_emitter.
    """

    @property
    def format_name(self) -> str:
        """Short format identifier (``rss`` or ``atom``)."""
        ...

    @property
    def default_filename(self) -> str:
        """File name used when the caller does not pass one."""
        ...

    def serialize(self, feed: Feed) -> bytes:
        """Render the feed as a UTF-8 XML document.

        Raises:
            SerializeError: When the document cannot be generated.
        """
        ...

    def emit(self, feed: Feed, output_dir: Path, filename: str | None = None) -> Path:
        """Serialize the feed and write it below output_dir.

        Returns:
            Path of the written file.

        Raises:
            SerializeError: When the document cannot be generated.
            WriteError: When the directory or file cannot be written.
        """
        ...
