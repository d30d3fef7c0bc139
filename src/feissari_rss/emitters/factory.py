"""Emitter factory for selecting the output format."""

from feissari_rss.emitters.atom import AtomEmitter
from feissari_rss.emitters.base import FeedEmitter
from feissari_rss.emitters.rss import RssEmitter

SUPPORTED_FORMATS = ("atom", "rss")


def create_emitter(format_name: str, author: str = "Feissarimokat") -> FeedEmitter:
    """Create the emitter for an output format.

    Args:
        format_name: ``atom`` or ``rss`` (case-insensitive).
        author: Feed author name, used by the Atom emitter.

    Returns:
        FeedEmitter implementation.

    Raises:
        ValueError: If the format is not supported.
    """
    fmt = format_name.strip().lower()

    if fmt == "atom":
        return AtomEmitter(author=author)

    elif fmt == "rss":
        return RssEmitter()

    else:
        raise ValueError(
            f"Unsupported output format: {format_name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
