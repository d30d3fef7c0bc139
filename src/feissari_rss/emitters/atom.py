"""Atom 1.0 output with a freshly built feed envelope."""

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from lxml import etree

from feissari_rss.emitters.writer import write_feed
from feissari_rss.exceptions import SerializeError
from feissari_rss.models.feed import Feed

ATOM_NS = "http://www.w3.org/2005/Atom"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _atom(tag: str) -> str:
    return f"{{{ATOM_NS}}}{tag}"


class AtomEmitter:
    """Builds an Atom feed from the enriched items.

    Upstream items carry no publish date, so every timestamp in the
    document is the generation time.
    """

    format_name = "atom"
    default_filename = "feed.xml"

    def __init__(
        self,
        author: str = "Feissarimokat",
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize Atom emitter.

        Args:
            author: Feed author name.
            clock: Returns the generation timestamp (timezone-aware).
        """
        self._author = author
        self._clock = clock

    def serialize(self, feed: Feed) -> bytes:
        """Render the feed as Atom with an XML declaration."""
        try:
            now = self._clock().isoformat(timespec="seconds")

            root = etree.Element(_atom("feed"), nsmap={None: ATOM_NS})
            _add_text(root, "title", feed.title)
            _add_text(root, "id", feed.link)
            _add_text(root, "updated", now)
            if feed.description:
                _add_text(root, "subtitle", feed.description)
            etree.SubElement(root, _atom("link"), href=feed.link, rel="alternate")
            author = etree.SubElement(root, _atom("author"))
            _add_text(author, "name", self._author)

            for item in feed.items:
                entry = etree.SubElement(root, _atom("entry"))
                _add_text(entry, "title", item.title)
                etree.SubElement(entry, _atom("link"), href=item.link, rel="alternate")
                _add_text(entry, "id", item.link)
                _add_text(entry, "updated", now)
                _add_text(entry, "published", now)
                content = _add_text(entry, "content", item.description)
                content.set("type", "html")

            return etree.tostring(
                root,
                xml_declaration=True,
                encoding="UTF-8",
                pretty_print=True,
            )
        except (ValueError, TypeError) as e:
            raise SerializeError(self.format_name, str(e)) from e

    def emit(self, feed: Feed, output_dir: Path, filename: str | None = None) -> Path:
        """Serialize and write the feed."""
        return write_feed(self.serialize(feed), output_dir, filename or self.default_filename)


def _add_text(parent: etree._Element, tag: str, text: str) -> etree._Element:
    element = etree.SubElement(parent, _atom(tag))
    element.text = text
    return element
