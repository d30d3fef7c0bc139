"""RSS 2.0 output, mirroring the upstream channel structure."""

from pathlib import Path

from lxml import etree

from feissari_rss.emitters.writer import write_feed
from feissari_rss.exceptions import SerializeError
from feissari_rss.models.feed import Feed


class RssEmitter:
    """Re-serializes the upstream channel with enriched item descriptions."""

    format_name = "rss"
    default_filename = "feed.rss"

    def serialize(self, feed: Feed) -> bytes:
        """Render the feed as RSS 2.0 with an XML declaration."""
        try:
            rss = etree.Element("rss", version=feed.version)
            channel = etree.SubElement(rss, "channel")
            _add_text(channel, "title", feed.title)
            _add_text(channel, "link", feed.link)
            _add_text(channel, "description", feed.description)

            # Optional channel fields are only written when upstream had them
            for tag, value in (
                ("lastBuildDate", feed.last_build_date),
                ("docs", feed.docs),
                ("language", feed.language),
            ):
                if value:
                    _add_text(channel, tag, value)

            for item in feed.items:
                entry = etree.SubElement(channel, "item")
                _add_text(entry, "title", item.title)
                _add_text(entry, "description", item.description)
                _add_text(entry, "link", item.link)

            return etree.tostring(
                rss,
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
    element = etree.SubElement(parent, tag)
    element.text = text
    return element
