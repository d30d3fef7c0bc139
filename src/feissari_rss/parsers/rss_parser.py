"""RSS 2.0 channel parser.

The document must be well-formed XML. Titles, links and descriptions are
read from the lxml tree so their text, surrounding whitespace included,
reaches the output unchanged; feedparser identifies the feed format and
reads the optional channel fields.
"""

import feedparser
from lxml import etree

from feissari_rss.exceptions import ParseError
from feissari_rss.models.feed import Feed, Item


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


class RSSParser:
    """Parser for the upstream RSS channel."""

    def parse(self, raw_content: bytes | str, source: str) -> Feed:
        """Parse RSS content into a Feed.

        Args:
            raw_content: Raw XML document. Text is encoded as UTF-8 first.
            source: Source identifier (the feed URL) for error messages.

        Returns:
            Parsed Feed with items in document order.

        Raises:
            ParseError: When the content is not well-formed XML or not an
                RSS channel.
        """
        if isinstance(raw_content, str):
            raw_content = raw_content.encode("utf-8")

        try:
            root = etree.fromstring(raw_content, parser=_xml_parser())
        except etree.XMLSyntaxError as e:
            raise ParseError(source, f"Malformed XML: {e}") from e

        channel = root.find("channel") if root.tag == "rss" else None
        if channel is None:
            raise ParseError(source, f"Document is not an RSS channel (root <{root.tag}>)")

        try:
            parsed = feedparser.parse(
                raw_content,
                sanitize_html=False,
                resolve_relative_uris=False,
            )
        except Exception as e:
            raise ParseError(source, f"Unexpected parse error: {e}") from e

        if parsed.bozo and not isinstance(
            parsed.bozo_exception, feedparser.CharacterEncodingOverride
        ):
            raise ParseError(source, f"Feed parse error: {parsed.bozo_exception}")
        if not parsed.version:
            raise ParseError(source, "Document is not a recognised feed")

        meta = parsed.feed
        return Feed(
            title=channel.findtext("title", default=""),
            link=channel.findtext("link", default=""),
            description=channel.findtext("description", default=""),
            last_build_date=meta.get("updated") or None,
            docs=meta.get("docs") or None,
            language=meta.get("language") or None,
            version=root.get("version", "2.0"),
            items=[self._parse_item(element) for element in channel.iterfind("item")],
        )

    def _parse_item(self, element: etree._Element) -> Item:
        """Parse a single <item> element into an Item."""
        return Item(
            title=element.findtext("title", default=""),
            link=element.findtext("link", default=""),
            description=element.findtext("description", default=""),
        )
