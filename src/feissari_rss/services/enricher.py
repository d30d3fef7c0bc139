"""Item description enrichment."""

from collections.abc import Iterable

from feissari_rss.models.feed import Item

IMAGE_TAG = '<img src="{src}" alt="{alt}">\n'


def enrich_description(item: Item, images: Iterable[str]) -> str:
    """Append one ``<img>`` line per image to the item description.

    The original description is kept as-is and followed by a blank line,
    even when there are no images. Titles are inserted verbatim; the
    output serializer escapes the whole description.
    """
    tags = "".join(IMAGE_TAG.format(src=src, alt=item.title) for src in images)
    return f"{item.description}\n\n{tags}"
