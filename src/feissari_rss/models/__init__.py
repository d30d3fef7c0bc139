"""Models package."""

from feissari_rss.models.extraction import ImageExtraction, Outcome
from feissari_rss.models.feed import Feed, Item

__all__ = [
    "Feed",
    "Item",
    "ImageExtraction",
    "Outcome",
]
