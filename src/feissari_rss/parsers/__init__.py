"""Parsers package."""

from feissari_rss.parsers.base import FeedParser
from feissari_rss.parsers.rss_parser import RSSParser

__all__ = [
    "FeedParser",
    "RSSParser",
]
