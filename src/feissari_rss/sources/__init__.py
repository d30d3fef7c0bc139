"""Sources package."""

from feissari_rss.sources.base import FeedSource
from feissari_rss.sources.http import HttpFeedSource

__all__ = [
    "FeedSource",
    "HttpFeedSource",
]
