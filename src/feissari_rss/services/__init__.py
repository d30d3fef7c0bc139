"""Services package."""

from feissari_rss.services.enricher import enrich_description
from feissari_rss.services.feed_service import FeedService

__all__ = [
    "FeedService",
    "enrich_description",
]
