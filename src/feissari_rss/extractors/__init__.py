"""Extractors package."""

from feissari_rss.extractors.base import ImageExtractor
from feissari_rss.extractors.postbody import PostBodyImageExtractor, normalize_image_url

__all__ = [
    "ImageExtractor",
    "PostBodyImageExtractor",
    "normalize_image_url",
]
