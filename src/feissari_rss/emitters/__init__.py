"""Emitters package."""

from feissari_rss.emitters.atom import AtomEmitter
from feissari_rss.emitters.base import FeedEmitter
from feissari_rss.emitters.factory import SUPPORTED_FORMATS, create_emitter
from feissari_rss.emitters.rss import RssEmitter
from feissari_rss.emitters.writer import write_feed

__all__ = [
    "FeedEmitter",
    "AtomEmitter",
    "RssEmitter",
    "SUPPORTED_FORMATS",
    "create_emitter",
    "write_feed",
]
