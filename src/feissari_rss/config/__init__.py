"""Configuration package."""

from feissari_rss.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
