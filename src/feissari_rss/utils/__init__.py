"""Utils package."""

from feissari_rss.utils.http_client import create_http_client
from feissari_rss.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "create_http_client",
]
