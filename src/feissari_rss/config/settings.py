"""Configuration management using pydantic-settings.

Every value has a default, so the tool runs without any environment.
Variables prefixed with ``FEISSARI_`` (or a ``.env`` file) override them.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from feissari_rss import __version__

DEFAULT_USER_AGENT = f"FeissariRSS/{__version__} (https://github.com/lepinkainen/feissari-rss)"


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FEISSARI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Upstream
    feed_url: str = Field(
        default="https://static.feissarimokat.com/dynamic/latest/posts.rss",
        description="Upstream RSS feed URL",
    )
    image_base_url: str = Field(
        default="https://static.feissarimokat.com",
        description="Origin prepended to root-relative image paths",
    )
    image_selector: str = Field(
        default="div.postbody img",
        description="CSS selector for post images on an item page",
    )

    # HTTP
    http_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    max_keepalive_connections: int = Field(default=10, ge=1)
    keepalive_expiry: float = Field(default=30.0, ge=0)
    max_concurrent_pages: int = Field(
        default=1,
        ge=1,
        description="Item pages fetched in parallel (1 = sequential)",
    )

    # Output
    output_dir: Path = Path(".")
    output_format: Literal["atom", "rss"] = "atom"
    feed_author: str = "Feissarimokat"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
