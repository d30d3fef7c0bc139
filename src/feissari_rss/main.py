"""Command line entry point.

Runs a single fetch/enrich/emit pass and exits. Scheduling is left to
cron or a systemd timer.
"""

import argparse
import asyncio
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError

from feissari_rss import __version__
from feissari_rss.config.settings import Settings, get_settings
from feissari_rss.emitters.factory import SUPPORTED_FORMATS, create_emitter
from feissari_rss.exceptions import FeissariError
from feissari_rss.extractors.postbody import PostBodyImageExtractor
from feissari_rss.parsers.rss_parser import RSSParser
from feissari_rss.services.feed_service import FeedService
from feissari_rss.sources.http import HttpFeedSource
from feissari_rss.utils.http_client import create_http_client
from feissari_rss.utils.logger import configure_logging, get_logger


async def run_once(
    settings: Settings,
    output_dir: Path,
    output_format: str,
    filename: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict:
    """Build all components from settings and run the pipeline once.

    Args:
        settings: Application settings.
        output_dir: Directory the output feed is written to.
        output_format: ``atom`` or ``rss``.
        filename: Optional output file name override.
        transport: Optional HTTP transport override.

    Returns:
        Run statistics from FeedService.run.
    """
    emitter = create_emitter(output_format, author=settings.feed_author)

    async with create_http_client(
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
        max_keepalive_connections=settings.max_keepalive_connections,
        keepalive_expiry=settings.keepalive_expiry,
        transport=transport,
    ) as client:
        service = FeedService(
            source=HttpFeedSource(settings.feed_url, client),
            parser=RSSParser(),
            extractor=PostBodyImageExtractor(
                client,
                base_url=settings.image_base_url,
                selector=settings.image_selector,
            ),
            emitter=emitter,
            max_concurrent_pages=settings.max_concurrent_pages,
        )
        return await service.run(output_dir, filename)


def build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the CLI argument parser with defaults taken from settings."""
    parser = argparse.ArgumentParser(
        prog="feissari-rss",
        description="Re-publish the Feissarimokat feed with post images inlined",
    )
    parser.add_argument(
        "--outdir",
        type=Path,
        default=settings.output_dir,
        help=f"Directory where the feed file will be saved (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        default=settings.output_format,
        help=f"Output feed format (default: {settings.output_format})",
    )
    parser.add_argument(
        "--filename",
        default=None,
        help="Output file name (default: feed.xml for atom, feed.rss for rss)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        get_logger("cli").error("Invalid configuration", error=str(e))
        return 1

    args = build_arg_parser(settings).parse_args(argv)

    configure_logging(log_level=args.log_level, json_format=settings.log_json)
    logger = get_logger("cli")

    try:
        stats = asyncio.run(run_once(settings, args.outdir, args.format, args.filename))
    except (FeissariError, httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Feed generation failed", error=str(e), error_type=type(e).__name__)
        return 1

    logger.info("Done", **stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
