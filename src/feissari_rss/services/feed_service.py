"""Feed processing service - main orchestration layer.

Coordinates feed fetching, image extraction, enrichment and output.
"""

import asyncio
from pathlib import Path

import structlog

from feissari_rss.emitters.base import FeedEmitter
from feissari_rss.exceptions import FeissariError
from feissari_rss.extractors.base import ImageExtractor
from feissari_rss.models.extraction import ImageExtraction, Outcome
from feissari_rss.models.feed import Feed, Item
from feissari_rss.parsers.base import FeedParser
from feissari_rss.services.enricher import enrich_description
from feissari_rss.sources.base import FeedSource

logger = structlog.get_logger()


class FeedService:
    """Runs one Fetch -> Extract -> Enrich -> Emit pass.

    Fetch, parse and output errors propagate to the caller. A failed
    item page only costs that item its images.
    """

    def __init__(
        self,
        source: FeedSource,
        parser: FeedParser,
        extractor: ImageExtractor,
        emitter: FeedEmitter,
        max_concurrent_pages: int = 1,
    ):
        """Initialize feed service.

        Args:
            source: Upstream feed source.
            parser: RSS parser instance.
            extractor: Item page image extractor.
            emitter: Output format strategy.
            max_concurrent_pages: Item pages fetched in parallel (1 = sequential).
        """
        self._source = source
        self._parser = parser
        self._extractor = extractor
        self._emitter = emitter
        self._max_concurrent_pages = max_concurrent_pages

    async def fetch_feed(self) -> Feed:
        """Fetch and parse the upstream feed.

        Raises:
            FetchError: When the feed cannot be downloaded.
            ParseError: When the feed cannot be parsed.
        """
        raw_content = await self._source.fetch_raw()
        feed = self._parser.parse(raw_content, self._source.url)
        logger.info("Feed fetched", url=self._source.url, item_count=len(feed.items))
        return feed

    async def enrich_feed(self, feed: Feed) -> list[ImageExtraction]:
        """Append post images to every item description in place.

        Returns:
            One extraction result per item, in item order.
        """
        semaphore = asyncio.Semaphore(self._max_concurrent_pages)

        async def enrich_single(item: Item) -> ImageExtraction:
            async with semaphore:
                result = await self._extractor.try_extract(item.link)
            if result.outcome is Outcome.FATAL:
                raise FeissariError(result.error or f"Fatal extraction failure for {item.link}")
            item.description = enrich_description(item, result.images)
            return result

        # gather keeps results in item order; each task touches only its own item
        return list(await asyncio.gather(*[enrich_single(item) for item in feed.items]))

    async def run(self, output_dir: Path, filename: str | None = None) -> dict:
        """Execute the full pipeline once.

        Args:
            output_dir: Directory the output feed is written to.
            filename: Output file name, defaults to the emitter's.

        Returns:
            dict: Run statistics.
        """
        log = logger.bind(job="feed_run", format=self._emitter.format_name)
        log.info("Starting feed run")

        feed = await self.fetch_feed()
        results = await self.enrich_feed(feed)
        output_path = self._emitter.emit(feed, output_dir, filename)

        stats = {
            "items_fetched": len(feed.items),
            "items_enriched": sum(1 for r in results if r.ok),
            "images_found": sum(len(r.images) for r in results),
            "extract_failures": [r.page_url for r in results if not r.ok],
            "output_path": str(output_path),
            "format": self._emitter.format_name,
        }

        log.info(
            "Feed run completed",
            items=stats["items_fetched"],
            enriched=stats["items_enriched"],
            images=stats["images_found"],
            failures=len(stats["extract_failures"]),
        )
        return stats
