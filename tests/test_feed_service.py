"""Tests for the end-to-end feed pipeline."""

from datetime import datetime, timezone

import httpx
import pytest
from lxml import etree

from feissari_rss.emitters.atom import ATOM_NS, AtomEmitter
from feissari_rss.emitters.rss import RssEmitter
from feissari_rss.exceptions import FeissariError, FetchError, ParseError
from feissari_rss.extractors.postbody import PostBodyImageExtractor
from feissari_rss.models.extraction import ImageExtraction, Outcome
from feissari_rss.parsers.rss_parser import RSSParser
from feissari_rss.services.feed_service import FeedService
from feissari_rss.sources.http import HttpFeedSource
from feissari_rss.utils.http_client import create_http_client

from conftest import FEED_URL, ITEM_URLS

EKA_IMAGES = [
    "https://static.feissarimokat.com/kuvat/eka1.jpg",
    "https://cdn.example.com/eka2.jpg",
]


def _service(client, emitter=None, max_concurrent_pages=1):
    return FeedService(
        source=HttpFeedSource(FEED_URL, client),
        parser=RSSParser(),
        extractor=PostBodyImageExtractor(client),
        emitter=emitter or RssEmitter(),
        max_concurrent_pages=max_concurrent_pages,
    )


def _rss_items(path):
    channel = etree.fromstring(path.read_bytes()).find("channel")
    return [
        (item.findtext("title"), item.findtext("link"), item.findtext("description"))
        for item in channel.findall("item")
    ]


@pytest.fixture
def routes(sample_rss_content, sample_post_html):
    return {
        FEED_URL: (200, sample_rss_content),
        ITEM_URLS[0]: (200, sample_post_html),
        ITEM_URLS[1]: (200, "<html><body><div class='postbody'><p>Ei kuvia</p></div></body></html>"),
        ITEM_URLS[2]: (200, "<div class='postbody'><img src='/kuvat/kolmas.png'></div>"),
    }


class TestFeedService:
    """Tests for FeedService."""

    async def test_full_run_writes_enriched_rss(self, make_transport, routes, tmp_path):
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            stats = await _service(client).run(tmp_path)

        assert stats["items_fetched"] == 3
        assert stats["items_enriched"] == 3
        assert stats["images_found"] == 3
        assert stats["extract_failures"] == []
        assert stats["format"] == "rss"
        assert stats["output_path"] == str(tmp_path / "feed.rss")

        assert _rss_items(tmp_path / "feed.rss") == [
            (
                "Eka moka",
                ITEM_URLS[0],
                "<p>Ensimmäinen</p>\n\n"
                f'<img src="{EKA_IMAGES[0]}" alt="Eka moka">\n'
                f'<img src="{EKA_IMAGES[1]}" alt="Eka moka">\n',
            ),
            ("Toka moka", ITEM_URLS[1], "Toinen\n\n"),
            (
                "Kolmas moka",
                ITEM_URLS[2],
                'Kolmas\n\n<img src="https://static.feissarimokat.com/kuvat/kolmas.png" alt="Kolmas moka">\n',
            ),
        ]

    async def test_requests_in_item_order(self, make_transport, routes, tmp_path):
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            await _service(client).run(tmp_path)

        assert [str(r.url) for r in transport.requests] == [FEED_URL] + ITEM_URLS

    async def test_failed_item_page_does_not_stop_run(self, make_transport, routes, tmp_path):
        routes[ITEM_URLS[1]] = (503, "Service Unavailable")
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            stats = await _service(client).run(tmp_path)

        assert stats["items_fetched"] == 3
        assert stats["items_enriched"] == 2
        assert stats["extract_failures"] == [ITEM_URLS[1]]

        items = _rss_items(tmp_path / "feed.rss")
        assert [link for _, link, _ in items] == ITEM_URLS
        assert items[1][2] == "Toinen\n\n"
        assert "kolmas.png" in items[2][2]

    async def test_network_error_on_item_page_is_recoverable(self, make_transport, routes, tmp_path):
        routes[ITEM_URLS[0]] = httpx.ConnectError
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            stats = await _service(client).run(tmp_path)

        assert stats["extract_failures"] == [ITEM_URLS[0]]
        assert _rss_items(tmp_path / "feed.rss")[0][2] == "<p>Ensimmäinen</p>\n\n"

    async def test_feed_fetch_failure_writes_nothing(self, make_transport, routes, tmp_path):
        routes[FEED_URL] = (500, "Internal Server Error")
        transport = make_transport(routes)
        out_dir = tmp_path / "out"

        async with create_http_client(transport=transport) as client:
            with pytest.raises(FetchError) as exc_info:
                await _service(client).run(out_dir)

        assert exc_info.value.status_code == 500
        assert not out_dir.exists()
        assert len(transport.requests) == 1

    async def test_unparseable_feed_writes_nothing(self, make_transport, routes, tmp_path):
        routes[FEED_URL] = (200, "definitely not xml")
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            with pytest.raises(ParseError):
                await _service(client).run(tmp_path)

        assert list(tmp_path.iterdir()) == []

    async def test_concurrent_pages_keep_item_order(self, make_transport, routes, tmp_path):
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            await _service(client, max_concurrent_pages=3).run(tmp_path)

        assert [link for _, link, _ in _rss_items(tmp_path / "feed.rss")] == ITEM_URLS

    async def test_repeated_runs_are_byte_identical(self, make_transport, routes, tmp_path):
        clock = lambda: datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)  # noqa: E731
        outputs = []
        for run_dir in ("first", "second"):
            transport = make_transport(routes)
            async with create_http_client(transport=transport) as client:
                stats = await _service(client, emitter=AtomEmitter(clock=clock)).run(
                    tmp_path / run_dir
                )
            outputs.append((tmp_path / run_dir / "feed.xml").read_bytes())
            assert stats["format"] == "atom"

        assert outputs[0] == outputs[1]
        entries = etree.fromstring(outputs[0]).findall(f"{{{ATOM_NS}}}entry")
        assert len(entries) == 3

    async def test_custom_filename(self, make_transport, routes, tmp_path):
        transport = make_transport(routes)

        async with create_http_client(transport=transport) as client:
            stats = await _service(client).run(tmp_path, filename="mokat.rss")

        assert (tmp_path / "mokat.rss").exists()
        assert stats["output_path"] == str(tmp_path / "mokat.rss")

    async def test_fatal_extraction_result_aborts(self, make_transport, routes, tmp_path):
        class BrokenExtractor:
            async def try_extract(self, page_url):
                return ImageExtraction(page_url=page_url, outcome=Outcome.FATAL, error="broken")

        transport = make_transport(routes)
        async with create_http_client(transport=transport) as client:
            service = FeedService(
                source=HttpFeedSource(FEED_URL, client),
                parser=RSSParser(),
                extractor=BrokenExtractor(),
                emitter=RssEmitter(),
            )
            with pytest.raises(FeissariError, match="broken"):
                await service.run(tmp_path)

        assert list(tmp_path.iterdir()) == []
