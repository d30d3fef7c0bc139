"""Test configuration and fixtures."""

import httpx
import pytest

FEED_URL = "https://static.feissarimokat.com/dynamic/latest/posts.rss"
ITEM_URLS = [
    "https://www.feissarimokat.com/2026/10/eka.html",
    "https://www.feissarimokat.com/2026/10/toka.html",
    "https://www.feissarimokat.com/2026/10/kolmas.html",
]


@pytest.fixture
def sample_rss_content():
    """Upstream RSS channel with three items."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Feissarimokat</title>
    <link>https://www.feissarimokat.com/</link>
    <description>Uusimmat mokat</description>
    <lastBuildDate>Mon, 19 Oct 2026 08:00:00 +0300</lastBuildDate>
    <docs>https://www.rssboard.org/rss-specification</docs>
    <language>fi</language>
    <item>
      <title>Eka moka</title>
      <description>&lt;p&gt;Ensimmäinen&lt;/p&gt;</description>
      <link>{ITEM_URLS[0]}</link>
    </item>
    <item>
      <title>Toka moka</title>
      <description>Toinen</description>
      <link>{ITEM_URLS[1]}</link>
    </item>
    <item>
      <title>Kolmas moka</title>
      <description>Kolmas</description>
      <link>{ITEM_URLS[2]}</link>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def sample_post_html():
    """Item page with images inside and outside the post body."""
    return """<!DOCTYPE html>
<html>
<head><title>Eka moka</title></head>
<body>
  <div class="header"><img src="/img/logo.png"></div>
  <div class="postbody">
    <p>Teksti</p>
    <img src="/kuvat/eka1.jpg">
    <img alt="ei lähdettä">
    <p><img src="https://cdn.example.com/eka2.jpg"></p>
  </div>
  <div class="sidebar"><img src="/ads/banner.gif"></div>
</body>
</html>"""


@pytest.fixture
def make_transport():
    """Build an httpx.MockTransport from a URL -> response table.

    A route is either a ``(status, body)`` tuple or an httpx exception
    class, which is raised for that URL. Unknown URLs answer 404. Every
    request is appended to the returned transport's ``requests`` list.
    """

    def factory(routes: dict) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            route = routes.get(str(request.url))
            if route is None:
                return httpx.Response(404, text="not found")
            if isinstance(route, type) and issubclass(route, Exception):
                raise route("simulated failure", request=request)
            status, body = route
            return httpx.Response(status, text=body)

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return factory
