"""HTTP client utilities.

One client is shared by the feed source and the image extractor so both
send the same User-Agent and use the same timeout and connection pool.
"""

import httpx

from feissari_rss.config.settings import DEFAULT_USER_AGENT


def create_http_client(
    timeout: float = 10.0,
    user_agent: str = DEFAULT_USER_AGENT,
    max_keepalive_connections: int = 10,
    keepalive_expiry: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        max_keepalive_connections: Idle connections kept in the pool.
        keepalive_expiry: Seconds an idle connection is kept open.
        transport: Optional transport override (tests use httpx.MockTransport).

    Returns:
        Configured httpx.AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        limits=httpx.Limits(
            max_keepalive_connections=max_keepalive_connections,
            keepalive_expiry=keepalive_expiry,
        ),
        transport=transport,
    )
