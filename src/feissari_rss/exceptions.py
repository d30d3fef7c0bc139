"""Custom exceptions for feissari-rss.

Every error carries a ``fatal`` flag. Fatal errors abort the run; the
only recoverable one is a failed image extraction for a single item.
"""


class FeissariError(Exception):
    """Base exception class for all feissari-rss errors."""

    fatal: bool = True


class FetchError(FeissariError):
    """Raised when the upstream RSS feed cannot be retrieved.

    Attributes:
        url: The feed URL that failed.
        status_code: HTTP status of the response, None for transport failures.
    """

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {message}")


class ParseError(FeissariError):
    """Raised when the upstream RSS content cannot be parsed.

    Attributes:
        source: Identifier (usually the URL) of the document being parsed.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Failed to parse {source}: {message}")


class ExtractError(FeissariError):
    """Raised when an item page cannot be fetched for image extraction.

    Attributes:
        page_url: The item page URL.
        status_code: HTTP status of the response, None for transport failures.
    """

    fatal = False

    def __init__(self, page_url: str, message: str, status_code: int | None = None):
        self.page_url = page_url
        self.status_code = status_code
        super().__init__(f"Failed to extract images from {page_url}: {message}")


class SerializeError(FeissariError):
    """Raised when the output feed document cannot be generated.

    Attributes:
        format_name: Output format being generated (rss or atom).
    """

    def __init__(self, format_name: str, message: str):
        self.format_name = format_name
        super().__init__(f"Failed to generate {format_name} feed: {message}")


class WriteError(FeissariError):
    """Raised when the output directory or file cannot be written.

    Attributes:
        path: Filesystem path that failed.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {message}")
