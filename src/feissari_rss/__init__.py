"""feissari-rss: Feissarimokat feed with post images inlined."""

__version__ = "0.1.0"
