"""In-memory inverted-index document search, with parsing and timing helpers."""

__version__ = "0.1.0"
__all__ = ["parse", "profile", "search_server"]