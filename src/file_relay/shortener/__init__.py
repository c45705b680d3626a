"""External link shortening."""

from file_relay.shortener.client import URLShortener

__all__ = ["URLShortener"]
