"""Errors raised while querying the NextBus feed."""

from typing import Optional


class FeedError(Exception):
    """Base class for feed failures."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NetworkError(FeedError):
    """The HTTP request could not complete or returned an error status."""


class ParseError(FeedError):
    """The response body was not well-formed XML."""
