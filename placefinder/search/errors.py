from __future__ import annotations


class SearchError(Exception):
    """Base class for failures reported to the caller as ``{"results": []}``."""

    status_code: int = 500
    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message or self.__class__.__name__)


class EmptyQueryError(SearchError):
    status_code = 400


class RateLimitExceeded(SearchError):
    status_code = 429
    message = "Rate limit exceeded. Please try again later."


class ConfigurationError(SearchError):
    message = "API configuration error"


class ResponseParseError(SearchError):
    message = "Failed to parse search results"


class SearchFailedError(SearchError):
    message = "Failed to process search request"
