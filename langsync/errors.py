"""
Exceptions raised while fetching and extracting provider language data
"""

from typing import Optional


class LanguageScraperError(Exception):
    """
    Base error for everything that can end a provider's run
    """

    service: str

    def __init__(self, message: str, service: Optional[str] = None):
        self.service = service or "Unknown"
        super().__init__(message)


class FetchError(LanguageScraperError):
    """Raised when a provider resource could not be downloaded."""

    url: str

    def __init__(self, message: str, url: str, service: Optional[str] = None):
        self.url = url
        super().__init__(f"{message} ({url})", service)


class ExtractionError(LanguageScraperError):
    """Raised when a downloaded payload does not have the expected shape."""


class MarkerNotFound(ExtractionError):
    """
    Raised when an expected delimiter is absent from a payload,
    which usually means the upstream page format has changed
    """

    marker: bytes
    start: int

    def __init__(self, marker: bytes, start: int = 0, service: Optional[str] = None):
        self.marker = marker
        self.start = start
        super().__init__(
            f"Marker {marker!r} not found (searched from offset {start})", service
        )
