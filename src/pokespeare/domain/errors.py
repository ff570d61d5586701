"""Errors raised by lookup collaborators."""

from __future__ import annotations


class FetchError(RuntimeError):
    """Raised when a JSON lookup could not produce a parsed document."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class LookupTransportError(FetchError):
    """The connection to the lookup service failed."""


class LookupParseError(FetchError):
    """The lookup service answered with a body that is not JSON."""


class LookupStatusError(FetchError):
    """The lookup service answered with a non-success status."""

    def __init__(self, message: str, *, url: str, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code
