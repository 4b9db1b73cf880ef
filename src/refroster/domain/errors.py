"""Error kinds raised while resolving and fetching maintainer references."""

from __future__ import annotations


class RefRosterError(Exception):
    """Base class for reference reconciliation errors."""


class InvalidUrlError(RefRosterError, ValueError):
    """Raised when a reference URL cannot be parsed or uses an unsupported scheme."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class FetchError(RefRosterError):
    """Raised when a reference document could not be retrieved."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class FetchTimeoutError(FetchError):
    """The fetch did not complete within its timeout."""


class FetchTransportError(FetchError):
    """The fetch failed below HTTP (DNS, connection, protocol)."""


class FetchStatusError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, *, url: str, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code
