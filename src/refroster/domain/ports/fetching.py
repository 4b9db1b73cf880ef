"""Ports for fetching maintainer reference documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(slots=True, frozen=True)
class FetchedBody:
    """Raw text retrieved from a reference URL."""

    body: str
    fetched_at: datetime
    truncated: bool = False


@runtime_checkable
class ReferenceFetcher(Protocol):
    """Callable port retrieving a raw reference document.

    Implementations raise ``refroster.domain.errors.FetchError`` subclasses on
    failure and must bound both time and size.
    """

    def __call__(self, url: str) -> FetchedBody: ...


@runtime_checkable
class AsyncReferenceFetcher(Protocol):
    """Cancellable variant of ``ReferenceFetcher``."""

    async def fetch(self, url: str) -> FetchedBody: ...


__all__ = ["AsyncReferenceFetcher", "FetchedBody", "ReferenceFetcher"]
