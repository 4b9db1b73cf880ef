"""Turn a configured reference URL into a ``ReferenceDocument``.

Every failure (bad URL, timeout, transport error, non-2xx status) collapses into
``FetchStatus.ERROR``. The cause is logged here and never raised to the caller.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .errors import FetchError, InvalidUrlError
from .types import ReferenceDocument
from .urls import normalize_reference_url

if TYPE_CHECKING:
    from .ports.fetching import AsyncReferenceFetcher, FetchedBody, ReferenceFetcher

log = getLogger(__name__)


def load_reference(url: str, fetcher: ReferenceFetcher) -> ReferenceDocument:
    """Resolve and fetch ``url``; a blank URL yields a ``missing`` document."""

    source_url = url.strip()
    if not source_url:
        return ReferenceDocument.missing()
    try:
        fetched = fetcher(normalize_reference_url(source_url))
    except (InvalidUrlError, FetchError) as exc:
        return _failed(source_url, exc)
    return _fetched(source_url, fetched)


async def load_reference_async(url: str, fetcher: AsyncReferenceFetcher) -> ReferenceDocument:
    """Cancellable twin of ``load_reference``; cancellation propagates to the caller."""

    source_url = url.strip()
    if not source_url:
        return ReferenceDocument.missing()
    try:
        fetched = await fetcher.fetch(normalize_reference_url(source_url))
    except (InvalidUrlError, FetchError) as exc:
        return _failed(source_url, exc)
    return _fetched(source_url, fetched)


def _failed(source_url: str, exc: InvalidUrlError | FetchError) -> ReferenceDocument:
    log.warning(
        "Maintainer reference unavailable url=%s kind=%s: %s",
        source_url,
        type(exc).__name__,
        exc,
    )
    return ReferenceDocument.error(source_url)


def _fetched(source_url: str, fetched: FetchedBody) -> ReferenceDocument:
    if fetched.truncated:
        log.info("Maintainer reference truncated to size cap url=%s", source_url)
    return ReferenceDocument.fetched(source_url, fetched.body, fetched.fetched_at)
