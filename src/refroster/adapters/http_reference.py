"""HTTP fetcher for maintainer reference documents."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from refroster.adapters.http_resilience import BoundedClient
from refroster.config.reference import get_fetch_config
from refroster.domain.errors import FetchStatusError, FetchTimeoutError, FetchTransportError
from refroster.domain.ports.fetching import FetchedBody

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from refroster.config.http_resilience import FetchConfig

log = getLogger(__name__)


def _default_client_factory(config: FetchConfig) -> BoundedClient:
    return BoundedClient(config)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class HttpReferenceFetcher:
    """Bounded GET of a raw reference document: one attempt, timeout and size cap."""

    config: FetchConfig = field(default_factory=get_fetch_config)
    client_factory: Callable[[FetchConfig], BoundedClient] = field(
        default=_default_client_factory
    )
    clock: Callable[[], datetime] = field(default=_utcnow)
    shared_client: BoundedClient | None = None

    def __call__(self, url: str) -> FetchedBody:
        """Blocking fetch; async callers must await ``fetch`` instead."""

        return asyncio.run(self.fetch(url))

    async def fetch(self, url: str) -> FetchedBody:
        if self.shared_client is not None:
            return await self._fetch_with(self.shared_client, url)
        async with self.client_factory(self.config) as client:
            return await self._fetch_with(client, url)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[HttpReferenceFetcher]:
        """Yield a fetcher whose concurrent fetches share one client and rate limiter."""

        async with self.client_factory(self.config) as client:
            yield replace(self, shared_client=client)

    async def _fetch_with(self, client: BoundedClient, url: str) -> FetchedBody:
        try:
            response = await client.get(url)
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise FetchTimeoutError(
                f"Timed out after {self.config.timeout_seconds}s fetching {url}",
                url=url,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchTransportError(f"Failed to fetch {url}: {exc}", url=url) from exc

        if not response.is_success:
            raise FetchStatusError(
                f"Unexpected status {response.status_code} fetching {url}",
                url=url,
                status_code=response.status_code,
            )

        log.debug(
            "Fetched %s status=%s bytes=%d truncated=%s",
            url,
            response.status_code,
            len(response.content),
            response.truncated,
        )
        return FetchedBody(
            body=response.text(),
            fetched_at=self.clock(),
            truncated=response.truncated,
        )
