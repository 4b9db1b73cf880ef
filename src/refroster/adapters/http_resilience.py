from __future__ import annotations

import asyncio
import codecs
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

import httpx
from aiolimiter import AsyncLimiter

from refroster.config.http_resilience import FetchConfig, RateLimit

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, TimeoutTypes, URLTypes

__all__ = ["BoundedClient", "BoundedResponse", "FetchConfig", "RateLimit"]

MAX_REDIRECTS = 10


@dataclass(slots=True, frozen=True)
class BoundedResponse:
    status_code: int
    content: bytes
    truncated: bool
    charset: str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300  # noqa: PLR2004

    def text(self) -> str:
        encoding = self.charset or "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError:
            encoding = "utf-8"
        return self.content.decode(encoding, errors="replace")


class AsyncClientOptions(TypedDict, total=False):
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.AsyncBaseTransport
    follow_redirects: bool
    max_redirects: int


class BoundedClient:
    """Async HTTP client that never reads more than ``max_body_bytes`` of a body.

    Redirects are followed (at most ``MAX_REDIRECTS``) and only the final status is
    reported. ``timeout_seconds`` bounds each request as a whole, starting once
    the rate limiter has let it through.
    """

    def __init__(
        self,
        config: FetchConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )

        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "follow_redirects": True,
            "max_redirects": MAX_REDIRECTS,
        }
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> BoundedClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: URLTypes,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> BoundedResponse:
        async def do_request() -> BoundedResponse:
            async with self._client.stream("GET", url, headers=headers) as response:
                if not response.is_success:
                    return BoundedResponse(
                        status_code=response.status_code,
                        content=b"",
                        truncated=False,
                        charset=response.charset_encoding,
                    )
                content, truncated = await self._read_capped(response)
                return BoundedResponse(
                    status_code=response.status_code,
                    content=content,
                    truncated=truncated,
                    charset=response.charset_encoding,
                )

        return await self._send(do_request)

    async def _read_capped(self, response: httpx.Response) -> tuple[bytes, bool]:
        limit = self.config.max_body_bytes
        chunks: list[bytes] = []
        size = 0
        async for chunk in response.aiter_bytes():
            remaining = limit - size
            if len(chunk) > remaining:
                chunks.append(chunk[:remaining])
                return b"".join(chunks), True
            chunks.append(chunk)
            size += len(chunk)
        return b"".join(chunks), False

    async def _send(self, func: Callable[[], Awaitable[BoundedResponse]]) -> BoundedResponse:
        if self._limiter is None:
            return await self._timed(func)
        async with self._limiter:
            return await self._timed(func)

    async def _timed(self, func: Callable[[], Awaitable[BoundedResponse]]) -> BoundedResponse:
        async with asyncio.timeout(self.config.timeout_seconds):
            return await func()
