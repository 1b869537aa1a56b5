"""Async HTTP client with retries, rate limiting and an optional on-disk cache."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

if TYPE_CHECKING:
    from types import TracebackType

    from regionalsync.config.http_resilience import CacheConfig, ResilienceConfig, RetryPolicy


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=("GET",),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


class ResilientClient:
    """GET-only client: retries wrap ``transport`` and the limiter wraps every call.

    ``transport`` defaults to the real network transport.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )
        retry_transport = RetryTransport(transport=transport, retry=build_retry(config.retry))
        headers = dict(config.default_headers) if config.default_headers else None

        self._client: httpx.AsyncClient
        if config.cache is not None:
            self._client = AsyncCacheClient(
                timeout=config.timeout_seconds,
                headers=headers,
                transport=retry_transport,
                storage=_build_storage(config.cache),
            )
        else:
            self._client = httpx.AsyncClient(
                timeout=config.timeout_seconds,
                headers=headers,
                transport=retry_transport,
            )

    async def __aenter__(self) -> ResilientClient:
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

    async def get(self, url: str) -> httpx.Response:
        if self._limiter is None:
            return await self._client.get(url)
        async with self._limiter:
            return await self._client.get(url)


def _build_storage(config: CacheConfig) -> AsyncSqliteStorage:
    return AsyncSqliteStorage(
        database_path=config.sqlite_path,
        default_ttl=config.default_ttl_seconds,
        refresh_ttl_on_access=config.refresh_ttl_on_access,
    )
