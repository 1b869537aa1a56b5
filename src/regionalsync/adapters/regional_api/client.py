"""HTTP client for the authoritative regional source."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from regionalsync.adapters.http_resilience import ResilientClient
from regionalsync.config.regional_source import RegionalSourceConfig, get_regional_source_config
from regionalsync.domain.ports.fetching import (
    RegionalFetcher,
    RegionalFetchError,
    RegionalFetchResult,
)

from .translator import RegionalPayloadError, parse_regionals

if TYPE_CHECKING:
    from collections.abc import Callable

    from regionalsync.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class RegionalApiFetcher:
    """Fetch the current regional list with a single GET.

    Every failure mode surfaces as ``RegionalFetchError`` so the caller can treat
    it as "no data this cycle".
    """

    config: RegionalSourceConfig = field(default_factory=get_regional_source_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> RegionalFetchResult:
        return asyncio.run(self._fetch_async())

    async def _fetch_async(self) -> RegionalFetchResult:
        log.debug("Fetching regionals from %s", self.config.url)
        async with self.client_factory(self.config.resilience) as client:
            payload = await self._perform_request(client)

        try:
            result = parse_regionals(payload)
        except RegionalPayloadError as exc:
            raise RegionalFetchError(str(exc)) from exc

        log.info(
            "Fetched %s regional(s) from the external source (%s discarded)",
            len(result.regionals),
            result.discarded,
        )
        return result

    async def _perform_request(self, client: ResilientClient) -> object:
        try:
            response = await client.get(self.config.url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise RegionalFetchError(
                f"Regional source timed out after {self.config.resilience.timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise RegionalFetchError(
                f"Regional source responded with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RegionalFetchError(f"Regional source request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RegionalFetchError("Regional source returned a payload that is not JSON") from exc


if TYPE_CHECKING:
    _fetcher_check: RegionalFetcher = RegionalApiFetcher()
