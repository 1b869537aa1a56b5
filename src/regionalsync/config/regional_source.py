"""Configuration for the authoritative regional source."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .storage import get_storage_config

REGIONAL_SOURCE_TIMEOUT_SECONDS = 10.0
_CACHE_MODES = ("off", "sqlite")


@dataclass(frozen=True, slots=True)
class RegionalSourceConfig:
    """Endpoint and HTTP behaviour for fetching the current regional list."""

    url: str
    resilience: ResilienceConfig


def _cache_from_environment() -> CacheConfig | None:
    mode = (optional_env_var("REGIONALSYNC_HTTP_CACHE") or "off").lower()
    if mode not in _CACHE_MODES:
        raise ConfigurationError(
            f"REGIONALSYNC_HTTP_CACHE must be one of {', '.join(_CACHE_MODES)}, got {mode!r}"
        )
    if mode == "off":
        return None
    return CacheConfig(sqlite_path=str(get_storage_config().http_cache_path()))


def get_regional_source_config(
    *,
    resilience: ResilienceConfig | None = None,
) -> RegionalSourceConfig:
    values = require_env_vars(("REGIONAL_SOURCE_URL",))
    timeout = env_float("REGIONAL_SOURCE_TIMEOUT_SECONDS", REGIONAL_SOURCE_TIMEOUT_SECONDS)
    if timeout <= 0:
        raise ConfigurationError("REGIONAL_SOURCE_TIMEOUT_SECONDS must be positive")
    return RegionalSourceConfig(
        url=values["REGIONAL_SOURCE_URL"],
        resilience=resilience
        or ResilienceConfig(
            name="regional-source",
            timeout_seconds=timeout,
            retry=RetryPolicy(total=3),
            ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
            cache=_cache_from_environment(),
            default_headers={"Accept": "application/json"},
        ),
    )
