"""Synchronization defaults for the regional reconciliation cycle."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, env_float
from .errors import ConfigurationError

DEFAULT_SYNC_INTERVAL_SECONDS = 3600.0
# floor for REGIONALSYNC_INTERVAL_SECONDS
MIN_SYNC_INTERVAL_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class SyncConfig:
    interval_seconds: float = DEFAULT_SYNC_INTERVAL_SECONDS
    allow_empty_payload: bool = False
    run_on_start: bool = True

    def __post_init__(self) -> None:
        if self.interval_seconds < MIN_SYNC_INTERVAL_SECONDS:
            raise ConfigurationError(
                f"Sync interval must be at least {MIN_SYNC_INTERVAL_SECONDS:g}s, "
                f"got {self.interval_seconds:g}s"
            )


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        interval_seconds=env_float("REGIONALSYNC_INTERVAL_SECONDS", DEFAULT_SYNC_INTERVAL_SECONDS),
        allow_empty_payload=env_flag("REGIONALSYNC_ALLOW_EMPTY_PAYLOAD"),
        run_on_start=env_flag("REGIONALSYNC_RUN_ON_START", default=True),
    )
