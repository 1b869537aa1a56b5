"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_float, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .regional_source import RegionalSourceConfig, get_regional_source_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .sync import (
    DEFAULT_SYNC_INTERVAL_SECONDS,
    MIN_SYNC_INTERVAL_SECONDS,
    SyncConfig,
    get_sync_config,
)

__all__ = [
    "DEFAULT_SYNC_INTERVAL_SECONDS",
    "MIN_SYNC_INTERVAL_SECONDS",
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RateLimit",
    "RegionalSourceConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "SyncConfig",
    "configure_logging",
    "env_flag",
    "env_float",
    "get_database_config",
    "get_regional_source_config",
    "get_storage_config",
    "get_sync_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
