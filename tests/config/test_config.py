from __future__ import annotations

from pathlib import Path

import pytest

from regionalsync.config import (
    DEFAULT_SYNC_INTERVAL_SECONDS,
    ConfigurationError,
    MissingConfigurationError,
    SyncConfig,
    env_flag,
    env_float,
    get_database_config,
    get_regional_source_config,
    get_storage_config,
    get_sync_config,
    optional_env_var,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " value ")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  ")

    assert optional_env_var("EXAMPLE_VAR") is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("TRUE", True), ("yes", True), ("off", False), ("0", False)],
)
def test_env_flag_parses_common_spellings(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert env_flag("EXAMPLE_FLAG") is expected


def test_env_flag_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(ConfigurationError):
        env_flag("EXAMPLE_FLAG")


def test_env_float_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_NUMBER", raising=False)

    assert env_float("EXAMPLE_NUMBER", 1.5) == 1.5

    monkeypatch.setenv("EXAMPLE_NUMBER", "abc")
    with pytest.raises(ConfigurationError):
        env_float("EXAMPLE_NUMBER", 1.5)


def test_sync_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "REGIONALSYNC_INTERVAL_SECONDS",
        "REGIONALSYNC_ALLOW_EMPTY_PAYLOAD",
        "REGIONALSYNC_RUN_ON_START",
    ):
        monkeypatch.delenv(name, raising=False)

    config = get_sync_config()

    assert config == SyncConfig()
    assert config.interval_seconds == DEFAULT_SYNC_INTERVAL_SECONDS
    assert config.allow_empty_payload is False
    assert config.run_on_start is True


def test_sync_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGIONALSYNC_INTERVAL_SECONDS", "900")
    monkeypatch.setenv("REGIONALSYNC_ALLOW_EMPTY_PAYLOAD", "true")
    monkeypatch.setenv("REGIONALSYNC_RUN_ON_START", "false")

    assert get_sync_config() == SyncConfig(
        interval_seconds=900, allow_empty_payload=True, run_on_start=False
    )


def test_sync_config_rejects_short_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGIONALSYNC_INTERVAL_SECONDS", "10")

    with pytest.raises(ConfigurationError):
        get_sync_config()


def test_regional_source_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGIONAL_SOURCE_URL", "https://example.test/regionals")
    monkeypatch.setenv("REGIONAL_SOURCE_TIMEOUT_SECONDS", "4")
    monkeypatch.delenv("REGIONALSYNC_HTTP_CACHE", raising=False)

    config = get_regional_source_config()

    assert config.url == "https://example.test/regionals"
    assert config.resilience.timeout_seconds == 4
    assert config.resilience.cache is None
    assert config.resilience.retry.total == 3


def test_regional_source_config_rejects_non_positive_timeout(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("REGIONAL_SOURCE_URL", "https://example.test/regionals")
    monkeypatch.setenv("REGIONAL_SOURCE_TIMEOUT_SECONDS", "0")

    with pytest.raises(ConfigurationError):
        get_regional_source_config()


def test_regional_source_sqlite_cache_lives_in_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("REGIONAL_SOURCE_URL", "https://example.test/regionals")
    monkeypatch.delenv("REGIONAL_SOURCE_TIMEOUT_SECONDS", raising=False)
    monkeypatch.setenv("REGIONALSYNC_HTTP_CACHE", "sqlite")
    monkeypatch.setenv("REGIONALSYNC_DATA_DIR", str(tmp_path))

    cache = get_regional_source_config().resilience.cache

    assert cache is not None
    assert cache.sqlite_path == str(tmp_path.resolve() / "http_cache.db")


@pytest.mark.parametrize("mode", ["redis", "memory"])
def test_regional_source_rejects_unknown_cache_mode(
    monkeypatch: pytest.MonkeyPatch, mode: str
) -> None:
    monkeypatch.setenv("REGIONAL_SOURCE_URL", "https://example.test/regionals")
    monkeypatch.setenv("REGIONALSYNC_HTTP_CACHE", mode)

    with pytest.raises(ConfigurationError):
        get_regional_source_config()


def test_database_config_prefers_explicit_uri(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "postgresql+psycopg://db/regionals")

    assert get_database_config().uri == "postgresql+psycopg://db/regionals"


def test_database_config_defaults_to_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("REGIONALSYNC_DATA_DIR", str(tmp_path / "data"))

    uri = get_database_config().uri

    assert uri == f"sqlite+pysqlite:///{tmp_path.resolve() / 'data' / 'regionalsync.db'}"
    assert get_storage_config().resolve_data_dir().is_dir()
