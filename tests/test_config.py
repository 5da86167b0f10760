from __future__ import annotations

import pytest

from app import config
from db import session
from db.config import engine_options, normalize_postgres_url, resolve_database_url

_GETTERS = (
    config.get_external_http_settings,
    config.get_squad_api_settings,
    config.get_auth_settings,
    config.get_player_sync_schedule_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


def test_squad_api_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SQUAD_API_URL", "SQUAD_SCHEMA_VERSION", "SQUAD_API_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    settings = config.get_squad_api_settings()

    assert settings.url == config.DEFAULT_SQUAD_API_URL
    assert settings.schema_version == "v2"
    assert settings.user_agent == "TeamCore/1.0"


def test_squad_api_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQUAD_API_URL", "https://api.example.test/squad")
    monkeypatch.setenv("SQUAD_SCHEMA_VERSION", " V1 ")

    settings = config.get_squad_api_settings()

    assert settings.url == "https://api.example.test/squad"
    assert settings.schema_version == "v1"


def test_http_settings_clamp_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXTERNAL_HTTP_TIMEOUT_SECONDS", "0")
    monkeypatch.setenv("EXTERNAL_HTTP_MAX_RETRIES", "-3")
    monkeypatch.setenv("EXTERNAL_HTTP_BACKOFF_MULTIPLIER", "not-a-number")

    settings = config.get_external_http_settings()

    assert settings.timeout_seconds == 1.0
    assert settings.max_retries == 0
    assert settings.backoff_multiplier == 2.0


def test_auth_settings_require_both_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "   ")

    settings = config.get_auth_settings()

    assert settings.anon_key is None
    assert settings.is_configured is False


def test_schedule_is_disabled_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PLAYER_SYNC_SCHEDULE_ENABLED", raising=False)
    monkeypatch.setenv("PLAYER_SYNC_INTERVAL_MINUTES", "0")

    settings = config.get_player_sync_schedule_settings()

    assert settings.enabled is False
    assert settings.interval_minutes == 1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("postgres://u:p@db:5432/app", "postgresql+psycopg://u:p@db:5432/app"),
        ("postgresql://u:p@db:5432/app", "postgresql+psycopg://u:p@db:5432/app"),
        ("postgresql+psycopg://u:p@db/app", "postgresql+psycopg://u:p@db/app"),
    ],
)
def test_normalize_postgres_url(raw: str, expected: str) -> None:
    assert normalize_postgres_url(raw) == expected


def test_database_url_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("SUPABASE_DB_URL", "postgres://hosted/app")
    monkeypatch.setenv("LOCAL_DATABASE_URL", "postgresql://localhost/app")

    assert resolve_database_url() == "postgresql+psycopg://hosted/app"

    monkeypatch.setenv("DATABASE_URL", "postgresql://primary/app")
    assert resolve_database_url() == "postgresql+psycopg://primary/app"


def test_missing_database_url_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATABASE_URL", "SUPABASE_DB_URL", "LOCAL_DATABASE_URL"):
        monkeypatch.setenv(name, "")

    with pytest.raises(RuntimeError, match="No database URL configured"):
        resolve_database_url()


def test_engine_options_keep_a_small_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SQL_ECHO", "DB_POOL_SIZE", "DB_POOL_RECYCLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DB_MAX_OVERFLOW", "many")

    options = engine_options()

    assert options["echo"] is False
    assert options["pool_pre_ping"] is True
    assert options["pool_size"] == 2
    assert options["max_overflow"] == 3
    assert options["pool_recycle"] == 1800


def test_engine_requires_postgres(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///players.db")
    session.get_engine.cache_clear()
    try:
        with pytest.raises(RuntimeError, match="must be PostgreSQL"):
            session.get_engine()
    finally:
        session.get_engine.cache_clear()
