"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files

DEFAULT_SQUAD_API_URL = "https://api.fupa.net/v1/teams/tus-ellmendingen-m1-2025-26/squad"


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class ExternalHTTPSettings:
    """
    Shared HTTP behavior settings for external connectors.

    Retries default to zero: a failed fetch ends the ingestion run and the
    trigger decides whether to run again.
    """

    timeout_seconds: float = 15.0
    max_retries: int = 0
    backoff_initial_seconds: float = 0.5
    backoff_multiplier: float = 2.0


@dataclass(frozen=True)
class SquadAPISettings:
    """
    Squad API connector settings.
    """

    url: str = DEFAULT_SQUAD_API_URL
    schema_version: str = "v2"
    user_agent: str = "TeamCore/1.0"


@dataclass(frozen=True)
class AuthSettings:
    """
    Bearer-token verification settings for the hosted auth service.
    """

    supabase_url: str | None = None
    anon_key: str | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.supabase_url and self.anon_key)


@dataclass(frozen=True)
class PlayerSyncScheduleSettings:
    """
    Periodic squad sync settings.
    """

    enabled: bool = False
    interval_minutes: int = 360


@lru_cache(maxsize=1)
def get_external_http_settings() -> ExternalHTTPSettings:
    """
    Return shared connector HTTP settings from environment variables.
    """

    return ExternalHTTPSettings(
        timeout_seconds=max(1.0, _get_float_env("EXTERNAL_HTTP_TIMEOUT_SECONDS", 15.0)),
        max_retries=max(0, _get_int_env("EXTERNAL_HTTP_MAX_RETRIES", 0)),
        backoff_initial_seconds=max(0.1, _get_float_env("EXTERNAL_HTTP_BACKOFF_INITIAL_SECONDS", 0.5)),
        backoff_multiplier=max(1.0, _get_float_env("EXTERNAL_HTTP_BACKOFF_MULTIPLIER", 2.0)),
    )


@lru_cache(maxsize=1)
def get_squad_api_settings() -> SquadAPISettings:
    """
    Return squad API settings from environment variables.

    The schema version is kept as a raw string here; the validator rejects
    unknown versions when the service is built.
    """

    return SquadAPISettings(
        url=_get_str_env("SQUAD_API_URL", DEFAULT_SQUAD_API_URL),
        schema_version=_get_str_env("SQUAD_SCHEMA_VERSION", "v2").lower(),
        user_agent=_get_str_env("SQUAD_API_USER_AGENT", "TeamCore/1.0"),
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """
    Return auth verification settings from environment variables.
    """

    return AuthSettings(
        supabase_url=_get_optional_str_env("SUPABASE_URL"),
        anon_key=_get_optional_str_env("SUPABASE_ANON_KEY"),
    )


@lru_cache(maxsize=1)
def get_player_sync_schedule_settings() -> PlayerSyncScheduleSettings:
    """
    Return periodic squad sync settings from environment variables.
    """

    return PlayerSyncScheduleSettings(
        enabled=_get_bool_env("PLAYER_SYNC_SCHEDULE_ENABLED", False),
        interval_minutes=max(1, _get_int_env("PLAYER_SYNC_INTERVAL_MINUTES", 360)),
    )
