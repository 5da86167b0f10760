"""
Environment-driven database configuration for the players table.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

_POSTGRES_SCHEMES = ("postgres://", "postgresql://")


def load_env_files() -> None:
    """
    Load KEY=VALUE pairs from `.env` and `.env.local` at the project root.
    Values already present in the process environment win.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def normalize_postgres_url(url: str) -> str:
    """
    Rewrite hosted Postgres connection strings to the psycopg driver form.
    """

    for scheme in _POSTGRES_SCHEMES:
        if url.startswith(scheme):
            return "postgresql+psycopg://" + url[len(scheme) :]
    return url


def resolve_database_url() -> str:
    """
    Resolve the players database URL.

    Priority:
    1) DATABASE_URL
    2) SUPABASE_DB_URL (connection string of the hosted project)
    3) LOCAL_DATABASE_URL
    """

    load_env_files()

    for name in ("DATABASE_URL", "SUPABASE_DB_URL", "LOCAL_DATABASE_URL"):
        value = (os.getenv(name) or "").strip()
        if value:
            return normalize_postgres_url(value)

    raise RuntimeError(
        "No database URL configured. Set DATABASE_URL, SUPABASE_DB_URL "
        "or LOCAL_DATABASE_URL."
    )


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def engine_options() -> dict[str, Any]:
    """
    Engine keyword arguments for the players database.

    Serverless deployments keep the pool small; the hosted pooler does the rest.
    """

    load_env_files()
    return {
        "echo": (os.getenv("SQL_ECHO") or "").strip().lower() in {"1", "true", "yes", "on"},
        "pool_pre_ping": True,
        "pool_recycle": _int_env("DB_POOL_RECYCLE", 1800),
        "pool_size": _int_env("DB_POOL_SIZE", 2),
        "max_overflow": _int_env("DB_MAX_OVERFLOW", 3),
    }
