from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI


def _validate_env() -> None:
    """
    Validate required environment variables at startup.

    Raises RuntimeError listing every missing or invalid variable so the
    operator can fix all problems in one restart cycle.

    Rules:
    - A PostgreSQL URL must be configured (DATABASE_URL, SUPABASE_DB_URL or
      LOCAL_DATABASE_URL).
    - SUPABASE_URL and SUPABASE_ANON_KEY are required for bearer-token checks.
    - SQUAD_SCHEMA_VERSION, when set, must name a known contract version.
    """

    from app.validators.squad_validator import SchemaVersion
    from db.config import load_env_files

    load_env_files()

    errors: list[str] = []

    # --- Database URL ---------------------------------------------------
    if not any(
        os.getenv(name, "").strip()
        for name in ("DATABASE_URL", "SUPABASE_DB_URL", "LOCAL_DATABASE_URL")
    ):
        errors.append(
            "No database URL configured. Set DATABASE_URL, SUPABASE_DB_URL or LOCAL_DATABASE_URL."
        )

    # --- Auth -----------------------------------------------------------
    missing_auth = [
        name for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY") if not os.getenv(name, "").strip()
    ]
    if missing_auth:
        errors.append(f"Missing auth settings: {', '.join(missing_auth)}.")

    # --- Squad schema version ------------------------------------------
    raw_version = os.getenv("SQUAD_SCHEMA_VERSION", "").strip()
    if raw_version:
        try:
            SchemaVersion.parse(raw_version)
        except ValueError as exc:
            errors.append(str(exc))

    if errors:
        raise RuntimeError(
            "Startup validation failed, missing or invalid environment variables:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _check_schema() -> None:
    """
    Confirm the database is reachable and every ORM table exists.

    Does NOT create tables; the players table is provisioned on the hosted
    database ahead of deployment.
    """
    from sqlalchemy import inspect as sa_inspect

    from db.models import Base
    from db.session import get_engine

    try:
        actual: set[str] = set(sa_inspect(get_engine()).get_table_names())
    except Exception as exc:
        raise RuntimeError("Database unavailable.") from exc

    missing = set(Base.metadata.tables.keys()) - actual
    if missing:
        logging.getLogger(__name__).critical(
            "Schema mismatch: table(s) absent from the database: %s",
            ", ".join(sorted(missing)),
        )
        raise RuntimeError(
            f"Schema mismatch: {len(missing)} table(s) missing from the database "
            f"({', '.join(sorted(missing))})."
        )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Validate the schema and start the squad sync scheduler on boot; stop it on exit."""
    _check_schema()
    logging.getLogger(__name__).info("Database schema validated")

    from app.scheduler.jobs import build_scheduler

    scheduler = build_scheduler()
    scheduler.start()
    logging.getLogger(__name__).info("Scheduler started with %d jobs", len(scheduler.get_jobs()))
    try:
        yield
    finally:
        scheduler.shutdown(wait=True)
        logging.getLogger(__name__).info("Scheduler shut down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    _configure_logging()

    application = FastAPI(
        title="TeamCore API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import players_router

    application.include_router(players_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application
