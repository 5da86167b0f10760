"""
db/session.py

Engine and sessions for the players database, created on first use.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db.config import engine_options, resolve_database_url


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the shared engine. Only PostgreSQL is supported: the upsert relies on ON CONFLICT."""
    database_url = resolve_database_url()
    if not database_url.startswith("postgresql"):
        raise RuntimeError("The players database must be PostgreSQL.")
    return create_engine(database_url, **engine_options())


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    # Rows are read after commit (RETURNING, roster listing), so keep them loaded.
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


def open_session() -> Session:
    return get_session_factory()()
