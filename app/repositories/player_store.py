"""
app/repositories/player_store.py

Storage boundary used by the player ingestion service.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Mapping, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import StorageError
from db.repositories.player_repository import PlayerRepository

logger = logging.getLogger(__name__)


class PlayerStore(Protocol):
    """
    Upsert-capable players table, conflict key ``id``.
    """

    def upsert(self, records: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
        ...


class SQLAlchemyPlayerStore:
    """
    PostgreSQL-backed store. Each upsert call is one transaction.

    The upsert is all-or-nothing, so a failure reports zero rows applied.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def upsert(self, records: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
        with self._session_factory() as session:
            try:
                written = PlayerRepository(session).upsert_players(records)
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception("Player upsert failed records=%s", len(records))
                raise StorageError(f"Failed to upsert players: {exc}", rows_applied=0) from exc
        return written

    def list_players(self) -> list[Any]:
        with self._session_factory() as session:
            try:
                return PlayerRepository(session).list_players()
            except SQLAlchemyError as exc:
                logger.exception("Player listing failed")
                raise StorageError(f"Failed to fetch players: {exc}") from exc
