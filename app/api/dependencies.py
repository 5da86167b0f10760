"""
app/api/dependencies.py

Shared FastAPI dependencies for the roster endpoints.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from app.repositories.player_store import SQLAlchemyPlayerStore
from app.services.player_ingestion_service import (
    PlayerIngestionService,
    get_player_ingestion_service,
    get_player_store,
)


def _configuration_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "Configuration Error", "message": message},
    )


def get_ingestion_service() -> PlayerIngestionService:
    """
    Resolve the ingestion service, reporting bad settings as a configuration error.
    """

    try:
        return get_player_ingestion_service()
    except (ValueError, RuntimeError) as exc:
        raise _configuration_error(str(exc)) from exc


def get_roster_store() -> SQLAlchemyPlayerStore:
    try:
        return get_player_store()
    except RuntimeError as exc:
        raise _configuration_error(str(exc)) from exc
