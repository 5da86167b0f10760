"""
app/api/routers/players.py

Squad ingestion trigger and roster read endpoints.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.api.auth import require_authenticated_user
from app.api.dependencies import get_ingestion_service, get_roster_store
from app.errors import StorageError
from app.repositories.player_store import SQLAlchemyPlayerStore
from app.schemas.players import (
    ErrorResponse,
    PlayerIngestionFailureResponse,
    PlayerIngestionSuccessResponse,
    PlayerResponse,
)
from app.services.player_ingestion_service import PlayerIngestionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["players"])


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.post(
    "/api/fetch-players",
    response_model=PlayerIngestionSuccessResponse,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PlayerIngestionFailureResponse},
    },
)
def fetch_players(
    _user: dict[str, Any] = Depends(require_authenticated_user),
    ingestion_service: PlayerIngestionService = Depends(get_ingestion_service),
) -> JSONResponse:
    """
    Fetch the squad from the external API and upsert it into the roster.
    """

    try:
        result = ingestion_service.run()
    except Exception as exc:
        logger.exception("Unexpected squad ingestion error error=%s", exc)
        body = ErrorResponse(
            error="Internal Server Error",
            message=str(exc) or "Unknown error occurred",
            timestamp=_now(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(mode="json"),
        )

    if result.success:
        success = PlayerIngestionSuccessResponse(
            players_processed=result.players_processed,
            timestamp=_now(),
            warnings=list(result.errors) or None,
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=success.model_dump(mode="json", exclude_none=True),
        )

    failure = PlayerIngestionFailureResponse(
        message="; ".join(result.errors),
        players_processed=result.players_processed,
        timestamp=_now(),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure.model_dump(mode="json"),
    )


@router.get("/players", response_model=list[PlayerResponse])
def list_players(
    _user: dict[str, Any] = Depends(require_authenticated_user),
    store: SQLAlchemyPlayerStore = Depends(get_roster_store),
) -> list[PlayerResponse]:
    """
    Return the stored roster ordered by last name.
    """

    try:
        players = store.list_players()
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to fetch players", "message": str(exc)},
        ) from exc

    return [PlayerResponse.model_validate(player) for player in players]
