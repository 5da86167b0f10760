"""
app/schemas/players.py

Response schemas for the roster endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlayerIngestionSuccessResponse(BaseModel):
    """
    Body returned when a squad ingestion run succeeds.
    """

    message: str = "Players fetched and stored successfully"
    players_processed: int = Field(..., ge=0)
    timestamp: datetime
    warnings: list[str] | None = None


class PlayerIngestionFailureResponse(BaseModel):
    """
    Body returned when a squad ingestion run fails.
    """

    error: str = "Failed to fetch and store players"
    message: str
    players_processed: int = Field(..., ge=0)
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
    message: str
    timestamp: datetime | None = None


class PlayerResponse(BaseModel):
    """
    One stored roster row.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str | None = None
    first_name: str
    last_name: str
    is_deactivated: bool | None = None
    position: str | None = None
    image: dict[str, Any] | None = None
    jersey_number: int | None = None
    matches: int | None = None
    goals: int | None = None
    flags: list[str] | None = None
    age: int | None = None
    date_of_birth: str | None = None
    nationality: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
