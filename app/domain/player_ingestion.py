"""
app/domain/player_ingestion.py

Domain models for one player ingestion run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class IngestionStage(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    VALIDATING = "validating"
    TRANSFORMING = "transforming"
    STORING = "storing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class IngestionResult:
    """
    Outcome of a single ingestion run. Never persisted.
    """

    success: bool
    players_processed: int
    errors: list[str] = field(default_factory=list)

    @classmethod
    def succeeded(cls, players_processed: int) -> "IngestionResult":
        return cls(success=True, players_processed=players_processed, errors=[])

    @classmethod
    def failed(cls, message: str, *, players_processed: int = 0) -> "IngestionResult":
        return cls(success=False, players_processed=players_processed, errors=[message])
