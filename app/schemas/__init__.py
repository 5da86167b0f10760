"""
app/schemas package marker.
"""

from app.schemas.players import (
    ErrorResponse,
    PlayerIngestionFailureResponse,
    PlayerIngestionSuccessResponse,
    PlayerResponse,
)
from app.schemas.squad import (
    PlayerImage,
    SquadPlayer,
    SquadPlayerV1,
    SquadPlayerV2,
    SquadResponseV1,
    SquadResponseV2,
)

__all__ = [
    "ErrorResponse",
    "PlayerImage",
    "PlayerIngestionFailureResponse",
    "PlayerIngestionSuccessResponse",
    "PlayerResponse",
    "SquadPlayer",
    "SquadPlayerV1",
    "SquadPlayerV2",
    "SquadResponseV1",
    "SquadResponseV2",
]
