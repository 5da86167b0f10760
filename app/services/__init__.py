"""
app/services package marker.
"""

from app.services.player_ingestion_service import (
    PlayerIngestionService,
    get_player_ingestion_service,
    get_player_store,
)

__all__ = [
    "PlayerIngestionService",
    "get_player_ingestion_service",
    "get_player_store",
]
