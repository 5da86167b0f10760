"""
app/domain package marker.
"""

from app.domain.player_ingestion import IngestionResult, IngestionStage

__all__ = [
    "IngestionResult",
    "IngestionStage",
]
