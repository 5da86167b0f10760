"""
app/repositories package marker.
"""

from app.repositories.player_store import PlayerStore, SQLAlchemyPlayerStore

__all__ = [
    "PlayerStore",
    "SQLAlchemyPlayerStore",
]
