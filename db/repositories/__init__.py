"""
Repository layer exports.
"""

from db.repositories.player_repository import PlayerRepository

__all__ = [
    "PlayerRepository",
]
