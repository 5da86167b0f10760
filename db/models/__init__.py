"""
Model package exports.

Importing this package registers the players table on ``Base.metadata``.
"""

from db.models.player import PLAYER_WRITABLE_COLUMNS, Base, Player

__all__ = [
    "Base",
    "PLAYER_WRITABLE_COLUMNS",
    "Player",
]
