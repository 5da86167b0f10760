"""
app/api/routers package marker.
"""

from app.api.routers.players import router as players_router

__all__ = [
    "players_router",
]
