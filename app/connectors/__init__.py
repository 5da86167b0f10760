"""
app/connectors package marker.
"""

from app.connectors.base import BaseConnector
from app.connectors.squad_api_connector import SquadAPIConnector

__all__ = [
    "BaseConnector",
    "SquadAPIConnector",
]
