"""
app/mappers package marker.
"""

from app.mappers.player_mapper import PlayerRecord, to_player_record, to_player_records

__all__ = [
    "PlayerRecord",
    "to_player_record",
    "to_player_records",
]
