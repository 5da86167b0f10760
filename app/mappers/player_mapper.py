"""
app/mappers/player_mapper.py

Field mapping from validated squad players to ``players`` table records.
"""

from __future__ import annotations

from typing import Any, Iterable

from app.schemas.squad import PlayerImage, SquadPlayer, SquadPlayerV1, SquadPlayerV2

PlayerRecord = dict[str, Any]

# Optional attributes per version, mapped to their storage column.
_V1_OPTIONAL_COLUMNS: dict[str, str] = {
    "jersey_number": "jersey_number",
    "position": "position",
    "date_of_birth": "date_of_birth",
    "nationality": "nationality",
}

_V2_OPTIONAL_COLUMNS: dict[str, str] = {
    "image": "image",
    "jersey_number": "jersey_number",
    "age": "age",
}


def to_player_record(player: SquadPlayer) -> PlayerRecord:
    """
    Map one validated player to its storage record.

    Optional fields the API left out are left out of the record; an explicit
    ``null`` is kept as ``None``.
    """

    if isinstance(player, SquadPlayerV2):
        record: PlayerRecord = {
            "id": player.id,
            "slug": player.slug,
            "first_name": player.first_name,
            "last_name": player.last_name,
            "is_deactivated": player.is_deactivated,
            "position": player.position,
            "matches": player.matches,
            "goals": player.goals,
            "flags": list(player.flags),
        }
        optional_columns = _V2_OPTIONAL_COLUMNS
    elif isinstance(player, SquadPlayerV1):
        record = {
            "id": player.id,
            "first_name": player.first_name,
            "last_name": player.last_name,
        }
        optional_columns = _V1_OPTIONAL_COLUMNS
    else:
        raise TypeError(f"Unsupported squad player type: {type(player).__name__}")

    for attribute, column in optional_columns.items():
        if attribute in player.model_fields_set:
            record[column] = _storage_value(getattr(player, attribute))
    return record


def to_player_records(players: Iterable[SquadPlayer]) -> list[PlayerRecord]:
    """Map players one-to-one, preserving order."""

    return [to_player_record(player) for player in players]


def _storage_value(value: Any) -> Any:
    if isinstance(value, PlayerImage):
        return {
            "path": value.path,
            "description": value.description,
            "source": value.source,
            "svg": value.svg,
        }
    return value
