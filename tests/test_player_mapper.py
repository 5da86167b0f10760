from __future__ import annotations

from typing import Any

from app.mappers.player_mapper import to_player_record, to_player_records
from app.validators.squad_validator import parse_squad_payload
from tests.fakes import make_v1_player, make_v2_player


def _v2(*players: dict[str, Any]):
    return parse_squad_payload({"players": list(players)}, "v2")


def _v1(*players: dict[str, Any]):
    return parse_squad_payload({"players": list(players)}, "v1")


def test_v2_full_player_maps_to_snake_case_record() -> None:
    (player,) = _v2(make_v2_player(101))

    record = to_player_record(player)

    assert record == {
        "id": 101,
        "slug": "player-101",
        "first_name": "Max",
        "last_name": "Muster101",
        "is_deactivated": False,
        "position": "Sturm",
        "matches": 12,
        "goals": 7,
        "flags": ["captain"],
        "image": {
            "path": "https://image.fupa.net/player/101",
            "description": "Portrait",
            "source": "fupa",
            "svg": False,
        },
        "jersey_number": 9,
        "age": 24,
    }


def test_absent_optional_fields_stay_absent() -> None:
    raw = make_v2_player(5)
    for key in ("image", "jerseyNumber", "age"):
        del raw[key]
    (player,) = _v2(raw)

    record = to_player_record(player)

    assert "image" not in record
    assert "jersey_number" not in record
    assert "age" not in record


def test_explicit_null_is_kept_as_none() -> None:
    (player,) = _v2(make_v2_player(5, image=None, jerseyNumber=None))

    record = to_player_record(player)

    assert record["image"] is None
    assert record["jersey_number"] is None
    assert record["age"] == 24


def test_v1_player_maps_optional_profile_fields() -> None:
    (player,) = _v1(make_v1_player("p-1"))

    assert to_player_record(player) == {
        "id": "p-1",
        "first_name": "Lena",
        "last_name": "Beispiel",
        "jersey_number": 4,
        "position": "Abwehr",
        "date_of_birth": "2001-03-14",
        "nationality": "DE",
    }


def test_v1_player_without_optional_fields() -> None:
    (player,) = _v1({"id": "p-2", "firstName": "Ada", "lastName": "Lovelace"})
    assert to_player_record(player) == {"id": "p-2", "first_name": "Ada", "last_name": "Lovelace"}


def test_records_preserve_order_and_natural_keys() -> None:
    ids = [301, 7, 150, 42]
    players = _v2(*(make_v2_player(player_id) for player_id in ids))

    records = to_player_records(players)

    assert len(records) == len(players)
    assert [record["id"] for record in records] == ids
    assert [record["id"] for record in records] == [player.id for player in players]


def test_flags_are_copied_into_a_plain_list() -> None:
    (player,) = _v2(make_v2_player(1, flags=["captain", "injured"]))
    record = to_player_record(player)
    assert record["flags"] == ["captain", "injured"]
    assert isinstance(record["flags"], list)
