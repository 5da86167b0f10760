"""
app/schemas/squad.py

Versioned pydantic models for the third-party squad API payload.

Two incompatible shapes of the squad endpoint are in circulation:

* ``v1``: string ids, only names required, a few optional profile fields.
* ``v2``: numeric ids with slug, status and season statistics required,
  plus an optional (and nullable) image descriptor.

All models validate strictly: no string/number coercion, and unknown keys
sent by the API are ignored.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SQUAD_MODEL_CONFIG = ConfigDict(
    strict=True,
    frozen=True,
    extra="ignore",
    populate_by_name=True,
)


class SquadPlayerV1(BaseModel):
    model_config = _SQUAD_MODEL_CONFIG

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    jersey_number: int | None = Field(default=None, alias="jerseyNumber")
    position: str | None = None
    date_of_birth: str | None = Field(default=None, alias="dateOfBirth")
    nationality: str | None = None

    @field_validator("jersey_number", "position", "date_of_birth", "nationality", mode="before")
    @classmethod
    def _reject_explicit_null(cls, value: Any) -> Any:
        # Optional in v1 means "may be absent", not "may be null".
        if value is None:
            raise ValueError("must not be null when present")
        return value


class PlayerImage(BaseModel):
    """Image descriptor attached to a v2 player."""

    model_config = _SQUAD_MODEL_CONFIG

    path: str
    description: str
    source: str
    svg: bool


class SquadPlayerV2(BaseModel):
    model_config = _SQUAD_MODEL_CONFIG

    id: int
    slug: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    is_deactivated: bool = Field(alias="isDeactivated")
    position: str
    matches: int
    goals: int
    flags: list[str]
    image: PlayerImage | None = None
    jersey_number: int | None = Field(default=None, alias="jerseyNumber")
    age: int | None = None


class SquadResponseV1(BaseModel):
    model_config = _SQUAD_MODEL_CONFIG

    players: list[SquadPlayerV1]


class SquadResponseV2(BaseModel):
    model_config = _SQUAD_MODEL_CONFIG

    players: list[SquadPlayerV2]


SquadPlayer = Union[SquadPlayerV1, SquadPlayerV2]
