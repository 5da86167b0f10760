"""
app/validators/squad_validator.py

Schema validation for untrusted squad API payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, ValidationError

from app.errors import PayloadValidationError
from app.schemas.squad import SquadPlayer, SquadResponseV1, SquadResponseV2


class SchemaVersion(str, Enum):
    """
    Squad API contract versions understood by the validator.
    """

    V1 = "v1"
    V2 = "v2"

    @classmethod
    def parse(cls, value: "SchemaVersion | str") -> "SchemaVersion":
        if isinstance(value, SchemaVersion):
            return value
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"Unsupported squad schema version '{value}'. Allowed versions: {allowed}.")


_RESPONSE_MODELS: dict[SchemaVersion, type[BaseModel]] = {
    SchemaVersion.V1: SquadResponseV1,
    SchemaVersion.V2: SquadResponseV2,
}


@dataclass(frozen=True)
class SquadValidationResult:
    """
    Tagged outcome of validating one squad payload.

    Exactly one of ``players`` (when ``ok``) or ``error`` is meaningful.
    """

    ok: bool
    players: tuple[SquadPlayer, ...] = field(default_factory=tuple)
    error: PayloadValidationError | None = None

    @classmethod
    def success(cls, players: Sequence[SquadPlayer]) -> "SquadValidationResult":
        return cls(ok=True, players=tuple(players))

    @classmethod
    def failure(cls, error: PayloadValidationError) -> "SquadValidationResult":
        return cls(ok=False, error=error)


def validate_squad_payload(payload: Any, version: SchemaVersion | str) -> SquadValidationResult:
    """
    Validate a decoded JSON value against the squad schema of ``version``.

    Only the first violation is reported. The function has no side effects.
    """

    model = _RESPONSE_MODELS[SchemaVersion.parse(version)]
    try:
        parsed = model.model_validate(payload)
    except ValidationError as exc:
        return SquadValidationResult.failure(_first_violation(exc))
    return SquadValidationResult.success(parsed.players)  # type: ignore[attr-defined]


def parse_squad_payload(payload: Any, version: SchemaVersion | str) -> tuple[SquadPlayer, ...]:
    """
    Raising form of :func:`validate_squad_payload`.
    """

    result = validate_squad_payload(payload, version)
    if not result.ok:
        assert result.error is not None
        raise result.error
    return result.players


def _first_violation(exc: ValidationError) -> PayloadValidationError:
    first = exc.errors(include_url=False)[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return PayloadValidationError(location=location, constraint=first.get("msg", "invalid value"))
