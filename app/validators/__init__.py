"""
app/validators package marker.
"""

from app.validators.squad_validator import (
    SchemaVersion,
    SquadValidationResult,
    parse_squad_payload,
    validate_squad_payload,
)

__all__ = [
    "SchemaVersion",
    "SquadValidationResult",
    "parse_squad_payload",
    "validate_squad_payload",
]
