"""
app/errors.py

Exceptions raised by the player ingestion pipeline.
"""

from __future__ import annotations


class PlayerIngestionError(Exception):
    """Base exception for terminal player ingestion failures."""


class TransportError(PlayerIngestionError):
    """
    Raised when the squad payload cannot be fetched or the API answers non-2xx.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PayloadValidationError(PlayerIngestionError, ValueError):
    """
    Raised when a squad payload violates its schema.

    ``location`` is the dotted path to the offending value, e.g. ``players.0.id``.
    """

    def __init__(self, *, location: str, constraint: str) -> None:
        self.location = location
        self.constraint = constraint
        super().__init__(f"Invalid squad payload at '{location}': {constraint}")


class StorageError(PlayerIngestionError):
    """
    Raised when the player upsert fails.

    ``rows_applied`` is what the storage layer reports as written before failing.
    """

    def __init__(self, message: str, *, rows_applied: int = 0) -> None:
        super().__init__(message)
        self.rows_applied = rows_applied
