"""
db/models/player.py

Roster table keyed by the squad API's player id.

The service owns a single table, so the declarative base lives here too.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Columns the ingestion pipeline may write. created_at/updated_at are server-side.
PLAYER_WRITABLE_COLUMNS: tuple[str, ...] = (
    "id",
    "slug",
    "first_name",
    "last_name",
    "is_deactivated",
    "position",
    "image",
    "jersey_number",
    "matches",
    "goals",
    "flags",
    "age",
    "date_of_birth",
    "nationality",
)


class Base(DeclarativeBase):
    """
    Metadata root for the players database; checked against the live schema at startup.
    """


class Player(Base):
    __tablename__ = "players"

    # Text so string ids (v1) and numeric ids (v2) share the same table.
    id: Mapped[str] = mapped_column(
        Text,
        primary_key=True,
        comment="Squad API player id",
    )
    slug: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_deactivated: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # An explicit null image from the API is stored as SQL NULL, not JSON 'null'.
    image: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB(none_as_null=True),
        nullable=True,
        comment="path, description, source, svg",
    )
    jersey_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    matches: Mapped[int | None] = mapped_column(Integer, nullable=True)
    goals: Mapped[int | None] = mapped_column(Integer, nullable=True)
    flags: Mapped[list[str] | None] = mapped_column(ARRAY(Text), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    date_of_birth: Mapped[str | None] = mapped_column(String(32), nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # The upsert refreshes updated_at itself; onupdate covers plain ORM updates.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (
        Index("ix_players_last_name", "last_name"),
        Index("ix_players_slug", "slug"),
    )
