"""
db/repositories/player_repository.py

Persistence layer for roster rows.

The caller controls commit/rollback; this repository never commits on its own.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.orm import Session

from db.models.player import PLAYER_WRITABLE_COLUMNS, Player


class PlayerRepository:
    """
    Repository for upserting and reading ``players`` rows.

    Upsert semantics: a record whose ``id`` already exists overwrites the
    columns present in that record and refreshes ``updated_at``. Columns
    absent from the record keep their stored value.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def upsert_players(self, records: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
        """
        Insert new players and update existing ones, keyed on ``id``.

        Records sharing the same set of columns go out in one statement.
        Duplicate ids within a call are collapsed, last occurrence wins.

        Returns
        -------
        list[dict[str, Any]]
            Written rows as stored (including timestamps), in input order.
        """
        if not records:
            return []

        deduped = _deduplicate(records)
        written: dict[str, dict[str, Any]] = {}
        for columns, payloads in _group_by_columns(deduped):
            stmt = self.build_upsert_statement(columns, payloads)
            for row in self._session.execute(stmt).mappings().all():
                written[row["id"]] = dict(row)

        return [written[payload["id"]] for payload in deduped if payload["id"] in written]

    @staticmethod
    def build_upsert_statement(
        columns: Sequence[str],
        payloads: Sequence[Mapping[str, Any]],
    ) -> Any:
        """
        Build ``INSERT ... ON CONFLICT (id) DO UPDATE ... RETURNING`` for one column set.
        """
        stmt = insert(Player).values(list(payloads))
        update_set: dict[str, Any] = {
            column: stmt.excluded[column] for column in columns if column != "id"
        }
        update_set["updated_at"] = func.now()
        return stmt.on_conflict_do_update(
            index_elements=[Player.id],
            set_=update_set,
        ).returning(*Player.__table__.columns)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_players(self) -> list[Player]:
        """Return every stored player ordered by last name, then first name."""
        stmt = select(Player).order_by(Player.last_name, Player.first_name)
        return list(self._session.scalars(stmt).all())


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


def _deduplicate(records: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Keep writable columns only and collapse duplicate ids, last write wins."""
    seen: dict[str, dict[str, Any]] = {}
    for record in records:
        payload = {key: value for key, value in record.items() if key in PLAYER_WRITABLE_COLUMNS}
        payload["id"] = str(record["id"])
        seen.pop(payload["id"], None)
        seen[payload["id"]] = payload
    return list(seen.values())


def _group_by_columns(
    payloads: Sequence[dict[str, Any]],
) -> list[tuple[tuple[str, ...], list[dict[str, Any]]]]:
    # Multi-row VALUES needs the same keys in every row.
    groups: dict[tuple[str, ...], list[dict[str, Any]]] = {}
    for payload in payloads:
        columns = tuple(column for column in PLAYER_WRITABLE_COLUMNS if column in payload)
        groups.setdefault(columns, []).append(payload)
    return list(groups.items())
