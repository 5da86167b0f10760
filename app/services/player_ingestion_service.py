"""
app/services/player_ingestion_service.py

Orchestration service for squad ingestion: fetch, validate, transform, upsert.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.config import get_external_http_settings, get_squad_api_settings
from app.connectors import BaseConnector, SquadAPIConnector
from app.domain.player_ingestion import IngestionResult, IngestionStage
from app.errors import StorageError, TransportError
from app.mappers.player_mapper import to_player_records
from app.repositories.player_store import PlayerStore, SQLAlchemyPlayerStore
from app.validators.squad_validator import SchemaVersion, validate_squad_payload

logger = logging.getLogger(__name__)


class _IngestionRun:
    """Stage tracker for a single run; discarded when the run ends."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.stage = IngestionStage.IDLE

    def advance(self, stage: IngestionStage) -> None:
        logger.debug(
            "Squad ingestion stage source=%s from=%s to=%s",
            self.source,
            self.stage.value,
            stage.value,
        )
        self.stage = stage


class PlayerIngestionService:
    """
    Runs one squad ingestion per call to :meth:`run`.

    No state is kept between runs and nothing is retried here; the trigger
    decides whether to run again. Re-running with unchanged squad data
    rewrites the same rows.
    """

    def __init__(
        self,
        *,
        connector: BaseConnector,
        store: PlayerStore,
        schema_version: SchemaVersion | str,
    ) -> None:
        self._connector = connector
        self._store = store
        self._schema_version = SchemaVersion.parse(schema_version)

    @property
    def schema_version(self) -> SchemaVersion:
        return self._schema_version

    def run(self) -> IngestionResult:
        """
        Fetch the squad and upsert it. Every failure is terminal for the run.
        """

        run = _IngestionRun(self._connector.source)
        try:
            result = self._run(run)
        except Exception as exc:
            logger.exception(
                "Unhandled squad ingestion failure source=%s stage=%s",
                run.source,
                run.stage.value,
            )
            result = IngestionResult.failed(str(exc) or type(exc).__name__)

        run.advance(IngestionStage.SUCCEEDED if result.success else IngestionStage.FAILED)
        logger.info(
            "Squad ingestion finished source=%s success=%s players_processed=%s errors=%s",
            run.source,
            result.success,
            result.players_processed,
            len(result.errors),
        )
        return result

    def _run(self, run: _IngestionRun) -> IngestionResult:
        run.advance(IngestionStage.FETCHING)
        try:
            payload = self._connector.fetch_payload()
        except TransportError as exc:
            logger.error(
                "Squad fetch failed source=%s status=%s error=%s",
                run.source,
                exc.status_code,
                exc,
            )
            return IngestionResult.failed(str(exc))

        run.advance(IngestionStage.VALIDATING)
        validation = validate_squad_payload(payload, self._schema_version)
        if not validation.ok:
            assert validation.error is not None
            logger.error(
                "Squad payload rejected version=%s location=%s constraint=%s",
                self._schema_version.value,
                validation.error.location,
                validation.error.constraint,
            )
            return IngestionResult.failed(str(validation.error))

        if not validation.players:
            logger.info("Squad payload is empty; nothing to store source=%s", run.source)
            return IngestionResult.succeeded(0)

        run.advance(IngestionStage.TRANSFORMING)
        records = to_player_records(validation.players)

        run.advance(IngestionStage.STORING)
        try:
            written = self._store.upsert(records)
        except StorageError as exc:
            logger.error(
                "Squad upsert failed records=%s rows_applied=%s error=%s",
                len(records),
                exc.rows_applied,
                exc,
            )
            return IngestionResult.failed(str(exc), players_processed=exc.rows_applied)

        return IngestionResult.succeeded(len(written))


@lru_cache(maxsize=1)
def get_player_store() -> SQLAlchemyPlayerStore:
    """
    Build and cache the SQL player store.
    """

    from db.session import open_session

    return SQLAlchemyPlayerStore(open_session)


@lru_cache(maxsize=1)
def get_player_ingestion_service() -> PlayerIngestionService:
    """
    Build and cache the player ingestion service from environment settings.
    """

    squad_settings = get_squad_api_settings()
    return PlayerIngestionService(
        connector=SquadAPIConnector(
            settings=squad_settings,
            http_settings=get_external_http_settings(),
        ),
        store=get_player_store(),
        schema_version=squad_settings.schema_version,
    )
