"""
app/scheduler/jobs.py

APScheduler-based periodic squad sync.

The job runs the same ingestion as ``POST /api/fetch-players``. It is off
unless ``PLAYER_SYNC_SCHEDULE_ENABLED`` is true, and then fires every
``PLAYER_SYNC_INTERVAL_MINUTES`` (UTC scheduler clock).

Lifecycle
----------
Call ``build_scheduler()`` once to get a configured ``BackgroundScheduler``.
Start it on app boot; shut it down gracefully on app shutdown.
The scheduler is wired into FastAPI via the ``lifespan`` context in main.py.
"""

from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from app.config import PlayerSyncScheduleSettings, get_player_sync_schedule_settings
from app.services.player_ingestion_service import get_player_ingestion_service

logger = logging.getLogger(__name__)

PLAYER_SYNC_JOB_ID = "player_sync"


def run_player_sync() -> None:
    """
    Run one squad ingestion. Failures are logged; the next tick tries again.
    """
    logger.info("Scheduler: player_sync starting")
    try:
        result = get_player_ingestion_service().run()
    except Exception as exc:  # noqa: BLE001
        logger.warning("Scheduler: player_sync could not start: %s", exc)
        return

    if result.success:
        logger.info(
            "Scheduler: player_sync complete players_processed=%s",
            result.players_processed,
        )
    else:
        logger.warning(
            "Scheduler: player_sync failed players_processed=%s errors=%s",
            result.players_processed,
            "; ".join(result.errors),
        )


def build_scheduler(settings: PlayerSyncScheduleSettings | None = None) -> BackgroundScheduler:
    """
    Build the scheduler and register the squad sync job when enabled.

    Returns a configured but *not yet started* ``BackgroundScheduler``.
    """
    settings = settings or get_player_sync_schedule_settings()
    scheduler = BackgroundScheduler(timezone="UTC")

    if not settings.enabled:
        logger.info("Scheduler: player_sync disabled")
        return scheduler

    scheduler.add_job(
        run_player_sync,
        trigger="interval",
        minutes=settings.interval_minutes,
        id=PLAYER_SYNC_JOB_ID,
        name="Periodic squad sync",
        replace_existing=True,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=600,
    )
    return scheduler
