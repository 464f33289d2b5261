"""Background scheduler for monthly credit resets."""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from ..core.config import Settings
from ..core.database import Database
from ..services.monthly_reset_service import reset_all_accounts

logger = logging.getLogger(__name__)

JOB_ID = "monthly_reset"


def execute_monthly_reset(database: Database) -> dict[str, int] | None:
    """Run one reset pass; failures are logged for operators and not raised."""

    try:
        summary = run_reset_once(database)
    except Exception:
        logger.exception("monthly credit reset failed")
        return None
    logger.info("monthly credit reset completed: %s", summary)
    return summary


def run_reset_once(database: Database) -> dict[str, int]:
    """Run the reset synchronously in its own unit of work."""

    with database.unit_of_work() as session:
        accounts_processed = reset_all_accounts(session)
    return {"accounts_processed": accounts_processed}


def build_scheduler(database: Database, settings: Settings) -> AsyncIOScheduler:
    """Create a scheduler with the monthly reset registered as its only job."""

    scheduler = AsyncIOScheduler(timezone=settings.scheduler_timezone)
    scheduler.add_job(
        execute_monthly_reset,
        CronTrigger(
            day=settings.reset_day,
            hour=settings.reset_hour,
            minute=settings.reset_minute,
            timezone=settings.scheduler_timezone,
        ),
        args=[database],
        id=JOB_ID,
        max_instances=1,
        coalesce=True,
        misfire_grace_time=3600,
        replace_existing=True,
    )
    return scheduler
