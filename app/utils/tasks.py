"""
Background scheduling for the reservation reconciliation sweep

The scheduler is per process. Deployments running several replicas should
set ENABLE_SCHEDULER=false everywhere and run `python -m app.scripts.reconcile`
from a single external cron instead.
"""
from typing import Optional
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from app.core.config import settings
from app.core.logging_config import get_logger
from app.db.session import SessionLocal
from app.services.reconciliation_service import reconciliation_service

logger = get_logger("scheduler")

RECONCILIATION_JOB_ID = "reconcile_reservations"

_scheduler: Optional[BackgroundScheduler] = None


def reconcile_reservations_job() -> bool:
    """
    Run one reconciliation pass in its own session

    Returns:
        True on success, False if the pass could not run
    """
    db = SessionLocal()
    try:
        reconciliation_service.reconcile(db)
        return True
    except Exception as e:
        logger.error(f"Reconciliation pass failed: {str(e)}", exc_info=True)
        return False
    finally:
        db.close()


def start_scheduler() -> Optional[BackgroundScheduler]:
    """Start the background scheduler if enabled and not already running"""
    global _scheduler

    if not settings.ENABLE_SCHEDULER:
        logger.info("Scheduler disabled (ENABLE_SCHEDULER=false)")
        return None

    if _scheduler is not None and _scheduler.running:
        return _scheduler

    _scheduler = BackgroundScheduler(timezone=settings.SCHEDULER_TIMEZONE)
    _scheduler.add_job(
        reconcile_reservations_job,
        CronTrigger.from_crontab(settings.RECONCILIATION_CRON, timezone=settings.SCHEDULER_TIMEZONE),
        id=RECONCILIATION_JOB_ID,
        max_instances=1,
        coalesce=True,
        replace_existing=True
    )
    _scheduler.start()
    logger.info(f"Reconciliation scheduled with cron '{settings.RECONCILIATION_CRON}'")
    return _scheduler


def shutdown_scheduler() -> None:
    """Stop the background scheduler"""
    global _scheduler

    if _scheduler is not None and _scheduler.running:
        _scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
    _scheduler = None
