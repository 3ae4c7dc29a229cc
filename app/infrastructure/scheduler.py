"""Background scheduling for the recurring entitlement check."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, tzinfo
from typing import Generic, TypeVar

from apscheduler.schedulers.background import BackgroundScheduler

from app.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENTITLEMENT_JOB_ID = "check_due_entitlements"


class EntitlementScheduler(Generic[T]):
    """Run ``job`` once after ``initial_delay`` and then every ``interval``.

    Only one run executes at a time. Scheduled runs are skipped while another
    run is in flight; :meth:`run_now` waits for it instead.
    """

    def __init__(
        self,
        job: Callable[[], T],
        *,
        initial_delay: timedelta,
        interval: timedelta,
        timezone: tzinfo | None = None,
        job_id: str = ENTITLEMENT_JOB_ID,
    ) -> None:
        self._job = job
        self._initial_delay = initial_delay
        self._interval = interval
        self._timezone = timezone
        self._job_id = job_id
        self._lock = threading.Lock()
        self._scheduler: BackgroundScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """Start the background scheduler; calling it twice is a no-op."""

        if self._scheduler is not None:
            logger.info("Entitlement scheduler already running, skipping start")
            return

        options = {"timezone": self._timezone} if self._timezone is not None else {}
        scheduler = BackgroundScheduler(**options)
        first_run = datetime.now(tz=self._timezone) + self._initial_delay
        scheduler.add_job(
            self._run_scheduled,
            trigger="interval",
            seconds=self._interval.total_seconds(),
            next_run_time=first_run,
            id=self._job_id,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info(
            "Entitlement scheduler started: first run at %s, then every %s",
            first_run.isoformat(timespec="seconds"),
            self._interval,
        )

    def stop(self, *, wait: bool = True) -> None:
        """Stop scheduling new runs and, by default, wait for a running one."""

        scheduler = self._scheduler
        if scheduler is None:
            return
        self._scheduler = None
        scheduler.shutdown(wait=wait)
        logger.info("Entitlement scheduler stopped")

    def run_now(self) -> T:
        """Run the job synchronously; exceptions reach the caller."""

        with self._lock:
            logger.info("Running entitlement check on demand")
            return self._job()

    def _run_scheduled(self) -> None:
        if not self._lock.acquire(blocking=False):
            logger.info("Entitlement check already in progress, skipping scheduled run")
            return
        try:
            logger.info("Running scheduled entitlement check")
            self._job()
        except Exception:
            logger.exception("Scheduled entitlement check failed")
        finally:
            self._lock.release()


def build_entitlement_scheduler(
    settings: Settings,
    job: Callable[[], T],
    *,
    timezone: tzinfo | None = None,
) -> EntitlementScheduler[T]:
    """Create a scheduler configured from ``settings``."""

    return EntitlementScheduler(
        job,
        initial_delay=timedelta(seconds=settings.scheduler_initial_delay_seconds),
        interval=timedelta(hours=settings.scheduler_interval_hours),
        timezone=timezone,
    )


__all__ = ["EntitlementScheduler", "build_entitlement_scheduler", "ENTITLEMENT_JOB_ID"]
