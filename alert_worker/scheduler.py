"""
Alert Reminder Scheduler

Runs the escalation evaluator on a fixed delay, independent of the command
surface. Overlapping ticks are skipped rather than queued.
"""
import logging
import threading
from datetime import datetime
from typing import Callable, Optional
import pytz
from apscheduler.schedulers.background import BackgroundScheduler

from .dates import utc_now
from .evaluator import AlertEvaluator, PassResult
from .metrics import PASS_ERRORS
from .scheduler_config import ALERT_CHECK_JOB_ID

logger = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"


class AlertScheduler:
    def __init__(
        self,
        evaluator: AlertEvaluator,
        interval_minutes: int = 5,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.evaluator = evaluator
        self.interval_minutes = interval_minutes
        self.clock = clock
        self.state = IDLE
        self.last_run_at: Optional[datetime] = None
        self.last_result: Optional[PassResult] = None
        self.last_error: Optional[str] = None
        self._lock = threading.Lock()
        self._scheduler: Optional[BackgroundScheduler] = None

    def tick(self) -> Optional[PassResult]:
        """
        Main job: run one evaluation pass.

        Returns None if the pass was skipped (one already running) or failed.
        """
        if not self._lock.acquire(blocking=False):
            logger.warning("Previous alert pass still running, skipping this tick")
            return None

        try:
            self.state = RUNNING
            now = self.clock()
            self.last_run_at = now
            try:
                result = self.evaluator.run_pass(now)
            except Exception as e:
                # Wait for the next tick, no immediate retry
                logger.error(f"Alert pass failed: {e}", exc_info=True)
                PASS_ERRORS.inc()
                self.last_error = str(e)
                return None

            self.last_result = result
            self.last_error = None
            return result
        finally:
            self.state = IDLE
            self._lock.release()

    def start(self):
        """Start the fixed-delay alert check job."""
        if self._scheduler is not None and self._scheduler.running:
            return

        self._scheduler = BackgroundScheduler(timezone=pytz.utc)
        self._scheduler.add_job(
            self.tick,
            'interval',
            minutes=self.interval_minutes,
            id=ALERT_CHECK_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            next_run_time=self.clock()
        )
        self._scheduler.start()
        logger.info(f"🚀 Alert scheduler started: checking every {self.interval_minutes} min")

    def shutdown(self):
        """Stop the scheduler gracefully."""
        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("🛑 Alert scheduler stopped")

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def status(self) -> dict:
        last = self.last_result
        return {
            "scheduler_running": self.running,
            "state": self.state,
            "interval_minutes": self.interval_minutes,
            "last_run_at": self.last_run_at.isoformat() if self.last_run_at else None,
            "last_error": self.last_error,
            "last_result": None if last is None else {
                "checked": last.checked,
                "notified": last.notified,
                "expired": last.expired,
                "skipped": last.skipped,
                "failed_sends": last.failed_sends,
            },
        }
