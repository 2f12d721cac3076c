"""
Alert Escalation Evaluator

One pass over all stored alerts: decides per alert whether a reminder is due
or the alert has expired, and performs the matching side effects.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Mapping, Tuple, Union

from .dates import as_utc, parse_alert_date
from .errors import AlertError, TransportError
from .metrics import ALERT_NOTIFICATIONS, ALERTS_EXPIRED, ALERTS_SKIPPED, PASS_DURATION
from .policy import ThresholdPolicy
from .send import is_success

logger = logging.getLogger(__name__)

Notifier = Callable[[str, object], Tuple[Mapping, int]]


@dataclass
class PassResult:
    checked: int = 0
    notified: int = 0
    expired: int = 0
    skipped: int = 0
    failed_sends: int = 0
    truncated: bool = False


class AlertEvaluator:
    """
    Applies a ThresholdPolicy to every alert in the store.

    Notification is at-most-once: last_notified_at is persisted before the
    notifier is called, and a failed send is not retried.
    """

    def __init__(
        self,
        store,
        notify: Notifier,
        policy: ThresholdPolicy,
        destination: str,
        timezone: Union[str, tzinfo],
        single_notification_per_pass: bool = False,
    ):
        self.store = store
        self.notify = notify
        self.policy = policy
        self.destination = destination
        self.timezone = timezone
        self.single_notification_per_pass = single_notification_per_pass

    def run_pass(self, now: datetime) -> PassResult:
        """
        Evaluate all alerts at `now`.

        Store failures (TransportError) propagate to the caller; any other
        AlertError for a single alert (unreadable date, name collision) skips it.
        """
        now = as_utc(now)
        result = PassResult()

        with PASS_DURATION.time():
            alerts = self.store.list_all()
            logger.info(f"🔍 Checking {len(alerts)} alerts")

            for alert in alerts:
                result.checked += 1

                try:
                    notified = self._process(alert, now, result)
                except TransportError:
                    raise
                except AlertError as e:
                    logger.warning(f"Skipping alert '{alert.name}': {e}")
                    ALERTS_SKIPPED.inc()
                    result.skipped += 1
                    continue

                if notified and self.single_notification_per_pass:
                    result.truncated = True
                    break

        logger.info(
            f"✅ Alert pass complete: {result.notified} notified, {result.expired} expired, "
            f"{result.skipped} skipped, {result.failed_sends} failed sends"
        )
        return result

    def _process(self, alert, now: datetime, result: PassResult) -> bool:
        """Apply the policy to one alert. Returns True if a reminder went out."""
        due_at = parse_alert_date(alert.date, self.timezone)
        decision = self.policy.evaluate(now, due_at, as_utc(alert.last_notified_at))

        if decision.expire:
            if self.store.delete(alert.name):
                logger.info(f"Alert '{alert.name}' expired {-decision.remaining_hours}h after its date, removed")
                ALERTS_EXPIRED.inc()
                result.expired += 1
            return False

        return decision.notify and self._notify(alert, now, result)

    def _notify(self, alert, now: datetime, result: PassResult) -> bool:
        # Only the timestamp is written, so edits made during the pass survive
        if not self.store.mark_notified(alert.id, now):
            logger.info(f"Alert '{alert.name}' was removed during the pass, not notifying")
            return False
        alert.last_notified_at = now

        result.notified += 1
        try:
            body, status_code = self.notify(self.destination, alert)
        except Exception as e:
            logger.error(f"❌ Error sending reminder for alert '{alert.name}': {e}", exc_info=True)
            ALERT_NOTIFICATIONS.labels(result="error").inc()
            result.failed_sends += 1
            return True

        if is_success(status_code):
            logger.info(f"✅ Sent reminder for alert '{alert.name}'")
            ALERT_NOTIFICATIONS.labels(result="sent").inc()
        else:
            logger.error(f"❌ Failed to send reminder for alert '{alert.name}': {body}")
            ALERT_NOTIFICATIONS.labels(result="failed").inc()
            result.failed_sends += 1
        return True
