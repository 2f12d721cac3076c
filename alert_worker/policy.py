"""
Threshold policy for alert reminders.

Pure functions deciding, for one alert at one instant, whether a reminder
must be sent and whether the alert is stale enough to be deleted.
All comparisons run on whole hours, truncated toward zero.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from .scheduler_config import DEFAULT_EXPIRY_GRACE_HOURS, SECONDS_PER_HOUR

Hours = Union[int, float]


def whole_hours(delta: timedelta) -> int:
    """Hours in delta, truncated toward zero (-36h59m -> -36)."""
    seconds = int(delta.total_seconds())
    hours = abs(seconds) // SECONDS_PER_HOUR
    return hours if seconds >= 0 else -hours


def hours_until(due_at: datetime, now: datetime) -> int:
    return whole_hours(due_at - now)


def hours_since(last_notified_at: Optional[datetime], now: datetime) -> Hours:
    if last_notified_at is None:
        return math.inf
    return whole_hours(now - last_notified_at)


@dataclass(frozen=True)
class Decision:
    notify: bool
    expire: bool
    remaining_hours: int
    hours_since_last: Hours


@dataclass(frozen=True)
class ThresholdPolicy:
    first_reminder_hours: int = 72
    last_reminder_hours: int = 24
    expiry_grace_hours: int = DEFAULT_EXPIRY_GRACE_HOURS
    legacy_predicate: bool = False

    def __post_init__(self):
        if self.first_reminder_hours < 0 or self.last_reminder_hours < 0:
            raise ValueError("Reminder windows must not be negative")
        if self.expiry_grace_hours < 0:
            raise ValueError("Expiry grace must not be negative")

    @classmethod
    def from_config(cls, config) -> "ThresholdPolicy":
        return cls(
            first_reminder_hours=config.ALERT_FIRST_REMINDER,
            last_reminder_hours=config.ALERT_LAST_REMINDER,
            expiry_grace_hours=config.ALERT_EXPIRY_GRACE,
            legacy_predicate=config.ALERT_LEGACY_PREDICATE,
        )

    def is_notify_due(self, remaining: int, since_last: Hours) -> bool:
        never_notified = since_last == math.inf
        repeat_due = since_last > self.last_reminder_hours or since_last > self.first_reminder_hours

        if self.legacy_predicate:
            return (remaining < self.last_reminder_hours and never_notified) or repeat_due

        if never_notified:
            return remaining < self.last_reminder_hours
        return repeat_due

    def is_expire_due(self, remaining: int) -> bool:
        return remaining < -self.expiry_grace_hours

    def evaluate(self, now: datetime, due_at: datetime,
                 last_notified_at: Optional[datetime] = None) -> Decision:
        remaining = hours_until(due_at, now)
        since_last = hours_since(last_notified_at, now)
        expire = self.is_expire_due(remaining)
        # Expired alerts are removed without a final reminder
        notify = False if expire else self.is_notify_due(remaining, since_last)
        return Decision(
            notify=notify,
            expire=expire,
            remaining_hours=remaining,
            hours_since_last=since_last,
        )
