"""
Date helpers for alerts.

Alert dates are persisted as text ("dd.mm.yyyy" or "dd.mm.yyyy HH:MM") and
interpreted in the configured timezone. Notification timestamps are kept in UTC.
"""
from datetime import datetime, tzinfo
from typing import Optional, Union
import pytz

from .errors import MalformedDateError
from .scheduler_config import ALERT_DATE_FORMATS


def get_timezone(tz: Union[str, tzinfo]) -> tzinfo:
    if isinstance(tz, str):
        try:
            return pytz.timezone(tz)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown timezone: {tz}")
    return tz


def _localize(naive: datetime, tz: tzinfo) -> datetime:
    # pytz zones need localize() to pick the right DST offset
    if hasattr(tz, "localize"):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def parse_alert_date(value: Optional[str], tz: Union[str, tzinfo]) -> datetime:
    """
    Parse a persisted or user supplied alert date into an aware datetime.

    Raises MalformedDateError if the value matches none of the accepted formats.
    """
    if value is None or not str(value).strip():
        raise MalformedDateError(value, "date is empty")

    text = str(value).strip()
    zone = get_timezone(tz)
    for fmt in ALERT_DATE_FORMATS:
        try:
            return _localize(datetime.strptime(text, fmt), zone)
        except ValueError:
            continue
    raise MalformedDateError(value, "expected dd.mm.yyyy or dd.mm.yyyy HH:MM")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp to aware UTC. Naive values are taken as UTC (SQLite drops tzinfo)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def is_before_today(due_at: datetime, now: datetime, tz: Union[str, tzinfo]) -> bool:
    """True if due_at falls on a calendar day before today, both seen in tz."""
    zone = get_timezone(tz)
    return due_at.astimezone(zone).date() < now.astimezone(zone).date()


def utc_now() -> datetime:
    return datetime.now(pytz.utc)
