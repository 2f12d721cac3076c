"""
Alert operations used by the command surface.
"""
import logging
from datetime import datetime, tzinfo
from typing import Callable, List, Union

from .models import Alert
from .dates import is_before_today, parse_alert_date, utc_now
from .errors import DuplicateNameError, MalformedDateError, NotFoundError
from .send import build_alert_embed

logger = logging.getLogger(__name__)

EDITABLE_PROPERTIES = ("name", "date", "description")


class AlertService:
    def __init__(self, store, timezone: Union[str, tzinfo], clock: Callable[[], datetime] = utc_now):
        self.store = store
        self.timezone = timezone
        self.clock = clock

    def _validate_date(self, value: str) -> str:
        """Reject unparseable dates and dates before today. Returns the trimmed text."""
        due_at = parse_alert_date(value, self.timezone)
        if is_before_today(due_at, self.clock(), self.timezone):
            raise MalformedDateError(value, "date is in the past")
        return value.strip()

    def exists(self, name: str) -> bool:
        return self.store.exists(name)

    def add_alert(self, name: str, date: str, description: str, created_by: str) -> Alert:
        date = self._validate_date(date)
        if self.store.exists(name):
            raise DuplicateNameError(name)

        alert = Alert(
            name=name,
            date=date,
            description=description,
            created_by=created_by,
            last_notified_at=None,
        )
        return self.store.create(alert)

    def edit_alert(self, name: str, property: str, value: str) -> Alert:
        """
        Change one property of an alert.

        Moving the date puts the alert back at the start of the reminder cycle.
        """
        prop = property.lower()
        if prop not in EDITABLE_PROPERTIES:
            raise ValueError(f"Unknown property '{property}', expected one of {', '.join(EDITABLE_PROPERTIES)}")

        alert = self.store.find_by_name(name)
        if alert is None:
            raise NotFoundError(name)

        if prop == "date":
            alert.date = self._validate_date(value)
            alert.last_notified_at = None
        elif prop == "name":
            value = value.strip()
            if value != name and self.store.exists(value):
                raise DuplicateNameError(value)
            alert.name = value
        else:
            alert.description = value

        if not self.store.update(alert):
            raise NotFoundError(name)
        logger.info(f"Edited alert '{name}': {prop} -> {value!r}")
        return alert

    def remove_alert(self, name: str) -> bool:
        return self.store.delete(name)

    def get_alerts(self) -> List[Alert]:
        return self.store.list_all()

    def get_alert(self, name: str) -> Alert:
        alert = self.store.find_by_name(name)
        if alert is None:
            raise NotFoundError(name)
        return alert

    def get_alert_embed(self, name: str) -> dict:
        return build_alert_embed(self.get_alert(name))

    def format_alert_list(self) -> str:
        lines = [f"-> {alert.name}" for alert in self.get_alerts()]
        if not lines:
            return "No reminders found."
        return "\n".join(lines)
