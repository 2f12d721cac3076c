from datetime import datetime
import pytz

from alert_worker.scheduler_config import DATETIME_FORMAT

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=pytz.utc)
TIMEZONE = "UTC"
CHANNEL_ID = "1234567890"


def fmt(dt: datetime) -> str:
    return dt.astimezone(pytz.utc).strftime(DATETIME_FORMAT)


class RecordingNotifier:
    """Stands in for the Discord sink."""

    def __init__(self, status_code=200):
        self.status_code = status_code
        self.error = None
        self.calls = []

    def __call__(self, destination, alert):
        self.calls.append((destination, alert.name))
        if self.error is not None:
            raise self.error
        return {"id": str(len(self.calls))}, self.status_code

    @property
    def names(self):
        return [name for _, name in self.calls]
