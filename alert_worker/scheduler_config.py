"""
Scheduler Configuration for Alert Reminders

Defines date formats, fixed windows and job settings.
"""

# Accepted formats for an alert's date, most specific first
DATETIME_FORMAT = "%d.%m.%Y %H:%M"   # 24.12.2026 18:00
DATE_FORMAT = "%d.%m.%Y"             # 24.12.2026 (midnight)
ALERT_DATE_FORMATS = (DATETIME_FORMAT, DATE_FORMAT)

# Hours past the due date before an alert is deleted
DEFAULT_EXPIRY_GRACE_HOURS = 36

# Seconds in one whole hour, used for threshold arithmetic
SECONDS_PER_HOUR = 60 * 60

# APScheduler job
ALERT_CHECK_JOB_ID = "alert_check_job"
