from prometheus_client import Counter, Histogram

ALERT_NOTIFICATIONS = Counter(
    "alert_notifications_total",
    "Alert reminders handed to the notification channel",
    ["result"]
)

ALERTS_EXPIRED = Counter(
    "alerts_expired_total",
    "Alerts deleted after their grace window"
)

ALERTS_SKIPPED = Counter(
    "alerts_skipped_total",
    "Alerts skipped during a pass because their data could not be read"
)

PASS_ERRORS = Counter(
    "alert_pass_errors_total",
    "Alert passes aborted by an error"
)

PASS_DURATION = Histogram(
    "alert_pass_duration_seconds",
    "Duration of one alert evaluation pass"
)
