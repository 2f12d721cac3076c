from fastapi import Request
from server.database import SessionLocal
from alert_worker.config import config as alert_config
from alert_worker.service import AlertService
from alert_worker.store import AlertStore

_service = AlertService(AlertStore(SessionLocal), timezone=alert_config.ALERT_TIMEZONE)

def get_alert_service() -> AlertService:
    return _service

def get_scheduler(request: Request):
    """The AlertScheduler started with the app, or None if disabled."""
    return getattr(request.app.state, "scheduler", None)
