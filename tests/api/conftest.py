import pytest
from fastapi.testclient import TestClient

from server.main import app
from server.dependencies import get_alert_service, get_scheduler
from alert_worker.scheduler import AlertScheduler
from tests.helpers import NOW

@pytest.fixture
def alert_scheduler(evaluator):
    return AlertScheduler(evaluator, clock=lambda: NOW)

@pytest.fixture
def api_client(service, alert_scheduler):
    app.dependency_overrides[get_alert_service] = lambda: service
    app.dependency_overrides[get_scheduler] = lambda: alert_scheduler
    # No context manager: startup hooks (tables, background scheduler) stay off
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture
def create_alert(api_client):
    def _create(name="Exam", date="24.10.2026", description="Chapter 4", created_by="Tomas"):
        payload = {"name": name, "date": date, "description": description, "created_by": created_by}
        return api_client.post("/alerts/", json=payload)
    return _create
