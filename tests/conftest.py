import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from server.database import make_session_factory
from alert_worker.models import Alert, Base
from alert_worker.evaluator import AlertEvaluator
from alert_worker.policy import ThresholdPolicy
from alert_worker.service import AlertService
from alert_worker.store import AlertStore
from tests.helpers import CHANNEL_ID, NOW, TIMEZONE, RecordingNotifier, fmt

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return AlertStore(session_factory)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def policy():
    return ThresholdPolicy(first_reminder_hours=72, last_reminder_hours=24, expiry_grace_hours=36)


@pytest.fixture
def evaluator(store, notifier, policy):
    return AlertEvaluator(store, notifier, policy, CHANNEL_ID, TIMEZONE)


@pytest.fixture
def service(store):
    return AlertService(store, TIMEZONE, clock=lambda: NOW)


@pytest.fixture
def add_alert(store):
    """Insert an alert straight into the store, bypassing date validation."""
    def _add(name, due_at=None, last_notified_at=None, date=None, description="Hand in the report", created_by="Tomas"):
        alert = Alert(
            name=name,
            date=date if date is not None else fmt(due_at),
            description=description,
            created_by=created_by,
            last_notified_at=last_notified_at,
        )
        return store.create(alert)
    return _add
