"""
Persistence for alerts.

Every operation runs in its own short session. Returned Alert objects are
detached snapshots; write changes back with update() or mark_notified().
"""
import logging
from contextlib import contextmanager
from typing import List, Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .models import Alert
from .errors import DuplicateNameError, TransportError

logger = logging.getLogger(__name__)


class AlertStore:
    def __init__(self, session_factory):
        self._session_factory = session_factory

    @contextmanager
    def _session(self):
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            raise TransportError(f"Alert store unavailable: {e}") from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def exists(self, name: str) -> bool:
        with self._session() as db:
            return db.query(Alert.id).filter(Alert.name == name).first() is not None

    def create(self, alert: Alert) -> Alert:
        """Insert a new alert. Raises DuplicateNameError if the name is taken."""
        with self._session() as db:
            if db.query(Alert.id).filter(Alert.name == alert.name).first() is not None:
                raise DuplicateNameError(alert.name)
            db.add(alert)
            try:
                db.commit()
            except IntegrityError:
                # Lost a race with a concurrent create of the same name
                db.rollback()
                raise DuplicateNameError(alert.name)
            logger.info(f"Created alert '{alert.name}' (id={alert.id}, date={alert.date})")
            return alert

    def find_by_name(self, name: str) -> Optional[Alert]:
        with self._session() as db:
            return db.query(Alert).filter(Alert.name == name).first()

    def list_all(self) -> List[Alert]:
        with self._session() as db:
            return db.query(Alert).order_by(Alert.id).all()

    def update(self, alert: Alert) -> bool:
        """
        Replace the stored record with the same id.

        Returns False without writing if the alert was deleted in the meantime.
        """
        with self._session() as db:
            row = db.get(Alert, alert.id)
            if row is None:
                logger.debug(f"Update skipped, alert id={alert.id} no longer exists")
                return False

            row.name = alert.name
            row.date = alert.date
            row.description = alert.description
            row.created_by = alert.created_by
            row.last_notified_at = alert.last_notified_at
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise DuplicateNameError(alert.name)
            return True

    def mark_notified(self, alert_id: int, notified_at) -> bool:
        """
        Set only last_notified_at on the alert with this id.

        Concurrent edits to other fields are left alone. Returns False if the
        alert was deleted in the meantime.
        """
        with self._session() as db:
            updated = db.query(Alert).filter(Alert.id == alert_id).update(
                {Alert.last_notified_at: notified_at}, synchronize_session=False
            )
            db.commit()
            return updated > 0

    def delete(self, name: str) -> bool:
        with self._session() as db:
            deleted = db.query(Alert).filter(Alert.name == name).delete(synchronize_session=False)
            db.commit()
            if deleted:
                logger.info(f"Deleted alert '{name}'")
            return deleted > 0
