import argparse
import logging
import time
from typing import Optional

from .config import AlertConfig, config
from .evaluator import AlertEvaluator, Notifier
from .policy import ThresholdPolicy
from .scheduler import AlertScheduler
from .send import send_alert_notification
from .store import AlertStore

logger = logging.getLogger(__name__)


def build_evaluator(
    store: AlertStore,
    notify: Notifier = send_alert_notification,
    cfg: AlertConfig = config
) -> AlertEvaluator:
    return AlertEvaluator(
        store=store,
        notify=notify,
        policy=ThresholdPolicy.from_config(cfg),
        destination=cfg.ALERT_CHANNEL_ID,
        timezone=cfg.ALERT_TIMEZONE,
        single_notification_per_pass=cfg.ALERT_SINGLE_NOTIFICATION_PER_PASS,
    )


def build_scheduler(store: Optional[AlertStore] = None, cfg: AlertConfig = config) -> AlertScheduler:
    if store is None:
        from server.database import SessionLocal
        store = AlertStore(SessionLocal)

    missing = cfg.missing_notification_settings()
    if missing:
        logger.warning(f"⚠️ Alert notifications will fail, missing: {', '.join(missing)}")

    return AlertScheduler(build_evaluator(store, cfg=cfg), interval_minutes=cfg.ALERT_SCHEDULER_DELAY)


def start_worker(once: bool = False):
    """
    Run the alert scheduler on its own, without the HTTP surface.
    """
    from server.database import engine
    from .models import Base

    Base.metadata.create_all(bind=engine)
    scheduler = build_scheduler()

    if once:
        scheduler.tick()
        return

    scheduler.start()
    try:
        while True:
            time.sleep(60)
    except KeyboardInterrupt:
        pass
    finally:
        scheduler.shutdown()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Alert reminder scheduler")
    parser.add_argument("--once", action="store_true", help="run a single pass and exit")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    start_worker(once=args.once)
