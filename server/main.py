import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from server.config import config
from server.database import engine, Base
from server.routes import router
from server.routes.prometheus import metrics_middleware

logger = logging.getLogger(__name__)

# =========================================================
# FASTAPI APP
# =========================================================

app = FastAPI(title="Alert Reminder API")
app.state.scheduler = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register Prometheus middleware
app.middleware("http")(metrics_middleware)

# Include API Router
app.include_router(router)

# =========================================================
# STARTUP / SHUTDOWN
# =========================================================
@app.on_event("startup")
def init_database():
    Base.metadata.create_all(bind=engine)
    logger.info("Alert tables ready")

@app.on_event("startup")
def start_alert_scheduler():
    if not config.ALERT_SCHEDULER_ENABLED:
        logger.info("Alert scheduler disabled (ALERT_SCHEDULER_ENABLED=false)")
        return
    from alert_worker.main import build_scheduler
    from server.dependencies import get_alert_service

    app.state.scheduler = build_scheduler(get_alert_service().store)
    app.state.scheduler.start()

@app.on_event("shutdown")
def stop_alert_scheduler():
    if app.state.scheduler is not None:
        app.state.scheduler.shutdown()
        app.state.scheduler = None
