from fastapi import APIRouter
from . import alerts, prometheus, internals

router = APIRouter()

router.include_router(alerts.router, prefix="/alerts", tags=["Alerts"])
router.include_router(prometheus.router, prefix="/metrics", tags=["Metrics"])
router.include_router(internals.router, prefix="/internals", tags=["Internals"])
