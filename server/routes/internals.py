from fastapi import APIRouter, Depends, HTTPException
from server.dependencies import get_scheduler

router = APIRouter()

# =========================================================
# INTERNAL ENDPOINTS (No Authentication Required)
# Operational view of the alert scheduler
# =========================================================

@router.get("/scheduler")
def scheduler_status(scheduler = Depends(get_scheduler)):
    """State of the background alert scheduler."""
    if scheduler is None:
        return {"enabled": False}
    return {"enabled": True, **scheduler.status()}


@router.post("/scheduler/run")
def run_scheduler_pass(scheduler = Depends(get_scheduler)):
    """Run one alert pass now. Skipped if a pass is already running."""
    if scheduler is None:
        raise HTTPException(status_code=503, detail="Alert scheduler is disabled")
    result = scheduler.tick()
    if result is None:
        raise HTTPException(status_code=409, detail=scheduler.last_error or "Alert pass skipped")
    return scheduler.status()["last_result"]
