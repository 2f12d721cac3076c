import logging
from fastapi import APIRouter, Depends, HTTPException, status
from server.schemas import (
    AlertCreate, AlertEdit, AlertResponse, AlertListResponse,
    AlertEmbedResponse, MessageResponse
)
from server.dependencies import get_alert_service
from alert_worker.errors import DuplicateNameError, MalformedDateError, NotFoundError
from alert_worker.service import AlertService

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "An alert with this name does not exist."

# =========================================================
# ALERT ENDPOINTS
# =========================================================
@router.post("/", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
def add_alert(
    alert_data: AlertCreate,
    service: AlertService = Depends(get_alert_service)
):
    try:
        return service.add_alert(
            alert_data.name,
            alert_data.date,
            alert_data.description,
            alert_data.created_by
        )
    except DuplicateNameError:
        raise HTTPException(
            status_code=409,
            detail=f"An alert with this name already exists. Use PUT /alerts/{alert_data.name} to change it."
        )
    except MalformedDateError:
        raise HTTPException(status_code=400, detail=f"The date ({alert_data.date}) is invalid!")

@router.get("/", response_model=AlertListResponse)
def list_alerts(service: AlertService = Depends(get_alert_service)):
    return {"alerts": service.get_alerts(), "text": service.format_alert_list()}

@router.get("/{name:path}", response_model=AlertEmbedResponse)
def alert_info(name: str, service: AlertService = Depends(get_alert_service)):
    try:
        return service.get_alert_embed(name)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

@router.put("/{name:path}", response_model=AlertResponse)
def edit_alert(
    name: str,
    edit_data: AlertEdit,
    service: AlertService = Depends(get_alert_service)
):
    try:
        return service.edit_alert(name, edit_data.property.value, edit_data.value)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except DuplicateNameError:
        raise HTTPException(status_code=409, detail=f"An alert named '{edit_data.value}' already exists.")
    except MalformedDateError:
        raise HTTPException(status_code=400, detail=f"The date ({edit_data.value}) is invalid!")

@router.delete("/{name:path}", response_model=MessageResponse)
def remove_alert(name: str, service: AlertService = Depends(get_alert_service)):
    if not service.remove_alert(name):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"message": f"The alert '{name}' was deleted."}
