from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, validator
from server.enums import AlertProperty

# =========================================================
# PYDANTIC SCHEMAS
# =========================================================

# Alert Schemas
class AlertCreate(BaseModel):
    name: str
    date: str  # dd.mm.yyyy or dd.mm.yyyy HH:MM
    description: str
    created_by: str

    @validator('name', 'created_by')
    def not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

class AlertEdit(BaseModel):
    property: AlertProperty
    value: str

    @validator('value')
    def value_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be empty")
        return v

class AlertResponse(BaseModel):
    id: int
    name: str
    date: str
    description: str
    created_by: Optional[str]
    last_notified_at: Optional[datetime]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True

class AlertListResponse(BaseModel):
    alerts: List[AlertResponse]
    text: str

class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool = False

class AlertEmbedResponse(BaseModel):
    title: str
    color: int
    fields: List[EmbedField]
    footer: dict

class MessageResponse(BaseModel):
    message: str
