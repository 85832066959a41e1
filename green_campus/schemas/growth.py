from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from green_campus.schemas.tree import HealthStatus


class MeasurementCreate(BaseModel):
    height_cm: float = Field(..., ge=0)
    measurement_date: date
    notes: Optional[str] = None


class MeasurementResponse(MeasurementCreate):
    id: int
    tree_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HealthUpdate(BaseModel):
    health_status: HealthStatus
