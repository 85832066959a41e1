from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import date, datetime

ActivityType = Literal["watering", "fertilizing", "pruning", "other"]


class CareActivityCreate(BaseModel):
    activity_type: ActivityType
    activity_date: date
    notes: Optional[str] = None


class CareActivityResponse(CareActivityCreate):
    id: int
    tree_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class WateringStatus(BaseModel):
    tree_id: int
    species_name: Optional[str] = None
    interval_days: int
    last_watered: Optional[date] = None
    days_since_watering: Optional[int] = None
    needs_watering: bool


class NotifyResponse(BaseModel):
    message: str
    notified: int


class AdminMessage(BaseModel):
    email: str
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
