from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import date, datetime

HealthStatus = Literal["healthy", "needs_care", "struggling"]


class TreeBase(BaseModel):
    species_id: int
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    planted_date: date
    notes: Optional[str] = None


class TreeCreate(TreeBase):
    current_height_cm: Optional[float] = Field(None, ge=0)
    health_status: Optional[HealthStatus] = None


class TreeUpdate(BaseModel):
    species_id: Optional[int] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    planted_date: Optional[date] = None
    current_height_cm: Optional[float] = Field(None, ge=0)
    health_status: Optional[HealthStatus] = None
    notes: Optional[str] = None


class TreeResponse(TreeBase):
    id: int
    user_id: int
    current_height_cm: float
    health_status: HealthStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    species_name: Optional[str] = None
    scientific_name: Optional[str] = None

    class Config:
        from_attributes = True


class AdminTreeResponse(TreeResponse):
    """Tree joined with its owner, for the admin overview"""
    user_full_name: str
    user_email: str


class MapTree(BaseModel):
    id: int
    latitude: float
    longitude: float
    species_name: Optional[str] = None
    health_status: HealthStatus
    planted_date: date
    current_height_cm: float

    class Config:
        from_attributes = True
