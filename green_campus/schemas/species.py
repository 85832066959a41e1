from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class SpeciesResponse(BaseModel):
    id: int
    name: str
    scientific_name: Optional[str] = None
    description: Optional[str] = None
    care_instructions: Optional[str] = None
    growth_rate: Optional[str] = None
    mature_height_feet: Optional[int] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
