from pydantic import BaseModel
from typing import Literal, Optional
from datetime import datetime

PhotoType = Literal["initial", "progress", "care"]


class PhotoResponse(BaseModel):
    id: int
    tree_id: int
    photo_url: str
    caption: Optional[str] = None
    photo_type: PhotoType
    taken_at: Optional[datetime] = None

    class Config:
        from_attributes = True
