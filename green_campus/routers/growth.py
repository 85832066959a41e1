from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional

from green_campus.auth import get_current_user
from green_campus.dependencies import get_growth_service
from green_campus.schemas.growth import HealthUpdate, MeasurementCreate, MeasurementResponse
from green_campus.schemas.photo import PhotoResponse, PhotoType
from green_campus.schemas.tree import TreeResponse
from green_campus.schemas.user import MessageResponse
from green_campus.security import Identity
from green_campus.services import GrowthService

router = APIRouter(prefix="/api/growth", tags=["growth"])


@router.get("/{tree_id}/measurements", response_model=List[MeasurementResponse])
async def list_measurements(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    return await growth.list_measurements(tree_id, identity)


@router.post("/{tree_id}/measurements", response_model=MeasurementResponse, status_code=201)
async def add_measurement(
    tree_id: int,
    body: MeasurementCreate,
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    """Record a height; the tree's current height follows the newest entry"""
    return await growth.add_measurement(
        tree_id,
        identity,
        height_cm=body.height_cm,
        measurement_date=body.measurement_date,
        notes=body.notes
    )


@router.get("/{tree_id}/photos", response_model=List[PhotoResponse])
async def list_photos(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    return await growth.list_photos(tree_id, identity)


@router.post("/{tree_id}/photos", response_model=PhotoResponse, status_code=201)
async def upload_photo(
    tree_id: int,
    photo: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
    photo_type: Optional[PhotoType] = Form(None),
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    """Upload a growth photo (multipart field ``photo``)"""
    contents = await photo.read() if photo else b""
    return await growth.add_photo(
        tree_id,
        identity,
        contents,
        photo.content_type if photo else None,
        caption=caption,
        photo_type=photo_type
    )


@router.delete("/{tree_id}/photos/{photo_id}", response_model=MessageResponse)
async def delete_photo(
    tree_id: int,
    photo_id: int,
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    """Remove a photo record and its file"""
    await growth.delete_photo(tree_id, photo_id, identity)
    return MessageResponse(message="Photo deleted successfully")


@router.put("/{tree_id}/health", response_model=TreeResponse)
async def update_health(
    tree_id: int,
    body: HealthUpdate,
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    return await growth.update_health(tree_id, identity, body.health_status)
