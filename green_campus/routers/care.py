from fastapi import APIRouter, Depends
from typing import List

from green_campus.auth import get_current_user, require_admin
from green_campus.dependencies import get_care_service, get_watering_service
from green_campus.schemas.care import (
    AdminMessage,
    CareActivityCreate,
    CareActivityResponse,
    NotifyResponse,
    WateringStatus,
)
from green_campus.schemas.user import MessageResponse
from green_campus.security import Identity
from green_campus.services import CareService, WateringService

router = APIRouter(prefix="/api/care", tags=["care"])


@router.post("/notify-unwatered", response_model=NotifyResponse)
async def notify_unwatered(
    admin: Identity = Depends(require_admin),
    watering: WateringService = Depends(get_watering_service)
):
    """Email the owners of every tree that is due for watering"""
    notified = await watering.notify_unwatered()
    return NotifyResponse(message=f"Sent {notified} watering reminders", notified=notified)


@router.post("/send-admin-message", response_model=MessageResponse)
async def send_admin_message(
    body: AdminMessage,
    admin: Identity = Depends(require_admin),
    care: CareService = Depends(get_care_service)
):
    await care.send_admin_message(body.email, body.subject, body.message)
    return MessageResponse(message="Message sent successfully")


@router.get("/{tree_id}/activities", response_model=List[CareActivityResponse])
async def list_activities(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    care: CareService = Depends(get_care_service)
):
    return await care.list_activities(tree_id, identity)


@router.post("/{tree_id}/activities", response_model=CareActivityResponse, status_code=201)
async def add_activity(
    tree_id: int,
    body: CareActivityCreate,
    identity: Identity = Depends(get_current_user),
    care: CareService = Depends(get_care_service)
):
    """Log watering, fertilizing, pruning or other care"""
    return await care.add_activity(
        tree_id,
        identity,
        activity_type=body.activity_type,
        activity_date=body.activity_date,
        notes=body.notes
    )


@router.get("/{tree_id}/watering-status", response_model=WateringStatus)
async def watering_status(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    watering: WateringService = Depends(get_watering_service)
):
    return await watering.status(tree_id, identity)
