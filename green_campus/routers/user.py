from fastapi import APIRouter, Depends
from typing import List

from green_campus.auth import get_current_user
from green_campus.dependencies import get_user_service
from green_campus.exceptions import ValidationError
from green_campus.schemas.user import (
    LeaderboardEntry,
    MessageResponse,
    PasswordChange,
    ProfileUpdate,
    UserResponse,
)
from green_campus.security import Identity
from green_campus.services import UserService

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/profile", response_model=UserResponse)
async def get_profile(
    identity: Identity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    return await users.get_profile(identity.id)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    body: ProfileUpdate,
    identity: Identity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    """Update full name and/or location"""
    fields = body.model_dump(exclude_unset=True)
    if "full_name" in fields and fields["full_name"] is None:
        raise ValidationError("full_name cannot be null")
    return await users.update_profile(identity.id, **fields)


@router.put("/password", response_model=MessageResponse)
async def change_password(
    body: PasswordChange,
    identity: Identity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    await users.change_password(identity.id, body.current_password, body.new_password)
    return MessageResponse(message="Password updated successfully")


@router.delete("/account", response_model=MessageResponse)
async def delete_account(
    identity: Identity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    """Delete the account with all of its trees"""
    await users.delete_account(identity.id)
    return MessageResponse(message="Account deleted successfully")


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def leaderboard(
    identity: Identity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    return await users.leaderboard()
