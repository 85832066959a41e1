from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import List, Optional

from green_campus.auth import get_current_user, require_admin
from green_campus.dependencies import get_growth_service, get_tree_service
from green_campus.schemas.photo import PhotoResponse, PhotoType
from green_campus.schemas.tree import AdminTreeResponse, TreeCreate, TreeResponse, TreeUpdate
from green_campus.schemas.user import MessageResponse
from green_campus.security import Identity
from green_campus.services import GrowthService, TreeService

router = APIRouter(prefix="/api/trees", tags=["trees"])


@router.get("", response_model=List[TreeResponse])
async def list_trees(
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    """Trees owned by the caller, most recently planted first"""
    return await trees.list_for_owner(identity.id)


@router.post("", response_model=TreeResponse, status_code=201)
async def plant_tree(
    body: TreeCreate,
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    """Plant a new tree"""
    return await trees.plant(
        owner_id=identity.id,
        species_id=body.species_id,
        latitude=body.latitude,
        longitude=body.longitude,
        planted_date=body.planted_date,
        initial_height=body.current_height_cm,
        health_status=body.health_status,
        notes=body.notes
    )


# Declared before /{tree_id} so "all" is not parsed as an id
@router.get("/all", response_model=List[AdminTreeResponse])
async def list_all_trees(
    admin: Identity = Depends(require_admin),
    trees: TreeService = Depends(get_tree_service)
):
    """Every tree with owner and species (admin only)"""
    return await trees.list_all()


@router.get("/{tree_id}", response_model=TreeResponse)
async def get_tree(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    return await trees.get(tree_id, identity)


@router.put("/{tree_id}", response_model=TreeResponse)
async def update_tree(
    tree_id: int,
    body: TreeUpdate,
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    """Update the provided fields only"""
    return await trees.update(tree_id, identity, **body.model_dump(exclude_unset=True))


@router.delete("/{tree_id}", response_model=MessageResponse)
async def delete_tree(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    await trees.delete(tree_id, identity)
    return MessageResponse(message="Tree deleted successfully")


@router.get("/{tree_id}/photos", response_model=List[PhotoResponse])
async def get_tree_photos(
    tree_id: int,
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    """Get all photos for a tree"""
    return await growth.list_photos(tree_id, identity)


@router.post("/{tree_id}/photos", response_model=PhotoResponse, status_code=201)
async def add_photo_to_tree(
    tree_id: int,
    photo: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
    photo_type: Optional[PhotoType] = Form(None),
    identity: Identity = Depends(get_current_user),
    growth: GrowthService = Depends(get_growth_service)
):
    """Add new photo to existing tree"""
    contents = await photo.read() if photo else b""
    return await growth.add_photo(
        tree_id,
        identity,
        contents,
        photo.content_type if photo else None,
        caption=caption,
        photo_type=photo_type
    )
