from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from green_campus.auth import get_current_user
from green_campus.dependencies import get_tree_service
from green_campus.schemas.tree import HealthStatus, MapTree
from green_campus.security import Identity
from green_campus.services import TreeService

router = APIRouter(prefix="/api/map", tags=["map"])


@router.get("/trees", response_model=List[MapTree])
async def map_trees(
    health_status: Optional[HealthStatus] = None,
    year: Optional[int] = None,
    species_id: Optional[int] = None,
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    """Caller's trees as map points, optionally filtered"""
    return await trees.map_view(identity.id, health_status=health_status, year=year, species_id=species_id)


@router.get("/trees/area", response_model=List[MapTree])
async def map_trees_in_area(
    north: float = Query(..., ge=-90, le=90),
    south: float = Query(..., ge=-90, le=90),
    east: float = Query(..., ge=-180, le=180),
    west: float = Query(..., ge=-180, le=180),
    identity: Identity = Depends(get_current_user),
    trees: TreeService = Depends(get_tree_service)
):
    """Caller's trees inside an inclusive bounding box"""
    return await trees.map_area(identity.id, north=north, south=south, east=east, west=west)
