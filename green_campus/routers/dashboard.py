from fastapi import APIRouter, Depends

from green_campus.auth import get_current_user
from green_campus.dependencies import get_dashboard_service
from green_campus.schemas.dashboard import DashboardOverview, DashboardStatistics
from green_campus.schemas.tree import TreeResponse
from green_campus.security import Identity
from green_campus.services import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=DashboardOverview)
async def overview(
    identity: Identity = Depends(get_current_user),
    dashboard: DashboardService = Depends(get_dashboard_service)
):
    """Totals, health breakdown, carbon offset and recent plantings"""
    data = await dashboard.overview(identity.id)
    data["recent_trees"] = [TreeResponse.model_validate(t) for t in data["recent_trees"]]
    return DashboardOverview(**data)


@router.get("/statistics", response_model=DashboardStatistics)
async def statistics(
    identity: Identity = Depends(get_current_user),
    dashboard: DashboardService = Depends(get_dashboard_service)
):
    return DashboardStatistics(**await dashboard.statistics(identity.id))
