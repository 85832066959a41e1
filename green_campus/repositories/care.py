from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.models import CareActivity
from green_campus.repositories.base import save


async def create_activity(
    db: AsyncSession,
    tree_id: int,
    activity_type: str,
    activity_date: date,
    notes: Optional[str] = None,
) -> CareActivity:
    activity = CareActivity(
        tree_id=tree_id,
        activity_type=activity_type,
        activity_date=activity_date,
        notes=notes,
    )
    return await save(db, activity)


async def get_activity(db: AsyncSession, activity_id: int) -> Optional[CareActivity]:
    return await db.get(CareActivity, activity_id)


async def list_activities_for_tree(db: AsyncSession, tree_id: int) -> List[CareActivity]:
    result = await db.execute(
        select(CareActivity)
        .where(CareActivity.tree_id == tree_id)
        .order_by(CareActivity.activity_date.desc(), CareActivity.id.desc())
    )
    return list(result.scalars().all())


async def latest_watering_date(db: AsyncSession, tree_id: int) -> Optional[date]:
    result = await db.execute(
        select(func.max(CareActivity.activity_date))
        .where(CareActivity.tree_id == tree_id, CareActivity.activity_type == "watering")
    )
    return result.scalar()


async def latest_watering_dates(db: AsyncSession) -> Dict[int, date]:
    """Most recent watering date per tree, for trees that were ever watered."""
    result = await db.execute(
        select(CareActivity.tree_id, func.max(CareActivity.activity_date))
        .where(CareActivity.activity_type == "watering")
        .group_by(CareActivity.tree_id)
    )
    return {tree_id: last for tree_id, last in result.all()}
