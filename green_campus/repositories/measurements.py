from datetime import date
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.models import Tree, TreeMeasurement
from green_campus.repositories.base import commit_or_raise


async def create_measurement(
    db: AsyncSession,
    tree_id: int,
    height_cm: float,
    measurement_date: date,
    notes: Optional[str] = None,
) -> TreeMeasurement:
    """Append a measurement and copy its height onto the tree in one commit."""
    measurement = TreeMeasurement(
        tree_id=tree_id,
        height_cm=height_cm,
        measurement_date=measurement_date,
        notes=notes,
    )
    db.add(measurement)

    # Last write wins, even when the new height is lower
    tree = await db.get(Tree, tree_id)
    if tree is not None:
        tree.current_height_cm = height_cm
        tree.updated_at = func.now()

    await commit_or_raise(db)
    await db.refresh(measurement)
    if tree is not None:
        await db.refresh(tree)
    return measurement


async def get_measurement(db: AsyncSession, measurement_id: int) -> Optional[TreeMeasurement]:
    return await db.get(TreeMeasurement, measurement_id)


async def list_measurements_for_tree(db: AsyncSession, tree_id: int) -> List[TreeMeasurement]:
    result = await db.execute(
        select(TreeMeasurement)
        .where(TreeMeasurement.tree_id == tree_id)
        .order_by(TreeMeasurement.measurement_date.desc(), TreeMeasurement.id.desc())
    )
    return list(result.scalars().all())
