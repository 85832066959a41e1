from datetime import date
from typing import List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from green_campus.models import Tree, TreePhoto
from green_campus.repositories.base import save, apply_updates


async def create_tree(
    db: AsyncSession,
    user_id: int,
    species_id: int,
    latitude: float,
    longitude: float,
    planted_date: date,
    current_height_cm: float = 0,
    health_status: str = "healthy",
    notes: Optional[str] = None,
) -> Tree:
    tree = Tree(
        user_id=user_id,
        species_id=species_id,
        latitude=latitude,
        longitude=longitude,
        planted_date=planted_date,
        current_height_cm=current_height_cm,
        health_status=health_status,
        notes=notes,
    )
    return await save(db, tree)


async def get_tree(db: AsyncSession, tree_id: int) -> Optional[Tree]:
    return await db.get(Tree, tree_id)


async def list_trees_for_user(db: AsyncSession, user_id: int) -> List[Tree]:
    result = await db.execute(
        select(Tree)
        .where(Tree.user_id == user_id)
        .order_by(Tree.planted_date.desc(), Tree.id.desc())
    )
    return list(result.scalars().unique().all())


async def list_all_trees(db: AsyncSession) -> List[Tree]:
    """Every tree with owner and species loaded (admin view)."""
    result = await db.execute(
        select(Tree)
        .options(joinedload(Tree.owner))
        .order_by(Tree.planted_date.desc(), Tree.id.desc())
    )
    return list(result.scalars().unique().all())


async def update_tree(db: AsyncSession, tree_id: int, **fields) -> Optional[Tree]:
    tree = await get_tree(db, tree_id)
    if tree is None:
        return None
    fields["updated_at"] = func.now()
    return await apply_updates(db, tree, fields)


async def delete_tree(db: AsyncSession, tree_id: int) -> None:
    await db.execute(delete(Tree).where(Tree.id == tree_id))
    await db.commit()


async def list_photo_urls_for_tree(db: AsyncSession, tree_id: int) -> List[str]:
    result = await db.execute(select(TreePhoto.photo_url).where(TreePhoto.tree_id == tree_id))
    return list(result.scalars().all())
