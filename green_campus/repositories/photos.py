from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.models import TreePhoto
from green_campus.repositories.base import save


async def create_photo(
    db: AsyncSession,
    tree_id: int,
    photo_url: str,
    caption: Optional[str] = None,
    photo_type: str = "progress",
) -> TreePhoto:
    photo = TreePhoto(tree_id=tree_id, photo_url=photo_url, caption=caption, photo_type=photo_type)
    return await save(db, photo)


async def get_photo(db: AsyncSession, photo_id: int) -> Optional[TreePhoto]:
    return await db.get(TreePhoto, photo_id)


async def list_photos_for_tree(db: AsyncSession, tree_id: int) -> List[TreePhoto]:
    result = await db.execute(
        select(TreePhoto)
        .where(TreePhoto.tree_id == tree_id)
        .order_by(TreePhoto.taken_at.desc(), TreePhoto.id.desc())
    )
    return list(result.scalars().all())


async def delete_photo(db: AsyncSession, photo_id: int) -> None:
    await db.execute(delete(TreePhoto).where(TreePhoto.id == photo_id))
    await db.commit()
