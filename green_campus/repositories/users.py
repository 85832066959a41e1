from typing import List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.models import User, Tree, TreePhoto
from green_campus.repositories.base import save, apply_updates


async def create_user(
    db: AsyncSession,
    email: str,
    password_hash: str,
    full_name: str,
    location: Optional[str] = None,
    email_verified: bool = False,
    verification_token: Optional[str] = None,
) -> User:
    user = User(
        email=email,
        password_hash=password_hash,
        full_name=full_name,
        location=location,
        email_verified=email_verified,
        verification_token=verification_token,
    )
    return await save(db, user)


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def update_user(db: AsyncSession, user_id: int, **fields) -> Optional[User]:
    user = await get_user(db, user_id)
    if user is None:
        return None
    fields["updated_at"] = func.now()
    return await apply_updates(db, user, fields)


async def delete_user(db: AsyncSession, user_id: int) -> None:
    # Trees, photos, measurements and activities go with it via ON DELETE CASCADE
    await db.execute(delete(User).where(User.id == user_id))
    await db.commit()


async def list_photo_urls_for_user(db: AsyncSession, user_id: int) -> List[str]:
    result = await db.execute(
        select(TreePhoto.photo_url)
        .join(Tree, TreePhoto.tree_id == Tree.id)
        .where(Tree.user_id == user_id)
    )
    return list(result.scalars().all())


async def tree_counts_by_user(db: AsyncSession) -> list:
    """Users with at least one tree, most trees first."""
    tree_count = func.count(Tree.id).label("tree_count")
    result = await db.execute(
        select(User.id, User.full_name, User.location, tree_count)
        .join(Tree, Tree.user_id == User.id)
        .group_by(User.id, User.full_name, User.location)
        .order_by(tree_count.desc(), User.full_name.asc(), User.id.asc())
    )
    return result.all()
