from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.models import TreeSpecies


async def list_species(db: AsyncSession) -> List[TreeSpecies]:
    result = await db.execute(select(TreeSpecies).order_by(TreeSpecies.name))
    return list(result.scalars().all())


async def get_species(db: AsyncSession, species_id: int) -> Optional[TreeSpecies]:
    return await db.get(TreeSpecies, species_id)
