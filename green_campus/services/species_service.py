from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from green_campus.exceptions import NotFound
from green_campus.models import TreeSpecies
from green_campus.repositories import species as species_repo


class SpeciesService:
    """Read-only species catalog."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> List[TreeSpecies]:
        return await species_repo.list_species(self.db)

    async def get(self, species_id: int) -> TreeSpecies:
        species = await species_repo.get_species(self.db, species_id)
        if species is None:
            raise NotFound("Species not found")
        return species
