from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from green_campus.exceptions import AccessDenied, NotFound, ValidationError
from green_campus.models import Tree
from green_campus.repositories import trees as trees_repo
from green_campus.security import Identity
from green_campus.services.photo_store import PhotoStore, get_photo_store

logger = logging.getLogger(__name__)

# Columns that may be cleared with an explicit null
NULLABLE_TREE_FIELDS = {"notes"}


async def get_owned_tree(db: AsyncSession, tree_id: int, requester: Identity) -> Tree:
    """Load a tree for ``requester``; existence is checked before ownership."""
    tree = await trees_repo.get_tree(db, tree_id)
    if tree is None:
        raise NotFound("Tree not found")
    if requester.id is None or tree.user_id != requester.id:
        logger.warning(f"User {requester.id} denied access to tree {tree_id}")
        raise AccessDenied()
    return tree


def _in_bounds(tree: Tree, north: float, south: float, east: float, west: float) -> bool:
    return south <= tree.latitude <= north and west <= tree.longitude <= east


class TreeService:

    def __init__(self, db: AsyncSession, photo_store: PhotoStore = None):
        self.db = db
        self.photo_store = photo_store or get_photo_store()

    async def plant(
        self,
        owner_id: int,
        species_id: int,
        latitude: float,
        longitude: float,
        planted_date: date,
        initial_height: Optional[float] = None,
        health_status: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Tree:
        tree = await trees_repo.create_tree(
            self.db,
            user_id=owner_id,
            species_id=species_id,
            latitude=latitude,
            longitude=longitude,
            planted_date=planted_date,
            current_height_cm=initial_height or 0,
            health_status=health_status or "healthy",
            notes=notes,
        )
        logger.info(f"User {owner_id} planted tree {tree.id}")
        return tree

    async def list_for_owner(self, owner_id: int) -> List[Tree]:
        return await trees_repo.list_trees_for_user(self.db, owner_id)

    async def list_all(self) -> List[Tree]:
        return await trees_repo.list_all_trees(self.db)

    async def get(self, tree_id: int, requester: Identity) -> Tree:
        return await get_owned_tree(self.db, tree_id, requester)

    async def update(self, tree_id: int, requester: Identity, **fields) -> Tree:
        await get_owned_tree(self.db, tree_id, requester)
        for field, value in fields.items():
            if value is None and field not in NULLABLE_TREE_FIELDS:
                raise ValidationError(f"{field} cannot be null")
        return await trees_repo.update_tree(self.db, tree_id, **fields)

    async def delete(self, tree_id: int, requester: Identity) -> None:
        await get_owned_tree(self.db, tree_id, requester)
        photo_urls = await trees_repo.list_photo_urls_for_tree(self.db, tree_id)
        await trees_repo.delete_tree(self.db, tree_id)
        await self.photo_store.delete_many(photo_urls)
        logger.info(f"Deleted tree {tree_id} with {len(photo_urls)} photos")

    async def map_view(
        self,
        owner_id: int,
        health_status: Optional[str] = None,
        year: Optional[int] = None,
        species_id: Optional[int] = None,
    ) -> List[Tree]:
        trees = await self.list_for_owner(owner_id)
        if health_status:
            trees = [t for t in trees if t.health_status == health_status]
        if year:
            trees = [t for t in trees if t.planted_date.year == year]
        if species_id:
            trees = [t for t in trees if t.species_id == species_id]
        return trees

    async def map_area(
        self,
        owner_id: int,
        north: float,
        south: float,
        east: float,
        west: float,
    ) -> List[Tree]:
        trees = await self.list_for_owner(owner_id)
        return [t for t in trees if _in_bounds(t, north, south, east, west)]
