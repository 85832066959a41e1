from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from green_campus.exceptions import NotFound
from green_campus.models import Tree, TreeMeasurement, TreePhoto
from green_campus.repositories import measurements as measurements_repo
from green_campus.repositories import photos as photos_repo
from green_campus.repositories import trees as trees_repo
from green_campus.security import Identity
from green_campus.services.photo_store import PhotoStore, get_photo_store
from green_campus.services.tree_service import get_owned_tree

logger = logging.getLogger(__name__)


class GrowthService:
    """Measurements, photos and health status of a single owned tree."""

    def __init__(self, db: AsyncSession, photo_store: PhotoStore = None):
        self.db = db
        self.photo_store = photo_store or get_photo_store()

    async def add_measurement(
        self,
        tree_id: int,
        requester: Identity,
        height_cm: float,
        measurement_date: date,
        notes: Optional[str] = None,
    ) -> TreeMeasurement:
        await get_owned_tree(self.db, tree_id, requester)
        return await measurements_repo.create_measurement(
            self.db,
            tree_id=tree_id,
            height_cm=height_cm,
            measurement_date=measurement_date,
            notes=notes,
        )

    async def list_measurements(self, tree_id: int, requester: Identity) -> List[TreeMeasurement]:
        await get_owned_tree(self.db, tree_id, requester)
        return await measurements_repo.list_measurements_for_tree(self.db, tree_id)

    async def add_photo(
        self,
        tree_id: int,
        requester: Identity,
        contents: bytes,
        content_type: Optional[str],
        caption: Optional[str] = None,
        photo_type: Optional[str] = None,
    ) -> TreePhoto:
        await get_owned_tree(self.db, tree_id, requester)
        photo_url = await self.photo_store.save(contents, content_type)
        try:
            return await photos_repo.create_photo(
                self.db,
                tree_id=tree_id,
                photo_url=photo_url,
                caption=caption or None,
                photo_type=photo_type or "progress",
            )
        except Exception:
            await self.photo_store.delete(photo_url)
            raise

    async def list_photos(self, tree_id: int, requester: Identity) -> List[TreePhoto]:
        await get_owned_tree(self.db, tree_id, requester)
        return await photos_repo.list_photos_for_tree(self.db, tree_id)

    async def delete_photo(self, tree_id: int, photo_id: int, requester: Identity) -> None:
        await get_owned_tree(self.db, tree_id, requester)
        photo = await photos_repo.get_photo(self.db, photo_id)
        if photo is None or photo.tree_id != tree_id:
            raise NotFound("Photo not found")

        photo_url = photo.photo_url
        await photos_repo.delete_photo(self.db, photo_id)
        if not await self.photo_store.delete(photo_url):
            logger.warning(f"Photo {photo_id} removed but blob {photo_url} was already gone")

    async def update_health(self, tree_id: int, requester: Identity, health_status: str) -> Tree:
        await get_owned_tree(self.db, tree_id, requester)
        return await trees_repo.update_tree(self.db, tree_id, health_status=health_status)
