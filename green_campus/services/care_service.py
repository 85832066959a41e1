from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from green_campus.exceptions import NotFound
from green_campus.models import CareActivity
from green_campus.repositories import care as care_repo
from green_campus.repositories import users as users_repo
from green_campus.security import Identity
from green_campus.services.email_service import EmailService, get_email_service
from green_campus.services.tree_service import get_owned_tree

logger = logging.getLogger(__name__)


class CareService:

    def __init__(self, db: AsyncSession, email_service: EmailService = None):
        self.db = db
        self.email_service = email_service or get_email_service()

    async def add_activity(
        self,
        tree_id: int,
        requester: Identity,
        activity_type: str,
        activity_date: date,
        notes: Optional[str] = None,
    ) -> CareActivity:
        await get_owned_tree(self.db, tree_id, requester)
        activity = await care_repo.create_activity(
            self.db,
            tree_id=tree_id,
            activity_type=activity_type,
            activity_date=activity_date,
            notes=notes,
        )
        logger.debug(f"Logged {activity_type} for tree {tree_id}")
        return activity

    async def list_activities(self, tree_id: int, requester: Identity) -> List[CareActivity]:
        await get_owned_tree(self.db, tree_id, requester)
        return await care_repo.list_activities_for_tree(self.db, tree_id)

    async def send_admin_message(self, email: str, subject: str, message: str) -> None:
        user = await users_repo.get_user_by_email(self.db, email)
        if user is None:
            raise NotFound("User not found")
        await self.email_service.send(user.email, subject, message)
        logger.info(f"Admin message sent to user {user.id}")
