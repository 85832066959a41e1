from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging
import secrets

from green_campus.exceptions import (
    ConstraintViolation,
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    NotFound,
)
from green_campus.models import User
from green_campus.repositories import users as users_repo
from green_campus.security import hash_password, verify_password
from green_campus.services.email_service import EmailService, get_email_service
from green_campus.services.photo_store import PhotoStore, get_photo_store

logger = logging.getLogger(__name__)

RESET_TOKEN_BYTES = 24


class UserService:

    def __init__(self, db: AsyncSession, photo_store: PhotoStore = None, email_service: EmailService = None):
        self.db = db
        self.photo_store = photo_store or get_photo_store()
        self.email_service = email_service or get_email_service()

    async def register(
        self,
        email: str,
        password: str,
        full_name: str,
        location: Optional[str] = None,
    ) -> User:
        if await users_repo.get_user_by_email(self.db, email):
            raise DuplicateEmail()

        try:
            user = await users_repo.create_user(
                self.db,
                email=email,
                password_hash=hash_password(password),
                full_name=full_name,
                location=location or None,
                email_verified=True,
            )
        except ConstraintViolation:
            # Lost a race with a concurrent registration
            raise DuplicateEmail()

        logger.info(f"Registered user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> bool:
        user = await users_repo.get_user_by_email(self.db, email)
        if user is None:
            return False
        return verify_password(password, user.password_hash)

    async def login(self, email: str, password: str) -> User:
        user = await users_repo.get_user_by_email(self.db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected login with invalid credentials")
            raise InvalidCredentials()
        return user

    async def get_profile(self, user_id: int) -> User:
        user = await users_repo.get_user(self.db, user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def update_profile(self, user_id: int, **fields) -> User:
        user = await users_repo.update_user(self.db, user_id, **fields)
        if user is None:
            raise NotFound("User not found")
        return user

    async def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        user = await self.get_profile(user_id)
        if not verify_password(current_password, user.password_hash):
            raise InvalidCredentials("Current password is incorrect")
        await users_repo.update_user(self.db, user_id, password_hash=hash_password(new_password))
        logger.info(f"User {user_id} changed password")

    async def request_password_reset(self, email: str) -> str:
        """Store a fresh reset token on the user and email it to them."""
        user = await users_repo.get_user_by_email(self.db, email)
        if user is None:
            raise NotFound("User not found")
        token = secrets.token_hex(RESET_TOKEN_BYTES)
        await users_repo.update_user(self.db, user.id, verification_token=token)
        await self.email_service.send(
            user.email,
            "Reset your Green Campus password",
            f"Hi {user.full_name},\n\n"
            f"Use this token to reset your password: {token}\n\n"
            f"If you did not ask for a reset, you can ignore this email.\n",
        )
        logger.info(f"Issued password reset token for user {user.id}")
        return token

    async def reset_password(self, email: str, token: str, new_password: str) -> None:
        user = await users_repo.get_user_by_email(self.db, email)
        stored = user.verification_token if user else None
        if not stored or not token or not secrets.compare_digest(stored, token):
            raise InvalidToken()
        await users_repo.update_user(
            self.db,
            user.id,
            password_hash=hash_password(new_password),
            verification_token=None,
        )
        logger.info(f"User {user.id} reset password")

    async def delete_account(self, user_id: int) -> None:
        photo_urls = await users_repo.list_photo_urls_for_user(self.db, user_id)
        await users_repo.delete_user(self.db, user_id)
        removed = await self.photo_store.delete_many(photo_urls)
        logger.info(f"Deleted user {user_id} and {removed} photo blobs")

    async def leaderboard(self) -> List[dict]:
        rows = await users_repo.tree_counts_by_user(self.db)
        return [
            {
                "id": row.id,
                "full_name": row.full_name,
                "location": row.location,
                "tree_count": row.tree_count,
                "rank": rank,
            }
            for rank, row in enumerate(rows, start=1)
        ]
