"""
Bearer-token authentication dependencies.

Handlers receive an explicit :class:`~green_campus.security.Identity`
instead of reading identity from request state.
"""
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import logging

from green_campus.exceptions import AccessDenied, Unauthenticated
from green_campus.security import Identity, decode_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token provided")
    return decode_token(credentials.credentials)


async def get_current_user(identity: Identity = Depends(get_identity)) -> Identity:
    if identity.is_admin:
        logger.debug(f"Admin {identity.username} rejected on a user endpoint")
        raise AccessDenied("User token required")
    return identity


async def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    if not identity.is_admin:
        logger.warning(f"User {identity.id} attempted an admin endpoint")
        raise AccessDenied("Admin access required")
    return identity
