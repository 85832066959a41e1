import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.exceptions import ConstraintViolation

logger = logging.getLogger(__name__)


def constraint_message(error: IntegrityError) -> str:
    detail = str(error.orig) if error.orig is not None else str(error)
    if "FOREIGN KEY" in detail.upper():
        return "Referenced record does not exist"
    if "UNIQUE" in detail.upper():
        return "Record already exists"
    return "Constraint violation"


async def commit_or_raise(db: AsyncSession) -> None:
    """Commit the session, turning integrity failures into ConstraintViolation."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Integrity error on commit: {e.orig}")
        raise ConstraintViolation(constraint_message(e)) from e


async def save(db: AsyncSession, obj):
    db.add(obj)
    await commit_or_raise(db)
    await db.refresh(obj)
    return obj


async def apply_updates(db: AsyncSession, obj, fields: dict):
    for field, value in fields.items():
        setattr(obj, field, value)
    await commit_or_raise(db)
    await db.refresh(obj)
    return obj
