"""
Watering reminders.

Each species has an expected watering interval, looked up by a
case-insensitive substring of the species name. A tree is due when it was
never watered, or when at least that many whole days have passed since
its latest watering activity.
"""
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from green_campus.models import Tree
from green_campus.repositories import care as care_repo
from green_campus.repositories import trees as trees_repo
from green_campus.security import Identity
from green_campus.services.email_service import EmailService, get_email_service
from green_campus.services.tree_service import get_owned_tree

logger = logging.getLogger(__name__)

# Checked in order, first match wins
WATERING_INTERVALS = (
    ("willow", 3),
    ("oak", 7),
    ("maple", 5),
    ("pine", 10),
    ("cherry", 6),
)
DEFAULT_WATERING_INTERVAL_DAYS = 7


def watering_interval(species_name: Optional[str]) -> int:
    name = (species_name or "").lower()
    for fragment, days in WATERING_INTERVALS:
        if fragment in name:
            return days
    return DEFAULT_WATERING_INTERVAL_DAYS


def days_since(last_watered: Optional[date], today: date) -> Optional[int]:
    if last_watered is None:
        return None
    return (today - last_watered).days


def needs_watering(species_name: Optional[str], last_watered: Optional[date], today: date = None) -> bool:
    elapsed = days_since(last_watered, today or date.today())
    if elapsed is None:
        return True
    return elapsed >= watering_interval(species_name)


def reminder_email(tree: Tree, last_watered: Optional[date], today: date) -> tuple:
    species = tree.species_name or "tree"
    subject = f"Your {species} needs watering"
    if last_watered is None:
        history = "We have no record of it being watered yet."
    else:
        history = f"It was last watered on {last_watered.isoformat()} ({days_since(last_watered, today)} days ago)."
    body = (
        f"Hi {tree.owner.full_name},\n\n"
        f"Your {species} (tree #{tree.id}, planted {tree.planted_date.isoformat()}) is due for watering. "
        f"{history}\n\n"
        f"{species.capitalize()}s should be watered every {watering_interval(tree.species_name)} days. "
        f"Please log a watering activity once it's done.\n\n"
        f"Thanks for helping keep our campus green!\n"
    )
    return subject, body


class WateringService:

    def __init__(self, db: AsyncSession, email_service: EmailService = None):
        self.db = db
        self.email_service = email_service or get_email_service()

    async def status(self, tree_id: int, requester: Identity, today: date = None) -> dict:
        tree = await get_owned_tree(self.db, tree_id, requester)
        today = today or date.today()
        last = await care_repo.latest_watering_date(self.db, tree_id)
        return {
            "tree_id": tree.id,
            "species_name": tree.species_name,
            "interval_days": watering_interval(tree.species_name),
            "last_watered": last,
            "days_since_watering": days_since(last, today),
            "needs_watering": needs_watering(tree.species_name, last, today),
        }

    async def notify_unwatered(self, today: date = None) -> int:
        """Email the owner of every tree that is due; returns the number of emails sent."""
        today = today or date.today()
        trees = await trees_repo.list_all_trees(self.db)
        last_watered = await care_repo.latest_watering_dates(self.db)

        sent = 0
        for tree in trees:
            last = last_watered.get(tree.id)
            if not needs_watering(tree.species_name, last, today):
                continue
            subject, body = reminder_email(tree, last, today)
            await self.email_service.send(tree.owner.email, subject, body)
            sent += 1

        logger.info(f"Watering sweep checked {len(trees)} trees, sent {sent} reminders")
        return sent
