from __future__ import annotations
from collections import Counter
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, Sequence

from green_campus.models import Tree
from green_campus.repositories import trees as trees_repo

# Rough estimate: one tree absorbs 48 lbs of CO2 per year
CO2_LBS_PER_TREE_YEAR = 48
RECENT_TREES = 5


def carbon_offset(trees: Sequence[Tree], current_year: int) -> int:
    """Whole calendar years since planting, no day-of-year adjustment."""
    return sum((current_year - t.planted_date.year) * CO2_LBS_PER_TREE_YEAR for t in trees)


def health_counts(trees: Sequence[Tree]) -> Dict[str, int]:
    counts = Counter(t.health_status for t in trees)
    return {status: counts.get(status, 0) for status in ("healthy", "needs_care", "struggling")}


def species_distribution(trees: Sequence[Tree]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for t in trees:
        name = t.species_name or "Unknown"
        counts[name] = counts.get(name, 0) + 1
    return counts


def height_stats(trees: Sequence[Tree]) -> tuple[float, float]:
    # Trees without a measurement sit at 0 and would drag the mean down
    heights = [t.current_height_cm for t in trees if t.current_height_cm and t.current_height_cm > 0]
    if not heights:
        return 0.0, 0.0
    return sum(heights) / len(heights), max(heights)


def build_overview(trees: Sequence[Tree], current_year: int) -> dict:
    """``trees`` must be ordered most recently planted first."""
    counts = health_counts(trees)
    return {
        "total_trees": len(trees),
        "healthy_trees": counts["healthy"],
        "needs_care_trees": counts["needs_care"],
        "struggling_trees": counts["struggling"],
        "total_carbon_offset": carbon_offset(trees, current_year),
        "recent_trees": list(trees[:RECENT_TREES]),
    }


def build_statistics(trees: Sequence[Tree]) -> dict:
    average, maximum = height_stats(trees)
    return {
        "species_distribution": species_distribution(trees),
        "average_height": average,
        "max_height": maximum,
        "total_trees": len(trees),
    }


class DashboardService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def overview(self, user_id: int, today: date | None = None) -> dict:
        trees = await trees_repo.list_trees_for_user(self.db, user_id)
        return build_overview(trees, (today or date.today()).year)

    async def statistics(self, user_id: int) -> dict:
        trees = await trees_repo.list_trees_for_user(self.db, user_id)
        return build_statistics(trees)
