from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict, List

from green_campus.schemas.tree import TreeResponse


class CamelModel(BaseModel):
    """Dashboard payloads keep the camelCase keys the web client reads."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DashboardOverview(CamelModel):
    total_trees: int
    healthy_trees: int
    needs_care_trees: int
    struggling_trees: int
    total_carbon_offset: int
    recent_trees: List[TreeResponse]


class DashboardStatistics(CamelModel):
    species_distribution: Dict[str, int]
    average_height: float
    max_height: float
    total_trees: int
