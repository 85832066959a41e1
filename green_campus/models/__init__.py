from green_campus.models.user import User
from green_campus.models.species import TreeSpecies
from green_campus.models.tree import Tree
from green_campus.models.photo import TreePhoto
from green_campus.models.measurement import TreeMeasurement
from green_campus.models.care_activity import CareActivity

__all__ = [
    "User",
    "TreeSpecies",
    "Tree",
    "TreePhoto",
    "TreeMeasurement",
    "CareActivity",
]
