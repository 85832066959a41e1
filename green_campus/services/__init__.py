from green_campus.services.email_service import EmailService, get_email_service
from green_campus.services.photo_store import PhotoStore, get_photo_store
from green_campus.services.user_service import UserService
from green_campus.services.species_service import SpeciesService
from green_campus.services.tree_service import TreeService, get_owned_tree
from green_campus.services.growth_service import GrowthService
from green_campus.services.care_service import CareService
from green_campus.services.watering_service import WateringService
from green_campus.services.dashboard_service import DashboardService

__all__ = [
    "EmailService", "get_email_service",
    "PhotoStore", "get_photo_store",
    "UserService",
    "SpeciesService",
    "TreeService", "get_owned_tree",
    "GrowthService",
    "CareService",
    "WateringService",
    "DashboardService",
]
