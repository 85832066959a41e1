"""FastAPI providers binding services to the request's database session."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from green_campus.database import get_db
from green_campus.services import (
    CareService,
    DashboardService,
    EmailService,
    GrowthService,
    PhotoStore,
    SpeciesService,
    TreeService,
    UserService,
    WateringService,
    get_email_service,
    get_photo_store,
)


def get_user_service(
    db: AsyncSession = Depends(get_db),
    photo_store: PhotoStore = Depends(get_photo_store),
    email_service: EmailService = Depends(get_email_service),
) -> UserService:
    return UserService(db, photo_store, email_service)


def get_species_service(db: AsyncSession = Depends(get_db)) -> SpeciesService:
    return SpeciesService(db)


def get_tree_service(
    db: AsyncSession = Depends(get_db),
    photo_store: PhotoStore = Depends(get_photo_store),
) -> TreeService:
    return TreeService(db, photo_store)


def get_growth_service(
    db: AsyncSession = Depends(get_db),
    photo_store: PhotoStore = Depends(get_photo_store),
) -> GrowthService:
    return GrowthService(db, photo_store)


def get_care_service(
    db: AsyncSession = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> CareService:
    return CareService(db, email_service)


def get_watering_service(
    db: AsyncSession = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> WateringService:
    return WateringService(db, email_service)


def get_dashboard_service(db: AsyncSession = Depends(get_db)) -> DashboardService:
    return DashboardService(db)
