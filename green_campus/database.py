from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from sqlalchemy import event, select, func
from pathlib import Path
import logging

from green_campus.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # One connection per session; SQLite connects are cheap and this keeps
        # aiosqlite connections off a shared pool across event loops
        return {"poolclass": NullPool, "connect_args": {"check_same_thread": False}}
    return {}


def _ensure_sqlite_dir(url: str) -> None:
    prefix = "sqlite+aiosqlite:///"
    if url.startswith(prefix) and ":memory:" not in url:
        Path(url[len(prefix):]).parent.mkdir(parents=True, exist_ok=True)


engine = create_async_engine(
    settings.database_url,
    echo=settings.sql_echo,
    **_engine_kwargs(settings.database_url),
)

if settings.database_url.startswith("sqlite"):
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE CASCADE unless this is set per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


SEED_SPECIES = [
    {
        "name": "Oak Tree",
        "scientific_name": "Quercus",
        "description": "Strong, long-living tree perfect for urban environments",
        "care_instructions": "Water weekly, prune in winter",
        "growth_rate": "slow",
        "mature_height_feet": 80,
    },
    {
        "name": "Maple Tree",
        "scientific_name": "Acer",
        "description": "Beautiful foliage tree with seasonal color changes",
        "care_instructions": "Regular watering, avoid overwatering",
        "growth_rate": "medium",
        "mature_height_feet": 60,
    },
    {
        "name": "Pine Tree",
        "scientific_name": "Pinus",
        "description": "Evergreen tree that provides year-round greenery",
        "care_instructions": "Drought tolerant once established",
        "growth_rate": "medium",
        "mature_height_feet": 70,
    },
    {
        "name": "Willow Tree",
        "scientific_name": "Salix",
        "description": "Fast-growing tree that loves water and wet soil",
        "care_instructions": "Keep soil moist, regular watering",
        "growth_rate": "fast",
        "mature_height_feet": 40,
    },
    {
        "name": "Cherry Tree",
        "scientific_name": "Prunus",
        "description": "Flowering tree that produces beautiful spring blossoms",
        "care_instructions": "Well-draining soil, moderate watering",
        "growth_rate": "medium",
        "mature_height_feet": 30,
    },
]


async def seed_species(session: AsyncSession) -> int:
    """Insert the fixed species catalog when the table is empty."""
    from green_campus.models import TreeSpecies

    count = (await session.execute(select(func.count(TreeSpecies.id)))).scalar()
    if count:
        return 0

    session.add_all([TreeSpecies(**row) for row in SEED_SPECIES])
    await session.commit()
    logger.info(f"Seeded {len(SEED_SPECIES)} tree species")
    return len(SEED_SPECIES)


async def init_db():
    """Create tables and seed reference data"""
    import green_campus.models  # noqa: F401  register mappers on Base

    _ensure_sqlite_dir(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await seed_species(session)
