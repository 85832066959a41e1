from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from green_campus.database import Base


class TreeSpecies(Base):
    __tablename__ = "tree_species"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    scientific_name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    care_instructions = Column(Text, nullable=True)
    growth_rate = Column(String(50), nullable=True)  # fast / medium / slow
    mature_height_feet = Column(Integer, nullable=True)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
