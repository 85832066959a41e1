from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from green_campus.database import Base


class Tree(Base):
    __tablename__ = "trees"
    __table_args__ = (
        Index("idx_trees_location", "latitude", "longitude"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    species_id = Column(Integer, ForeignKey("tree_species.id"), nullable=False, index=True)

    # GPS coordinates in decimal degrees
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    planted_date = Column(Date, nullable=False, index=True)
    current_height_cm = Column(Float, nullable=False, default=0)
    health_status = Column(String(50), nullable=False, default="healthy")  # healthy / needs_care / struggling
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="trees")
    species = relationship("TreeSpecies", lazy="joined")
    photos = relationship("TreePhoto", back_populates="tree", cascade="all, delete-orphan", passive_deletes=True)
    measurements = relationship(
        "TreeMeasurement", back_populates="tree", cascade="all, delete-orphan", passive_deletes=True
    )
    care_activities = relationship(
        "CareActivity", back_populates="tree", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def species_name(self):
        return self.species.name if self.species else None

    @property
    def scientific_name(self):
        return self.species.scientific_name if self.species else None

    # Only valid when ``owner`` was eagerly loaded (admin listing)
    @property
    def user_full_name(self):
        return self.owner.full_name

    @property
    def user_email(self):
        return self.owner.email
