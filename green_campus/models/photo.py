from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from green_campus.database import Base


class TreePhoto(Base):
    __tablename__ = "tree_photos"

    id = Column(Integer, primary_key=True, index=True)
    tree_id = Column(Integer, ForeignKey("trees.id", ondelete="CASCADE"), nullable=False, index=True)
    photo_url = Column(String(500), nullable=False)
    caption = Column(Text, nullable=True)
    photo_type = Column(String(50), nullable=False, default="progress")  # initial / progress / care
    taken_at = Column(DateTime(timezone=True), server_default=func.now())

    tree = relationship("Tree", back_populates="photos")
