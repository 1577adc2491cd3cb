"""
Gallery photo model.
"""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from portal.db.base import BaseModel


class GalleryPhoto(BaseModel):
    """Photo published by an admin, optionally linked to an event."""
    __tablename__ = "gallery_photos"

    image_url = Column(String(500), nullable=False)
    caption = Column(String(500), nullable=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="SET NULL"), nullable=True, index=True)
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    event = relationship("Event", back_populates="photos")
