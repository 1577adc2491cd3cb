"""
Event and event registration models.
"""
from datetime import datetime
from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from portal.db.base import BaseModel
from portal.models.content import ModeratedContent


class Event(ModeratedContent, BaseModel):
    """Association event, public once approved."""
    __tablename__ = "events"
    content_label = "Event"

    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # "HH:MM"
    end_time = Column(String(5), nullable=True)
    location = Column(String(255), nullable=False)
    image_url = Column(String(500), nullable=True)
    category = Column(String(100), nullable=False, default="General", index=True)

    # Relationships
    author = relationship("User", back_populates="events")
    registrations = relationship("EventRegistration", back_populates="event", cascade="all, delete-orphan")
    photos = relationship("GalleryPhoto", back_populates="event")


class EventRegistration(BaseModel):
    """Ledger row recording that a user signed up for an event."""
    __tablename__ = "event_registrations"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    registered_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="registrations")
    event = relationship("Event", back_populates="registrations")

    # One registration per user per event, enforced by the store
    __table_args__ = (
        UniqueConstraint('user_id', 'event_id', name='uq_user_event_registration'),
    )
