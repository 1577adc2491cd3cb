"""Models package - Import all models for SQLAlchemy registration."""
from portal.models.user import User, UserRole
from portal.models.content import ContentStatus, ModeratedContent
from portal.models.blog import BlogPost
from portal.models.event import Event, EventRegistration
from portal.models.gallery import GalleryPhoto
from portal.models.contact import ContactMessage

__all__ = [
    "User",
    "UserRole",
    "ContentStatus",
    "ModeratedContent",
    "BlogPost",
    "Event",
    "EventRegistration",
    "GalleryPhoto",
    "ContactMessage",
]
