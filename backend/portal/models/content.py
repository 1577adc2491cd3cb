"""
Shared columns for content that goes through moderation.
"""
from sqlalchemy import Column, Boolean, ForeignKey, Integer, Enum as SQLEnum
from sqlalchemy.orm import declared_attr
import enum


class ContentStatus(str, enum.Enum):
    """Moderation status enumeration."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ModeratedContent:
    """Mixin for author-owned content with an approval status."""

    # Human readable name used in messages, e.g. "Blog post"
    content_label = "Content"

    @declared_attr
    def author_id(cls):
        return Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    @declared_attr
    def status(cls):
        return Column(SQLEnum(ContentStatus), default=ContentStatus.PENDING, nullable=False, index=True)

    @declared_attr
    def is_admin_post(cls):
        return Column(Boolean, default=False, nullable=False)
