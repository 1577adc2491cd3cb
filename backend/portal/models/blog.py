"""
Blog post model.
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from portal.db.base import BaseModel
from portal.models.content import ModeratedContent


class BlogPost(ModeratedContent, BaseModel):
    """Member-submitted article, public once approved."""
    __tablename__ = "blog_posts"
    content_label = "Blog post"

    title = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=False)
    thumbnail = Column(String(500), nullable=True)
    category = Column(String(100), nullable=False, index=True)

    # Relationships
    author = relationship("User", back_populates="blog_posts")
