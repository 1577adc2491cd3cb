"""
Pydantic schemas for BlogPost entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from portal.models.content import ContentStatus
from portal.schemas.common import AuthorSummary, Pagination


class BlogCreate(BaseModel):
    """Schema for blog post submission."""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    excerpt: str = Field(..., min_length=1)
    thumbnail: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class BlogUpdate(BaseModel):
    """Schema for blog post update. Omitted fields are left unchanged."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, min_length=1)
    thumbnail: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class BlogResponse(BaseModel):
    """Schema for blog post response."""
    id: int
    title: str
    content: str
    excerpt: str
    thumbnail: Optional[str] = None
    category: str
    author_id: int
    author: Optional[AuthorSummary] = None
    status: ContentStatus
    is_admin_post: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BlogDetail(BaseModel):
    blog: BlogResponse


class BlogList(BaseModel):
    blogs: List[BlogResponse]
    pagination: Pagination


class PublicBlogList(BlogList):
    """Public listing also carries the category filter options."""
    categories: List[str]
