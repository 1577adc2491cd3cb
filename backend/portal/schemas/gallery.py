"""
Pydantic schemas for GalleryPhoto entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime
from portal.schemas.common import EventSummary, Pagination


class PhotoCreate(BaseModel):
    """Schema for photo upload (the image itself lives in external storage)."""
    image_url: str = Field(..., min_length=1, max_length=500)
    caption: Optional[str] = Field(None, max_length=500)
    event_id: Optional[int] = None

    class Config:
        str_strip_whitespace = True


class PhotoUpdate(BaseModel):
    """Schema for photo update."""
    caption: Optional[str] = Field(None, max_length=500)
    event_id: Optional[int] = None


class PhotoResponse(BaseModel):
    """Schema for photo response."""
    id: int
    image_url: str
    caption: Optional[str] = None
    event_id: Optional[int] = None
    event: Optional[EventSummary] = None
    uploaded_at: datetime

    class Config:
        from_attributes = True


class EventFilterOption(BaseModel):
    id: Union[int, str]
    title: str


class GalleryFilters(BaseModel):
    events: List[EventFilterOption]
    years: List[int]


class PhotoDetail(BaseModel):
    photo: PhotoResponse


class PhotoList(BaseModel):
    photos: List[PhotoResponse]
    filters: GalleryFilters
    pagination: Pagination
