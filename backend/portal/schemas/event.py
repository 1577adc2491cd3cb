"""
Pydantic schemas for Event and EventRegistration entities.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
import datetime as dt
from portal.models.content import ContentStatus
from portal.schemas.common import AuthorSummary, Pagination

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
OPTIONAL_TIME_PATTERN = r"^(([01]\d|2[0-3]):[0-5]\d)?$"


class EventCreate(BaseModel):
    """Schema for event submission."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: dt.date
    time: str = Field(..., pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=OPTIONAL_TIME_PATTERN)
    location: str = Field(..., min_length=1, max_length=255)
    image_url: Optional[str] = None
    category: str = Field("General", min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class EventUpdate(BaseModel):
    """Schema for event update. An empty end_time clears it."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=OPTIONAL_TIME_PATTERN)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    image_url: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class EventResponse(BaseModel):
    """Schema for event response. attendee_count is derived from registrations."""
    id: int
    title: str
    description: str
    date: dt.date
    time: str
    end_time: Optional[str] = None
    location: str
    image_url: Optional[str] = None
    category: str
    author_id: int
    author: Optional[AuthorSummary] = None
    status: ContentStatus
    is_admin_post: bool
    attendee_count: int = 0
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class EventDetail(BaseModel):
    event: EventResponse


class EventList(BaseModel):
    events: List[EventResponse]
    pagination: Pagination


class RegistrationResponse(BaseModel):
    """A user's registration together with the event it refers to."""
    id: int
    registered_at: dt.datetime
    event: EventResponse


class RegistrationList(BaseModel):
    registrations: List[RegistrationResponse]


class AttendeeResponse(BaseModel):
    """Public profile of an event attendee."""
    id: int
    full_name: str
    email: str
    student_id: str
    course: str

    class Config:
        from_attributes = True


class AttendeeList(BaseModel):
    attendees: List[AttendeeResponse]
    total_attendees: int
