"""
Pydantic schemas for statistics endpoints.
"""
from pydantic import BaseModel
from typing import List
import datetime as dt
from portal.schemas.contact import ContactSummary


class PublicStats(BaseModel):
    """Aggregate counts shown on the public landing page."""
    total_users: int
    total_blogs: int
    total_events: int


class DashboardCounts(BaseModel):
    total_users: int
    total_blogs: int
    total_events: int
    total_photos: int
    total_registrations: int
    pending_blogs: int
    pending_events: int


class UpcomingEvent(BaseModel):
    id: int
    title: str
    date: dt.date
    attendee_count: int


class DashboardStats(BaseModel):
    """Admin dashboard payload."""
    stats: DashboardCounts
    recent_messages: List[ContactSummary]
    upcoming_events: List[UpcomingEvent]
