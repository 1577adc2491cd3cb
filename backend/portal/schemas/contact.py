"""
Pydantic schemas for ContactMessage entity.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import List
from datetime import datetime
from portal.schemas.common import Pagination


class ContactCreate(BaseModel):
    """Schema for a public contact form submission."""
    name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)

    class Config:
        str_strip_whitespace = True


class ContactSummary(BaseModel):
    """Message header shown on the admin dashboard."""
    id: int
    name: str
    email: str
    subject: str
    is_read: bool
    sent_at: datetime

    class Config:
        from_attributes = True


class ContactResponse(ContactSummary):
    """Full contact message."""
    message: str


class ContactDetail(BaseModel):
    message: ContactResponse


class ContactList(BaseModel):
    messages: List[ContactResponse]
    unread_count: int
    pagination: Pagination
