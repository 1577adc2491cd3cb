"""
Contact message model.
"""
from datetime import datetime
from sqlalchemy import Column, String, Text, Boolean, DateTime
from portal.db.base import BaseModel


class ContactMessage(BaseModel):
    """Message submitted through the public contact form."""
    __tablename__ = "contact_messages"

    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False, index=True)
    sent_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
