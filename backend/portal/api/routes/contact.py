"""
Contact form routes: public submission, admin inbox.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Optional
from portal.db.session import get_db
from portal.models.user import User
from portal.models.contact import ContactMessage
from portal.schemas.common import ApiResponse
from portal.schemas.contact import ContactCreate, ContactResponse, ContactDetail, ContactList
from portal.core.exceptions import NotFound
from portal.core.utils import format_response, pagination_meta
from portal.services.query_service import paginate
from portal.api.dependencies import require_admin

router = APIRouter(prefix="/contact", tags=["contact"])


def get_message_or_404(message_id: int, db: Session) -> ContactMessage:
    message = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
    if not message:
        raise NotFound("Message not found")
    return message


@router.post("", response_model=ApiResponse[ContactDetail], status_code=status.HTTP_201_CREATED)
async def send_message(message_data: ContactCreate, db: Session = Depends(get_db)):
    """Submit a contact message (public)."""
    message = ContactMessage(**message_data.model_dump())
    db.add(message)
    db.commit()
    db.refresh(message)
    return format_response(ContactDetail(message=ContactResponse.model_validate(message)), "Message sent successfully")


@router.get("", response_model=ApiResponse[ContactList])
async def list_messages(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    is_read: Optional[bool] = Query(None),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List contact messages, newest first (admin only)."""
    query = db.query(ContactMessage)
    if is_read is not None:
        query = query.filter(ContactMessage.is_read == is_read)
    query = query.order_by(ContactMessage.sent_at.desc(), ContactMessage.id.desc())

    messages, total = paginate(query, page, limit)
    unread_count = db.query(func.count(ContactMessage.id)).filter(
        ContactMessage.is_read.is_(False)
    ).scalar() or 0

    data = ContactList(
        messages=[ContactResponse.model_validate(m) for m in messages],
        unread_count=unread_count,
        pagination=pagination_meta(page, limit, total)
    )
    return format_response(data, "Contact messages fetched successfully")


@router.patch("/{message_id}/read", response_model=ApiResponse[ContactDetail])
async def mark_as_read(
    message_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Mark a message as read (admin only)."""
    message = get_message_or_404(message_id, db)
    message.is_read = True
    db.commit()
    db.refresh(message)
    return format_response(ContactDetail(message=ContactResponse.model_validate(message)), "Message marked as read")


@router.delete("/{message_id}", response_model=ApiResponse[None])
async def delete_message(
    message_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a message (admin only)."""
    message = get_message_or_404(message_id, db)
    db.delete(message)
    db.commit()
    return format_response(None, "Message deleted successfully")
