"""
Event routes: public listings, submissions, moderation and registrations.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Literal, Optional
from portal.db.session import get_db
from portal.models.user import User
from portal.models.event import Event
from portal.schemas.common import ApiResponse
from portal.schemas.event import (
    EventCreate, EventUpdate, EventDetail, EventList,
    RegistrationList, AttendeeList, AttendeeResponse
)
from portal.core.utils import format_response, pagination_meta
from portal.services import moderation_service, query_service, registration_service
from portal.api.dependencies import get_current_user, require_admin, PageParams

router = APIRouter(prefix="/events", tags=["events"])


def _event_list(events, params: PageParams, total: int, db: Session) -> EventList:
    return EventList(
        events=registration_service.serialize_events(events, db),
        pagination=pagination_meta(params.page, params.limit, total)
    )


def _event_detail(event: Event, db: Session) -> EventDetail:
    return EventDetail(event=registration_service.serialize_event(event, db))


@router.get("", response_model=ApiResponse[EventList])
async def list_events(
    params: PageParams = Depends(),
    filter: Literal["all", "upcoming", "past"] = Query("all"),
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """List approved events (public)."""
    events, total = query_service.list_public_events(
        params.page, params.limit, db, when=filter, search=search, category=category
    )
    return format_response(_event_list(events, params, total, db), "Events fetched successfully")


@router.get("/my-events", response_model=ApiResponse[EventList])
async def my_events(
    params: PageParams = Depends(),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's own events in every status."""
    events, total = moderation_service.list_by_author(Event, current_user, params.page, params.limit, db)
    return format_response(_event_list(events, params, total, db), "Your events fetched successfully")


@router.get("/admin/pending", response_model=ApiResponse[EventList])
async def pending_events(
    params: PageParams = Depends(),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Review queue, oldest submission first (admin only)."""
    events, total = moderation_service.list_pending(Event, params.page, params.limit, db)
    return format_response(_event_list(events, params, total, db), "Pending events fetched successfully")


@router.get("/user/registrations", response_model=ApiResponse[RegistrationList])
async def my_registrations(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's registrations, most recent first."""
    registrations = registration_service.list_for_user(current_user, db)
    return format_response(
        RegistrationList(registrations=registrations),
        "User registrations fetched successfully"
    )


@router.get("/{event_id}", response_model=ApiResponse[EventDetail])
async def get_event(event_id: int, db: Session = Depends(get_db)):
    """Get a single event by id in any status."""
    event = moderation_service.get_content_or_404(Event, event_id, db)
    return format_response(_event_detail(event, db), "Event fetched successfully")


@router.post("", response_model=ApiResponse[EventDetail], status_code=status.HTTP_201_CREATED)
async def create_event(
    event_data: EventCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Submit an event. Admin events are published immediately."""
    fields = event_data.model_dump()
    fields["end_time"] = fields["end_time"] or None
    event = moderation_service.create_content(Event, fields, current_user, db)
    message = "Event published successfully" if event.is_admin_post else "Event submitted for approval"
    return format_response(_event_detail(event, db), message)


@router.put("/{event_id}", response_model=ApiResponse[EventDetail])
async def update_event(
    event_id: int,
    event_data: EventUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit an event (author until approved, admin always)."""
    event = moderation_service.get_content_or_404(Event, event_id, db)
    submitted = event_data.model_dump(exclude_unset=True)
    changes = {k: v for k, v in submitted.items() if v is not None and k != "end_time"}
    if "end_time" in submitted:
        changes["end_time"] = submitted["end_time"] or None
    event = moderation_service.update_content(event, changes, current_user, db)
    return format_response(_event_detail(event, db), "Event updated successfully")


@router.delete("/{event_id}", response_model=ApiResponse[None])
async def delete_event(
    event_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an event (author until approved, admin always)."""
    event = moderation_service.get_content_or_404(Event, event_id, db)
    moderation_service.delete_content(event, current_user, db)
    return format_response(None, "Event deleted successfully")


@router.post("/{event_id}/approve", response_model=ApiResponse[EventDetail])
async def approve_event(
    event_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Approve an event (admin only)."""
    event = moderation_service.approve(Event, event_id, db)
    return format_response(_event_detail(event, db), "Event approved successfully")


@router.post("/{event_id}/reject", response_model=ApiResponse[EventDetail])
async def reject_event(
    event_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Reject an event (admin only)."""
    event = moderation_service.reject(Event, event_id, db)
    return format_response(_event_detail(event, db), "Event rejected successfully")


@router.post("/{event_id}/register", response_model=ApiResponse[None], status_code=status.HTTP_201_CREATED)
async def register_for_event(
    event_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Register the caller for an event."""
    registration_service.register_for_event(current_user, event_id, db)
    return format_response(None, "Registered for event successfully")


@router.get("/{event_id}/attendees", response_model=ApiResponse[AttendeeList])
async def event_attendees(
    event_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List the users registered for an event (admin only)."""
    attendees = registration_service.list_attendees(event_id, db)
    return format_response(
        AttendeeList(
            attendees=[AttendeeResponse.model_validate(u) for u in attendees],
            total_attendees=len(attendees)
        ),
        "Event attendees fetched successfully"
    )
