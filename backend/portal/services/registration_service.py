"""
Event registration ledger.

Attendee counts are always derived from registration rows; nothing stores
a running total.
"""
import logging
from typing import Dict, Iterable, List
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from portal.core.exceptions import Conflict, NotFound
from portal.models.event import Event, EventRegistration
from portal.models.user import User
from portal.schemas.event import EventResponse, RegistrationResponse

logger = logging.getLogger(__name__)


def get_event_or_404(event_id: int, db: Session) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFound("Event not found")
    return event


def attendee_count(event_id: int, db: Session) -> int:
    """Number of registrations for one event."""
    return db.query(func.count(EventRegistration.id)).filter(
        EventRegistration.event_id == event_id
    ).scalar() or 0


def attendee_counts(event_ids: Iterable[int], db: Session) -> Dict[int, int]:
    """Registration counts for several events in one grouped query."""
    event_ids = list(event_ids)
    if not event_ids:
        return {}
    rows = db.query(EventRegistration.event_id, func.count(EventRegistration.id)).filter(
        EventRegistration.event_id.in_(event_ids)
    ).group_by(EventRegistration.event_id).all()
    return {event_id: count for event_id, count in rows}


def serialize_event(event: Event, db: Session) -> EventResponse:
    """Event response with its attendee count."""
    return EventResponse.model_validate(event).model_copy(
        update={"attendee_count": attendee_count(event.id, db)}
    )


def serialize_events(events: List[Event], db: Session) -> List[EventResponse]:
    """Event responses for a page of events, counted in one query."""
    counts = attendee_counts((event.id for event in events), db)
    return [
        EventResponse.model_validate(event).model_copy(
            update={"attendee_count": counts.get(event.id, 0)}
        )
        for event in events
    ]


def register_for_event(user: User, event_id: int, db: Session) -> EventRegistration:
    """
    Record ``user``'s registration for an event.

    The unique (user_id, event_id) constraint decides concurrent attempts:
    whichever insert loses gets Conflict.
    """
    event = get_event_or_404(event_id, db)

    existing = db.query(EventRegistration).filter(
        EventRegistration.user_id == user.id,
        EventRegistration.event_id == event.id
    ).first()
    if existing:
        raise Conflict("Already registered for this event")

    registration = EventRegistration(user_id=user.id, event_id=event.id)
    db.add(registration)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Already registered for this event")
    db.refresh(registration)

    logger.info(f"User {user.id} registered for event {event.id}")
    return registration


def list_for_user(user: User, db: Session) -> List[RegistrationResponse]:
    """A user's registrations with event details, most recent first."""
    registrations = db.query(EventRegistration).options(
        joinedload(EventRegistration.event).joinedload(Event.author)
    ).filter(
        EventRegistration.user_id == user.id
    ).order_by(EventRegistration.registered_at.desc(), EventRegistration.id.desc()).all()

    events = serialize_events([r.event for r in registrations], db)
    return [
        RegistrationResponse(id=r.id, registered_at=r.registered_at, event=event)
        for r, event in zip(registrations, events)
    ]


def list_attendees(event_id: int, db: Session) -> List[User]:
    """Users registered for an event, in registration order."""
    get_event_or_404(event_id, db)

    registrations = db.query(EventRegistration).options(
        joinedload(EventRegistration.user)
    ).filter(
        EventRegistration.event_id == event_id
    ).order_by(EventRegistration.registered_at.asc(), EventRegistration.id.asc()).all()
    return [r.user for r in registrations]
