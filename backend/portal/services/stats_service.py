"""
Statistics aggregation for the landing page and the admin dashboard.
"""
from datetime import date
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from portal.models.blog import BlogPost
from portal.models.contact import ContactMessage
from portal.models.content import ContentStatus
from portal.models.event import Event, EventRegistration
from portal.models.gallery import GalleryPhoto
from portal.models.user import User
from portal.schemas.contact import ContactSummary
from portal.schemas.stats import DashboardCounts, DashboardStats, PublicStats, UpcomingEvent
from portal.services.registration_service import attendee_counts


def _count(db: Session, column, *criteria) -> int:
    return db.query(func.count(column)).filter(*criteria).scalar() or 0


def public_stats(db: Session) -> PublicStats:
    """Member count plus approved blog and event counts."""
    return PublicStats(
        total_users=_count(db, User.id),
        total_blogs=_count(db, BlogPost.id, BlogPost.status == ContentStatus.APPROVED),
        total_events=_count(db, Event.id, Event.status == ContentStatus.APPROVED)
    )


def dashboard_stats(db: Session, today: Optional[date] = None) -> DashboardStats:
    """Totals, the five latest contact messages and the next five events."""
    today = today or date.today()

    counts = DashboardCounts(
        total_users=_count(db, User.id),
        total_blogs=_count(db, BlogPost.id, BlogPost.status == ContentStatus.APPROVED),
        total_events=_count(db, Event.id, Event.status == ContentStatus.APPROVED),
        total_photos=_count(db, GalleryPhoto.id),
        total_registrations=_count(db, EventRegistration.id),
        pending_blogs=_count(db, BlogPost.id, BlogPost.status == ContentStatus.PENDING),
        pending_events=_count(db, Event.id, Event.status == ContentStatus.PENDING)
    )

    recent_messages = db.query(ContactMessage).order_by(
        ContactMessage.sent_at.desc(), ContactMessage.id.desc()
    ).limit(5).all()

    upcoming = db.query(Event).filter(
        Event.date >= today
    ).order_by(Event.date.asc(), Event.time.asc(), Event.id.asc()).limit(5).all()
    counts_by_event = attendee_counts((event.id for event in upcoming), db)

    return DashboardStats(
        stats=counts,
        recent_messages=[ContactSummary.model_validate(m) for m in recent_messages],
        upcoming_events=[
            UpcomingEvent(
                id=event.id,
                title=event.title,
                date=event.date,
                attendee_count=counts_by_event.get(event.id, 0)
            )
            for event in upcoming
        ]
    )
