"""
Public query helpers: pagination, search and filtered listings.

Public listings only ever include APPROVED content, whatever other filters
are applied.
"""
from datetime import MAXYEAR, date, datetime
from typing import Any, List, Optional, Tuple
from sqlalchemy import extract, or_
from sqlalchemy.orm import Query, Session, joinedload
from portal.core.exceptions import ValidationError
from portal.models.blog import BlogPost
from portal.models.content import ContentStatus
from portal.models.event import Event
from portal.models.gallery import GalleryPhoto

ALL = "All"


def paginate(query: Query, page: int, limit: int) -> Tuple[List[Any], int]:
    """Return (items on ``page``, total matching rows). Pages are 1-based."""
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, total


def search_clause(search: str, *columns):
    """Case-insensitive substring match over any of ``columns``."""
    return or_(*[column.icontains(search, autoescape=True) for column in columns])


def list_public_blogs(
    page: int,
    limit: int,
    db: Session,
    search: Optional[str] = None,
    category: Optional[str] = None
) -> Tuple[List[BlogPost], int]:
    """Approved blog posts, newest first."""
    query = db.query(BlogPost).options(joinedload(BlogPost.author)).filter(
        BlogPost.status == ContentStatus.APPROVED
    )
    if search:
        query = query.filter(search_clause(search, BlogPost.title, BlogPost.excerpt, BlogPost.content))
    if category and category != ALL:
        query = query.filter(BlogPost.category == category)

    query = query.order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
    return paginate(query, page, limit)


def blog_categories(db: Session) -> List[str]:
    """Category filter options: "All" followed by categories of approved posts."""
    rows = db.query(BlogPost.category).filter(
        BlogPost.status == ContentStatus.APPROVED
    ).distinct().order_by(BlogPost.category).all()
    return [ALL] + [category for (category,) in rows]


def list_public_events(
    page: int,
    limit: int,
    db: Session,
    when: str = "all",
    search: Optional[str] = None,
    category: Optional[str] = None,
    today: Optional[date] = None
) -> Tuple[List[Event], int]:
    """
    Approved events.

    ``when`` is "upcoming" (today or later, soonest first), "past" (before
    today, latest first) or "all" (latest first).
    """
    today = today or date.today()
    query = db.query(Event).options(joinedload(Event.author)).filter(
        Event.status == ContentStatus.APPROVED
    )
    if search:
        query = query.filter(search_clause(search, Event.title, Event.description))
    if category and category != ALL:
        query = query.filter(Event.category == category)

    if when == "upcoming":
        query = query.filter(Event.date >= today).order_by(Event.date.asc(), Event.time.asc(), Event.id.asc())
    elif when == "past":
        query = query.filter(Event.date < today).order_by(Event.date.desc(), Event.time.desc(), Event.id.desc())
    else:
        query = query.order_by(Event.date.desc(), Event.time.desc(), Event.id.desc())
    return paginate(query, page, limit)


def list_photos(
    page: int,
    limit: int,
    db: Session,
    event_id: Optional[str] = None,
    year: Optional[int] = None
) -> Tuple[List[GalleryPhoto], int]:
    """Gallery photos, most recently uploaded first."""
    query = db.query(GalleryPhoto).options(joinedload(GalleryPhoto.event))
    if event_id and event_id != ALL:
        if not event_id.isdigit():
            raise ValidationError('event_id must be an event id or "All"')
        query = query.filter(GalleryPhoto.event_id == int(event_id))
    if year:
        query = query.filter(GalleryPhoto.uploaded_at >= datetime(year, 1, 1))
        if year < MAXYEAR:
            query = query.filter(GalleryPhoto.uploaded_at < datetime(year + 1, 1, 1))

    query = query.order_by(GalleryPhoto.uploaded_at.desc(), GalleryPhoto.id.desc())
    return paginate(query, page, limit)


def gallery_filter_options(db: Session) -> dict:
    """Event and year choices for the gallery filter bar."""
    events = db.query(Event.id, Event.title).filter(
        Event.status == ContentStatus.APPROVED
    ).order_by(Event.date.desc()).all()
    years = db.query(extract("year", GalleryPhoto.uploaded_at)).distinct().all()

    return {
        "events": [{"id": ALL, "title": "All Events"}] + [
            {"id": event_id, "title": title} for event_id, title in events
        ],
        "years": sorted({int(year) for (year,) in years if year is not None}, reverse=True)
    }
