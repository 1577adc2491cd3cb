"""
Moderation workflow shared by blog posts and events.

Content is PENDING when a student submits it and APPROVED straight away
when an admin does. Only admins move content between states. Authors may
edit or delete their own content until it is approved; admins may always
edit or delete.
"""
import logging
from typing import Any, Dict, List, Tuple, Type
from sqlalchemy.orm import Session, joinedload
from portal.core.exceptions import Forbidden, NotFound
from portal.models.content import ContentStatus, ModeratedContent
from portal.models.user import User
from portal.services.query_service import paginate

logger = logging.getLogger(__name__)


def initial_state(user: User) -> Tuple[ContentStatus, bool]:
    """Return (status, is_admin_post) for content created by ``user``."""
    if user.is_admin:
        return ContentStatus.APPROVED, True
    return ContentStatus.PENDING, False


def can_modify(content: ModeratedContent, user: User) -> bool:
    """Whether ``user`` may edit or delete ``content``."""
    if user.is_admin:
        return True
    return content.author_id == user.id and content.status != ContentStatus.APPROVED


def ensure_can_modify(content: ModeratedContent, user: User, action: str) -> None:
    """Raise Forbidden unless ``user`` may perform ``action`` ("edit"/"delete")."""
    if can_modify(content, user):
        return
    if content.author_id != user.id:
        raise Forbidden(f"You do not have permission to {action} this {content.content_label.lower()}")
    raise Forbidden(f"Cannot {action} approved content")


def get_content_or_404(model: Type[ModeratedContent], content_id: int, db: Session):
    """Fetch a content row with its author or raise NotFound."""
    content = db.query(model).options(joinedload(model.author)).filter(
        model.id == content_id
    ).first()
    if not content:
        raise NotFound(f"{model.content_label} not found")
    return content


def create_content(model: Type[ModeratedContent], fields: Dict[str, Any], user: User, db: Session):
    """Create content owned by ``user`` with the status implied by their role."""
    status, is_admin_post = initial_state(user)
    content = model(
        **fields,
        author_id=user.id,
        status=status,
        is_admin_post=is_admin_post
    )
    db.add(content)
    db.commit()
    db.refresh(content)

    logger.info(f"{model.content_label} {content.id} created by user {user.id} as {status.value}")
    return content


def update_content(content: ModeratedContent, changes: Dict[str, Any], user: User, db: Session):
    """Apply ``changes`` after the ownership check. Status is left untouched."""
    ensure_can_modify(content, user, "edit")

    for field, value in changes.items():
        setattr(content, field, value)
    db.commit()
    db.refresh(content)
    return content


def delete_content(content: ModeratedContent, user: User, db: Session) -> None:
    """Delete after the ownership check."""
    ensure_can_modify(content, user, "delete")

    content_id = content.id
    db.delete(content)
    db.commit()
    logger.info(f"{content.content_label} {content_id} deleted by user {user.id}")


def set_status(model: Type[ModeratedContent], content_id: int, status: ContentStatus, db: Session):
    """
    Move content to ``status`` with a single UPDATE statement.

    Any state may move to APPROVED or REJECTED.
    """
    updated = db.query(model).filter(model.id == content_id).update(
        {model.status: status}, synchronize_session=False
    )
    if not updated:
        db.rollback()
        raise NotFound(f"{model.content_label} not found")
    db.commit()

    logger.info(f"{model.content_label} {content_id} set to {status.value}")
    return get_content_or_404(model, content_id, db)


def approve(model: Type[ModeratedContent], content_id: int, db: Session):
    return set_status(model, content_id, ContentStatus.APPROVED, db)


def reject(model: Type[ModeratedContent], content_id: int, db: Session):
    return set_status(model, content_id, ContentStatus.REJECTED, db)


def list_pending(model: Type[ModeratedContent], page: int, limit: int, db: Session) -> Tuple[List[Any], int]:
    """Pending review queue, oldest submission first."""
    query = db.query(model).options(joinedload(model.author)).filter(
        model.status == ContentStatus.PENDING
    ).order_by(model.created_at.asc(), model.id.asc())
    return paginate(query, page, limit)


def list_by_author(model: Type[ModeratedContent], user: User, page: int, limit: int, db: Session) -> Tuple[List[Any], int]:
    """All of a user's own content in every status, newest first."""
    query = db.query(model).options(joinedload(model.author)).filter(
        model.author_id == user.id
    ).order_by(model.created_at.desc(), model.id.desc())
    return paginate(query, page, limit)
