"""
Request dependencies for authentication and role checks.
"""
from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from portal.core.config import settings
from portal.core.exceptions import Forbidden, Unauthenticated
from portal.core.security import decode_access_token
from portal.db.session import get_db
from portal.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the caller from the bearer token or fail with 401."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token provided")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise Unauthenticated("Invalid or expired token")

    user_id = payload.get("user_id")
    user = db.get(User, user_id) if isinstance(user_id, int) else None
    if user is None:
        # Token outlived its account
        raise Unauthenticated("Invalid or expired token")

    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Allow only ADMIN callers; the role is read from the database, not the token."""
    if not current_user.is_admin:
        raise Forbidden("Admin access required")
    return current_user


class PageParams:
    """Common page/limit query parameters."""

    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
    ):
        self.page = page
        self.limit = limit
