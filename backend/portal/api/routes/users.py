"""
User management routes.
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import Optional
from portal.db.session import get_db
from portal.schemas.common import ApiResponse
from portal.schemas.user import UserResponse, UserSummary, UserProfileUpdate, UserDetail, UserList
from portal.models.user import User, UserRole
from portal.core.exceptions import Forbidden, NotFound
from portal.core.utils import format_response, pagination_meta
from portal.services.query_service import ALL, paginate, search_clause
from portal.api.dependencies import get_current_user, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def get_user_or_404(user_id: int, db: Session) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user


def search_users(
    page: int,
    limit: int,
    db: Session,
    search: Optional[str] = None,
    role: Optional[str] = None
) -> UserList:
    """Paginated member directory, newest accounts first."""
    query = db.query(User)
    if search:
        query = query.filter(search_clause(search, User.full_name, User.email, User.student_id))
    if role and role != ALL:
        query = query.filter(User.role == UserRole(role))
    query = query.order_by(User.created_at.desc(), User.id.desc())

    users, total = paginate(query, page, limit)
    return UserList(
        users=[UserSummary.model_validate(u) for u in users],
        pagination=pagination_meta(page, limit, total)
    )


def delete_account(user: User, db: Session) -> None:
    """Delete a user together with their content and registrations."""
    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")


@router.get("", response_model=ApiResponse[UserList])
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None),
    role: Optional[str] = Query(None, pattern="^(All|STUDENT|ADMIN)$"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List users (admin only)."""
    return format_response(search_users(page, limit, db, search, role), "Users fetched successfully")


@router.delete("/account/delete", response_model=ApiResponse[None])
async def delete_own_account(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete the caller's own account."""
    delete_account(current_user, db)
    return format_response(None, "Account deleted successfully")


@router.get("/{user_id}", response_model=ApiResponse[UserDetail])
async def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get user by ID."""
    user = get_user_or_404(user_id, db)
    return format_response(UserDetail(user=UserResponse.model_validate(user)), "User fetched successfully")


@router.put("/{user_id}", response_model=ApiResponse[UserDetail])
async def update_profile(
    user_id: int,
    profile: UserProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update name, phone number or bio (the user themself or an admin)."""
    user = get_user_or_404(user_id, db)
    if current_user.id != user.id and not current_user.is_admin:
        raise Forbidden("You can only update your own profile")

    changes = profile.model_dump(exclude_unset=True)
    if changes.get("full_name") is not None:
        user.full_name = changes["full_name"]
    if "phone_number" in changes:
        user.phone_number = changes["phone_number"] or None
    if "bio" in changes:
        user.bio = changes["bio"] or None
    db.commit()
    db.refresh(user)

    return format_response(UserDetail(user=UserResponse.model_validate(user)), "User profile updated successfully")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete any user (admin only)."""
    user = get_user_or_404(user_id, db)
    delete_account(user, db)
    return format_response(None, "User deleted successfully")
