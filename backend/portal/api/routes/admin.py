"""
Admin dashboard routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from portal.db.session import get_db
from portal.models.user import User
from portal.schemas.common import ApiResponse
from portal.schemas.stats import DashboardStats
from portal.schemas.user import UserList
from portal.core.utils import format_response
from portal.services import stats_service
from portal.api.dependencies import require_admin
from portal.api.routes.users import search_users

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=ApiResponse[DashboardStats])
async def dashboard_stats(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Dashboard totals, recent messages and upcoming events."""
    return format_response(stats_service.dashboard_stats(db), "Dashboard statistics fetched successfully")


@router.get("/users", response_model=ApiResponse[UserList])
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None),
    role: Optional[str] = Query(None, pattern="^(All|STUDENT|ADMIN)$"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Searchable member directory."""
    return format_response(search_users(page, limit, db, search, role), "Users fetched successfully")
