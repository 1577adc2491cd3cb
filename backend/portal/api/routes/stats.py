"""
Public statistics routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from portal.db.session import get_db
from portal.schemas.common import ApiResponse
from portal.schemas.stats import PublicStats
from portal.core.utils import format_response
from portal.services import stats_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/public", response_model=ApiResponse[PublicStats])
async def public_stats(db: Session = Depends(get_db)):
    """Landing page counters."""
    return format_response(stats_service.public_stats(db), "Statistics fetched successfully")
