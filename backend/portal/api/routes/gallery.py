"""
Gallery routes: public browsing, admin-managed photos.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload
from typing import Optional
from portal.db.session import get_db
from portal.models.user import User
from portal.models.gallery import GalleryPhoto
from portal.schemas.common import ApiResponse
from portal.schemas.gallery import PhotoCreate, PhotoUpdate, PhotoResponse, PhotoDetail, PhotoList
from portal.core.exceptions import NotFound
from portal.core.utils import format_response, pagination_meta
from portal.services import query_service
from portal.services.registration_service import get_event_or_404
from portal.api.dependencies import require_admin, PageParams

router = APIRouter(prefix="/gallery", tags=["gallery"])


def get_photo_or_404(photo_id: int, db: Session) -> GalleryPhoto:
    photo = db.query(GalleryPhoto).options(joinedload(GalleryPhoto.event)).filter(
        GalleryPhoto.id == photo_id
    ).first()
    if not photo:
        raise NotFound("Photo not found")
    return photo


@router.get("", response_model=ApiResponse[PhotoList])
async def list_photos(
    params: PageParams = Depends(),
    event_id: Optional[str] = Query(None),
    year: Optional[int] = Query(None, ge=1900, le=9999),
    db: Session = Depends(get_db)
):
    """List gallery photos with filter options (public)."""
    photos, total = query_service.list_photos(
        params.page, params.limit, db, event_id=event_id, year=year
    )
    data = PhotoList(
        photos=[PhotoResponse.model_validate(p) for p in photos],
        filters=query_service.gallery_filter_options(db),
        pagination=pagination_meta(params.page, params.limit, total)
    )
    return format_response(data, "Photos fetched successfully")


@router.get("/{photo_id}", response_model=ApiResponse[PhotoDetail])
async def get_photo(photo_id: int, db: Session = Depends(get_db)):
    """Get a single photo (public)."""
    photo = get_photo_or_404(photo_id, db)
    return format_response(PhotoDetail(photo=PhotoResponse.model_validate(photo)), "Photo fetched successfully")


@router.post("", response_model=ApiResponse[PhotoDetail], status_code=status.HTTP_201_CREATED)
async def upload_photo(
    photo_data: PhotoCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Add a photo (admin only)."""
    if photo_data.event_id is not None:
        get_event_or_404(photo_data.event_id, db)

    photo = GalleryPhoto(
        image_url=photo_data.image_url,
        caption=photo_data.caption or None,
        event_id=photo_data.event_id
    )
    db.add(photo)
    db.commit()

    photo = get_photo_or_404(photo.id, db)
    return format_response(PhotoDetail(photo=PhotoResponse.model_validate(photo)), "Photo uploaded successfully")


@router.put("/{photo_id}", response_model=ApiResponse[PhotoDetail])
async def update_photo(
    photo_id: int,
    photo_data: PhotoUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Change a photo's caption or linked event (admin only)."""
    photo = get_photo_or_404(photo_id, db)
    changes = photo_data.model_dump(exclude_unset=True)

    if "caption" in changes:
        photo.caption = changes["caption"] or None
    if "event_id" in changes:
        if changes["event_id"] is not None:
            get_event_or_404(changes["event_id"], db)
        photo.event_id = changes["event_id"]
    db.commit()

    photo = get_photo_or_404(photo_id, db)
    return format_response(PhotoDetail(photo=PhotoResponse.model_validate(photo)), "Photo updated successfully")


@router.delete("/{photo_id}", response_model=ApiResponse[None])
async def delete_photo(
    photo_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a photo (admin only)."""
    photo = get_photo_or_404(photo_id, db)
    db.delete(photo)
    db.commit()
    return format_response(None, "Photo deleted successfully")
