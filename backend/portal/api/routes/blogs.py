"""
Blog post routes: public reading, member submissions and moderation.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from portal.db.session import get_db
from portal.models.user import User
from portal.models.blog import BlogPost
from portal.schemas.common import ApiResponse
from portal.schemas.blog import BlogCreate, BlogUpdate, BlogResponse, BlogDetail, BlogList, PublicBlogList
from portal.core.utils import format_response, pagination_meta
from portal.services import moderation_service, query_service
from portal.api.dependencies import get_current_user, require_admin, PageParams

router = APIRouter(prefix="/blogs", tags=["blogs"])


def _blog_list(blogs, params: PageParams, total: int) -> BlogList:
    return BlogList(
        blogs=[BlogResponse.model_validate(b) for b in blogs],
        pagination=pagination_meta(params.page, params.limit, total)
    )


@router.get("", response_model=ApiResponse[PublicBlogList])
async def list_blogs(
    params: PageParams = Depends(),
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """List approved blog posts (public)."""
    blogs, total = query_service.list_public_blogs(
        params.page, params.limit, db, search=search, category=category
    )
    data = PublicBlogList(
        **_blog_list(blogs, params, total).model_dump(),
        categories=query_service.blog_categories(db)
    )
    return format_response(data, "Blogs fetched successfully")


@router.get("/my-blogs", response_model=ApiResponse[BlogList])
async def my_blogs(
    params: PageParams = Depends(),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's own posts in every status."""
    blogs, total = moderation_service.list_by_author(BlogPost, current_user, params.page, params.limit, db)
    return format_response(_blog_list(blogs, params, total), "Your blogs fetched successfully")


@router.get("/admin/pending", response_model=ApiResponse[BlogList])
async def pending_blogs(
    params: PageParams = Depends(),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Review queue, oldest submission first (admin only)."""
    blogs, total = moderation_service.list_pending(BlogPost, params.page, params.limit, db)
    return format_response(_blog_list(blogs, params, total), "Pending blogs fetched successfully")


@router.get("/{blog_id}", response_model=ApiResponse[BlogDetail])
async def get_blog(blog_id: int, db: Session = Depends(get_db)):
    """Get a single post by id in any status, so authors can preview pending posts."""
    blog = moderation_service.get_content_or_404(BlogPost, blog_id, db)
    return format_response(BlogDetail(blog=BlogResponse.model_validate(blog)), "Blog fetched successfully")


@router.post("", response_model=ApiResponse[BlogDetail], status_code=status.HTTP_201_CREATED)
async def create_blog(
    blog_data: BlogCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Submit a post. Admin posts are published immediately."""
    blog = moderation_service.create_content(BlogPost, blog_data.model_dump(), current_user, db)
    message = "Blog published successfully" if blog.is_admin_post else "Blog submitted for approval"
    return format_response(BlogDetail(blog=BlogResponse.model_validate(blog)), message)


@router.put("/{blog_id}", response_model=ApiResponse[BlogDetail])
async def update_blog(
    blog_id: int,
    blog_data: BlogUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit a post (author until approved, admin always)."""
    blog = moderation_service.get_content_or_404(BlogPost, blog_id, db)
    changes = {k: v for k, v in blog_data.model_dump(exclude_unset=True).items() if v is not None}
    blog = moderation_service.update_content(blog, changes, current_user, db)
    return format_response(BlogDetail(blog=BlogResponse.model_validate(blog)), "Blog updated successfully")


@router.delete("/{blog_id}", response_model=ApiResponse[None])
async def delete_blog(
    blog_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a post (author until approved, admin always)."""
    blog = moderation_service.get_content_or_404(BlogPost, blog_id, db)
    moderation_service.delete_content(blog, current_user, db)
    return format_response(None, "Blog deleted successfully")


@router.post("/{blog_id}/approve", response_model=ApiResponse[BlogDetail])
async def approve_blog(
    blog_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Approve a post (admin only)."""
    blog = moderation_service.approve(BlogPost, blog_id, db)
    return format_response(BlogDetail(blog=BlogResponse.model_validate(blog)), "Blog approved successfully")


@router.post("/{blog_id}/reject", response_model=ApiResponse[BlogDetail])
async def reject_blog(
    blog_id: int,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Reject a post (admin only)."""
    blog = moderation_service.reject(BlogPost, blog_id, db)
    return format_response(BlogDetail(blog=BlogResponse.model_validate(blog)), "Blog rejected successfully")
