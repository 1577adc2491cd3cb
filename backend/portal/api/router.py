"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from portal.api.routes import (
    auth, users, blogs, events, gallery, contact, admin, stats
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(blogs.router)
api_router.include_router(events.router)
api_router.include_router(gallery.router)
api_router.include_router(contact.router)
api_router.include_router(admin.router)
api_router.include_router(stats.router)
