"""
Authentication routes for registration, login and password changes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from portal.db.session import get_db
from portal.schemas.common import ApiResponse
from portal.schemas.user import UserCreate, UserLogin, PasswordChange, AuthPayload, UserDetail, UserResponse
from portal.models.user import User
from portal.core.utils import format_response
from portal.services import auth_service
from portal.api.dependencies import get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[AuthPayload], status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new member account."""
    payload = auth_service.register_user(user_data, db)
    return format_response(payload, "User registered successfully")


@router.post("/login", response_model=ApiResponse[AuthPayload])
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get a session token."""
    payload = auth_service.authenticate_user(credentials.email, credentials.password, db)
    return format_response(payload, "Login successful")


@router.get("/me", response_model=ApiResponse[UserDetail])
async def get_me(current_user: User = Depends(get_current_user)):
    """Get the caller's profile."""
    return format_response(
        UserDetail(user=UserResponse.model_validate(current_user)),
        "User fetched successfully"
    )


@router.post("/change-password", response_model=ApiResponse[None])
async def change_password(
    data: PasswordChange,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Change the caller's password. Outstanding tokens stay valid."""
    auth_service.change_password(current_user.id, data.current_password, data.new_password, db)
    return format_response(None, "Password changed successfully")
