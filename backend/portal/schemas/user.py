"""
Pydantic schemas for User entity and authentication.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from datetime import datetime
from portal.models.user import UserRole
from portal.schemas.common import Pagination


class UserCreate(BaseModel):
    """Schema for member registration."""
    full_name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(..., min_length=6)
    student_id: str = Field(..., min_length=1, max_length=50)
    course: str = Field(..., min_length=1, max_length=150)
    year_of_study: int = Field(..., ge=1, le=4)

    class Config:
        str_strip_whitespace = True


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class PasswordChange(BaseModel):
    """Schema for password change."""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)


class UserProfileUpdate(BaseModel):
    """Profile fields a member may change. Identity fields are not accepted."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=150)
    phone_number: Optional[str] = Field(None, max_length=30)
    bio: Optional[str] = None

    class Config:
        str_strip_whitespace = True


class UserResponse(BaseModel):
    """Schema for a member profile. The password hash is never included."""
    id: int
    email: str
    full_name: str
    student_id: str
    course: str
    year_of_study: int
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    """Schema for admin user listings."""
    id: int
    email: str
    full_name: str
    student_id: str
    course: str
    year_of_study: int
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True


class AuthPayload(BaseModel):
    """Returned from register and login."""
    user: UserResponse
    token: str
    token_type: str = "bearer"


class UserDetail(BaseModel):
    user: UserResponse


class UserList(BaseModel):
    users: List[UserSummary]
    pagination: Pagination
