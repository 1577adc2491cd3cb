"""
User model for authentication and member profiles.
"""
from sqlalchemy import Column, String, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from portal.db.base import BaseModel
import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    STUDENT = "STUDENT"
    ADMIN = "ADMIN"


class User(BaseModel):
    """Member account. Email and student id are immutable after creation."""
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(150), nullable=False)
    student_id = Column(String(50), unique=True, nullable=False, index=True)
    course = Column(String(150), nullable=False)
    year_of_study = Column(Integer, nullable=False)
    phone_number = Column(String(30), nullable=True)
    bio = Column(Text, nullable=True)
    role = Column(SQLEnum(UserRole), default=UserRole.STUDENT, nullable=False)

    # Relationships
    blog_posts = relationship("BlogPost", back_populates="author", cascade="all, delete-orphan")
    events = relationship("Event", back_populates="author", cascade="all, delete-orphan")
    registrations = relationship("EventRegistration", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
