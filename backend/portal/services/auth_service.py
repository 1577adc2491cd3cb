"""
Credential and session issuing: registration, login and password changes.
"""
import logging
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from portal.core.exceptions import Conflict, NotFound, Unauthenticated
from portal.core.security import create_session_token, get_password_hash, verify_password
from portal.models.user import User, UserRole
from portal.schemas.user import AuthPayload, UserCreate, UserResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def issue_session(user: User) -> AuthPayload:
    """Build the auth payload (profile + signed token) for a user."""
    role = user.role.value if isinstance(user.role, UserRole) else user.role
    token = create_session_token(user.id, user.email, role)
    return AuthPayload(user=UserResponse.model_validate(user), token=token)


def register_user(user_data: UserCreate, db: Session) -> AuthPayload:
    """Create a STUDENT account and issue a session for it."""
    existing_user = db.query(User).filter(
        or_(User.email == user_data.email, User.student_id == user_data.student_id)
    ).first()
    if existing_user:
        raise Conflict("Email or Student ID already registered")

    new_user = User(
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        student_id=user_data.student_id,
        course=user_data.course,
        year_of_study=user_data.year_of_study,
        role=UserRole.STUDENT
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration with the same identity
        db.rollback()
        raise Conflict("Email or Student ID already registered")
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.id}")
    return issue_session(new_user)


def authenticate_user(email: str, password: str, db: Session) -> AuthPayload:
    """
    Verify credentials and issue a session.

    Unknown email and wrong password fail with the same error so the
    response does not reveal which accounts exist.
    """
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Failed login attempt")
        raise Unauthenticated(INVALID_CREDENTIALS)

    return issue_session(user)


def change_password(user_id: int, current_password: str, new_password: str, db: Session) -> None:
    """Re-hash and store a new password after checking the current one."""
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")

    if not verify_password(current_password, user.hashed_password):
        raise Unauthenticated("Current password is incorrect")

    user.hashed_password = get_password_hash(new_password)
    db.commit()
    logger.info(f"Password changed for user {user_id}")
