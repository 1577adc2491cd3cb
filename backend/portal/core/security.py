"""
Member credentials and session tokens.

Passwords are stored as bcrypt hashes. Sessions are HS256-signed JWTs that
carry the member's id, email and role; the role claim is informational only,
authorization always re-reads the role from the database.
"""
from datetime import datetime, timedelta
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from portal.core.config import settings


def _password_digest(password: str) -> bytes:
    # bcrypt ignores input past 72 bytes; a SHA256 digest keeps every character significant
    return hashlib.sha256(password.encode("utf-8")).digest()


def get_password_hash(password: str) -> str:
    """Hash a member password for storage."""
    return bcrypt.hashpw(_password_digest(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a login attempt against the stored hash."""
    return bcrypt.checkpw(_password_digest(plain_password), hashed_password.encode("utf-8"))


def create_access_token(claims: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign ``claims`` with an ``exp`` set ``expires_delta`` from now (default from settings)."""
    lifetime = expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    payload = {**claims, "exp": datetime.utcnow() + lifetime}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_session_token(user_id: int, email: str, role: str) -> str:
    """Token handed out on register and login."""
    return create_access_token({"sub": str(user_id), "user_id": user_id, "email": email, "role": role})


def decode_access_token(token: str) -> Optional[dict]:
    """Claims of a valid session token, or None if it is forged, malformed or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
