"""
Promote an existing member account to ADMIN.

Registration only ever creates STUDENT accounts, so the first admin has to
be granted from the command line:

    python create_admin.py someone@example.com
"""
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from portal.db.session import SessionLocal
from portal.models import User, UserRole


def promote(email: str) -> bool:
    """Set the user's role to ADMIN. Returns False if no such user exists."""
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if not user:
            print(f"No user registered with email {email}")
            return False

        if user.role == UserRole.ADMIN:
            print(f"{email} is already an admin")
            return True

        user.role = UserRole.ADMIN
        db.commit()
        print(f"{email} promoted to admin")
        return True
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python create_admin.py <email>")
        sys.exit(2)
    sys.exit(0 if promote(sys.argv[1]) else 1)
