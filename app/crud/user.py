"""
CRUD operations for User model.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.models.user import User, UserRole


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create(
    db: Session,
    email: str,
    role: UserRole = UserRole.JOB_SEEKER,
    full_name: Optional[str] = None
) -> User:
    """
    Create a user account.

    Args:
        db: Database session
        email: Unique email address
        role: Account role (default: job-seeker)
        full_name: Optional display name

    Returns:
        Created User instance
    """
    user = User(email=email, role=role, full_name=full_name)

    db.add(user)
    db.commit()
    db.refresh(user)
    return user
