"""
CRUD operations for Resume model.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.models.resume import Resume


def get_by_user(db: Session, user_id: int) -> Optional[Resume]:
    """Return the user's first resume, or None if they have none."""
    return (
        db.query(Resume)
        .filter(Resume.user_id == user_id)
        .order_by(Resume.id)
        .first()
    )


def create(db: Session, user_id: int, title: Optional[str] = None) -> Resume:
    resume = Resume(user_id=user_id, title=title)

    db.add(resume)
    db.commit()
    db.refresh(resume)
    return resume
