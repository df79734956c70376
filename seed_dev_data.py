"""
Script to create a job-seeker account with a resume for local development.

Until real authentication exists, the application endpoints act as
DEFAULT_USER_ID (or the X-User-Id header). This script creates that user and
prints the id to put in .env.

Safe to run more than once: existing records are reused.

Run this script from the project root:
    python seed_dev_data.py [email]
"""

import sys
from typing import Tuple

from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.crud import resume as resume_crud
from app.crud import user as user_crud
from app.models.resume import Resume
from app.models.user import User, UserRole

DEFAULT_EMAIL = "seeker@jobboard.local"


def seed(db: Session, email: str = DEFAULT_EMAIL) -> Tuple[User, Resume]:
    """
    Ensure a job-seeker with at least one resume exists.

    Returns:
        Tuple of (user, resume)
    """
    user = user_crud.get_by_email(db, email)
    if not user:
        user = user_crud.create(db, email=email, role=UserRole.JOB_SEEKER, full_name="Dev Seeker")

    resume = resume_crud.get_by_user(db, user.id)
    if not resume:
        resume = resume_crud.create(db, user_id=user.id, title="Default resume")

    return user, resume


def main():
    email = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_EMAIL
    db = SessionLocal()

    try:
        user, resume = seed(db, email)

        print(f"\n{'='*60}")
        print(f"Job-seeker: {user.email} (ID: {user.id})")
        print(f"Resume ID: {resume.id}")
        print(f"{'='*60}")
        print(f"\nAdd this to your .env to apply as this user:")
        print(f"  DEFAULT_USER_ID={user.id}\n")

    except Exception as e:
        db.rollback()
        print(f"\n✗ Error while seeding: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
