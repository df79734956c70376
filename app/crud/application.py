"""
CRUD operations for Application model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.application import Application


def get_by_job_and_applicant(db: Session, job_id: int, applicant_id: int) -> Optional[Application]:
    """
    Find the application a user submitted for a job.

    Args:
        db: Database session
        job_id: Job ID
        applicant_id: Applicant's user ID

    Returns:
        Application if the user already applied, None otherwise
    """
    return db.query(Application).filter(
        Application.job_id == job_id,
        Application.applicant_id == applicant_id
    ).first()


def get_by_applicant(db: Session, applicant_id: int) -> List[Application]:
    """Retrieve all applications submitted by one user."""
    return (
        db.query(Application)
        .filter(Application.applicant_id == applicant_id)
        .order_by(Application.id)
        .all()
    )


def create(db: Session, job_id: int, applicant_id: int, resume_id: int) -> Application:
    """
    Insert a new application.

    Raises:
        sqlalchemy.exc.IntegrityError: If the applicant already applied to
            this job (uq_applications_job_applicant). The caller owns the
            rollback.
    """
    application = Application(
        job_id=job_id,
        applicant_id=applicant_id,
        resume_id=resume_id
    )

    db.add(application)
    db.commit()
    db.refresh(application)
    return application
