"""
Application submission workflow.

Decides whether a user may apply to a job and records the application.
Checks run in a fixed order (existence, then authorization, then business
state) so a rejected caller always gets the most specific reason first.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ForbiddenError, NotFoundError, UnauthenticatedError
from app.crud import application as application_crud
from app.crud import job as job_crud
from app.crud import resume as resume_crud
from app.crud import user as user_crud
from app.models.application import Application
from app.models.user import User

logger = logging.getLogger(__name__)


def get_job_seeker(db: Session, user_id: Optional[int]) -> User:
    """
    Resolve the caller to an existing job-seeker.

    Raises:
        UnauthenticatedError: No identity was resolved for the request
        NotFoundError: The user does not exist
        ForbiddenError: The user is not a job-seeker
    """
    if user_id is None:
        raise UnauthenticatedError("token is invalid")

    user = user_crud.get_by_id(db, user_id)
    if not user:
        raise NotFoundError("user does not exist", entity="user")

    if not user.is_job_seeker:
        raise ForbiddenError("user is not a job-seeker")

    return user


def submit_application(db: Session, job_id: int, applicant_id: Optional[int]) -> Application:
    """
    Apply to a job on behalf of the caller.

    Order of checks:
    1. Job exists (404)
    2. Caller identity resolved (401)
    3. User exists (404) and is a job-seeker (403)
    4. No previous application for this job (403)
    5. User has a resume (404)
    6. Job is not closed (403)

    Args:
        db: Database session
        job_id: Job to apply to
        applicant_id: Resolved caller id, None if unauthenticated

    Returns:
        The created Application

    Raises:
        NotFoundError, UnauthenticatedError, ForbiddenError
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("job does not exist", entity="job")

    user = get_job_seeker(db, applicant_id)

    if application_crud.get_by_job_and_applicant(db, job.id, user.id):
        logger.info(f"User {user.id} already applied to job {job.id}")
        raise ForbiddenError("application already exists")

    resume = resume_crud.get_by_user(db, user.id)
    if not resume:
        raise NotFoundError("user must have a resume to apply", entity="resume")

    if not job.is_open:
        raise ForbiddenError("job is not open")

    try:
        application = application_crud.create(
            db,
            job_id=job.id,
            applicant_id=user.id,
            resume_id=resume.id
        )
    except IntegrityError:
        # A concurrent submission for the same pair got in first
        db.rollback()
        logger.warning(f"Duplicate application rejected by constraint: job {job.id}, user {user.id}")
        raise ForbiddenError("application already exists")

    logger.info(f"Created application {application.id}: job {job.id}, user {user.id}, resume {resume.id}")
    return application


def list_applications(db: Session, applicant_id: Optional[int]) -> List[Application]:
    """
    List every application the caller has submitted.

    An empty list is a normal result, not an error.

    Raises:
        UnauthenticatedError, NotFoundError, ForbiddenError
    """
    user = get_job_seeker(db, applicant_id)
    return application_crud.get_by_applicant(db, user.id)
