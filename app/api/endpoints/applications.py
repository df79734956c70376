"""
API endpoints for job applications.

The caller is resolved through get_current_user_id; see app/core/deps.py.
"""

import logging
from typing import List, Optional, Union
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.core.exceptions import AppError, InternalError
from app.schemas.application import ApplicationResponse, ApplicationListMessage
from app.services import application_service

router = APIRouter(tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("/jobs/{job_id}/apply", status_code=201, response_model=ApplicationResponse)
def apply_to_job(
    job_id: int,
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id)
):
    """
    Submit an application for a job as the current user.

    Raises:
        HTTP 404: Job, user or resume not found
        HTTP 401: No caller identity
        HTTP 403: Not a job-seeker, already applied, or job is closed
    """
    try:
        return application_service.submit_application(db, job_id, user_id)
    except AppError:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error applying to job {job_id} as user {user_id}: {e}")
        raise InternalError("Failed to submit application", cause=str(e))


@router.get("/applications", response_model=Union[List[ApplicationResponse], ApplicationListMessage])
def list_my_applications(
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id)
):
    """
    List the current user's applications.

    Returns a message body instead of an empty list when there are none.
    """
    try:
        applications = application_service.list_applications(db, user_id)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error listing applications for user {user_id}: {e}")
        raise InternalError("Failed to list applications", cause=str(e))

    if not applications:
        return ApplicationListMessage(message="no applications were found")

    return [ApplicationResponse.model_validate(a) for a in applications]
