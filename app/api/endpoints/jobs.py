import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import AppError, InternalError, NotFoundError
from app.crud import job as job_crud
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobDeleteResponse,
    JobDeleteAllResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new job posting.

    The request body is validated before this runs; the first failing check
    is returned as a 400. New jobs always start with status=open.
    """
    try:
        new_job = job_crud.create(db, request)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating job: {e}")
        raise InternalError("Sorry! Job is not created", cause=str(e))

    logger.info(f"Created job {new_job.id}: {new_job.title}")
    return new_job


@router.get("", response_model=List[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    """List every job posting."""
    try:
        return job_crud.get_all(db)
    except Exception as e:
        logger.error(f"Error listing jobs: {e}")
        raise InternalError("There are no Jobs at this time", cause=str(e))


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    try:
        job = job_crud.get_by_id(db, job_id)
    except Exception as e:
        logger.error(f"Error fetching job {job_id}: {e}")
        raise InternalError("There is no job with this id", cause=str(e))

    if not job:
        raise NotFoundError("Job not found", entity="job")

    return job


@router.api_route("/{job_id}", methods=["PUT", "PATCH"], response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Update a job posting.

    Only the fields present in the body are validated and changed.
    salary_range must be sent whole (both min and max).
    """
    try:
        job = job_crud.get_by_id(db, job_id)
        if not job:
            raise NotFoundError("Job not found", entity="job")

        updated_job = job_crud.update(db, job, request)
    except AppError:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating job {job_id}: {e}")
        raise InternalError("An error occurred while updating the job", cause=str(e))

    logger.info(f"Updated job {job_id}: {sorted(request.model_fields_set)}")
    return updated_job


@router.delete("/{job_id}", response_model=JobDeleteResponse)
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """Delete a job by ID."""
    try:
        deleted = job_crud.delete(db, job_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting job {job_id}: {e}")
        raise InternalError("Job does not exist!", cause=str(e))

    if not deleted:
        raise NotFoundError("Job not found", entity="job")

    logger.info(f"Deleted job {job_id}")
    return JobDeleteResponse(message="Job deleted successfully")


@router.delete("", response_model=JobDeleteAllResponse)
def delete_all_jobs(db: Session = Depends(get_db)):
    """
    Delete every job posting.

    Applications that reference the deleted jobs are kept.
    """
    try:
        deleted_count = job_crud.delete_all(db)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting all jobs: {e}")
        raise InternalError("An error occurred while deleting all jobs", cause=str(e))

    logger.info(f"Deleted all jobs ({deleted_count} removed)")
    return JobDeleteAllResponse(
        message="All jobs deleted successfully",
        deleted_count=deleted_count
    )
