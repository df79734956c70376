"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.job import Job, JobStatus
from app.schemas.job import JobCreateRequest, JobUpdateRequest


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id
    """
    db_job = Job(
        title=job_data.title,
        description=job_data.description,
        location=job_data.location,
        salary_min=job_data.salary_range.min,
        salary_max=job_data.salary_range.max,
        status=JobStatus.OPEN
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Args:
        db: Database session
        job_id: Job ID to retrieve

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def get_all(db: Session) -> List[Job]:
    """Retrieve every job, oldest first."""
    return db.query(Job).order_by(Job.id).all()


def update(db: Session, job: Job, job_data: JobUpdateRequest) -> Job:
    """
    Merge the fields present in job_data into an existing job.

    Args:
        db: Database session
        job: Job instance to update
        job_data: Validated partial update; unset fields are ignored

    Returns:
        Updated Job instance
    """
    changes = job_data.model_dump(exclude_unset=True)

    salary_range = changes.pop("salary_range", None)
    if salary_range is not None:
        job.salary_min = salary_range["min"]
        job.salary_max = salary_range["max"]

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: int) -> bool:
    """
    Delete a job by ID.

    Args:
        db: Database session
        job_id: Job ID to delete

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True


def delete_all(db: Session) -> int:
    """
    Delete every job.

    Applications referencing the deleted jobs are left in place.

    Returns:
        Number of jobs removed
    """
    deleted_count = db.query(Job).delete(synchronize_session=False)
    db.commit()

    return deleted_count
