"""
Application database model.

Links one applicant, one job and one resume. References are plain id columns
(no foreign keys): jobs can be deleted without touching their applications.
"""

from sqlalchemy import Column, Integer, DateTime, UniqueConstraint, func
from app.core.database import Base


class Application(Base):
    """
    A job-seeker's application to a job posting.

    The (job_id, applicant_id) unique constraint is the source of truth for
    "one application per user per job"; the service's read-before-write check
    only rejects the common case early.
    """
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_applicant"),
    )

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, nullable=False, index=True)
    applicant_id = Column(Integer, nullable=False, index=True)
    resume_id = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, applicant_id={self.applicant_id})>"
