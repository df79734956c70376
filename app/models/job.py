import enum
from sqlalchemy import Column, Integer, String, Float, DateTime, Enum, func
from app.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Job posting status.

    - OPEN: accepting applications (default)
    - CLOSED: no longer accepting applications
    """
    OPEN = "open"
    CLOSED = "closed"


class Job(Base):
    """
    Job model representing a job posting on the board.
    The salary range is stored as two columns and exposed as a nested object.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)
    salary_min = Column(Float, nullable=False)
    salary_max = Column(Float, nullable=False)
    location = Column(String, nullable=False)

    status = Column(
        Enum(JobStatus, name="jobstatus", values_callable=lambda e: [m.value for m in e]),
        default=JobStatus.OPEN,
        nullable=False,
        index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def salary_range(self) -> dict:
        return {"min": self.salary_min, "max": self.salary_max}

    @property
    def is_open(self) -> bool:
        return self.status != JobStatus.CLOSED

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', status={self.status.value})>"
