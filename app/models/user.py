"""
User model.

Only the role is consulted by the application workflow; profile fields are
kept for the records themselves.
"""

import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from app.core.database import Base


class UserRole(str, enum.Enum):
    JOB_SEEKER = "job-seeker"
    EMPLOYER = "employer"
    ADMIN = "admin"


class User(Base):
    """A job-board account. Only job-seekers may apply to jobs."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    full_name = Column(String, nullable=True)

    role = Column(
        Enum(UserRole, name="userrole", values_callable=lambda e: [m.value for m in e]),
        default=UserRole.JOB_SEEKER,
        nullable=False
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def is_job_seeker(self) -> bool:
        return self.role == UserRole.JOB_SEEKER

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"
