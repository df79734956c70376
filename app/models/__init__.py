"""
Database models package.
"""

from app.models.job import Job, JobStatus
from app.models.user import User, UserRole
from app.models.resume import Resume
from app.models.application import Application

__all__ = ["Job", "JobStatus", "User", "UserRole", "Resume", "Application"]
