"""
Pydantic schemas for Application API responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ApplicationResponse(BaseModel):
    """An application linking an applicant, a job and a resume."""
    id: int
    job_id: int
    applicant_id: int
    resume_id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ApplicationListMessage(BaseModel):
    """Returned instead of an empty list when the user has no applications."""
    message: str
