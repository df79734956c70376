"""
Pydantic schemas for Job API requests/responses.

Validation messages are user-facing: the request validation handler in
main.py returns the first failing check's message with a 400.
"""

import math
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from app.models.job import JobStatus


def require_text(value: Any, label: str) -> str:
    """Reject anything that is not a non-empty string."""
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    if not value.strip():
        raise ValueError(f"{label} cannot be empty")
    return value


SALARY_BOUNDS_REQUIRED = "Salary range must include both min and max values"

# Messages for missing nested fields, keyed by dotted location
MISSING_FIELD_MESSAGES = {
    "salary_range.min": SALARY_BOUNDS_REQUIRED,
    "salary_range.max": SALARY_BOUNDS_REQUIRED,
}


def require_salary(value: Any) -> float:
    """Reject booleans, non-numbers, NaN/infinity and negative amounts."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Salary range values must be numbers")
    if not math.isfinite(value):
        raise ValueError("Salary range values must be finite numbers")
    if value < 0:
        raise ValueError("Salary range values cannot be negative")
    return value


class SalaryRange(BaseModel):
    """Salary range with non-negative bounds where min <= max"""
    min: float = Field(..., description="Minimum salary (>= 0)")
    max: float = Field(..., description="Maximum salary (>= min)")

    @field_validator("min", "max", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> float:
        return require_salary(v)

    @model_validator(mode="after")
    def validate_bounds(self) -> "SalaryRange":
        if self.min > self.max:
            raise ValueError("Minimum salary must be less than maximum salary")
        return self


class JobCreateRequest(BaseModel):
    """Schema for creating a new job. Status always starts as open."""
    title: str
    description: str
    location: str
    salary_range: SalaryRange

    @field_validator("title", "description", "location", mode="before")
    @classmethod
    def validate_text(cls, v: Any, info: ValidationInfo) -> str:
        return require_text(v, info.field_name.capitalize())


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Omitted fields are left untouched. Fields that are present (including an
    explicit null) go through the same checks as on create.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    salary_range: Optional[SalaryRange] = None

    @field_validator("title", "description", "location", mode="before")
    @classmethod
    def validate_text(cls, v: Any, info: ValidationInfo) -> str:
        return require_text(v, info.field_name.capitalize())

    @field_validator("salary_range", mode="before")
    @classmethod
    def validate_salary_range(cls, v: Any) -> Any:
        if v is None:
            raise ValueError(SALARY_BOUNDS_REQUIRED)
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    description: str
    salary_range: SalaryRange
    location: str
    status: JobStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobDeleteResponse(BaseModel):
    message: str


class JobDeleteAllResponse(BaseModel):
    message: str
    deleted_count: int = Field(..., serialization_alias="deletedCount")
