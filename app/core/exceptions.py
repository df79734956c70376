"""
Application error taxonomy.

Services raise these instead of HTTPException so the same rules can be
exercised without a request. main.py registers a handler that renders every
AppError as a JSON body of the form {"message": ...}.
"""

from typing import Any, Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class InvalidInputError(AppError):
    """Malformed, missing or out-of-range request fields."""
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedError(AppError):
    """No caller identity could be resolved."""
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    """Role mismatch, duplicate application or closed job."""
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    """A referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, entity: Optional[str] = None):
        super().__init__(message)
        self.entity = entity


class InternalError(AppError):
    """Unexpected store or runtime failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "internal server error", cause: Optional[str] = None):
        super().__init__(message)
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.cause:
            body["error"] = self.cause
        return body
