"""
FastAPI dependencies for resolving the caller's identity.

Authentication is not implemented yet. Endpoints that need a caller depend on
get_current_user_id, so swapping in a token-based resolver later (or a fake
one in tests via app.dependency_overrides) does not touch the services.
"""

import logging
from typing import Optional

from fastapi import Header

from app.core.config import settings

logger = logging.getLogger(__name__)


def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id")
) -> Optional[int]:
    """
    DEVELOPMENT ONLY: Resolve the caller's user id.

    Uses the X-User-Id header when present, otherwise falls back to
    settings.DEFAULT_USER_ID. Returns None when neither is set or the header
    is not an integer id, which the services report as 401.
    """
    if x_user_id is not None:
        try:
            return int(x_user_id)
        except ValueError:
            logger.info(f"Ignoring unusable X-User-Id header: {x_user_id!r}")
            return None

    return settings.DEFAULT_USER_ID
