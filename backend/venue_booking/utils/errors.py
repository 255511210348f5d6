import logging
from typing import Dict, Optional

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    field_errors: Optional[Dict[str, str]] = None,
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Build the ``{"message", "field_errors"}`` error body the routes share, and log it."""
    errors = dict(field_errors or {})
    logger.error("%s %s", message, errors)
    return HTTPException(status_code=code, detail={"message": message, "field_errors": errors})
