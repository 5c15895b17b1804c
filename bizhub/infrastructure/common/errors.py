"""Error translation shared by the routers."""

import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def internal_error(action: str, error: Exception) -> HTTPException:
    """Log an unexpected failure and hide its details from the client."""
    logger.error(f"{action}: {error!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )
