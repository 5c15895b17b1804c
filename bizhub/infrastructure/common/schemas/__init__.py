"""Common API schemas."""

from bizhub.infrastructure.common.schemas.response_wrappers import (
    PaginatedResponse,
    ResultResponse,
)

__all__ = [
    "PaginatedResponse",
    "ResultResponse",
]
