"""Common response envelopes for API responses."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.result import Result

T = TypeVar("T")


class ResultResponse(BaseModel, Generic[T]):
    """Outcome of an operation, with its payload when it succeeded."""

    succeeded: bool = Field(..., description="Whether the operation succeeded")
    messages: list[str] = Field(default_factory=list, description="Messages to show the user")
    data: T | None = Field(None, description="Payload, only set on success")

    @classmethod
    def from_result(cls, result: Result[Any]) -> "ResultResponse[T]":
        return cls(
            succeeded=result.succeeded,
            messages=list(result.messages),
            data=result.data if result.succeeded else None,
        )


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of items with page metadata."""

    succeeded: bool
    messages: list[str] = Field(default_factory=list)
    data: list[T] = Field(default_factory=list)
    total_count: int
    current_page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_page(cls, page: PaginatedResult[Any]) -> "PaginatedResponse[T]":
        return cls(
            succeeded=page.succeeded,
            messages=list(page.messages),
            data=list(page.data),
            total_count=page.total_count,
            current_page=page.current_page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )
