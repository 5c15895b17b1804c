"""
Page parameters and page results for listing queries.

Example:
    pagination = Pagination(page=2, page_size=12)
    result = await repository.paged_list_async(spec, pagination, order_by="Name")
    if result.succeeded:
        dtos = [mapper.to_dto(product) for product in result.data]
        page = result.with_data(dtos)
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# Larger pages are rejected
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Which slice of an ordered listing to return.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Rows to skip before this page."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Rows to fetch for this page."""
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    A page of items plus totals and the outcome of the query.

    Attributes:
        data: Items for the current page
        total_count: Number of matching items across all pages
        pagination: The pagination parameters used
        succeeded: Whether the query completed
        messages: Errors when the query failed
    """

    data: list[T]
    total_count: int
    pagination: Pagination
    succeeded: bool = True
    messages: list[str] = field(default_factory=list)

    @classmethod
    def success(
        cls, data: Iterable[T], total_count: int, pagination: Pagination
    ) -> "PaginatedResult[T]":
        """Create a successful page."""
        return cls(data=list(data), total_count=total_count, pagination=pagination)

    @classmethod
    def failure(
        cls, messages: str | Iterable[str], pagination: Pagination | None = None
    ) -> "PaginatedResult[Any]":
        """Create a failed page carrying no items."""
        collected = [messages] if isinstance(messages, str) else list(messages)
        return cls(
            data=[],
            total_count=0,
            pagination=pagination or Pagination(),
            succeeded=False,
            messages=collected,
        )

    def with_data(self, data: Iterable[U]) -> "PaginatedResult[U]":
        """Return the same page metadata with mapped items."""
        return replace(self, data=list(data))  # type: ignore[return-value]

    @property
    def current_page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Number of items per page."""
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """ceil(total_count / page_size), 0 for an empty result."""
        if self.total_count == 0:
            return 0
        return (self.total_count + self.pagination.page_size - 1) // self.pagination.page_size

    @property
    def has_next(self) -> bool:
        """True unless this is the last page or there are no items."""
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """True for every page after the first."""
        return self.pagination.page > 1


def paginate(items: Sequence[T], pagination: Pagination) -> PaginatedResult[T]:
    """Slice an already ordered in-memory sequence into one page."""
    start = pagination.offset
    return PaginatedResult.success(
        items[start : start + pagination.limit], len(items), pagination
    )
