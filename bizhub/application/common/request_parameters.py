"""Query-string parameters shared by paged list endpoints."""

from pydantic import BaseModel, Field

from bizhub.application.common.pagination import MAX_PAGE_SIZE, Pagination


class RequestParameters(BaseModel):
    """Paging, ordering and free-text search parameters."""

    page_nr: int = Field(1, ge=1, description="Page number (1-indexed)")
    page_size: int = Field(20, ge=1, le=MAX_PAGE_SIZE, description="Items per page")
    order_by: str | None = Field(None, description='Ordering, e.g. "Name asc, CreatedOn desc"')
    search_text: str | None = Field(None, description="Free-text filter")

    def to_pagination(self) -> Pagination:
        return Pagination(page=self.page_nr, page_size=self.page_size)
