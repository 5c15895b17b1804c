"""Tests for Pagination and PaginatedResult."""

import pytest

from bizhub.application.common.pagination import (
    MAX_PAGE_SIZE,
    PaginatedResult,
    Pagination,
    paginate,
)


class TestPagination:
    def test_offset_and_limit(self) -> None:
        pagination = Pagination(page=3, page_size=12)

        assert pagination.offset == 24
        assert pagination.limit == 12

    @pytest.mark.parametrize(
        ("page", "page_size"),
        [(0, 10), (1, 0), (1, MAX_PAGE_SIZE + 1)],
    )
    def test_rejects_invalid_values(self, page: int, page_size: int) -> None:
        with pytest.raises(ValueError):
            Pagination(page=page, page_size=page_size)


class TestPaginatedResult:
    def test_page_metadata(self) -> None:
        page = PaginatedResult.success(range(10), total_count=25, pagination=Pagination(2, 10))

        assert page.current_page == 2
        assert page.page_size == 10
        assert page.total_pages == 3
        assert page.has_next
        assert page.has_previous

    def test_empty_result_has_no_pages(self) -> None:
        page = PaginatedResult.success([], total_count=0, pagination=Pagination())

        assert page.total_pages == 0
        assert not page.has_next
        assert not page.has_previous

    def test_last_page_has_no_next(self) -> None:
        page = PaginatedResult.success([1], total_count=21, pagination=Pagination(3, 10))

        assert page.total_pages == 3
        assert not page.has_next

    def test_failure_carries_messages_and_no_items(self) -> None:
        page = PaginatedResult.failure("database is locked")

        assert not page.succeeded
        assert page.messages == ["database is locked"]
        assert page.data == []
        assert page.total_count == 0

    def test_with_data_keeps_metadata(self) -> None:
        page = PaginatedResult.success([1, 2], total_count=12, pagination=Pagination(1, 2))
        mapped = page.with_data(str(item) for item in page.data)

        assert mapped.data == ["1", "2"]
        assert mapped.total_count == 12
        assert mapped.pagination == page.pagination


class TestPaginate:
    def test_slices_requested_page(self) -> None:
        page = paginate(list(range(1, 8)), Pagination(page=2, page_size=3))

        assert page.data == [4, 5, 6]
        assert page.total_count == 7

    def test_page_beyond_last_is_empty_with_real_total(self) -> None:
        page = paginate(list(range(5)), Pagination(page=4, page_size=2))

        assert page.data == []
        assert page.total_count == 5
        assert not page.has_next
