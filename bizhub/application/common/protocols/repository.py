"""Protocol for the generic repository used by every command and query service."""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from bizhub.application.common.pagination import PaginatedResult, Pagination
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, Specification

TEntity = TypeVar("TEntity")
TKey = TypeVar("TKey", contravariant=True)


class RepositoryProtocol(Protocol[TEntity, TKey]):
    """Generic persistence gateway for one entity type."""

    async def list_async(
        self, spec: Specification[TEntity] | None = None, track_changes: bool = False
    ) -> Result[list[TEntity]]: ...

    async def first_or_default_async(
        self, spec: Specification[TEntity], track_changes: bool = False
    ) -> Result[TEntity | None]: ...

    async def find_by_id_async(
        self, entity_id: TKey, track_changes: bool = False, *includes: Include
    ) -> Result[TEntity | None]: ...

    async def count_async(self, spec: Specification[TEntity] | None = None) -> Result[int]: ...

    async def exists_async(self, entity_id: TKey) -> Result[bool]: ...

    async def paged_list_async(
        self,
        spec: Specification[TEntity] | None,
        pagination: Pagination,
        order_by: str | None = None,
        allowed_order: Iterable[str] | None = None,
    ) -> PaginatedResult[TEntity]: ...

    async def create_async(self, entity: TEntity) -> Result[TEntity]: ...

    async def create_range_async(self, entities: Iterable[TEntity]) -> Result[list[TEntity]]: ...

    def update(self, entity: TEntity) -> Result[TEntity]: ...

    def update_range(self, entities: Iterable[TEntity]) -> Result[list[TEntity]]: ...

    async def delete_async(self, entity_id: TKey) -> Result[TEntity]: ...

    async def remove_range_async(self, entities: Iterable[TEntity]) -> Result[Any]: ...

    async def save_async(self) -> Result[Any]: ...
