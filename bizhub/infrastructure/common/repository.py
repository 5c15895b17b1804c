"""Generic async repository over SQLAlchemy mapped models."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from bizhub.application.common.ordering import order_clauses
from bizhub.application.common.pagination import PaginatedResult, Pagination
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, Specification

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity")
TKey = TypeVar("TKey")

CONCURRENCY_CONFLICT_MESSAGE = "The entity was updated by another user or process."


def error_message(error: BaseException) -> str:
    """Return the innermost driver message for a store error."""
    original = getattr(error, "orig", None)
    return str(original if original is not None else error)


class Repository(Generic[TEntity, TKey]):
    """
    Generic persistence gateway for one mapped model.

    Reads run immediately; writes are only staged in the session until
    save_async() commits them. One instance belongs to one unit of work and
    must not be shared between concurrent operations.
    """

    def __init__(self, db: AsyncSession, model: type[TEntity]) -> None:
        self.db = db
        self.model = model

    def _failure(self, operation: str, error: SQLAlchemyError) -> Result[Any]:
        message = error_message(error)
        logger.error(f"{operation} failed for {self.model.__name__}: {message}", exc_info=True)
        return Result.fail(message)

    def _detach(self, entities: Iterable[Any]) -> None:
        for entity in entities:
            if entity is not None and entity in self.db:
                self.db.expunge(entity)

    async def list_async(
        self, spec: Specification[TEntity] | None = None, track_changes: bool = False
    ) -> Result[list[TEntity]]:
        """
        List every row matching the specification.

        Args:
            spec: Criteria and eager-load paths, None for all rows
            track_changes: Keep the rows attached for a later update

        Returns:
            Result with the matching entities
        """
        statement = select(self.model)
        if spec is not None:
            statement = spec.apply(statement)
        try:
            entities = list((await self.db.execute(statement)).scalars().all())
        except SQLAlchemyError as e:
            return self._failure("list", e)

        if not track_changes:
            self._detach(entities)
        return Result.success(entities)

    async def first_or_default_async(
        self, spec: Specification[TEntity], track_changes: bool = False
    ) -> Result[TEntity | None]:
        """Return the first matching row, or a successful None when nothing matches."""
        statement = spec.apply(select(self.model)).limit(1)
        try:
            entity = (await self.db.execute(statement)).scalars().first()
        except SQLAlchemyError as e:
            return self._failure("first_or_default", e)

        if not track_changes:
            self._detach([entity])
        return Result.success(entity)

    async def find_by_id_async(
        self, entity_id: TKey, track_changes: bool = False, *includes: Include
    ) -> Result[TEntity | None]:
        """Look up one row by primary key, loading the given paths."""
        options = [include.loader_option() for include in includes]
        try:
            entity = await self.db.get(
                self.model, entity_id, options=options, populate_existing=bool(options)
            )
        except SQLAlchemyError as e:
            return self._failure("find_by_id", e)

        if not track_changes:
            self._detach([entity])
        return Result.success(entity)

    async def count_async(self, spec: Specification[TEntity] | None = None) -> Result[int]:
        statement = select(func.count()).select_from(self.model)
        if spec is not None:
            statement = spec.where(statement)
        try:
            count = (await self.db.execute(statement)).scalar_one()
        except SQLAlchemyError as e:
            return self._failure("count", e)
        return Result.success(int(count))

    async def exists_async(self, entity_id: TKey) -> Result[bool]:
        key_column = inspect(self.model).primary_key[0]
        statement = select(func.count()).select_from(self.model).where(key_column == entity_id)
        try:
            count = (await self.db.execute(statement)).scalar_one()
        except SQLAlchemyError as e:
            return self._failure("exists", e)
        return Result.success(count > 0)

    async def paged_list_async(
        self,
        spec: Specification[TEntity] | None,
        pagination: Pagination,
        order_by: str | None = None,
        allowed_order: Iterable[str] | None = None,
    ) -> PaginatedResult[TEntity]:
        """
        Load one page of matching rows.

        The total is counted over the predicated set, then the ordered slice
        [offset, offset + limit) is fetched. A page past the end yields no
        items and the real total without running the slice query.

        Args:
            spec: Criteria and eager-load paths
            pagination: Page number and size
            order_by: "Field [asc|desc]" ordering, primary key tie-break added
            allowed_order: Field names callers may order by

        Returns:
            PaginatedResult with detached entities
        """
        spec = spec or Specification()
        count_statement = spec.where(select(func.count()).select_from(self.model))
        try:
            total_count = int((await self.db.execute(count_statement)).scalar_one())
        except SQLAlchemyError as e:
            failure = self._failure("paged_list", e)
            return PaginatedResult.failure(failure.messages, pagination)

        # Nothing to fetch past the last row
        if pagination.offset >= total_count:
            return PaginatedResult.success([], total_count, pagination)

        statement = (
            spec.apply(select(self.model))
            .order_by(*order_clauses(self.model, order_by, allowed_order))
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        try:
            entities = list((await self.db.execute(statement)).scalars().all())
        except SQLAlchemyError as e:
            failure = self._failure("paged_list", e)
            return PaginatedResult.failure(failure.messages, pagination)

        self._detach(entities)
        return PaginatedResult.success(entities, total_count, pagination)

    async def create_async(self, entity: TEntity) -> Result[TEntity]:
        """Stage an insert. Nothing is written until save_async()."""
        self.db.add(entity)
        return Result.success(entity)

    async def create_range_async(self, entities: Iterable[TEntity]) -> Result[list[TEntity]]:
        staged = list(entities)
        self.db.add_all(staged)
        return Result.success(staged)

    def update(self, entity: TEntity) -> Result[TEntity]:
        """Mark an entity as changed in the session."""
        self.db.add(entity)
        return Result.success(entity)

    def update_range(self, entities: Iterable[TEntity]) -> Result[list[TEntity]]:
        staged = list(entities)
        self.db.add_all(staged)
        return Result.success(staged)

    async def delete_async(self, entity_id: TKey) -> Result[TEntity]:
        """
        Stage a delete by primary key.

        A missing key is reported as a failed result, never raised.
        """
        found = await self.find_by_id_async(entity_id, True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(f"Entity with ID {entity_id} not found.")

        try:
            await self.db.delete(found.data)
        except SQLAlchemyError as e:
            return self._failure("delete", e)
        return Result.success(found.data)

    async def remove_range_async(self, entities: Sequence[TEntity]) -> Result[Any]:
        try:
            for entity in entities:
                await self.db.delete(entity)
        except SQLAlchemyError as e:
            return self._failure("remove_range", e)
        return Result.success()

    async def save_async(self) -> Result[Any]:
        """Commit every staged change in one transaction."""
        try:
            await self.db.commit()
        except StaleDataError as e:
            await self.db.rollback()
            logger.warning(f"Concurrency conflict saving {self.model.__name__}: {e!s}")
            return Result.fail(CONCURRENCY_CONFLICT_MESSAGE)
        except SQLAlchemyError as e:
            await self.db.rollback()
            return self._failure("save", e)
        return Result.success()
