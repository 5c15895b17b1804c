"""
Specifications: declarative filter and eager-load descriptors.

A specification pairs a boolean SQL criteria with the relationship paths that
should be loaded alongside the matching rows. Building one never touches the
database; the repository turns it into a single SELECT.

Example:
    spec = LambdaSpec(
        Advertisement.id == advertisement_id,
        Include(Advertisement.advertisement_tier)
        .then(AdvertisementTier.images)
        .then(AdvertisementTierImage.image),
        Include(Advertisement.images).then(AdvertisementImage.image),
    )
    result = await repository.first_or_default_async(spec)

    predicate = (
        PredicateBuilder.new(True)
        .and_if(params.status, lambda status: Advertisement.status == status)
        .and_if(params.user_id, lambda user_id: Advertisement.user_id == user_id)
    )
    spec = LambdaSpec(predicate.build())
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, and_, false, or_, true
from sqlalchemy.orm import QueryableAttribute, selectinload
from sqlalchemy.orm.interfaces import LoaderOption

TEntity = TypeVar("TEntity")
V = TypeVar("V")


@dataclass(frozen=True, eq=False)
class Include:
    """A fixed eager-load path, e.g. tier -> images -> image."""

    path: tuple[QueryableAttribute[Any], ...]

    def __init__(self, first: QueryableAttribute[Any], *rest: QueryableAttribute[Any]) -> None:
        object.__setattr__(self, "path", (first, *rest))

    def then(self, attribute: QueryableAttribute[Any]) -> "Include":
        """Extend the path by one relationship."""
        return Include(*self.path, attribute)

    def loader_option(self) -> LoaderOption:
        """Translate the path into chained selectin loads."""
        option = selectinload(self.path[0])
        for attribute in self.path[1:]:
            option = option.selectinload(attribute)
        return option


@dataclass(frozen=True, eq=False)
class Specification(Generic[TEntity]):
    """
    Immutable query descriptor.

    Attributes:
        criteria: Boolean SQL expression rows must satisfy, None for all rows
        includes: Relationship paths to load with the matching rows
    """

    criteria: ColumnElement[bool] | None = None
    includes: tuple[Include, ...] = ()

    def add_include(self, include: Include) -> "Specification[TEntity]":
        """Return a new specification with one more eager-load path."""
        return Specification(criteria=self.criteria, includes=(*self.includes, include))

    def where(self, statement: Select[Any]) -> Select[Any]:
        """Apply only the criteria, for count queries."""
        if self.criteria is None:
            return statement
        return statement.where(self.criteria)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply criteria and loader options to a select statement."""
        statement = self.where(statement)
        if self.includes:
            statement = statement.options(*(include.loader_option() for include in self.includes))
        return statement


class LambdaSpec(Specification[TEntity]):
    """Specification built from a single predicate."""

    def __init__(self, criteria: ColumnElement[bool] | None, *includes: Include) -> None:
        super().__init__(criteria=criteria, includes=tuple(includes))


class PredicateBuilder:
    """Incrementally combine optional filter clauses into one predicate."""

    def __init__(self, default: bool = True) -> None:
        self._predicate: ColumnElement[bool] = true() if default else false()

    @classmethod
    def new(cls, default: bool = True) -> "PredicateBuilder":
        """Start a builder matching everything (True) or nothing (False)."""
        return cls(default)

    def and_(self, clause: ColumnElement[bool]) -> "PredicateBuilder":
        self._predicate = and_(self._predicate, clause)
        return self

    def or_(self, clause: ColumnElement[bool]) -> "PredicateBuilder":
        self._predicate = or_(self._predicate, clause)
        return self

    def and_if(
        self, value: V | None, clause: Callable[[V], ColumnElement[bool]]
    ) -> "PredicateBuilder":
        """AND a clause only when the filter value was supplied."""
        if value is None:
            return self
        return self.and_(clause(value))

    def build(self) -> ColumnElement[bool]:
        return self._predicate
