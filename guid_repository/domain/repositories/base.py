"""Generic repository base interface.

Repository[T] is the single data-access abstraction of this package.  The
SQLAlchemy implementation lives in guid_repository/infrastructure/persistence/
and is bound per entity model at startup through RepositoryRegistry.

Design notes:
  - All methods are async; cancelling the awaiting task cancels the
    in-flight statement, there is no separate cancellation argument.
  - T is the mapped entity type and must satisfy the Entity contract.
  - Predicates are SQLAlchemy boolean expressions; transforms receive the
    already-filtered Select and return a new one (ordering, loader options,
    limits).  Filter is always applied before the transform.
  - Nothing here commits.  Writes are staged on the caller's session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeAlias, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select

from guid_repository.domain.models.entity import Entity

T = TypeVar("T", bound=Entity)

Predicate: TypeAlias = ColumnElement[bool]
QueryTransform: TypeAlias = Callable[[Select], Select]


class Repository(ABC, Generic[T]):
    """Abstract query/staging interface for one entity type."""

    @abstractmethod
    async def get_list(
        self,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> list[T]:
        """Return all entities matching filter, shaped by additional_query."""

    @abstractmethod
    async def get_single(
        self,
        filter: Predicate,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> T | None:
        """Return the first entity matching filter, or None.

        No ordering is implied unless the filter or transform imposes one.
        """

    @abstractmethod
    async def get_by_id(
        self,
        id: UUID,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> T | None:
        """Return the first entity with the given id after filter/transform, or None.

        The id must fall inside whatever window the transform selects, so an
        entity excluded by its LIMIT or OFFSET is not found.
        """

    @abstractmethod
    async def get_count(self, filter: Predicate | None = None) -> int:
        """Return the number of entities matching filter."""

    @abstractmethod
    async def select_list(
        self,
        selector: Any,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
    ) -> list[Any]:
        """Return selector projected over every matching entity."""

    @abstractmethod
    async def get_single_property_value(
        self,
        selector: Any,
        filter: Predicate | None = None,
    ) -> Any | None:
        """Return the first projected value, or None."""

    @abstractmethod
    async def is_exist(self, filter: Predicate) -> bool:
        """Return True when at least one entity matches filter."""

    @abstractmethod
    async def add(self, entity: T) -> None:
        """Stamp created_at and stage the entity for insertion."""

    @abstractmethod
    async def remove(self, entity: T) -> None:
        """Stage the entity as *updated*.

        Kept for compatibility with existing callers: nothing is deleted.
        Use delete() for real removal.
        """

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Stage the entity's changes for the next flush."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Stage the entity for deletion."""

    @abstractmethod
    async def get_list_from_raw_sql(
        self,
        column_name: str,
        table_name: str | None = None,
        condition: str | None = None,
        additional_queries: Mapping[str, str] | None = None,
        skip: int | None = None,
        take: int | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> list[Any]:
        """Run a single-column raw SELECT and return the column values."""

    @abstractmethod
    async def get_total_count_from_raw_sql(
        self,
        table_name: str | None = None,
        condition: str | None = None,
        additional_queries: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> int:
        """Run a raw id SELECT and return how many rows came back."""
