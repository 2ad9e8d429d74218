"""SQLAlchemy implementation of Repository."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Generic
from uuid import UUID

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, selectinload

from guid_repository.domain.repositories.base import (
    Predicate,
    QueryTransform,
    Repository,
    T,
)
from guid_repository.infrastructure.persistence.raw_sql import RawSqlQuery

logger = logging.getLogger(__name__)


class SqlRepository(Repository[T], Generic[T]):
    """Repository bound to one mapped model and one AsyncSession.

    Holds nothing but the session reference; every call builds a fresh
    statement.  Errors raised by the session or driver propagate unchanged.
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[T],
        schema_name: str = "public",
    ) -> None:
        self._session = session
        self.model = model
        self.schema_name = schema_name

    # --- statement composition ---

    def _query(
        self,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> Select:
        stmt = select(self.model)
        if filter is not None:
            stmt = stmt.where(filter)
        if additional_query is not None:
            stmt = additional_query(stmt)
        if split_query:
            # Relationships load with one extra SELECT each instead of JOINs.
            stmt = stmt.options(selectinload("*"))
        return stmt

    async def _all(self, stmt: Select) -> list[T]:
        result = await self._session.execute(stmt)
        return list(result.scalars().unique().all())

    async def _first(self, stmt: Select) -> T | None:
        result = await self._session.execute(stmt.limit(1))
        return result.scalars().unique().first()

    @property
    def _id_column_name(self) -> str:
        return inspect(self.model).get_property("id").columns[0].name

    # --- reads ---

    async def get_list(
        self,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> list[T]:
        return await self._all(self._query(filter, additional_query, split_query))

    async def get_single(
        self,
        filter: Predicate,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> T | None:
        return await self._first(self._query(filter, additional_query, split_query))

    async def get_by_id(
        self,
        id: UUID,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
        split_query: bool = False,
    ) -> T | None:
        stmt = self._query(filter, additional_query)
        if additional_query is not None:
            # The id must match inside the transformed window, after any
            # ORDER BY / LIMIT / OFFSET the transform applied.
            window = aliased(self.model, stmt.subquery())
            stmt = stmt.limit(None).offset(None).where(
                self.model.id.in_(select(window.id))
            )
        if split_query:
            stmt = stmt.options(selectinload("*"))
        return await self._first(stmt.where(self.model.id == id))

    async def get_count(self, filter: Predicate | None = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        if filter is not None:
            stmt = stmt.where(filter)
        return await self._session.scalar(stmt) or 0

    async def select_list(
        self,
        selector: Any,
        filter: Predicate | None = None,
        additional_query: QueryTransform | None = None,
    ) -> list[Any]:
        stmt = self._query(filter, additional_query).with_only_columns(
            selector, maintain_column_froms=True
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_single_property_value(
        self,
        selector: Any,
        filter: Predicate | None = None,
    ) -> Any | None:
        stmt = self._query(filter).with_only_columns(selector, maintain_column_froms=True)
        result = await self._session.execute(stmt.limit(1))
        return result.scalars().first()

    async def is_exist(self, filter: Predicate) -> bool:
        stmt = select(select(self.model.id).where(filter).exists())
        return bool(await self._session.scalar(stmt))

    # --- staging ---

    async def add(self, entity: T) -> None:
        # Only stamp instances the session has never seen.
        if inspect(entity).transient:
            entity.created_at = datetime.now(timezone.utc)
        self._session.add(entity)

    async def remove(self, entity: T) -> None:
        logger.warning(
            "remove() stages %r as an update; use delete() to remove it", entity
        )
        await self.update(entity)

    async def update(self, entity: T) -> None:
        """Merge entity into the session.

        A detached or newly built instance carrying an existing id updates
        that row instead of being inserted.  created_at is left untouched
        unless the instance has it set.
        """
        await self._session.merge(entity)

    async def delete(self, entity: T) -> None:
        await self._session.delete(entity)

    # --- raw SQL ---

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
        query = RawSqlQuery(
            table_name=table_name or self.model.__tablename__,
            column_name=column_name,
            condition=condition,
            additional_queries=dict(additional_queries or {}),
            skip=skip,
            take=take,
            schema_name=self.schema_name,
        )
        logger.debug("raw list query: %s", query.sql)
        result = await self._session.execute(query.statement(), dict(params or {}))
        return list(result.scalars().all())

    async def get_total_count_from_raw_sql(
        self,
        table_name: str | None = None,
        condition: str | None = None,
        additional_queries: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> int:
        query = RawSqlQuery(
            table_name=table_name or self.model.__tablename__,
            column_name=self._id_column_name,
            condition=condition,
            additional_queries=dict(additional_queries or {}),
            schema_name=self.schema_name,
        )
        logger.debug("raw count query: %s", query.sql)
        result = await self._session.execute(query.statement(), dict(params or {}))
        # Counted client-side over the materialized ids, not with COUNT(*).
        return len(result.scalars().all())
