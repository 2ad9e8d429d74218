"""Startup registration and per-session resolution of repositories.

Each concrete entity model is registered explicitly, once, when the
application starts:

    registry = RepositoryRegistry()
    add_repositories(registry, User, Order)

and resolved per request through a scope bound to one session:

    async with repository_scope(registry) as repos:
        users = repos.get(User)
        await users.add(User(id=uuid4(), name="Ada"))

A scope caches one repository per model, so all resolutions inside a
request share the same instance and the same session.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from guid_repository.domain.repositories.base import Repository
from guid_repository.infrastructure.database import AsyncSessionLocal, settings
from guid_repository.infrastructure.persistence.models.base import BaseEntity
from guid_repository.infrastructure.persistence.repositories.sql import SqlRepository

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)

RepositoryFactory = Callable[[AsyncSession], Repository[Any]]


def _require_concrete_model(model: Any) -> None:
    if not isinstance(model, type) or not issubclass(model, BaseEntity):
        raise TypeError(f"{model!r} is not a BaseEntity subclass")
    if model.__dict__.get("__abstract__", False):
        raise TypeError(f"{model.__name__} is abstract; register a concrete model")
    try:
        inspect(model)
    except NoInspectionAvailable as exc:
        raise TypeError(f"{model.__name__} is not mapped") from exc


class RepositoryRegistry:
    """Model → repository factory bindings, filled once at startup."""

    def __init__(self, schema_name: str | None = None) -> None:
        self.schema_name = schema_name or settings.database_schema
        self._factories: dict[type[BaseEntity], RepositoryFactory] = {}

    def register(
        self,
        model: type[E],
        repository_class: type[SqlRepository[Any]] = SqlRepository,
    ) -> None:
        """Bind model to repository_class.  Re-registering replaces the binding."""
        _require_concrete_model(model)
        if model in self._factories:
            logger.warning("Replacing repository binding for %s", model.__name__)

        schema_name = self.schema_name

        def factory(session: AsyncSession) -> Repository[Any]:
            return repository_class(session, model, schema_name=schema_name)

        self._factories[model] = factory
        logger.debug(
            "Registered %s for %s", repository_class.__name__, model.__name__
        )

    def resolve(self, model: type[E], session: AsyncSession) -> Repository[E]:
        """Construct a new repository for model bound to session."""
        try:
            factory = self._factories[model]
        except KeyError:
            raise LookupError(f"No repository registered for {model.__name__}") from None
        return factory(session)

    def scope(self, session: AsyncSession) -> RepositoryScope:
        return RepositoryScope(self, session)

    @property
    def models(self) -> list[type[BaseEntity]]:
        return list(self._factories)

    def __contains__(self, model: object) -> bool:
        return model in self._factories

    def __len__(self) -> int:
        return len(self._factories)


class RepositoryScope:
    """All repositories for one session; one instance per model."""

    def __init__(self, registry: RepositoryRegistry, session: AsyncSession) -> None:
        self.registry = registry
        self.session = session
        self._instances: dict[type[BaseEntity], Repository[Any]] = {}

    def get(self, model: type[E]) -> Repository[E]:
        if model not in self._instances:
            self._instances[model] = self.registry.resolve(model, self.session)
        return self._instances[model]


def add_repositories(registry: RepositoryRegistry, *models: type[BaseEntity]) -> RepositoryRegistry:
    """Register every model with the default SqlRepository."""
    for model in models:
        registry.register(model)
    return registry


@asynccontextmanager
async def repository_scope(
    registry: RepositoryRegistry,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> AsyncIterator[RepositoryScope]:
    """Open a session and transaction and yield a scope bound to it.

    The transaction commits when the block exits normally and rolls back
    on error; repositories themselves never commit.
    """
    async with session_factory() as session:
        async with session.begin():
            yield registry.scope(session)
