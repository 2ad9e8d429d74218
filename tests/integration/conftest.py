"""In-memory SQLite fixtures for repository integration tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from guid_repository.infrastructure.database import Base
from guid_repository.infrastructure.persistence.repositories import (
    RepositoryRegistry,
    add_repositories,
)
from tests.models import Part, Widget


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def registry() -> RepositoryRegistry:
    # SQLite exposes its default database as schema "main".
    return add_repositories(RepositoryRegistry(schema_name="main"), Widget, Part)
