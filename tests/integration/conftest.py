"""Fixtures backed by an in-memory SQLite store (aiosqlite).

Each test gets a fresh engine and schema.  The session is not wrapped in
session.begin(), so a test that provokes a constraint violation can still
tear down cleanly.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from coffee_express.infrastructure.database import ensure_schema
from coffee_express.infrastructure.persistence.repositories import get_repositories
from coffee_express.infrastructure.services import get_services


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await ensure_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def repos(session):
    return get_repositories(session)


@pytest.fixture
def services(session):
    return get_services(session)
