"""Async SQLAlchemy engine, session factory, and store-boundary helpers."""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from coffee_express.infrastructure.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session wrapped in a single transaction.

    The transaction commits when the consumer finishes cleanly and rolls
    back if an exception (including cancellation) propagates.
    """
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session


async def check_connection(bind: AsyncEngine = engine) -> bool:
    """Ping the store.  Returns False (and logs why) when it is unreachable."""
    try:
        async with bind.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("Database ping failed for %s", bind.url.render_as_string())
        return False
    return True


async def ensure_schema(bind: AsyncEngine = engine) -> None:
    """Create every mapped table that does not exist yet.

    Alembic owns versioned migrations; this is for tests and local bootstrap.
    """
    import coffee_express.infrastructure.persistence.models  # noqa: F401 — registers all mappers

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ensured on %s", bind.url.render_as_string())
