"""Migration runner for the coffee_express schema.

The target URL is resolved by _database_url(); online runs go through an
async engine and hand a sync connection to Alembic via run_sync.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from coffee_express.infrastructure.config import settings  # noqa: E402
from coffee_express.infrastructure.database import Base  # noqa: E402
import coffee_express.infrastructure.persistence.models  # noqa: E402, F401

target_metadata = Base.metadata


def _database_url() -> str:
    """DATABASE_URL, then sqlalchemy.url in alembic.ini, then Settings."""
    return (
        os.environ.get("DATABASE_URL")
        or config.get_main_option("sqlalchemy.url")
        or settings.database_url
    )


def _configure(**options) -> None:  # type: ignore[no-untyped-def]
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        **options,
    )


def run_migrations_offline() -> None:
    """Render the migration SQL to stdout instead of executing it."""
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_on_connection(connection: Connection) -> None:
    # batch mode recreates tables on SQLite, which cannot ALTER constraints
    _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(_database_url())
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_on_connection)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
