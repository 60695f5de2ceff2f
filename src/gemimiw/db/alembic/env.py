"""Alembic migration environment for the gemimiw tables."""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from gemimiw.config import DATABASE_KEY, DATABASE_URL
from gemimiw.db.models import Base
from gemimiw.db.session import engine_url

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

url = engine_url(DATABASE_URL, DATABASE_KEY)

# SQLite cannot ALTER most constraints in place
batch = url.get_backend_name() == "sqlite"


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting."""
    context.configure(
        url=url.render_as_string(hide_password=False),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=batch,
    )

    with context.begin_transaction():
        context.run_migrations()


def apply_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=batch,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations over a short-lived async engine."""
    migration_engine = create_async_engine(url, poolclass=pool.NullPool)

    async with migration_engine.connect() as connection:
        await connection.run_sync(apply_migrations)

    await migration_engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
