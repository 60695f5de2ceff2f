"""Async database engine and session management."""

from pathlib import Path

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from gemimiw.config import DATABASE_KEY, DATABASE_URL


def engine_url(url: str, key: str) -> URL:
    """Parse ``url``, applying the access key as its password when one is set."""
    parsed = make_url(url)

    if parsed.get_backend_name() != "sqlite":
        if key:
            parsed = parsed.set(password=key)
    elif parsed.database not in (None, "", ":memory:"):
        # SQLite will not create missing parent directories
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    return parsed


engine = create_async_engine(engine_url(DATABASE_URL, DATABASE_KEY), echo=False)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncSession:
    """Get a new async database session."""
    async with async_session() as session:
        yield session
