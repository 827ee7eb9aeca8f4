"""Database configuration module.

The engine and session factory are built at application startup and kept on
``app.state``; request handlers receive sessions through ``get_db``.
"""
from typing import Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from salesdash.settings import settings

Base = declarative_base()


def build_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create the async engine for the configured database."""
    url = database_url or settings.DATABASE_URL
    connect_args = {}
    # asyncpg enforces a per-statement deadline; other drivers have no equivalent
    if url.startswith("postgresql+asyncpg"):
        connect_args["command_timeout"] = settings.DB_COMMAND_TIMEOUT_SECONDS
    return create_async_engine(
        url,
        echo=settings.DEBUG,
        connect_args=connect_args,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db(request: Request) -> AsyncSession:
    """Dependency for database session."""
    async with request.app.state.session_factory() as session:
        yield session
