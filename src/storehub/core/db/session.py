"""Async sessions for request handlers, services and the health probe."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.storehub.core.db.engine import get_engine


def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay readable after commit so services can return them as-is.
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Open a session on `engine` (the shared engine by default).

    The session is closed on exit; committing or rolling back is up to the caller.
    """
    if engine is None:
        engine = get_engine()
    async with session_factory(engine)() as session:
        yield session
