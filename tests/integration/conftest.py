"""Integration test fixtures for database and HTTP client operations.

These fixtures require a PostgreSQL database at DATABASE_URL. Tables are
created from the SQLModel metadata for the test run and dropped afterwards.
"""

from collections.abc import AsyncGenerator
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.storehub.core import db
from src.storehub.core.config import get_settings
from src.storehub.main import create_app
from src.storehub.models import Branch, Brand, BrandMember, BrandRole
from tests.factories import BranchFactory, BrandFactory, BrandMemberFactory


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Test engine with a fresh schema; skips when the database is unreachable."""
    await db.dispose_engine()

    settings = get_settings()
    test_engine = create_async_engine(settings.database_url, poolclass=NullPool)
    try:
        async with test_engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
            await conn.run_sync(SQLModel.metadata.create_all)
    except (DBAPIError, OSError) as e:
        await test_engine.dispose()
        pytest.skip(f"PostgreSQL not available: {e}")

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session for arranging data. Tests must commit what the app should see."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def brand(db_session: AsyncSession) -> Brand:
    brand = BrandFactory.build()
    db_session.add(brand)
    await db_session.commit()
    return brand


@pytest.fixture
async def branch(db_session: AsyncSession, brand: Brand) -> Branch:
    branch = BranchFactory.build(brand_id=brand.id)
    db_session.add(branch)
    await db_session.commit()
    return branch


@pytest.fixture
async def owner(db_session: AsyncSession, brand: Brand, user_id: UUID) -> BrandMember:
    member = BrandMemberFactory.build(
        brand_id=brand.id, user_id=user_id, role=BrandRole.OWNER.value
    )
    db_session.add(member)
    await db_session.commit()
    return member


@pytest.fixture
async def db_client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client running the real dependency graph against the test database."""
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    await db.dispose_engine()
