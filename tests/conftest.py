"""Pytest configuration and fixtures for the entity registry.

DB-dependent fixtures run against an in-memory SQLite database (aiosqlite)
created fresh for each test; the session is rolled back afterwards.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from registry.application.use_cases.entities import EntityService
from registry.core.config import Settings
from registry.infrastructure.composition import build_entity_service
from registry.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_all,
)

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the in-memory database, independent of the environment."""
    return Settings(database_url=TEST_DATABASE_URL, default_page_size=50, max_page_size=200)


@pytest.fixture
async def db_engine() -> AsyncEngine:
    """Fresh in-memory engine with all tables created."""
    engine = build_engine(TEST_DATABASE_URL)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    factory = build_session_factory(db_engine)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def entity_service(db_session: AsyncSession, test_settings: Settings) -> EntityService:
    """EntityService wired to SQLAlchemy repositories on db_session."""
    return build_entity_service(db_session, test_settings)
