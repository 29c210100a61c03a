"""
Database fixtures for persistence tests.

Two backends are provided:
- ``sqlite_session``: file-backed SQLite in the test's tmp_path, always on
- ``db_session``: Testcontainers PostgreSQL, for @pytest.mark.integration

Usage:
    from tests.shared.fixtures.database import db_session, sqlite_session  # noqa: F401

    async def test_something(sqlite_session):
        repo = UserRepositorySQLAlchemy(sqlite_session)
        await repo.insert_user(new_user)
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from conduit_identity.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:18-alpine"


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'conduit-test.db'}"


@pytest_asyncio.fixture(scope="function")
async def sqlite_engine(tmp_path):
    """SQLite engine with the identity schema created."""
    engine = create_engine(sqlite_url(tmp_path))
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def sqlite_session(sqlite_engine):
    async with create_session_maker(sqlite_engine)() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean database state via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_url(postgres_container) -> str:
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    connection_url = postgres_container.get_connection_url()
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    return async_url.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture(scope="function")
async def db_session(postgres_url):
    """
    Provide an isolated PostgreSQL session for each test.

    Tables are dropped and recreated around every test. The engine is
    function-scoped with NullPool so no connection outlives its event loop.
    """
    engine = create_async_engine(postgres_url, echo=False, poolclass=NullPool)

    await drop_tables(engine)
    await create_tables(engine)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()

    await drop_tables(engine)
    await engine.dispose()
