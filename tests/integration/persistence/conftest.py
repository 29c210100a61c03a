"""Fixtures for persistence tests."""

from tests.shared.fixtures.database import (  # noqa: F401
    db_session,
    postgres_container,
    postgres_url,
    sqlite_engine,
    sqlite_session,
)
