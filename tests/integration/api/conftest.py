"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from conduit.presentation.api.app import API_PREFIX, create_app
from conduit_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test settings backed by a throwaway SQLite file."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'api-test.db'}",
        database_create_tables=True,
        password_hash_rounds=4,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def app(api_settings):
    return create_app(api_settings)


@pytest.fixture
def client(app):
    """TestClient with lifespan events (tables are created on startup)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client, api_prefix) -> dict:
    """Register jake and return the response's user object."""
    response = client.post(
        f"{api_prefix}/users",
        json={
            "user": {
                "username": "jake",
                "email": "jake@jake.jake",
                "password": "password",
            },
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]
