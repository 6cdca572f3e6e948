"""Pytest fixtures for API integration tests.

Each test gets its own SQLite database file so the FastAPI app can open
connections from TestClient's event loop without sharing state between
tests.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from hubtrack.presentation.api.app import API_PREFIX, create_app
from hubtrack.presentation.api.dependencies import get_db_session
from hubtrack_config.settings import Settings, get_settings
from hubtrack_identity.infrastructure.persistence.sqlalchemy import IdentityBase

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and fast hashing."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        postgres_password=SecretStr("test-password"),
        environment="test",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
        smtp_enabled=False,
        frontend_base_url="http://localhost:3000",
    )


@pytest.fixture
def async_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'hubtrack-test.db'}",
        poolclass=NullPool,
    )

    async def _create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(IdentityBase.metadata.create_all)

    asyncio.run(_create_tables())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def app(api_settings, async_engine):
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings
    return app


@pytest.fixture
def test_client(app):
    """Test client without lifespan, the schema is created by the fixture."""
    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "name": "Alice",
        "email": "alice@x.com",
        "password": "Passw0rd",
        "company": "Acme",
    }


@pytest.fixture
def register_user(test_client, api_prefix):
    """Register an account and return the response body."""

    def _register(**data) -> dict:
        payload = {
            "name": "Member",
            "password": "Passw0rd",
            "company": "Acme",
            **data,
        }
        response = test_client.post(f"{api_prefix}/auth/register", json=payload)
        assert response.status_code == 201, (
            f"Registration failed: {response.status_code} - {response.text}"
        )
        return response.json()

    return _register


@pytest.fixture
def authenticated_user(register_user, registered_user_data) -> dict:
    """Register the default user and return headers, credentials and id."""
    data = register_user(**registered_user_data)

    return {
        "headers": {"Authorization": f"Bearer {data['token']}"},
        "email": registered_user_data["email"],
        "password": registered_user_data["password"],
        "user_id": data["user"]["id"],
        "token": data["token"],
    }


@pytest.fixture
def auth_headers(authenticated_user) -> dict:
    return authenticated_user["headers"]


@pytest.fixture
def admin_headers(register_user) -> dict:
    data = register_user(name="Root", email="admin@x.com", role="admin")
    return {"Authorization": f"Bearer {data['token']}"}
