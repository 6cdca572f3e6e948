"""
Pytest configuration for hubtrack_identity tests.

This conftest provides fixtures specific to accounts and authentication.
"""

import pytest

from hubtrack_identity import JWTService, PasswordHashingService
from hubtrack_identity.domain.user import User, UserRole

TEST_SECRET = "unit-test-secret"


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return User.create("test@example.com", name="Test User", company="Acme")


@pytest.fixture
def admin_user() -> User:
    """Create an admin test user."""
    return User.create(
        "admin@example.com",
        name="Admin",
        company="Acme",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET)


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Fast bcrypt for tests."""
    return PasswordHashingService(rounds=4)
