"""Root pytest configuration.

Test Structure:
    tests/
    ├── hubtrack_config/       # Settings and env file discovery
    ├── hubtrack_identity/     # Identity tests (accounts, hashing, tokens)
    │   ├── unit/              # Fast, isolated tests with mocked repositories
    │   └── integration/       # Repository tests against in-memory SQLite
    └── hubtrack/              # Presentation tests
        ├── integration/api/   # HTTP tests through FastAPI's TestClient
        └── unit/cli/          # Typer CLI tests

Settings are read from ``config/.env.test`` when present. Required secrets
fall back to throwaway test values so the suite runs without any setup.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from hubtrack_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")

# Must be set before hubtrack.presentation.api.app builds its module-level app
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that exercise the database or the HTTP stack",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make every test session start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
