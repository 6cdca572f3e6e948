"""Hubtrack configuration.

Every value can be set through the environment. An env file is picked up
as a fallback, looked up in this order:

- the path in ``HUBTRACK_ENV_FILE`` (relative paths resolve against the
  project root)
- ``config/.env.dev`` for a local checkout
- ``config/.env`` inside the container

Real environment variables always win over the file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "HUBTRACK_ENV_FILE"


def project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    # Installed as a wheel: src/hubtrack_config -> project
    return Path(__file__).resolve().parents[2]


def _candidate_env_files() -> list[Path]:
    candidates = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else project_root() / path)

    config_dir = project_root() / "config"
    candidates += [config_dir / ".env.dev", config_dir / ".env"]
    return candidates


def find_env_file() -> Path | None:
    """Return the first existing env file, or None to rely on the environment."""
    return next((path for path in _candidate_env_files() if path.is_file()), None)


class Settings(BaseSettings):
    """Runtime configuration for the API, the CLI and the identity services.

    ``jwt_secret_key`` and ``postgres_password`` have no defaults; startup
    fails with a validation error when either is missing.
    """

    model_config = SettingsConfigDict(
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Secrets
    jwt_secret_key: SecretStr
    postgres_password: SecretStr

    app_name: str = "Hubtrack"
    environment: Literal["development", "production", "test"] = "production"
    debug: bool = False

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "hubtrack"

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 8001
    api_debug: bool = False
    # Comma separated, empty disables CORS
    api_cors_origins: str = ""

    # Tokens
    jwt_session_token_expire_days: int = 7
    jwt_reset_token_expire_hours: int = 1

    bcrypt_rounds: int = 12

    # Outgoing mail
    smtp_enabled: bool = False
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: SecretStr | None = None
    smtp_from_email: str = ""
    smtp_from_name: str = "Hubtrack"
    smtp_use_tls: bool = True
    smtp_starttls: bool = True

    # Base of the links sent in reset emails
    frontend_base_url: str = "http://localhost:3000"

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origin_list(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value or "")

    @field_validator("frontend_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        user = self.postgres_user
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (origin.strip() for origin in self.api_cors_origins.split(","))
        return [origin for origin in origins if origin]

    @property
    def is_development(self) -> bool:
        """Local development only; enables logging of reset tokens."""
        return self.environment == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
