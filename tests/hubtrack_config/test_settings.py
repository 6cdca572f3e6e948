"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from hubtrack_config import Settings, find_env_file, get_settings
from hubtrack_config.settings import ENV_FILE_VARIABLE


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": "secret",
        "postgres_password": "pg-pass",
        **overrides,
    }
    return Settings(_env_file=None, **values)


class TestSettings:
    def test_defaults(self):
        settings = _settings()

        assert settings.jwt_session_token_expire_days == 7
        assert settings.jwt_reset_token_expire_hours == 1
        assert settings.bcrypt_rounds == 12
        assert settings.smtp_enabled is False

    def test_secrets_are_masked(self):
        settings = _settings()

        assert settings.jwt_secret_key.get_secret_value() == "secret"
        assert "secret" not in repr(settings.jwt_secret_key)

    def test_missing_jwt_secret_fails(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None, postgres_password="pg-pass")

    def test_database_url(self):
        settings = _settings(postgres_host="db", postgres_user="svc", postgres_db="ht")

        assert settings.database_url == "postgresql+asyncpg://svc:pg-pass@db:5432/ht"

    def test_cors_origins_split(self):
        settings = _settings(api_cors_origins="http://a.com, http://b.com,")

        assert settings.cors_origins == ["http://a.com", "http://b.com"]

    def test_cors_origins_accepts_list(self):
        settings = _settings(api_cors_origins=["http://a.com", "http://b.com"])

        assert settings.cors_origins == ["http://a.com", "http://b.com"]

    def test_empty_cors_origins(self):
        assert _settings().cors_origins == []

    def test_frontend_base_url_trailing_slash(self):
        settings = _settings(frontend_base_url="https://app.hubtrack.io/")

        assert settings.frontend_base_url == "https://app.hubtrack.io"

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [("development", True), ("test", False), ("production", False)],
    )
    def test_is_development(self, environment, expected):
        assert _settings(environment=environment).is_development is expected

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "10")
        monkeypatch.setenv("SMTP_ENABLED", "true")

        settings = Settings(_env_file=None)

        assert settings.bcrypt_rounds == 10
        assert settings.smtp_enabled is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestEnvFileDiscovery:
    def test_explicit_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv(ENV_FILE_VARIABLE, str(env_file))

        assert find_env_file() == env_file

    def test_missing_explicit_env_file_is_skipped(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ENV_FILE_VARIABLE, str(tmp_path / "missing.env"))

        assert find_env_file() != tmp_path / "missing.env"
