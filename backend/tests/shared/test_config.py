"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Defaults should describe a local development server."""
        for name in ("PORT", "JWT_SECRET", "JWT_EXPIRES_IN", "BCRYPT_ROUNDS", "MUTATION_MAX_ATTEMPTS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "DevHub API"
        assert settings.port == 5000
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expires_in == 3600
        assert settings.bcrypt_rounds == 10
        assert settings.github_api_url == "https://api.github.com"
        assert settings.mutation_max_attempts == 3

    def test_reads_environment(self, monkeypatch):
        """Environment variables should override defaults, case-insensitively."""
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.setenv("jwt_expires_in", "60")
        monkeypatch.setenv("GITHUB_TIMEOUT", "2.5")

        settings = Settings(_env_file=None)

        assert settings.jwt_secret == "from-env"
        assert settings.jwt_expires_in == 60
        assert settings.github_timeout == 2.5

    def test_ignores_unknown_variables(self, monkeypatch):
        monkeypatch.setenv("SOME_UNRELATED_SETTING", "x")
        Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_rejects_invalid_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
