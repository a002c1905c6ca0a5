"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from SENTINEL_* environment variables
- Environment detection
- Validation (log level, migrations path)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sentinel.core.config import Settings, get_settings
from sentinel.core.enums import Environment


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults_without_environment(self):
        """Test the package works with no configuration at all."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.migrations_path == "alembic/versions"
        assert settings.database_url is None
        assert settings.db_echo is False
        assert settings.forbidden_detail == "Permission denied"


@pytest.mark.unit
class TestSettingsLoading:
    """Test loading from environment variables."""

    def test_reads_prefixed_variables(self):
        env_values = {
            "SENTINEL_ENVIRONMENT": "production",
            "SENTINEL_MIGRATIONS_PATH": "db/migrations/versions",
            "SENTINEL_DATABASE_URL": "postgresql+asyncpg://u:p@db/app",
            "SENTINEL_DB_ECHO": "true",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.migrations_path == "db/migrations/versions"
        assert settings.database_url == "postgresql+asyncpg://u:p@db/app"
        assert settings.db_echo is True

    def test_ignores_unprefixed_variables(self):
        with patch.dict(os.environ, {"MIGRATIONS_PATH": "other"}, clear=True):
            assert Settings().migrations_path == "alembic/versions"

    def test_invalid_environment_rejected(self):
        with patch.dict(os.environ, {"SENTINEL_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(log_level="verbose")

        assert any(
            "Unsupported log level" in str(error) for error in exc_info.value.errors()
        )

    def test_migrations_path_trailing_slash_stripped(self):
        assert Settings(migrations_path="alembic/versions/").migrations_path == (
            "alembic/versions"
        )


@pytest.mark.unit
class TestEnvironmentDetection:
    """Test environment helper properties."""

    @pytest.mark.parametrize(
        ("environment", "development", "testing", "production"),
        [
            (Environment.DEVELOPMENT, True, False, False),
            (Environment.TESTING, False, True, False),
            (Environment.CI, False, True, False),
            (Environment.PRODUCTION, False, False, True),
        ],
    )
    def test_flags(self, environment, development, testing, production):
        settings = Settings(environment=environment)

        assert settings.is_development is development
        assert settings.is_testing is testing
        assert settings.is_production is production


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()
