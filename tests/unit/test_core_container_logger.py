"""Unit tests for get_logger() container function.

Tests cover:
- Renderer selection based on SENTINEL_ENVIRONMENT
- Singleton pattern (same instance returned)
"""

from unittest.mock import MagicMock, patch

import pytest

from sentinel.core.container import get_logger
from sentinel.core.enums import Environment


@pytest.fixture
def fresh_logger_cache():
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()
    get_logger()


@pytest.mark.unit
@pytest.mark.usefixtures("fresh_logger_cache")
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.PRODUCTION, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
        ],
    )
    def test_renderer_follows_environment(self, environment, use_json):
        """Test JSON rendering is used only in testing and CI."""
        with patch("sentinel.core.container.infrastructure.settings") as mock_settings:
            mock_settings.environment = environment
            mock_settings.log_level = "DEBUG"

            with patch(
                "sentinel.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_console.return_value = MagicMock()

                logger = get_logger()

                mock_console.assert_called_once_with(use_json=use_json, level="DEBUG")
                assert logger is mock_console.return_value

    def test_returns_singleton(self):
        """Test get_logger() returns the same instance on every call."""
        assert get_logger() is get_logger()
