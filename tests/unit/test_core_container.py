"""Unit tests for container functions.

Tests cover:
- get_logger() adapter configuration per environment
- Singleton pattern (same logger instance returned)
- create_albums_api() reads settings and honors overrides
- create_albums_api() returns a new client per call

Architecture:
- Unit tests with mocked settings and adapters
- Tests centralized dependency injection pattern
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from src.core.config import Settings
from src.core.container import create_albums_api, get_logger
from src.core.enums import Environment
from src.infrastructure.albums.api.albums_api import AlbumsAPI


def make_settings(**overrides) -> Settings:
    values = {
        "environment": Environment.DEVELOPMENT,
        "debug": False,
        "log_level": "INFO",
        "albums_api_base_url": "https://albums.test",
        "albums_api_timeout": 5.0,
    } | overrides
    return Settings(_env_file=None, **values)


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    def setup_method(self):
        get_logger.cache_clear()

    def teardown_method(self):
        get_logger.cache_clear()

    def test_development_uses_human_readable_output(self):
        """Test get_logger() builds a non-JSON ConsoleAdapter in development."""
        with patch(
            "src.core.container.get_settings",
            return_value=make_settings(environment=Environment.DEVELOPMENT),
        ):
            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_adapter = MagicMock()
                mock_console.return_value = mock_adapter

                logger = get_logger()

                mock_console.assert_called_once_with(use_json=False, level="INFO")
                assert logger == mock_adapter

    @pytest.mark.parametrize(
        "environment",
        [Environment.TESTING, Environment.CI, Environment.PRODUCTION],
    )
    def test_other_environments_use_json_output(self, environment):
        """Test get_logger() builds a JSON ConsoleAdapter outside development."""
        with patch(
            "src.core.container.get_settings",
            return_value=make_settings(environment=environment),
        ):
            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=True, level="INFO")

    def test_debug_forces_debug_level(self):
        """Test debug mode lowers the level to DEBUG."""
        with patch(
            "src.core.container.get_settings",
            return_value=make_settings(debug=True, log_level="ERROR"),
        ):
            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=False, level="DEBUG")

    def test_get_logger_returns_singleton(self):
        """Test get_logger() returns the same instance on repeated calls."""
        with patch("src.core.container.get_settings", return_value=make_settings()):
            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_console.return_value = MagicMock()

                first = get_logger()
                second = get_logger()

                assert first is second
                mock_console.assert_called_once()


@pytest.mark.unit
class TestCreateAlbumsAPI:
    """Test create_albums_api() factory."""

    def test_builds_client_from_settings(self):
        """Test base URL and timeout come from settings."""
        api = create_albums_api(make_settings())

        assert isinstance(api, AlbumsAPI)
        assert api._base_url == "https://albums.test"
        assert api._timeout == 5.0
        assert api._transport is None

    def test_explicit_arguments_override_settings(self):
        """Test explicit base_url, timeout and transport win."""
        transport = httpx.MockTransport(lambda request: httpx.Response(200))

        api = create_albums_api(
            make_settings(),
            base_url="http://localhost:8080/",
            timeout=1.5,
            transport=transport,
        )

        assert api._base_url == "http://localhost:8080"
        assert api._timeout == 1.5
        assert api._transport is transport

    def test_defaults_to_get_settings(self):
        """Test settings are read from get_settings() when not given."""
        with patch(
            "src.core.container.get_settings",
            return_value=make_settings(albums_api_base_url="https://other.test"),
        ):
            api = create_albums_api()

        assert api._base_url == "https://other.test"

    def test_not_a_singleton(self):
        """Test every call returns a new client."""
        settings = make_settings()

        assert create_albums_api(settings) is not create_albums_api(settings)
