"""Pytest configuration shared by unit and integration tests.

This configuration provides:
1. A fixed base URL so HTTP mocks never depend on local settings
2. Album payload fixtures in the wire shape (camelCase userId)
3. Settings cache isolation between tests
"""

from typing import Any

import pytest

from src.core.config import get_settings
from tests.utils.payloads import album_payload

TEST_BASE_URL = "https://albums.test"


@pytest.fixture
def base_url() -> str:
    """Base URL used by every client under test."""
    return TEST_BASE_URL


@pytest.fixture
def albums_payload() -> list[dict[str, Any]]:
    """Two albums owned by user 1, in server order."""
    return [
        album_payload(1, "quidem molestiae enim", 1),
        album_payload(2, "sunt qui excepturi placeat culpa", 1),
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached Settings so environment patches take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
