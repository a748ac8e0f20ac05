"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Endpoints: Default remote endpoint and resource paths
- Timeouts: Default timeouts for the albums API
- Limits: Truncation and safety limits

Example:
    >>> from src.core.constants import ALBUMS_PATH, ALBUM_PATH
    >>> spec = RequestSpec(method="GET", path_template=ALBUM_PATH, path_params={"id": 3})
"""

# =============================================================================
# Endpoints
# =============================================================================

DEFAULT_ALBUMS_API_BASE_URL: str = "https://jsonplaceholder.typicode.com"
"""Default base endpoint serving the /albums resource."""

ALBUMS_PATH: str = "/albums"
"""Collection endpoint (list, filtered list, create)."""

ALBUM_PATH: str = "/albums/{id}"
"""Single-resource endpoint template ({id} is the album id)."""

USER_ID_QUERY_PARAM: str = "userId"
"""Query parameter name used to filter albums by owner."""


# =============================================================================
# Timeouts
# =============================================================================

ALBUMS_API_TIMEOUT_DEFAULT: float = 10.0
"""Default request timeout in seconds.

Covers connect, read, write and pool waits together. Override with
ALBUMS_API_TIMEOUT.
"""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body kept in error details (truncation limit)."""
