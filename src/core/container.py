"""Composition root.

Builds the objects the application wires together. Adapter selection is
centralized here so the rest of the code depends only on protocols.

Architecture:
    - Logger: application-scoped singleton (@lru_cache), since it configures
      structlog globally
    - Albums API client: NOT a singleton. Each call builds a new client and
      the caller owns it and passes it explicitly to whoever needs it

Usage:
    from src.core.container import create_albums_api, get_logger

    logger = get_logger()
    api = create_albums_api()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import Settings, get_settings

if TYPE_CHECKING:
    import httpx

    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.albums.api.albums_api import AlbumsAPI


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=not settings.is_development, level=level)


def create_albums_api(
    settings: Settings | None = None,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    transport: "httpx.AsyncBaseTransport | None" = None,
) -> "AlbumsAPI":
    """Build an albums API client from settings.

    Explicit arguments override the corresponding settings.

    Args:
        settings: Settings to read (defaults to get_settings()).
        base_url: Base URL override.
        timeout: Timeout override in seconds.
        transport: Optional httpx transport (tests).

    Returns:
        AlbumsAPI: New client owned by the caller.
    """
    from src.infrastructure.albums.api.albums_api import AlbumsAPI

    settings = settings or get_settings()
    return AlbumsAPI(
        base_url=base_url or settings.albums_api_base_url,
        timeout=timeout if timeout is not None else settings.albums_api_timeout,
        transport=transport,
    )
