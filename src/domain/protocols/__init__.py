"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure and presentation adapters implement these protocols without
inheritance.

Usage:
    from src.domain.protocols import AlbumsAPIProtocol, LoggerProtocol
"""

from src.domain.protocols.albums_api_protocol import AlbumsAPIProtocol
from src.domain.protocols.display_sink_protocol import DisplaySinkProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AlbumsAPIProtocol",
    "DisplaySinkProtocol",
    "LoggerProtocol",
]
