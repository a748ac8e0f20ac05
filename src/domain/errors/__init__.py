"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import AlbumError, AlbumHttpError
"""

from src.domain.errors.album_error import (
    AlbumError,
    AlbumHttpError,
    AlbumInvalidResponseError,
    AlbumUnavailableError,
)

__all__ = [
    "AlbumError",
    "AlbumHttpError",
    "AlbumInvalidResponseError",
    "AlbumUnavailableError",
]
