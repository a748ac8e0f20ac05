"""Album mappers package.

Converts album JSON payloads to and from Album entities.
"""

from src.infrastructure.albums.mappers.album_mapper import AlbumDecodeError, AlbumMapper

__all__ = [
    "AlbumDecodeError",
    "AlbumMapper",
]
