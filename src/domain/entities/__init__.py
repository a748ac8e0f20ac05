"""Domain entities.

Pure data entities with no framework dependencies.
"""

from src.domain.entities.album import Album, AlbumCollection

__all__ = [
    "Album",
    "AlbumCollection",
]
