"""Albums resource integration.

Structure:
- api/: httpx client for the /albums endpoints
- mappers/: JSON payload <-> Album conversion
"""

from src.infrastructure.albums.api import AlbumsAPI
from src.infrastructure.albums.mappers import AlbumMapper

__all__ = [
    "AlbumMapper",
    "AlbumsAPI",
]
