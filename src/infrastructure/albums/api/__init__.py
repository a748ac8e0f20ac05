"""Albums API clients package.

HTTP clients for the remote /albums resource.
"""

from src.infrastructure.albums.api.albums_api import AlbumsAPI

__all__ = [
    "AlbumsAPI",
]
