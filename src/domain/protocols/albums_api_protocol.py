"""AlbumsAPIProtocol definition (port for the remote albums resource).

Callers (the CLI runner, presentation code, tests) depend on this protocol
rather than on the httpx-backed client, so a stub can stand in for the
network.

Contract:
    - Every operation returns a Result; none raises for expected failures
    - Success always carries a 2xx status code
    - Failure carries ValidationError (bad argument, no request sent) or
      one of the AlbumError subclasses
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.album import Album, AlbumCollection


class AlbumsAPIProtocol(Protocol):
    """Protocol for album resource clients."""

    async def list_albums(self) -> Result[AlbumCollection, DomainError]:
        """Fetch every album.

        Returns:
            Success(list[Album]): Albums in server order.
            Failure(DomainError): On any error.
        """
        ...

    async def list_albums_by_user(
        self, user_id: int
    ) -> Result[AlbumCollection, DomainError]:
        """Fetch the albums owned by one user.

        Args:
            user_id: Owner id (non-negative).

        Returns:
            Success(list[Album]): Albums in server order.
            Failure(DomainError): On any error.
        """
        ...

    async def get_album(self, album_id: int) -> Result[Album, DomainError]:
        """Fetch a single album.

        Args:
            album_id: Album id (non-negative).

        Returns:
            Success(Album): The album.
            Failure(DomainError): On any error.
        """
        ...

    async def create_album(self, draft: Album) -> Result[Album, DomainError]:
        """Create an album from a draft.

        Args:
            draft: Album to create; its id is replaced by the server's.

        Returns:
            Success(Album): The created album as echoed by the server.
            Failure(DomainError): On any error.
        """
        ...
