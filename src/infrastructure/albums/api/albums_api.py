"""Albums API client.

HTTP client for the remote albums resource.

Endpoints:
    GET  /albums              - List all albums
    GET  /albums?userId={id}  - List albums owned by one user
    GET  /albums/{id}         - Get a single album
    POST /albums              - Create an album

Every operation validates its arguments locally, builds a RequestSpec,
performs exactly one HTTP call and returns a Result. No operation raises
for an expected failure and none retries.
"""

from typing import Any

import httpx
import structlog

from src.core.constants import (
    ALBUM_PATH,
    ALBUMS_API_TIMEOUT_DEFAULT,
    ALBUMS_PATH,
    USER_ID_QUERY_PARAM,
)
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.album import Album, AlbumCollection
from src.domain.errors import AlbumInvalidResponseError
from src.infrastructure.albums.mappers.album_mapper import AlbumDecodeError, AlbumMapper
from src.infrastructure.http.base_api_client import BaseResourceAPIClient
from src.infrastructure.http.request_spec import RequestSpec

logger = structlog.get_logger(__name__)


def _validate_identifier(value: Any, field: str) -> Failure[DomainError] | None:
    """Reject anything that is not a non-negative int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return Failure(
            error=ValidationError(
                message=f"{field} must be a non-negative integer, got {value!r}",
                field=field,
            )
        )
    return None


def _validate_draft(draft: Any) -> Failure[DomainError] | None:
    """Check a create-album draft before it is serialized."""
    if not isinstance(draft, Album):
        return Failure(
            error=ValidationError(
                message=f"draft must be an Album, got {type(draft).__name__}",
                field="draft",
            )
        )
    if not isinstance(draft.title, str):
        return Failure(
            error=ValidationError(
                message=f"draft.title must be a string, got {draft.title!r}",
                field="title",
            )
        )
    if isinstance(draft.id, bool) or not isinstance(draft.id, int):
        return Failure(
            error=ValidationError(
                message=f"draft.id must be an integer, got {draft.id!r}",
                field="id",
            )
        )
    return _validate_identifier(draft.user_id, "user_id")


class AlbumsAPI(BaseResourceAPIClient):
    """HTTP client for the albums resource.

    Returns decoded Album entities; JSON shape knowledge lives in AlbumMapper.
    Holds no mutable state, so one instance can serve concurrent callers.

    Example:
        >>> api = AlbumsAPI(base_url="https://jsonplaceholder.typicode.com")
        >>> result = await api.get_album(3)
        >>> if isinstance(result, Success):
        ...     print(result.value.title)
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = ALBUMS_API_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
        mapper: AlbumMapper | None = None,
    ) -> None:
        """Initialize albums API client.

        Args:
            base_url: API base URL.
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport replacing the network.
            mapper: Optional mapper (defaults to AlbumMapper()).
        """
        super().__init__(
            base_url=base_url,
            resource_name="albums",
            timeout=timeout,
            transport=transport,
        )
        self._mapper = mapper or AlbumMapper()

    async def list_albums(self) -> Result[AlbumCollection, DomainError]:
        """Fetch every album.

        Returns:
            Success(list[Album]): Albums in server order (may be empty).
            Failure(DomainError): On network, HTTP or decode error.
        """
        spec = RequestSpec(method="GET", path_template=ALBUMS_PATH)
        return await self._fetch_collection(spec, operation="list_albums")

    async def list_albums_by_user(
        self, user_id: int
    ) -> Result[AlbumCollection, DomainError]:
        """Fetch the albums owned by one user.

        Args:
            user_id: Owner id, sent as the only query parameter (userId).

        Returns:
            Success(list[Album]): Albums in server order (may be empty).
            Failure(ValidationError): If user_id is not a non-negative int;
                no request is sent.
            Failure(DomainError): On network, HTTP or decode error.
        """
        invalid = _validate_identifier(user_id, "user_id")
        if invalid is not None:
            logger.warning("albums_api_invalid_argument", operation="list_albums_by_user")
            return invalid

        spec = RequestSpec(
            method="GET",
            path_template=ALBUMS_PATH,
            query_params={USER_ID_QUERY_PARAM: user_id},
        )
        return await self._fetch_collection(spec, operation="list_albums_by_user")

    async def get_album(self, album_id: int) -> Result[Album, DomainError]:
        """Fetch a single album.

        Args:
            album_id: Album id substituted into /albums/{id}.

        Returns:
            Success(Album): The album.
            Failure(ValidationError): If album_id is not a non-negative int;
                no request is sent.
            Failure(DomainError): On network, HTTP or decode error.
        """
        invalid = _validate_identifier(album_id, "album_id")
        if invalid is not None:
            logger.warning("albums_api_invalid_argument", operation="get_album")
            return invalid

        spec = RequestSpec(
            method="GET",
            path_template=ALBUM_PATH,
            path_params={"id": album_id},
        )
        return await self._fetch_single(spec, operation="get_album")

    async def create_album(self, draft: Album) -> Result[Album, DomainError]:
        """Create an album.

        The draft is sent as the JSON body. The album in the response is the
        one returned, so the server-assigned id replaces the draft's id.

        Args:
            draft: Album to create.

        Returns:
            Success(Album): The created album (status 201 or 200).
            Failure(ValidationError): If the draft is invalid; no request is sent.
            Failure(DomainError): On network, HTTP or decode error.
        """
        invalid = _validate_draft(draft)
        if invalid is not None:
            logger.warning("albums_api_invalid_argument", operation="create_album")
            return invalid

        spec = RequestSpec(
            method="POST",
            path_template=ALBUMS_PATH,
            body=self._mapper.to_payload(draft),
        )
        return await self._fetch_single(spec, operation="create_album")

    async def _fetch_collection(
        self, spec: RequestSpec, *, operation: str
    ) -> Result[AlbumCollection, DomainError]:
        result = await self._execute_and_parse_list(spec, operation=operation)
        if isinstance(result, Failure):
            return result

        try:
            albums = self._mapper.map_albums(result.value)
        except AlbumDecodeError as e:
            return self._mapping_failure(e, result.status_code, operation)

        logger.info("albums_api_albums_fetched", operation=operation, count=len(albums))
        return Success(value=albums, status_code=result.status_code)

    async def _fetch_single(
        self, spec: RequestSpec, *, operation: str
    ) -> Result[Album, DomainError]:
        result = await self._execute_and_parse_object(spec, operation=operation)
        if isinstance(result, Failure):
            return result

        try:
            album = self._mapper.map_album(result.value)
        except AlbumDecodeError as e:
            return self._mapping_failure(e, result.status_code, operation)

        logger.info("albums_api_album_fetched", operation=operation, album_id=album.id)
        return Success(value=album, status_code=result.status_code)

    def _mapping_failure(
        self, error: AlbumDecodeError, status_code: int, operation: str
    ) -> Failure[DomainError]:
        return Failure(
            error=AlbumInvalidResponseError(
                message=str(error),
                operation=operation,
                status_code=status_code,
            )
        )
