"""Album mapper.

Converts between album JSON payloads and Album entities. Contains all the
knowledge about the wire shape:

    {
        "id": 1,
        "title": "quidem molestiae enim",
        "userId": 1
    }

A payload with a missing or mistyped field is rejected as a whole; the
mapper never builds a partially-populated Album.
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from src.domain.entities.album import Album, AlbumCollection
from src.schemas.album_schemas import ALBUM_LIST_ADAPTER, AlbumPayload

logger = structlog.get_logger(__name__)


class AlbumDecodeError(ValueError):
    """Raised when a payload does not match the album shape."""


def _describe(error: ValidationError) -> str:
    """Flatten pydantic validation errors into one line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "body"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class AlbumMapper:
    """Mapper for album payloads.

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = AlbumMapper()
        >>> album = mapper.map_album({"id": 1, "title": "t", "userId": 2})
        >>> mapper.decode_album(mapper.encode_album(album)) == album
        True
    """

    def to_payload(self, album: Album) -> dict[str, Any]:
        """Convert an Album to a JSON-ready dict (wire field names).

        Args:
            album: Album entity.

        Returns:
            Dict with id, title and userId keys.
        """
        return AlbumPayload.from_domain(album).model_dump(by_alias=True)

    def encode_album(self, album: Album) -> bytes:
        """Serialize an Album to JSON bytes.

        Args:
            album: Album entity.

        Returns:
            UTF-8 encoded JSON object.
        """
        return AlbumPayload.from_domain(album).model_dump_json(by_alias=True).encode()

    def map_album(self, data: Any) -> Album:
        """Map a parsed JSON object to an Album.

        Args:
            data: Parsed JSON value.

        Returns:
            Album entity.

        Raises:
            AlbumDecodeError: If data is not a valid album object.
        """
        try:
            return AlbumPayload.model_validate(data).to_domain()
        except ValidationError as e:
            detail = _describe(e)
            logger.warning("album_mapping_failed", error=detail)
            raise AlbumDecodeError(f"Invalid album payload: {detail}") from e

    def map_albums(self, data: Any) -> AlbumCollection:
        """Map a parsed JSON array to a list of Albums, keeping order.

        Args:
            data: Parsed JSON value.

        Returns:
            List of Album entities.

        Raises:
            AlbumDecodeError: If data is not an array of valid album objects.
        """
        try:
            payloads = ALBUM_LIST_ADAPTER.validate_python(data)
        except ValidationError as e:
            detail = _describe(e)
            logger.warning("album_list_mapping_failed", error=detail)
            raise AlbumDecodeError(f"Invalid album list payload: {detail}") from e
        return [payload.to_domain() for payload in payloads]

    def decode_album(self, raw: bytes | str) -> Album:
        """Decode JSON bytes into an Album.

        Args:
            raw: JSON document.

        Returns:
            Album entity.

        Raises:
            AlbumDecodeError: On malformed JSON or an invalid album object.
        """
        return self.map_album(self._load(raw))

    def decode_albums(self, raw: bytes | str) -> AlbumCollection:
        """Decode JSON bytes into a list of Albums.

        An empty document decodes to an empty list.

        Args:
            raw: JSON document.

        Returns:
            List of Album entities.

        Raises:
            AlbumDecodeError: On malformed JSON or an invalid album array.
        """
        if not raw.strip():
            return []
        return self.map_albums(self._load(raw))

    @staticmethod
    def _load(raw: bytes | str) -> Any:
        try:
            return json.loads(raw)
        except ValueError as e:
            raise AlbumDecodeError(f"Malformed JSON: {e}") from e
