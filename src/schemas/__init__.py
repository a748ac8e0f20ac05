"""Wire schemas for the remote albums API.

All Pydantic models for JSON payload validation and serialization.
Schemas are kept separate from domain entities (wire-format concerns only).

Usage:
    from src.schemas import AlbumPayload
"""

from src.schemas.album_schemas import ALBUM_LIST_ADAPTER, AlbumPayload

__all__ = [
    "ALBUM_LIST_ADAPTER",
    "AlbumPayload",
]
