"""Album domain entity.

An album record as served by the remote /albums resource.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Immutable value once constructed; equality by field values
    - Wire naming (userId) is handled by the mapper, not here

Usage:
    from src.domain.entities import Album

    draft = Album(id=0, title="My Title", user_id=5)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Album:
    """Album record.

    Attributes:
        id: Album identifier. Server-assigned; drafts sent for creation may
            carry any placeholder (the server replaces it).
        title: Album title.
        user_id: Identifier of the owning user.

    Example:
        >>> album = Album(id=1, title="quidem molestiae enim", user_id=1)
        >>> album == Album(id=1, title="quidem molestiae enim", user_id=1)
        True
    """

    id: int
    title: str
    user_id: int


# Ordered as returned by the server, no dedup
type AlbumCollection = list[Album]
