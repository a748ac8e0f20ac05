"""Album wire schemas.

Pydantic schemas for the /albums JSON payloads. Includes:
- AlbumPayload: one album as it travels over the wire (camelCase userId)
- ALBUM_LIST_ADAPTER: validator for a JSON array of albums
- Domain conversion methods

Types are strict: a string "5" is not accepted where an integer is expected,
and booleans are not integers.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter

from src.domain.entities.album import Album


class AlbumPayload(BaseModel):
    """Single album JSON object.

    Attributes:
        id: Album identifier.
        title: Album title.
        user_id: Owner id (serialized as "userId").
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: StrictInt = Field(..., description="Album identifier")
    title: StrictStr = Field(..., description="Album title")
    user_id: StrictInt = Field(..., alias="userId", description="Owner user id")

    @classmethod
    def from_domain(cls, album: Album) -> "AlbumPayload":
        """Convert domain entity to wire schema.

        Args:
            album: Album entity.

        Returns:
            AlbumPayload for request bodies.
        """
        return cls(id=album.id, title=album.title, user_id=album.user_id)

    def to_domain(self) -> Album:
        """Convert wire schema to domain entity.

        Returns:
            Album entity.
        """
        return Album(id=self.id, title=self.title, user_id=self.user_id)


ALBUM_LIST_ADAPTER: TypeAdapter[list[AlbumPayload]] = TypeAdapter(list[AlbumPayload])
"""Validator for a JSON array of album objects."""
