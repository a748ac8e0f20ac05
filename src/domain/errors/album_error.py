"""Album client error types.

These errors are part of the album client contract - they define the failure
cases every client operation can return (besides ValidationError for bad
arguments, see src/core/errors).

Architecture:
- Domain layer errors (part of the client contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- The albums API client returns these, it never raises them

Usage:
    from src.domain.errors import AlbumError, AlbumHttpError
    from src.core.result import Result, Success, Failure

    async def get_album(self, album_id: int) -> Result[Album, DomainError]:
        if response.status_code == 404:
            return Failure(error=AlbumHttpError(...))
        return Success(value=album, status_code=response.status_code)
"""

from dataclasses import dataclass

from src.core.enums import ErrorKind
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AlbumError(DomainError):
    """Base albums API error.

    Attributes:
        kind: ErrorKind of the failure.
        message: Human-readable message.
        operation: Client operation that failed (list_albums, get_album, ...).
        status_code: HTTP status, None when no response was received.
    """

    operation: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlbumUnavailableError(AlbumError):
    """Transport-level failure: no response was received.

    Returned when:
    - Connection timeout or read timeout occurs
    - DNS resolution fails
    - Connection is refused or reset

    Attributes:
        kind: Always ErrorKind.NETWORK.
        is_timeout: Whether the failure was a timeout.
    """

    kind: ErrorKind = ErrorKind.NETWORK
    is_timeout: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class AlbumHttpError(AlbumError):
    """Response received with a non-2xx status.

    Attributes:
        kind: Always ErrorKind.HTTP.
        status_code: The non-2xx status code.
        response_body: Truncated raw response body for debugging.
        retry_after: Seconds from a Retry-After header (429 only). Reported
            as data; the client never retries.
    """

    kind: ErrorKind = ErrorKind.HTTP
    response_body: str | None = None
    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlbumInvalidResponseError(AlbumError):
    """2xx response whose body does not match the expected shape.

    Returned when:
    - Response JSON is malformed
    - A required field is missing or has the wrong type
    - An array was expected and an object arrived (or vice versa)

    Attributes:
        kind: Always ErrorKind.DECODE.
        response_body: Truncated raw response body for debugging.
    """

    kind: ErrorKind = ErrorKind.DECODE
    response_body: str | None = None
