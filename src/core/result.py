"""Result types for railway-oriented programming.

Every album client operation returns a Result instead of raising. A Success
carries the decoded value plus the 2xx status code it arrived with; a Failure
carries a classified error (see src/core/errors and src/domain/errors).

Usage:
    result = await api.get_album(3)
    match result:
        case Success(value=album, status_code=status):
            print(f"{album.title} ({status})")
        case Failure(error=error):
            print(f"{error.kind.value}: {error.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.core.enums import ErrorKind

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
        status_code: HTTP status code of the response (always 2xx).

    Raises:
        ValueError: If status_code is outside the 200-299 range.
    """

    value: T
    status_code: int = 200

    def __post_init__(self) -> None:
        if not 200 <= self.status_code <= 299:
            raise ValueError(
                f"Success requires a 2xx status code, got {self.status_code}"
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def kind(self) -> ErrorKind | None:
        """Error kind of the wrapped error."""
        return getattr(self.error, "kind", None)

    @property
    def status_code(self) -> int | None:
        """HTTP status code carried by the error, None when no response."""
        return getattr(self.error, "status_code", None)

    @property
    def message(self) -> str:
        """Human-readable message of the wrapped error."""
        return getattr(self.error, "message", str(self.error))


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
