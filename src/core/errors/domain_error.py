"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for ALL album client errors. Errors flow
through the system as data (inside Failure), not as exceptions.

Architecture:
- Base class for all error types (core, domain)
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorKind

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        kind: ErrorKind = ErrorKind.HTTP
"""

from dataclasses import dataclass
from src.core.enums import ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        kind: Machine-readable error kind (enum).
        message: Human-readable error message.
        status_code: HTTP status of the response, None when none was received.
    """

    kind: ErrorKind
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        """String representation of error."""
        if self.status_code is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.kind.value} ({self.status_code}): {self.message}"
