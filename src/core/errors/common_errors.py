"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures detected before any request

Usage:
    from src.core.errors import ValidationError
    from src.core.result import Failure

    return Failure(error=ValidationError(
        message="user_id must be a non-negative integer",
        field="user_id",
    ))
"""

from dataclasses import dataclass

from src.core.enums import ErrorKind
from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure (no network call was made).

    Attributes:
        kind: Always ErrorKind.INVALID_ARGUMENT.
        message: Human-readable message.
        field: Argument name that failed validation.
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT
    field: str | None = None
