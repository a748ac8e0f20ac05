"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for error handling without exceptions
- Settings and constants

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorKind
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
