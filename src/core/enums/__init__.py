"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ErrorKind, Environment
"""

from src.core.enums.environment import Environment
from src.core.enums.error_kind import ErrorKind

__all__ = ["ErrorKind", "Environment"]
