"""Logging port used by the presenter and the command-line runner.

Events are snake_case names plus keyword context, for example
``logger.info("album_received", album_id=3, title="...")``. Request-level
diagnostics inside the HTTP client go straight through structlog; this port
covers the objects that receive a logger by injection.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.warning("album_request_failed", kind="http", status_code=404)
    scoped = logger.bind(command="demo")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger: one event name, keyword context, five levels."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level.

        Args:
            message: Event name.
            error: Exception whose type and text are added to the event.
            **context: Event fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at critical level; same arguments as error()."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event.

        The receiver is left untouched.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as bind()."""
        ...
