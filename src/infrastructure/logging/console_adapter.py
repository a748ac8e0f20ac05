"""structlog-backed logger for the album client.

ConsoleAdapter configures structlog once for the whole process and then
forwards events to it:
- development: coloured key=value lines for a terminal
- testing, ci, production: one JSON object per line

Log lines go to stderr by default so stdout carries only album output.
ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def _exception_fields(error: Exception | None) -> dict[str, str]:
    if error is None:
        return {}
    return {"error_type": type(error).__name__, "error_message": str(error)}


class ConsoleAdapter:
    """Structured console logger.

    Args:
        use_json: Render JSON lines instead of the human-readable format.
        level: Lowest level name that is emitted; unknown names mean INFO.
        stream: Destination stream, stderr when omitted.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        stream: TextIO | None = None,
    ) -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message (str): Event name.
            error (Exception | None): Exception whose type and text are added
                as error_type and error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **context, **_exception_fields(error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event.

        Args:
            message (str): Event name.
            error (Exception | None): Exception whose type and text are added
                as error_type and error_message.
            **context: Structured key-value context.
        """
        self._logger.critical(message, **context, **_exception_fields(error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``.

        Args:
            **context: Context to bind to all subsequent events.

        Returns:
            ConsoleAdapter: New adapter instance; this one is unchanged.
        """
        scoped = object.__new__(ConsoleAdapter)
        scoped._logger = self._logger.bind(**context)
        return scoped

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter with bound context (alias for bind).

        Args:
            **context: Context to bind to all subsequent events.

        Returns:
            ConsoleAdapter: New adapter instance.
        """
        return self.bind(**context)
