"""Display sinks implementing DisplaySinkProtocol."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from src.core.enums import ErrorKind


class ConsoleDisplaySink:
    """Writes presenter output to text streams.

    Text blocks and notifications go to ``out``; errors go to ``err``.
    """

    def __init__(self, *, out: TextIO | None = None, err: TextIO | None = None) -> None:
        """Initialize the sink.

        Args:
            out (TextIO | None): Stream for text and notifications, stdout when omitted.
            err (TextIO | None): Stream for errors, stderr when omitted.
        """
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    def append_text(self, text: str) -> None:
        """Write a block of text as-is.

        Args:
            text (str): Text to write; the caller supplies any newline.
        """
        self._out.write(text)
        self._out.flush()

    def notify(self, text: str) -> None:
        """Write a one-line notice prefixed with ``[notice]``.

        Args:
            text (str): Notice text.
        """
        self._out.write(f"[notice] {text}\n")
        self._out.flush()

    def show_error(self, kind: ErrorKind, message: str) -> None:
        """Write a one-line error prefixed with its kind.

        Args:
            kind (ErrorKind): Error category shown in brackets.
            message (str): Error description.
        """
        self._err.write(f"[{kind.value}] {message}\n")
        self._err.flush()


@dataclass
class RecordingDisplaySink:
    """Keeps presenter output in memory.

    Attributes:
        texts: Appended text blocks, in order.
        notifications: Notification texts, in order.
        errors: (kind, message) pairs, in order.
    """

    texts: list[str] = field(default_factory=list)
    notifications: list[str] = field(default_factory=list)
    errors: list[tuple[ErrorKind, str]] = field(default_factory=list)

    def append_text(self, text: str) -> None:
        """Record a text block.

        Args:
            text (str): Text block.
        """
        self.texts.append(text)

    def notify(self, text: str) -> None:
        """Record a notification.

        Args:
            text (str): Notice text.
        """
        self.notifications.append(text)

    def show_error(self, kind: ErrorKind, message: str) -> None:
        """Record an error.

        Args:
            kind (ErrorKind): Error category.
            message (str): Error description.
        """
        self.errors.append((kind, message))
