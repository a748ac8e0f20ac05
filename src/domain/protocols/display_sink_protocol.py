"""DisplaySinkProtocol definition.

A display sink renders album client outcomes to a user. It is the seam
between the Result Presenter and whatever surface shows the text (a console,
a GUI text view, a test recorder).

Implementations do NOT inherit from this protocol (PEP 544 structural
subtyping).
"""

from typing import Protocol

from src.core.enums import ErrorKind


class DisplaySinkProtocol(Protocol):
    """Protocol for rendering presenter output."""

    def append_text(self, text: str) -> None:
        """Append a block of text to the persistent display area.

        Args:
            text: Text to append (may contain newlines).
        """
        ...

    def notify(self, text: str) -> None:
        """Show a short transient notification.

        Args:
            text: Notification text.
        """
        ...

    def show_error(self, kind: ErrorKind, message: str) -> None:
        """Render a failed outcome.

        Args:
            kind: Classified error kind.
            message: Human-readable error message.
        """
        ...
