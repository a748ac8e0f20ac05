"""Console presentation of album results."""

from src.presentation.console.album_presenter import AlbumResultPresenter, format_album
from src.presentation.console.display_sinks import ConsoleDisplaySink, RecordingDisplaySink

__all__ = [
    "AlbumResultPresenter",
    "ConsoleDisplaySink",
    "RecordingDisplaySink",
    "format_album",
]
