"""Result presenter for album client outcomes.

Forwards decoded albums to a display sink as text blocks, and failures to the
sink's error channel as (kind, message).

Usage:
    presenter = AlbumResultPresenter(sink=ConsoleDisplaySink(), logger=get_logger())
    presenter.present_albums(await api.list_albums())
    presenter.present_album(await api.get_album(3), notify=True)
"""

from src.core.errors import DomainError
from src.core.result import Failure, Result
from src.domain.entities.album import Album, AlbumCollection
from src.domain.protocols.display_sink_protocol import DisplaySinkProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


def format_album(album: Album) -> str:
    """Render one album as a text block."""
    return (
        f" Album id : {album.id}\n"
        f" Album title : {album.title}\n"
        f" Album user id : {album.user_id}\n"
    )


class AlbumResultPresenter:
    """Dispatches album Results to a display sink.

    Attributes:
        _sink: Where text, notifications and errors go.
        _logger: Structured logger (album titles are logged at info level).
    """

    def __init__(self, *, sink: DisplaySinkProtocol, logger: LoggerProtocol) -> None:
        self._sink = sink
        self._logger = logger

    def present_albums(self, result: Result[AlbumCollection, DomainError]) -> bool:
        """Present the outcome of a collection operation.

        Args:
            result: Result of list_albums or list_albums_by_user.

        Returns:
            bool: True if the result was a Success.
        """
        if isinstance(result, Failure):
            return self._present_failure(result)

        for album in result.value:
            self._logger.info("album_received", album_id=album.id, title=album.title)
            self._sink.append_text(format_album(album))
        return True

    def present_album(
        self,
        result: Result[Album, DomainError],
        *,
        notify: bool = False,
    ) -> bool:
        """Present the outcome of a single-album operation.

        Args:
            result: Result of get_album or create_album.
            notify: Also show the album title as a transient notification.

        Returns:
            bool: True if the result was a Success.
        """
        if isinstance(result, Failure):
            return self._present_failure(result)

        album = result.value
        self._logger.info("album_received", album_id=album.id, title=album.title)
        self._sink.append_text(format_album(album))
        if notify:
            self._sink.notify(album.title)
        return True

    def _present_failure(self, result: Failure[DomainError]) -> bool:
        error = result.error
        self._logger.warning(
            "album_request_failed",
            kind=error.kind.value,
            status_code=error.status_code,
        )
        self._sink.show_error(error.kind, error.message)
        return False
