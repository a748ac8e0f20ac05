"""
Album client command-line entry point.

Builds settings, logger, albums API client, presenter and display sink, then
runs the requested operation(s) and renders the outcome.

Usage:
    python -m src.main demo
    python -m src.main list
    python -m src.main list --user-id 1
    python -m src.main get 3
    python -m src.main create --title "My Title" --user-id 5

Exit status is 0 when every operation succeeded and 1 otherwise.
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence

from src.core.config import get_settings
from src.core.container import create_albums_api, get_logger
from src.domain.entities.album import Album
from src.domain.protocols.albums_api_protocol import AlbumsAPIProtocol
from src.domain.protocols.display_sink_protocol import DisplaySinkProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.console.album_presenter import AlbumResultPresenter
from src.presentation.console.display_sinks import ConsoleDisplaySink


def positive_float(value: str) -> float:
    """Parse a strictly positive number of seconds for --timeout."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not seconds > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Returns:
        argparse.ArgumentParser: Parser with demo/list/get/create subcommands.
    """
    parser = argparse.ArgumentParser(
        prog="album-client",
        description="Fetch and create album records on a remote REST endpoint",
    )
    parser.add_argument(
        "--base-url",
        help="Base endpoint serving /albums (overrides ALBUMS_API_BASE_URL)",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        help="Request timeout in seconds (overrides ALBUMS_API_TIMEOUT)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "demo",
        help="Create an album, then list all, list by user 1 and get album 3",
    )

    list_parser = subparsers.add_parser("list", help="List albums")
    list_parser.add_argument("--user-id", type=int, help="Only albums of this user")

    get_parser = subparsers.add_parser("get", help="Get one album")
    get_parser.add_argument("album_id", type=int, help="Album id")

    create_parser = subparsers.add_parser("create", help="Create an album")
    create_parser.add_argument("--title", required=True, help="Album title")
    create_parser.add_argument("--user-id", type=int, required=True, help="Owner id")
    create_parser.add_argument(
        "--id",
        type=int,
        default=0,
        help="Placeholder id sent in the body (the server assigns the real one)",
    )

    return parser


async def run_demo(api: AlbumsAPIProtocol, presenter: AlbumResultPresenter) -> bool:
    """Run the four operations concurrently and present them in order.

    Args:
        api: Albums client shared by all four calls.
        presenter: Presenter receiving each Result.

    Returns:
        bool: True if every operation succeeded.
    """
    created, all_albums, user_albums, single = await asyncio.gather(
        api.create_album(Album(id=0, title="My Title", user_id=5)),
        api.list_albums(),
        api.list_albums_by_user(1),
        api.get_album(3),
    )
    outcomes = [
        presenter.present_album(created),
        presenter.present_albums(all_albums),
        presenter.present_albums(user_albums),
        presenter.present_album(single, notify=True),
    ]
    return all(outcomes)


async def run_command(
    args: argparse.Namespace,
    api: AlbumsAPIProtocol,
    presenter: AlbumResultPresenter,
) -> bool:
    """Dispatch a parsed command to the client and presenter.

    Args:
        args: Parsed command-line arguments.
        api: Albums client.
        presenter: Presenter receiving the Result.

    Returns:
        bool: True if the operation(s) succeeded.
    """
    if args.command == "demo":
        return await run_demo(api, presenter)
    if args.command == "list":
        if args.user_id is None:
            return presenter.present_albums(await api.list_albums())
        return presenter.present_albums(await api.list_albums_by_user(args.user_id))
    if args.command == "get":
        return presenter.present_album(await api.get_album(args.album_id), notify=True)
    if args.command == "create":
        draft = Album(id=args.id, title=args.title, user_id=args.user_id)
        return presenter.present_album(await api.create_album(draft))
    raise ValueError(f"Unknown command: {args.command}")


def main(
    argv: Sequence[str] | None = None,
    *,
    sink: DisplaySinkProtocol | None = None,
    logger: LoggerProtocol | None = None,
    api: AlbumsAPIProtocol | None = None,
) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        sink: Display sink (defaults to ConsoleDisplaySink).
        logger: Logger (defaults to the container logger).
        api: Albums client (defaults to one built from settings and flags).

    Returns:
        int: Process exit status.
    """
    args = build_parser().parse_args(argv)

    settings = get_settings()
    logger = logger or get_logger()
    if api is None:
        api = create_albums_api(
            settings,
            base_url=args.base_url,
            timeout=args.timeout,
        )
    presenter = AlbumResultPresenter(sink=sink or ConsoleDisplaySink(), logger=logger)

    logger.info(
        "album_client_started",
        command=args.command,
        app=settings.app_name,
        version=settings.app_version,
    )
    succeeded = asyncio.run(run_command(args, api, presenter))
    logger.info("album_client_finished", command=args.command, succeeded=succeeded)

    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
