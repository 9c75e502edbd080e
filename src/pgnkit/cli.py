"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pgnkit.config import LibrarySettings
from pgnkit.library import (
    count_pgns,
    describe_game,
    list_pgns,
    load_games,
    page_count,
    paginate,
)
from pgnkit.notation.writer import games_to_pgn

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnkit", description="Browse and normalise PGN game records."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="list PGN files in a directory")
    list_cmd.add_argument("--dir", type=Path, default=None, help="PGN directory")
    list_cmd.add_argument("--page", type=int, default=0, help="page number (0-based)")

    games_cmd = commands.add_parser("games", help="summarise games in a PGN file")
    games_cmd.add_argument("file", type=Path)
    games_cmd.add_argument("--page", type=int, default=0, help="page number (0-based)")

    format_cmd = commands.add_parser("format", help="re-serialise parseable games")
    format_cmd.add_argument("file", type=Path)
    return parser


def _configure_logging(settings: LibrarySettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cmd_list(settings: LibrarySettings, directory: Path | None, page: int) -> int:
    pgn_dir = directory or settings.pgn_dir
    total = count_pgns(pgn_dir)
    pages = page_count(total, settings.page_size)
    if total == 0:
        print(f"No PGNs found, please add them to: {pgn_dir}")
        return 0
    start = page * settings.page_size
    entries = list_pgns(
        pgn_dir, start, start + settings.page_size - 1, encoding=settings.encoding
    )
    print(f"Page {page + 1}/{pages}")
    for entry in entries:
        print(f"  {entry.path.name}: {entry.title}")
    return 0


def _cmd_games(settings: LibrarySettings, file: Path, page: int) -> int:
    games = load_games(file, settings.encoding)
    if not games:
        print("Couldn't parse any games from PGN")
        return 0
    pages = page_count(len(games), settings.page_size)
    print(f"Page {page + 1}/{pages}")
    first = page * settings.page_size
    for offset, game in enumerate(paginate(games, page, settings.page_size)):
        print(f"  {first + offset + 1}. {describe_game(game)}")
    return 0


def _cmd_format(settings: LibrarySettings, file: Path) -> int:
    games = load_games(file, settings.encoding)
    sys.stdout.write(games_to_pgn(games))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``pgnkit`` command and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        settings = LibrarySettings.from_env()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    _configure_logging(settings, args.verbose)

    try:
        if args.command == "list":
            return _cmd_list(settings, args.dir, args.page)
        if args.command == "games":
            return _cmd_games(settings, args.file, args.page)
        return _cmd_format(settings, args.file)
    except OSError as exc:
        _LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
