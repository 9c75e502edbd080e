"""PGN file discovery, paging and loading."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from pgnkit.notation.models import Game
from pgnkit.notation.reader import read_games

_LOGGER = logging.getLogger(__name__)
_PGN_PATTERN = "*.pgn"

T = TypeVar("T")


@dataclass(slots=True)
class PgnEntry:
    """A PGN file plus header details peeked from its first game."""

    path: Path
    white_player_name: str | None = None
    black_player_name: str | None = None
    event: str | None = None
    round: str | None = None

    @property
    def title(self) -> str:
        if self.white_player_name or self.black_player_name:
            return (
                f"{self.white_player_name or '?'} vs {self.black_player_name or '?'}"
            )
        return self.path.stem


def _pgn_paths(directory: Path) -> list[Path]:
    return sorted(p for p in directory.glob(_PGN_PATTERN) if p.is_file())


def count_pgns(directory: Path) -> int:
    """Number of ``*.pgn`` files in *directory* (0 if it does not exist)."""
    if not directory.is_dir():
        _LOGGER.info("No PGN directory found at %s", directory)
        return 0
    return len(_pgn_paths(directory))


def load_games(path: Path, encoding: str = "utf-8") -> list[Game]:
    """Read *path* and return every game that parses."""
    text = path.read_text(encoding=encoding, errors="replace")
    games = read_games(text)
    _LOGGER.debug("Loaded %d game(s) from %s", len(games), path)
    return games


def _peek_entry(path: Path, encoding: str) -> PgnEntry:
    entry = PgnEntry(path=path)
    try:
        games = load_games(path, encoding)
    except OSError as exc:
        _LOGGER.warning("Failed to read PGN file %s: %s", path, exc)
        return entry
    if games:
        first = games[0]
        entry.white_player_name = first.white
        entry.black_player_name = first.black
        entry.event = first.event
        entry.round = first.round
    return entry


def list_pgns(
    directory: Path,
    start: int,
    end: int,
    *,
    encoding: str = "utf-8",
    peek: bool = True,
) -> list[PgnEntry]:
    """Entries for the sorted PGN files with index ``start..end`` inclusive."""
    if start < 0:
        raise ValueError(f"start cannot be negative: {start}")
    if start > end:
        raise ValueError("start cannot be greater than end")
    if not directory.is_dir():
        _LOGGER.info("No PGN directory found at %s", directory)
        return []

    paths = _pgn_paths(directory)[start : end + 1]
    if not peek:
        return [PgnEntry(path=path) for path in paths]
    return [_peek_entry(path, encoding) for path in paths]


def page_count(total: int, page_size: int) -> int:
    """Pages needed to show *total* items; an empty listing still has one."""
    if page_size <= 0:
        raise ValueError(f"Page size must be positive: {page_size}")
    if total <= 0:
        return 1
    return math.ceil(total / page_size)


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    if page < 0:
        raise ValueError(f"Page cannot be negative: {page}")
    if page_size <= 0:
        raise ValueError(f"Page size must be positive: {page_size}")
    first = page * page_size
    return list(items[first : first + page_size])


def describe_game(game: Game) -> str:
    """One-line summary: players, event/round and outcome."""
    title = f"{game.white or '?'} vs {game.black or '?'}"
    details: list[str] = []
    if game.event:
        details.append(game.event)
    if game.round:
        details.append(f"round {game.round}")
    if details:
        title += f" ({', '.join(details)})"
    return f"{title} {game.termination.token}"
