"""Multi-game reader with best-effort recovery.

:func:`read_games` never raises for malformed input: a game that fails to
parse is dropped and reading resumes after the next plausible termination
token.  Empty input and entirely malformed input both yield ``[]``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from pgnkit.notation.grammar import game
from pgnkit.notation.models import Game
from pgnkit.notation.scanners import ParseError

_LOGGER = logging.getLogger(__name__)

# A termination token that starts a token (start of text, whitespace or a
# closing bracket before it) and is not glued to a closing quote or brace.
_TERMINATION_RE = re.compile(r'(?<![^\s)}\]])(?:1-0|0-1|1/2-1/2|\*)(?!["}])')
_RESUME_TRIM = " \r\n"


def find_termination(text: str, pos: int = 0) -> int:
    """Return the position just past the next plausible termination token.

    This is a heuristic.  Tokens quoted in a tag value (``"1-0"``) or closing
    a block comment (``{won 1-0}``) are skipped, but a token surrounded by
    spaces inside a comment or tag value is still taken as a game end.
    Returns ``len(text)`` when no token is found.
    """
    match = _TERMINATION_RE.search(text, pos)
    if match is None:
        return len(text)
    return match.end()


def _skip_whitespace(text: str, pos: int) -> int:
    total = len(text)
    while pos < total and text[pos].isspace():
        pos += 1
    return pos


def _resume_position(text: str, pos: int) -> int:
    end = find_termination(text, pos)
    total = len(text)
    while end < total and text[end] in _RESUME_TRIM:
        end += 1
    return end


def iter_games(text: str) -> Iterator[Game]:
    """Yield every game that parses, in input order."""
    pos = _skip_whitespace(text, 0)
    total = len(text)
    while pos < total:
        try:
            parsed, end = game(text, pos)
        except (ParseError, RecursionError) as exc:
            resume = _resume_position(text, pos)
            _LOGGER.debug(
                "Skipping unparseable game text at %d..%d: %s", pos, resume, exc
            )
            pos = _skip_whitespace(text, resume)
            continue
        yield parsed
        pos = _skip_whitespace(text, end)


def read_games(text: str) -> list[Game]:
    """Parse every game in *text*, silently dropping malformed ones."""
    return list(iter_games(text))


def split_games(text: str) -> list[str]:
    """Split *text* into per-game chunks at plausible termination tokens.

    No grammar is run; chunks are meant for :func:`read_games_batch`.
    Whitespace-only chunks are dropped.
    """
    chunks: list[str] = []
    pos = _skip_whitespace(text, 0)
    total = len(text)
    while pos < total:
        end = find_termination(text, pos)
        chunk = text[pos:end].strip()
        if chunk:
            chunks.append(chunk)
        pos = _skip_whitespace(text, end)
    return chunks


def read_games_batch(
    texts: Iterable[str], max_workers: int | None = None
) -> list[list[Game]]:
    """Parse independent texts concurrently, one result list per input.

    Results keep the order of *texts*.
    """
    sources = list(texts)
    if not sources:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(read_games, sources))
