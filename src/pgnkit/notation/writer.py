"""Serialise parsed games back to movetext.

Output re-parses to an equal :class:`~pgnkit.notation.models.Game`: move
numbers are written exactly as they were read, comments keep their text, and
variations are nested in parentheses.
"""

from __future__ import annotations

from collections.abc import Iterable

from pgnkit.core.enums import Piece
from pgnkit.core.move import BasicMove, MarkedMove, Move
from pgnkit.notation.models import Game, GameMove, MoveSequence


def move_to_san(move: Move) -> str:
    """SAN-style text of an unresolved move, e.g. ``Ngxf3`` or ``h8=Q``."""
    if not isinstance(move, BasicMove):
        return move.value
    san = "" if move.piece == Piece.PAWN else move.piece.symbol
    san += move.from_square.name
    if move.is_capture:
        san += "x"
    san += move.to.name
    if move.promoted_to is not None:
        san += "=" + move.promoted_to.symbol
    return san


def marked_move_to_text(marked: MarkedMove) -> str:
    text = move_to_san(marked.move)
    if marked.is_check:
        text += "+"
    if marked.is_checkmate:
        text += "#"
    if marked.annotation_symbol is not None:
        text += marked.annotation_symbol.value
    return text


def comment_to_text(comment: str) -> str:
    """Write a comment in block form, or inline form if it holds a ``}``."""
    if "}" in comment and "\n" not in comment and "\r" not in comment:
        return f";{comment}\n"
    # Block comments cannot contain a closing brace.
    return "{" + comment.replace("}", "]") + "}"


def _join(parts: list[str]) -> str:
    # An inline comment already ends the line.
    text = ""
    for part in parts:
        if text and not text.endswith("\n"):
            text += " "
        text += part
    return text


def game_move_to_text(game_move: GameMove) -> str:
    parts: list[str] = []
    if game_move.number is not None:
        parts.append(str(game_move.number))
    parts.append(marked_move_to_text(game_move.marked_move))
    if game_move.nag is not None:
        parts.append(str(game_move.nag))
    if game_move.comment is not None:
        parts.append(comment_to_text(game_move.comment))
    for line in game_move.variations:
        parts.append("(" + move_sequence_to_text(line) + ")")
    return _join(parts)


def move_sequence_to_text(sequence: MoveSequence) -> str:
    parts: list[str] = []
    if sequence.comment is not None:
        parts.append(comment_to_text(sequence.comment))
    parts.extend(game_move_to_text(move) for move in sequence.moves)
    return _join(parts)


def _escape_tag_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def game_to_pgn(game: Game) -> str:
    """Build a single-game PGN document."""
    lines = [f'[{name} "{_escape_tag_value(value)}"]' for name, value in game.tags]
    if lines:
        lines.append("")
    movetext = move_sequence_to_text(game.main_line)
    lines.append(_join([movetext, game.termination.token]))
    lines.append("")
    return "\n".join(lines)


def games_to_pgn(games: Iterable[Game]) -> str:
    return "\n".join(game_to_pgn(game) for game in games)
