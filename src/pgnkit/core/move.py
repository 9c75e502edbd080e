"""Move value objects as written in movetext (SAN-style, unresolved)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

from pgnkit.core.enums import AnnotationSymbol, Piece
from pgnkit.core.types import XX, Square

if TYPE_CHECKING:
    from pgnkit.notation.models import GameMove, MoveNumber


class _Markable:
    """Shortcuts wrapping a move into a :class:`MarkedMove`."""

    __slots__ = ()

    def no_mark(self) -> MarkedMove:
        return MarkedMove(self)  # type: ignore[arg-type]

    def check(self) -> MarkedMove:
        return MarkedMove(self, is_check=True)  # type: ignore[arg-type]

    def checkmate(self) -> MarkedMove:
        return MarkedMove(self, is_checkmate=True)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class BasicMove(_Markable):
    """A piece or pawn move to a destination square.

    ``from_square`` carries whatever disambiguation the text provided and is
    :data:`~pgnkit.core.types.XX` when there was none.  Resolving it against
    the legal moves of a position is left to the replay engine.
    """

    piece: Piece
    to: Square
    from_square: Square = XX
    is_capture: bool = False
    promoted_to: Piece | None = None

    # ── Builders ─────────────────────────────────────────────────────────

    def with_origin(self, square: Square) -> BasicMove:
        return replace(self, from_square=square)

    def with_capture(self) -> BasicMove:
        return replace(self, is_capture=True)

    def with_promotion(self, piece: Piece) -> BasicMove:
        return replace(self, promoted_to=piece)


class Castle(_Markable, Enum):
    """Castling moves, valued by their movetext literal."""

    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"

    def __repr__(self) -> str:
        return f"Castle.{self.name}"


CASTLE_KINGSIDE = Castle.KINGSIDE
CASTLE_QUEENSIDE = Castle.QUEENSIDE

Move: TypeAlias = BasicMove | Castle


@dataclass(frozen=True, slots=True)
class MarkedMove:
    """A move plus its check/mate suffix and optional quality annotation."""

    move: Move
    is_check: bool = False
    is_checkmate: bool = False
    annotation_symbol: AnnotationSymbol | None = None

    def annotated(self, symbol: AnnotationSymbol) -> MarkedMove:
        return replace(self, annotation_symbol=symbol)

    def numbered(self, number: MoveNumber | None) -> GameMove:
        """Wrap into a bare :class:`GameMove` with the given move number."""
        from pgnkit.notation.models import GameMove

        return GameMove(number=number, marked_move=self)
