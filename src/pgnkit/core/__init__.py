"""Core domain layer: coordinates, pieces and unresolved moves.

Quick start::

    from pgnkit.core import BasicMove, Piece, Square

    move = BasicMove(Piece.KNIGHT, Square.parse("f3")).with_origin(Square.parse("g"))
    print(move.from_square.file, move.to)
"""

from pgnkit.core.enums import AnnotationSymbol, Color, File, GameTermination, Piece, Rank
from pgnkit.core.move import (
    CASTLE_KINGSIDE,
    CASTLE_QUEENSIDE,
    BasicMove,
    Castle,
    MarkedMove,
    Move,
)
from pgnkit.core.types import XX, Square

__all__ = [
    # Enums
    "AnnotationSymbol",
    "Color",
    "File",
    "GameTermination",
    "Piece",
    "Rank",
    # Types
    "Square",
    "XX",
    # Moves
    "BasicMove",
    "CASTLE_KINGSIDE",
    "CASTLE_QUEENSIDE",
    "Castle",
    "MarkedMove",
    "Move",
]
