"""Core enumerations for the game-record domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class File(IntEnum):
    """Board file a–h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @property
    def symbol(self) -> str:
        return chr(ord("a") + self.value)

    @classmethod
    def from_symbol(cls, char: str) -> File:
        if len(char) != 1 or char not in "abcdefgh":
            raise ValueError(f"Invalid file: {char!r}")
        return cls(ord(char) - ord("a"))


class Rank(IntEnum):
    """Board rank 1–8 (stored as 0–7)."""

    R1 = 0
    R2 = 1
    R3 = 2
    R4 = 3
    R5 = 4
    R6 = 5
    R7 = 6
    R8 = 7

    @property
    def symbol(self) -> str:
        return str(self.value + 1)

    @classmethod
    def from_symbol(cls, char: str) -> Rank:
        if len(char) != 1 or char not in "12345678":
            raise ValueError(f"Invalid rank: {char!r}")
        return cls(int(char) - 1)


class Piece(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def symbol(self) -> str:
        """SAN letter; pawns are written as ``P`` only when explicit."""
        return _PIECE_SYMBOLS[self]


_PIECE_SYMBOLS: dict[Piece, str] = {
    Piece.PAWN: "P",
    Piece.KNIGHT: "N",
    Piece.BISHOP: "B",
    Piece.ROOK: "R",
    Piece.QUEEN: "Q",
    Piece.KING: "K",
}


class AnnotationSymbol(StrEnum):
    """Move-quality suffix written directly after a move."""

    BLUNDER = "??"
    MISTAKE = "?"
    DUBIOUS = "?!"
    INTERESTING = "!?"
    GOOD = "!"
    BRILLIANT = "!!"


class GameTermination(StrEnum):
    """Game termination marker, valued by its movetext token."""

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAWN_GAME = "1/2-1/2"
    UNKNOWN = "*"

    @property
    def token(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        """Short human-readable outcome."""
        return _TERMINATION_DESCRIPTIONS[self]

    @classmethod
    def from_token(cls, token: str) -> GameTermination:
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Invalid termination token: {token!r}") from None


_TERMINATION_DESCRIPTIONS: dict[GameTermination, str] = {
    GameTermination.WHITE_WINS: "White Won",
    GameTermination.BLACK_WINS: "Black Won",
    GameTermination.DRAWN_GAME: "Draw",
    GameTermination.UNKNOWN: "Unknown",
}
