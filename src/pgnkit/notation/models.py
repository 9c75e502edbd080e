"""Parsed game-record models.

A game's moves form a tree: every :class:`GameMove` may own alternative
lines (variations), each of which is a :class:`MoveSequence` whose moves may
own variations in turn.  All models are immutable and sequences are tuples.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from pgnkit.core.enums import Color, GameTermination
from pgnkit.core.move import MarkedMove

FEN_TAG = "FEN"


@dataclass(frozen=True, slots=True)
class NAG:
    """Numeric annotation glyph, written ``$n``."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"NAG value must be non-negative: {self.value}")

    def __str__(self) -> str:
        return f"${self.value}"


@dataclass(frozen=True, slots=True)
class MoveNumber:
    """Move-number token: ``12.`` for white, ``12...`` for black."""

    number: int
    color: Color = Color.WHITE

    @classmethod
    def white(cls, number: int) -> MoveNumber:
        return cls(number, Color.WHITE)

    @classmethod
    def black(cls, number: int) -> MoveNumber:
        return cls(number, Color.BLACK)

    def __str__(self) -> str:
        return f"{self.number}..." if self.color == Color.BLACK else f"{self.number}."


@dataclass(frozen=True, slots=True)
class GameMove:
    """One node of the move tree."""

    marked_move: MarkedMove
    number: MoveNumber | None = None
    nag: NAG | None = None
    comment: str | None = None
    variations: tuple[MoveSequence, ...] = ()

    # ── Builders ─────────────────────────────────────────────────────────

    def with_nag(self, nag: NAG) -> GameMove:
        return replace(self, nag=nag)

    def with_comment(self, comment: str) -> GameMove:
        return replace(self, comment=comment)

    def with_variations(self, variations: Iterable[MoveSequence]) -> GameMove:
        return replace(self, variations=tuple(variations))


@dataclass(frozen=True, slots=True)
class MoveSequence:
    """A line of moves with an optional leading comment."""

    moves: tuple[GameMove, ...] = ()
    comment: str | None = None

    @classmethod
    def of(cls, *moves: GameMove, comment: str | None = None) -> MoveSequence:
        return cls(moves=tuple(moves), comment=comment)

    def __len__(self) -> int:
        return len(self.moves)


@dataclass(frozen=True, slots=True)
class Game:
    """A complete parsed game record."""

    tags: tuple[tuple[str, str], ...] = ()
    comment: str | None = None
    moves: tuple[GameMove, ...] = ()
    termination: GameTermination = GameTermination.UNKNOWN

    # ── Tag lookups ──────────────────────────────────────────────────────

    def tag(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of tag *name* (case-sensitive)."""
        for tag_name, value in self.tags:
            if tag_name == name:
                return value
        return default

    @property
    def starting_fen(self) -> str | None:
        return self.tag(FEN_TAG)

    @property
    def white(self) -> str | None:
        return self.tag("White")

    @property
    def black(self) -> str | None:
        return self.tag("Black")

    @property
    def event(self) -> str | None:
        return self.tag("Event")

    @property
    def round(self) -> str | None:
        return self.tag("Round")

    @property
    def ply_count(self) -> int:
        """Number of main-line moves."""
        return len(self.moves)

    @property
    def main_line(self) -> MoveSequence:
        return MoveSequence(moves=self.moves, comment=self.comment)
