"""Partially-known square type and named square constants.

A square is indexed as ``9 * file + rank`` where either coordinate may be
the unknown sentinel ``8``:
    a1=0, a2=1, ..., a8=7, a?=8
    b1=9, ..., b?=17
    ...
    ?1=72, ..., ?8=79, ??=80

Squares read from disambiguation text (``Ngf3``, ``R2h4``) usually know only
one coordinate; destination squares always know both.
"""

from __future__ import annotations

from dataclasses import dataclass

from pgnkit.core.enums import File, Rank

_UNKNOWN = 8
_AXIS = 9


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable value object for a board coordinate with optional axes."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < _AXIS * _AXIS:
            raise ValueError(f"Invalid square index: {self.index}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new(cls, file: File | None, rank: Rank | None) -> Square:
        f = _UNKNOWN if file is None else int(file)
        r = _UNKNOWN if rank is None else int(rank)
        return cls(_AXIS * f + r)

    @classmethod
    def known(cls, file: File, rank: Rank) -> Square:
        return cls(_AXIS * int(file) + int(rank))

    @classmethod
    def from_file(cls, file: File) -> Square:
        """Square with a known file and unknown rank, e.g. ``g`` in ``Ngf3``."""
        return cls.new(file, None)

    @classmethod
    def from_rank(cls, rank: Rank) -> Square:
        """Square with a known rank and unknown file, e.g. ``2`` in ``R2h4``."""
        return cls.new(None, rank)

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse a square name such as ``'e4'``, ``'g'``, ``'2'`` or ``''``."""
        if len(name) > 2:
            raise ValueError(f"Invalid square name: {name!r}")
        file: File | None = None
        rank: Rank | None = None
        for char in name:
            if char in "abcdefgh" and file is None and rank is None:
                file = File.from_symbol(char)
            elif char in "12345678" and rank is None:
                rank = Rank.from_symbol(char)
            else:
                raise ValueError(f"Invalid square name: {name!r}")
        return cls.new(file, rank)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def file(self) -> File | None:
        f = self.index // _AXIS
        return None if f == _UNKNOWN else File(f)

    @property
    def rank(self) -> Rank | None:
        r = self.index % _AXIS
        return None if r == _UNKNOWN else Rank(r)

    @property
    def is_known(self) -> bool:
        return self.file is not None and self.rank is not None

    @property
    def name(self) -> str:
        """Known coordinates only, e.g. 'e4', 'g', '2' or ''."""
        file, rank = self.file, self.rank
        return (file.symbol if file is not None else "") + (
            rank.symbol if rank is not None else ""
        )

    def __str__(self) -> str:
        file, rank = self.file, self.rank
        return (file.symbol if file is not None else "?") + (
            rank.symbol if rank is not None else "?"
        )

    def __repr__(self) -> str:
        return f"Square({self})"


# ── Named square constants ──────────────────────────────────────────────────

A1, A2, A3, A4, A5, A6, A7, A8, AX = (Square(i) for i in range(0, 9))
B1, B2, B3, B4, B5, B6, B7, B8, BX = (Square(i) for i in range(9, 18))
C1, C2, C3, C4, C5, C6, C7, C8, CX = (Square(i) for i in range(18, 27))
D1, D2, D3, D4, D5, D6, D7, D8, DX = (Square(i) for i in range(27, 36))
E1, E2, E3, E4, E5, E6, E7, E8, EX = (Square(i) for i in range(36, 45))
F1, F2, F3, F4, F5, F6, F7, F8, FX = (Square(i) for i in range(45, 54))
G1, G2, G3, G4, G5, G6, G7, G8, GX = (Square(i) for i in range(54, 63))
H1, H2, H3, H4, H5, H6, H7, H8, HX = (Square(i) for i in range(63, 72))
X1, X2, X3, X4, X5, X6, X7, X8, XX = (Square(i) for i in range(72, 81))
