"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

# From "1001 chess miniatures".
MINIATURE_PGN = (
    '[Event "Croatia"]\n'
    '[Site "?"]\n'
    '[Date "2004.??.??"]\n'
    '[Round "?"]\n'
    '[White "Gardijan"]\n'
    '[Black "Sulc"]\n'
    '[Result "0-1"]\n'
    '[ECO "B20"]\n'
    '[PlyCount "10"]\n'
    "\n"
    "1. e4 c5 2. c4 Nc6 3. Ne2 Ne5 4. d4 (4. Ng3) 4... Qa5+ 5. "
    "Bd2 $4 (5. Nec3) 5... Nd3# 0-1\n"
)

SCHOLARS_MATE_PGN = (
    '[Event "Casual Game"]\n'
    '[White "Alice"]\n'
    '[Black "Bob"]\n'
    '[Result "1-0"]\n'
    "\n"
    "{Scholar's mate} 1. e4 e5 2. Bc4 Nc6 3. Qh5 Nf6?? 4. Qxf7# 1-0\n"
)


@pytest.fixture
def miniature_pgn() -> str:
    return MINIATURE_PGN


@pytest.fixture
def scholars_mate_pgn() -> str:
    return SCHOLARS_MATE_PGN


@pytest.fixture
def pgn_dir(tmp_path: Path) -> Path:
    """A directory holding three PGN files and one unrelated file."""
    directory = tmp_path / "pgns"
    directory.mkdir()
    (directory / "a_miniature.pgn").write_text(MINIATURE_PGN, encoding="utf-8")
    (directory / "b_scholar.pgn").write_text(SCHOLARS_MATE_PGN, encoding="utf-8")
    (directory / "c_untagged.pgn").write_text("1. d4 d5 *\n", encoding="utf-8")
    (directory / "notes.txt").write_text("not a game", encoding="utf-8")
    return directory
