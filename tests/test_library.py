"""Tests for PGN file discovery, paging and loading."""

import logging
from pathlib import Path

import pytest

from pgnkit.core.enums import GameTermination
from pgnkit.library import (
    PgnEntry,
    count_pgns,
    describe_game,
    list_pgns,
    load_games,
    page_count,
    paginate,
)
from pgnkit.notation.models import Game


class TestDiscovery:
    def test_count_pgns(self, pgn_dir: Path) -> None:
        assert count_pgns(pgn_dir) == 3

    def test_count_missing_directory(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="pgnkit.library"):
            assert count_pgns(tmp_path / "missing") == 0
        assert "No PGN directory found" in caplog.text

    def test_list_sorted_range(self, pgn_dir: Path) -> None:
        entries = list_pgns(pgn_dir, 1, 2)
        assert [e.path.name for e in entries] == ["b_scholar.pgn", "c_untagged.pgn"]

    def test_list_peeks_headers(self, pgn_dir: Path) -> None:
        first, second, third = list_pgns(pgn_dir, 0, 5)
        assert first.white_player_name == "Gardijan"
        assert first.event == "Croatia"
        assert second.title == "Alice vs Bob"
        assert third.white_player_name is None
        assert third.title == "c_untagged"

    def test_list_without_peek(self, pgn_dir: Path) -> None:
        entries = list_pgns(pgn_dir, 0, 0, peek=False)
        assert entries == [PgnEntry(path=pgn_dir / "a_miniature.pgn")]

    def test_list_start_after_end_raises(self, pgn_dir: Path) -> None:
        with pytest.raises(ValueError, match="greater than end"):
            list_pgns(pgn_dir, 3, 2)

    def test_list_negative_start_raises(self, pgn_dir: Path) -> None:
        with pytest.raises(ValueError, match="negative"):
            list_pgns(pgn_dir, -1, 2)

    def test_list_missing_directory(self, tmp_path: Path) -> None:
        assert list_pgns(tmp_path / "missing", 0, 5) == []


class TestLoading:
    def test_load_games(self, pgn_dir: Path) -> None:
        (game,) = load_games(pgn_dir / "b_scholar.pgn")
        assert game.termination == GameTermination.WHITE_WINS

    def test_load_skips_malformed_games(self, tmp_path: Path) -> None:
        path = tmp_path / "mixed.pgn"
        path.write_text("1. e4 *\n1. Zz9 0-1\n1. d4 *\n", encoding="utf-8")
        assert len(load_games(path)) == 2

    def test_load_replaces_undecodable_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.pgn"
        path.write_bytes(b'[White "Andr\xe9"]\n\n1. e4 *\n')
        (game,) = load_games(path)
        assert game.white is not None
        assert game.white.startswith("Andr")

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_games(tmp_path / "missing.pgn")


class TestPaging:
    @pytest.mark.parametrize(
        ("total", "size", "expected"),
        [(0, 6, 1), (1, 6, 1), (6, 6, 1), (7, 6, 2), (13, 6, 3)],
    )
    def test_page_count(self, total: int, size: int, expected: int) -> None:
        assert page_count(total, size) == expected

    def test_page_count_bad_size_raises(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            page_count(3, 0)

    def test_paginate(self) -> None:
        items = list(range(10))
        assert paginate(items, 0, 4) == [0, 1, 2, 3]
        assert paginate(items, 2, 4) == [8, 9]
        assert paginate(items, 5, 4) == []

    def test_paginate_negative_page_raises(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            paginate([1], -1, 4)


class TestDescribe:
    def test_describe_full(self, miniature_pgn: str) -> None:
        from pgnkit.notation.grammar import parse_game

        assert describe_game(parse_game(miniature_pgn)) == (
            "Gardijan vs Sulc (Croatia, round ?) 0-1"
        )

    def test_describe_untagged(self) -> None:
        assert describe_game(Game()) == "? vs ? *"
