"""Notation package: movetext grammar, multi-game reader and writer."""

from pgnkit.notation.grammar import game, parse_game
from pgnkit.notation.models import NAG, Game, GameMove, MoveNumber, MoveSequence
from pgnkit.notation.reader import (
    find_termination,
    iter_games,
    read_games,
    read_games_batch,
    split_games,
)
from pgnkit.notation.scanners import ParseError
from pgnkit.notation.writer import game_to_pgn, games_to_pgn, move_to_san

__all__ = [
    "NAG",
    "Game",
    "GameMove",
    "MoveNumber",
    "MoveSequence",
    "ParseError",
    "game",
    "parse_game",
    "find_termination",
    "iter_games",
    "read_games",
    "read_games_batch",
    "split_games",
    "game_to_pgn",
    "games_to_pgn",
    "move_to_san",
]
