"""pgnkit: typed parser for PGN-style chess game records.

Quick start::

    from pgnkit import read_games

    for game in read_games(open("games.pgn", encoding="utf-8").read()):
        print(game.white, "vs", game.black, game.termination.token)
        for move in game.moves:
            print(move.marked_move, len(move.variations))
"""

from pgnkit.core import (
    AnnotationSymbol,
    BasicMove,
    Castle,
    Color,
    File,
    GameTermination,
    MarkedMove,
    Move,
    Piece,
    Rank,
    Square,
)
from pgnkit.notation import (
    NAG,
    Game,
    GameMove,
    MoveNumber,
    MoveSequence,
    ParseError,
    game_to_pgn,
    games_to_pgn,
    parse_game,
    read_games,
    read_games_batch,
    split_games,
)

__version__ = "0.1.0"

__all__ = [
    "AnnotationSymbol",
    "BasicMove",
    "Castle",
    "Color",
    "File",
    "GameTermination",
    "MarkedMove",
    "Move",
    "Piece",
    "Rank",
    "Square",
    "NAG",
    "Game",
    "GameMove",
    "MoveNumber",
    "MoveSequence",
    "ParseError",
    "game_to_pgn",
    "games_to_pgn",
    "parse_game",
    "read_games",
    "read_games_batch",
    "split_games",
]
