"""Movetext grammar.

Leaf rules are built with the combinators; the recursive rules (game move,
variation, move sequence) are plain functions so they can refer to each
other.  Every rule has the shape ``rule(text, pos) -> (value, new_pos)`` and
raises :class:`ParseError` without consuming anything when it fails.

Grammar, in ordered-choice notation::

    game          <- tag_section move_sequence game_termination ws?
    tag_section   <- (tag_pair ws?)*
    tag_pair      <- "[" ws? symbol ws string ws? "]"
    move_sequence <- (comment ws?)? (game_move ws?)*
    game_move     <- (move_number ws?)? marked_move ws? (nag ws?)?
                     (comment ws?)? variation*
    variation     <- "(" ws? move_sequence ")" ws?
    marked_move   <- (basic_move / "O-O-O" / "O-O") "+"? "#"? annotation?
    basic_move    <- piece? disambiguation? "x"? square ("=" piece)?
    disambiguation <- (square / file / rank) &("x" / file)
"""

from __future__ import annotations

from pgnkit.core.enums import AnnotationSymbol, Color, File, GameTermination, Piece, Rank
from pgnkit.core.move import BasicMove, Castle, MarkedMove, Move
from pgnkit.core.types import XX, Square
from pgnkit.notation.combinators import (
    choice,
    followed_by,
    literal,
    many,
    mapped,
    optional,
    parse_rule,
    tokens,
    trailing,
)
from pgnkit.notation.models import NAG, Game, GameMove, MoveNumber, MoveSequence
from pgnkit.notation.scanners import (
    ParseError,
    read_one_char,
    scan_while,
    scan_while_nonempty,
)

_SYMBOL_EXTRA_CHARS = "_+#=:"


# ── Lexical rules ────────────────────────────────────────────────────────────


def pgn_integer(text: str, pos: int) -> tuple[int, int]:
    digits, pos = scan_while_nonempty(text, pos, _is_ascii_digit, "integer")
    return int(digits), pos


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def pgn_symbol(text: str, pos: int) -> tuple[str, int]:
    return scan_while_nonempty(
        text, pos, lambda c: c.isalnum() or c in _SYMBOL_EXTRA_CHARS, "symbol"
    )


def whitespace(text: str, pos: int) -> tuple[None, int]:
    _, pos = scan_while_nonempty(text, pos, str.isspace, "whitespace")
    return None, pos


optional_whitespace = optional(whitespace)

_string_escape = tokens({'\\"': '"', "\\\\": "\\"})


def _string_plain_char(text: str, pos: int) -> tuple[str, int]:
    if text.startswith('"', pos):
        raise ParseError(pos, "string character")
    return read_one_char(text, pos)


pgn_string_char = choice(_string_escape, _string_plain_char)
_quote = literal('"')
_string_body = many(pgn_string_char)


def pgn_string(text: str, pos: int) -> tuple[str, int]:
    """Quoted string; ``\\"`` and ``\\\\`` are the only escapes."""
    _, pos = _quote(text, pos)
    chars, pos = _string_body(text, pos)
    _, pos = _quote(text, pos)
    return "".join(chars), pos


# ── Tags ─────────────────────────────────────────────────────────────────────

_open_bracket = literal("[")
_close_bracket = literal("]")


def tag_pair(text: str, pos: int) -> tuple[tuple[str, str], int]:
    _, pos = _open_bracket(text, pos)
    _, pos = optional_whitespace(text, pos)
    name, pos = pgn_symbol(text, pos)
    _, pos = whitespace(text, pos)
    value, pos = pgn_string(text, pos)
    _, pos = optional_whitespace(text, pos)
    _, pos = _close_bracket(text, pos)
    return (name, value), pos


_tag_pairs = many(trailing(tag_pair, whitespace))


def tag_section(text: str, pos: int) -> tuple[tuple[tuple[str, str], ...], int]:
    pairs, pos = _tag_pairs(text, pos)
    return tuple(pairs), pos


# ── Board coordinates and pieces ─────────────────────────────────────────────

game_termination = tokens({t.token: t for t in GameTermination})

file_ = tokens({f.symbol: f for f in File})
rank = tokens({r.symbol: r for r in Rank})
piece = tokens({p.symbol: p for p in Piece})


def square(text: str, pos: int) -> tuple[Square, int]:
    f, pos = file_(text, pos)
    r, pos = rank(text, pos)
    return Square.known(f, r), pos


_move_number_dot = literal(".")
_black_move_marks = optional(literal(".."))


def move_number(text: str, pos: int) -> tuple[MoveNumber, int]:
    number, pos = pgn_integer(text, pos)
    _, pos = _move_number_dot(text, pos)
    black_marks, pos = _black_move_marks(text, pos)
    color = Color.WHITE if black_marks is None else Color.BLACK
    return MoveNumber(number, color), pos


# ── Moves ────────────────────────────────────────────────────────────────────

_capture_mark = literal("x")

_disambiguation_origin = choice(
    square,
    mapped(file_, Square.from_file),
    mapped(rank, Square.from_rank),
)
_disambiguation_lookahead = followed_by(choice(_capture_mark, file_))


def move_disambiguation(text: str, pos: int) -> tuple[Square, int]:
    """Origin hint of a move, e.g. ``g`` in ``Ngf3`` or ``a1`` in ``Qa1d4``.

    The hint only counts when more destination text follows it (a capture
    mark or another file letter); otherwise ``e4`` would be read as origin
    file ``e`` plus a dangling ``4``.
    """
    origin, pos = _disambiguation_origin(text, pos)
    _disambiguation_lookahead(text, pos)
    return origin, pos


_optional_piece = optional(piece)
_optional_disambiguation = optional(move_disambiguation)
_optional_capture = optional(_capture_mark)
_promotion_mark = literal("=")


def promotion(text: str, pos: int) -> tuple[Piece, int]:
    _, pos = _promotion_mark(text, pos)
    return piece(text, pos)


_optional_promotion = optional(promotion)


def basic_move(text: str, pos: int) -> tuple[BasicMove, int]:
    moved, pos = _optional_piece(text, pos)
    origin, pos = _optional_disambiguation(text, pos)
    capture, pos = _optional_capture(text, pos)
    to, pos = square(text, pos)
    promoted_to, pos = _optional_promotion(text, pos)
    return (
        BasicMove(
            piece=Piece.PAWN if moved is None else moved,
            to=to,
            from_square=XX if origin is None else origin,
            is_capture=capture is not None,
            promoted_to=promoted_to,
        ),
        pos,
    )


annotation_symbol = tokens(
    {
        "??": AnnotationSymbol.BLUNDER,
        "?!": AnnotationSymbol.DUBIOUS,
        "!?": AnnotationSymbol.INTERESTING,
        "!!": AnnotationSymbol.BRILLIANT,
        "?": AnnotationSymbol.MISTAKE,
        "!": AnnotationSymbol.GOOD,
    }
)

_castle = tokens({"O-O-O": Castle.QUEENSIDE, "O-O": Castle.KINGSIDE})
_any_move = choice(basic_move, _castle)
_check_mark = optional(literal("+"))
_checkmate_mark = optional(literal("#"))
_optional_annotation = optional(annotation_symbol)


def marked_move(text: str, pos: int) -> tuple[MarkedMove, int]:
    move: Move
    move, pos = _any_move(text, pos)
    check, pos = _check_mark(text, pos)
    checkmate, pos = _checkmate_mark(text, pos)
    symbol, pos = _optional_annotation(text, pos)
    return (
        MarkedMove(
            move=move,
            is_check=check is not None,
            is_checkmate=checkmate is not None,
            annotation_symbol=symbol,
        ),
        pos,
    )


_nag_mark = literal("$")


def nag(text: str, pos: int) -> tuple[NAG, int]:
    _, pos = _nag_mark(text, pos)
    value, pos = pgn_integer(text, pos)
    return NAG(value), pos


# ── Comments ─────────────────────────────────────────────────────────────────

line_end = tokens({"\r\n": None, "\r": None, "\n": None})
_inline_comment_mark = literal(";")
_block_open = literal("{")
_block_close = literal("}")


def inline_comment(text: str, pos: int) -> tuple[str, int]:
    """``;`` comment running to the end of the line (line end consumed)."""
    _, pos = _inline_comment_mark(text, pos)
    value, pos = scan_while(text, pos, lambda c: c != "\r" and c != "\n")
    _, pos = line_end(text, pos)
    return value, pos


def block_comment(text: str, pos: int) -> tuple[str, int]:
    _, pos = _block_open(text, pos)
    value, pos = scan_while(text, pos, lambda c: c != "}")
    _, pos = _block_close(text, pos)
    return value, pos


comment = choice(inline_comment, block_comment)


# ── Movetext structure ───────────────────────────────────────────────────────

_move_number_ws = optional(trailing(move_number, whitespace))
_marked_move_ws = trailing(marked_move, whitespace)
_nag_ws = optional(trailing(nag, whitespace))
_comment_ws = optional(trailing(comment, whitespace))
_open_paren = literal("(")
_close_paren = literal(")")


def variation(text: str, pos: int) -> tuple[MoveSequence, int]:
    _, pos = _open_paren(text, pos)
    _, pos = optional_whitespace(text, pos)
    sequence, pos = move_sequence(text, pos)
    _, pos = _close_paren(text, pos)
    _, pos = optional_whitespace(text, pos)
    return sequence, pos


_variations = many(variation)


def game_move(text: str, pos: int) -> tuple[GameMove, int]:
    number, pos = _move_number_ws(text, pos)
    marked, pos = _marked_move_ws(text, pos)
    glyph, pos = _nag_ws(text, pos)
    note, pos = _comment_ws(text, pos)
    variations, pos = _variations(text, pos)
    return (
        GameMove(
            marked_move=marked,
            number=number,
            nag=glyph,
            comment=note,
            variations=tuple(variations),
        ),
        pos,
    )


_game_moves = many(trailing(game_move, whitespace))


def move_sequence(text: str, pos: int) -> tuple[MoveSequence, int]:
    note, pos = _comment_ws(text, pos)
    moves, pos = _game_moves(text, pos)
    return MoveSequence(moves=tuple(moves), comment=note), pos


def game(text: str, pos: int) -> tuple[Game, int]:
    tags, pos = tag_section(text, pos)
    sequence, pos = move_sequence(text, pos)
    termination, pos = game_termination(text, pos)
    _, pos = optional_whitespace(text, pos)
    return (
        Game(
            tags=tags,
            comment=sequence.comment,
            moves=sequence.moves,
            termination=termination,
        ),
        pos,
    )


def parse_game(text: str) -> Game:
    """Parse exactly one game; raise :class:`ParseError` otherwise."""
    return parse_rule(game, text)
