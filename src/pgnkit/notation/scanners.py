"""Character-class scanners over an immutable text buffer.

Every scanner takes the full text plus a cursor position and returns the
matched text together with the position just past it.  The remainder is
always ``text[pos:]``; nothing is sliced off the input, so a failed attempt
leaves the caller free to retry from the same position.
"""

from __future__ import annotations

from collections.abc import Callable

CharPredicate = Callable[[str], bool]


class ParseError(ValueError):
    """Raised when a scanner or grammar rule cannot match at a position."""

    def __init__(self, position: int, expected: str = "") -> None:
        self.position = position
        self.expected = expected
        if expected:
            message = f"Expected {expected} at position {position}"
        else:
            message = f"No match at position {position}"
        super().__init__(message)


def scan_while(text: str, pos: int, predicate: CharPredicate) -> tuple[str, int]:
    """Consume the longest run of characters satisfying *predicate*."""
    end = pos
    total = len(text)
    while end < total and predicate(text[end]):
        end += 1
    return text[pos:end], end


def scan_while_nonempty(
    text: str, pos: int, predicate: CharPredicate, expected: str = ""
) -> tuple[str, int]:
    """Like :func:`scan_while` but fail on an empty run."""
    matched, end = scan_while(text, pos, predicate)
    if not matched:
        raise ParseError(pos, expected)
    return matched, end


def read_one_char(text: str, pos: int) -> tuple[str, int]:
    """Consume exactly one character."""
    if pos >= len(text):
        raise ParseError(pos, "any character")
    return text[pos], pos + 1
