"""Ordered-choice parser combinators.

A rule is any callable ``rule(text, pos) -> (value, new_pos)`` that raises
:class:`ParseError` when it cannot match.  Rules never mutate shared state,
so backtracking is just calling the next alternative with the original
position.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pgnkit.notation.scanners import ParseError

T = TypeVar("T")
U = TypeVar("U")

Rule = Callable[[str, int], tuple[T, int]]

__all__ = [
    "ParseError",
    "Rule",
    "choice",
    "followed_by",
    "literal",
    "many",
    "many1",
    "mapped",
    "optional",
    "parse_rule",
    "tokens",
    "trailing",
]


def literal(token: str) -> Rule[str]:
    """Match *token* exactly."""

    def rule(text: str, pos: int) -> tuple[str, int]:
        if text.startswith(token, pos):
            return token, pos + len(token)
        raise ParseError(pos, repr(token))

    return rule


def tokens(mapping: Mapping[str, T]) -> Rule[T]:
    """Ordered choice over literal tokens, each mapped to a value.

    Tokens are tried in mapping order, so a longer token must come before any
    shorter token that is its prefix.
    """
    items = tuple(mapping.items())
    expected = " or ".join(repr(token) for token, _ in items)

    def rule(text: str, pos: int) -> tuple[T, int]:
        for token, value in items:
            if text.startswith(token, pos):
                return value, pos + len(token)
        raise ParseError(pos, expected)

    return rule


def choice(*rules: Rule[Any]) -> Rule[Any]:
    """Try *rules* in order from the same position; first success wins."""

    def rule(text: str, pos: int) -> tuple[Any, int]:
        for alternative in rules:
            try:
                return alternative(text, pos)
            except ParseError:
                continue
        raise ParseError(pos)

    return rule


def optional(inner: Rule[T]) -> Rule[T | None]:
    def rule(text: str, pos: int) -> tuple[T | None, int]:
        try:
            return inner(text, pos)
        except ParseError:
            return None, pos

    return rule


def many(inner: Rule[T]) -> Rule[list[T]]:
    """Zero or more repetitions of *inner*."""

    def rule(text: str, pos: int) -> tuple[list[T], int]:
        values: list[T] = []
        while True:
            try:
                value, new_pos = inner(text, pos)
            except ParseError:
                return values, pos
            # An empty match would repeat forever.
            if new_pos == pos:
                return values, pos
            values.append(value)
            pos = new_pos

    return rule


def many1(inner: Rule[T]) -> Rule[list[T]]:
    """One or more repetitions of *inner*."""
    repeated = many(inner)

    def rule(text: str, pos: int) -> tuple[list[T], int]:
        values, new_pos = repeated(text, pos)
        if not values:
            raise ParseError(pos)
        return values, new_pos

    return rule


def mapped(inner: Rule[T], func: Callable[[T], U]) -> Rule[U]:
    def rule(text: str, pos: int) -> tuple[U, int]:
        value, new_pos = inner(text, pos)
        return func(value), new_pos

    return rule


def followed_by(inner: Rule[Any]) -> Rule[None]:
    """Non-consuming lookahead: succeed only if *inner* matches here."""

    def rule(text: str, pos: int) -> tuple[None, int]:
        inner(text, pos)
        return None, pos

    return rule


def trailing(inner: Rule[T], separator: Rule[Any]) -> Rule[T]:
    """*inner* followed by an optional *separator* whose value is dropped."""
    skip = optional(separator)

    def rule(text: str, pos: int) -> tuple[T, int]:
        value, pos = inner(text, pos)
        _, pos = skip(text, pos)
        return value, pos

    return rule


def parse_rule(rule: Rule[T], text: str) -> T:
    """Run *rule* over *text* and require it to consume everything."""
    value, pos = rule(text, 0)
    if pos != len(text):
        raise ParseError(pos, "end of input")
    return value
