"""Whitespace-separated token input and integer output helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _parse_int(token: str) -> int:
    """Parse an integer literal, accepting base prefixes and legacy octal."""
    sign = ""
    body = token
    if body[:1] in ("+", "-"):
        sign, body = body[0], body[1:]
    if len(body) > 1 and body[0] == "0" and body[1].isdigit():
        value = int(sign + body[1:], 8)
    else:
        value = int(sign + body, 0)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


class TokenReader:
    """Reads whitespace-separated tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = self._generate(stream)

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self) -> str:
        """Return the next token, raising EOFError when input is exhausted."""
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    def integer(self) -> int:
        """Return the next token parsed as a 64-bit signed integer."""
        return _parse_int(self.word())

    def integers(self, count: int) -> list[int]:
        """Return the next ``count`` tokens parsed as integers."""
        return [self.integer() for _ in range(count)]


def format_ints(values: Iterable[int], sep: str = " ") -> str:
    """Join integers with ``sep``; an empty separator falls back to a space."""
    return (sep or " ").join(str(v) for v in values)