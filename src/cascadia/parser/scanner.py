"""Cursor-based text scanner shared by the markup and stylesheet parsers."""

from __future__ import annotations

from typing import Callable

from cascadia.parser.errors import OutOfBoundsError, ParseError, UnexpectedEofError

__all__ = ["Scanner"]


class Scanner:
    """Reads an immutable string left to right.

    The parsers built on top never backtrack, so the cursor only moves
    forward.
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        self._text = text
        self._pos = pos

    @property
    def pos(self) -> int:
        return self._pos

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.at_end():
            raise OutOfBoundsError("peek past end of input", self._pos)
        return self._text[self._pos]

    def starts_with(self, s: str) -> bool:
        return self._text.startswith(s, self._pos)

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def advance(self) -> str:
        """Consume and return the current character."""
        if self.at_end():
            raise OutOfBoundsError("advance past end of input", self._pos)
        char = self._text[self._pos]
        self._pos += 1
        return char

    def consume_while(self, pred: Callable[[str], bool]) -> str:
        """Consume characters while *pred* holds; returns them (possibly empty)."""
        start = self._pos
        while not self.at_end() and pred(self._text[self._pos]):
            self._pos += 1
        return self._text[start:self._pos]

    def skip_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def expect(self, s: str, error: type[ParseError]) -> None:
        """Consume the literal *s* or raise *error*.

        At end of input this raises :class:`UnexpectedEofError` instead.
        """
        if self.at_end():
            raise UnexpectedEofError(f"expected {s!r}, reached end of input", self._pos)
        if not self.starts_with(s):
            found = self._text[self._pos:self._pos + len(s)]
            raise error(f"expected {s!r}, found {found!r}", self._pos)
        self._pos += len(s)
