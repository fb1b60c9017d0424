"""Hand-written recursive-descent parser for stylesheets.

Syntax example:
    h1, h2 { display: block; margin-top: 16px; }
    a#link.external { color: #d3a003; }
    .note { font-size: 1.4em; }
"""

from __future__ import annotations

import logging
import re

from cascadia.parser.errors import (
    InvalidColorError,
    InvalidNumberError,
    MalformedDeclarationError,
    UnterminatedBlockError,
)
from cascadia.parser.scanner import Scanner
from cascadia.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Rule,
    Selector,
    Size,
    Stylesheet,
    Unit,
    Value,
)

__all__ = ["StylesheetParser", "parse_stylesheet", "parse_value"]

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")

# Unsigned decimal, optional fraction and exponent.  Stricter than float()
# which would also take underscores and surrounding whitespace.
_NUMBER_RE = re.compile(
    r"""
    [0-9]+              # integer part
    (?:\.[0-9]*)?       # optional fraction
    (?:[eE][+-]?[0-9]+)?  # optional exponent
    """,
    re.VERBOSE,
)

# Checked in this order: "rem" must be tried before "em".
_UNIT_SUFFIXES: tuple[tuple[str, Unit], ...] = (
    ("px", Unit.PX),
    ("%", Unit.PERCENT),
    ("rem", Unit.REM),
    ("em", Unit.EM),
)


def _is_identifier_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in "-_"


def _is_identifier_start(c: str) -> bool:
    return c.isascii() and c.isalpha()


def parse_value(raw: str) -> Value:
    """Classify a raw declaration value by its leading character.

    ``#rrggbb`` becomes a Color, a digit-led value becomes a Size, and
    anything else is kept verbatim as a Keyword.
    """
    if raw.startswith("#"):
        digits = raw[1:]
        if not _HEX_RE.fullmatch(digits):
            raise InvalidColorError(f"Invalid color: {raw!r}")
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    if raw[:1].isascii() and raw[:1].isdigit():
        number, unit = raw, Unit.NONE
        for suffix, suffix_unit in _UNIT_SUFFIXES:
            if raw.endswith(suffix):
                number, unit = raw[: -len(suffix)], suffix_unit
                break
        if not _NUMBER_RE.fullmatch(number):
            raise InvalidNumberError(f"Invalid number: {raw!r}")
        return Size(float(number), unit)

    return Keyword(raw)


class StylesheetParser:
    """Builds a Stylesheet from source text, one rule at a time."""

    def __init__(self, source: str) -> None:
        self.scanner = Scanner(source)

    def parse_identifier(self) -> str:
        return self.scanner.consume_while(_is_identifier_char)

    def parse_selector(self) -> Selector:
        """Parse ``tag? (#id)? (.class)*`` with no separators.

        Any character outside that grammar, including whitespace, ends the
        selector.  A repeated ``#id`` keeps the last one.
        """
        s = self.scanner
        tag: str | None = None
        id_: str | None = None
        classes: list[str] = []
        while not s.at_end():
            c = s.peek()
            if c == "#":
                s.advance()
                id_ = self.parse_identifier()
            elif c == ".":
                s.advance()
                classes.append(self.parse_identifier())
            elif _is_identifier_start(c) and tag is None:
                tag = self.parse_identifier()
            else:
                break
        return Selector(tag=tag, id=id_, classes=tuple(classes))

    def parse_selector_list(self) -> list[Selector]:
        s = self.scanner
        selectors: list[Selector] = []
        while True:
            s.skip_whitespace()
            selectors.append(self.parse_selector())
            s.skip_whitespace()
            if s.at_end() or s.peek() != ",":
                return selectors
            s.advance()

    def parse_declaration(self) -> Declaration:
        """Parse ``name: raw value;`` and classify the value."""
        s = self.scanner
        name = self.parse_identifier()
        if not name:
            raise MalformedDeclarationError("Expected a property name", s.pos)
        s.skip_whitespace()
        if s.at_end() or s.peek() != ":":
            raise MalformedDeclarationError(f"Expected ':' after {name!r}", s.pos)
        s.advance()
        s.skip_whitespace()
        raw = s.consume_while(lambda c: c != ";")
        if s.at_end():
            raise MalformedDeclarationError(f"Missing ';' after {name!r}", s.pos)
        s.advance()
        return Declaration(name, parse_value(raw))

    def parse_declaration_block(self) -> list[Declaration]:
        s = self.scanner
        s.expect("{", UnterminatedBlockError)
        declarations: list[Declaration] = []
        while True:
            s.skip_whitespace()
            if s.at_end():
                raise UnterminatedBlockError("Missing '}' at end of input", s.pos)
            if s.peek() == "}":
                s.advance()
                return declarations
            declarations.append(self.parse_declaration())

    def parse_rule(self) -> Rule:
        selectors = self.parse_selector_list()
        self.scanner.skip_whitespace()
        declarations = self.parse_declaration_block()
        return Rule(tuple(selectors), tuple(declarations))

    def parse(self) -> Stylesheet:
        rules: list[Rule] = []
        while True:
            self.scanner.skip_whitespace()
            if self.scanner.at_end():
                break
            rules.append(self.parse_rule())
        logger.debug("Parsed stylesheet with %d rule(s)", len(rules))
        return Stylesheet(tuple(rules))


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet source into a Stylesheet.

    Returns the rules in source order.  Raises a
    :class:`~cascadia.parser.errors.ParseError` subclass on the first
    grammar violation.
    """
    return StylesheetParser(source).parse()
