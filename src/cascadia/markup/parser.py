"""Recursive-descent parser for the markup language.

Grammar:
    Node       = Element | Text
    Element    = '<' Name Attribute* '>' Node* '</' Name '>'
    Attribute  = Name '=' Quote Value Quote
    Text       = any run of characters up to the next '<'

There are no entities, comments or self-closing tags: every element needs
an explicit closing tag with exactly the same name.
"""

from __future__ import annotations

import logging

from cascadia.model.dom import Element, ElementData, Node, Text
from cascadia.parser.errors import (
    MalformedAttributeError,
    UnclosedOrMismatchedTagError,
    UnexpectedEofError,
)
from cascadia.parser.scanner import Scanner

__all__ = ["MarkupParser", "parse_markup"]

logger = logging.getLogger(__name__)

_QUOTES = "\"'"


def _is_name_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _is_attribute_value_char(c: str) -> bool:
    return c not in _QUOTES and c not in "<>"


class MarkupParser:
    """Builds a document tree from markup source."""

    def __init__(self, source: str) -> None:
        self.scanner = Scanner(source)

    def _require_input(self, what: str) -> None:
        if self.scanner.at_end():
            raise UnexpectedEofError(
                f"Unexpected end of input in {what}", self.scanner.pos
            )

    def parse_node(self) -> Node:
        self.scanner.skip_whitespace()
        self._require_input("document")
        if self.scanner.peek() == "<":
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Text:
        return Text(self.scanner.consume_while(lambda c: c != "<"))

    def parse_tag_name(self) -> str:
        return self.scanner.consume_while(_is_name_char)

    def parse_attribute(self) -> tuple[str, str]:
        """Parse ``name="value"`` (single or double quotes)."""
        s = self.scanner
        name = self.parse_tag_name()
        if not name:
            raise MalformedAttributeError("Expected an attribute name", s.pos)
        s.expect("=", MalformedAttributeError)
        self._require_input(f"attribute {name!r}")
        quote = s.advance()
        if quote not in _QUOTES:
            raise MalformedAttributeError(
                f"Attribute {name!r} value must be quoted", s.pos
            )
        value = s.consume_while(_is_attribute_value_char)
        self._require_input(f"attribute {name!r}")
        if s.advance() != quote:
            raise MalformedAttributeError(
                f"Mismatched quotes around attribute {name!r}", s.pos
            )
        return name, value

    def parse_attributes(self) -> dict[str, str]:
        """Parse attributes up to (not including) the closing ``>``.

        A repeated attribute name keeps the last value.
        """
        attributes: dict[str, str] = {}
        while True:
            self.scanner.skip_whitespace()
            self._require_input("start tag")
            if self.scanner.peek() == ">":
                return attributes
            name, value = self.parse_attribute()
            attributes[name] = value

    def parse_element(self) -> Element:
        s = self.scanner
        start = s.pos
        s.expect("<", UnclosedOrMismatchedTagError)
        tag_name = self.parse_tag_name()
        if not tag_name:
            raise UnclosedOrMismatchedTagError("Expected a tag name", start)
        attributes = self.parse_attributes()
        s.expect(">", MalformedAttributeError)

        children = self.parse_elements()

        s.expect("</", UnclosedOrMismatchedTagError)
        closing = self.parse_tag_name()
        if closing != tag_name or s.at_end() or s.advance() != ">":
            raise UnclosedOrMismatchedTagError(
                f"Expected '</{tag_name}>' to close tag opened at {start}", s.pos
            )
        return Element(ElementData(tag_name, attributes), tuple(children))

    def parse_elements(self) -> list[Node]:
        """Parse sibling nodes until the next closing tag."""
        nodes: list[Node] = []
        while True:
            self.scanner.skip_whitespace()
            self._require_input("element content")
            if self.scanner.starts_with("</"):
                return nodes
            nodes.append(self.parse_node())


def parse_markup(source: str, wrap: str | None = None) -> Node:
    """Parse markup source into a single root node.

    Only one top-level node is read.  Pass *wrap* to enclose the source in a
    synthetic root element of that name, so several top-level siblings can
    be parsed together.  The wrapper name must be a valid tag name.
    """
    if wrap is not None and not all(_is_name_char(c) for c in wrap):
        raise ValueError(f"Invalid wrapper tag name: {wrap!r}")
    if wrap:
        source = f"<{wrap}>{source}</{wrap}>"
    root = MarkupParser(source).parse_node()
    logger.debug("Parsed markup root %r", getattr(root, "tag_name", "#text"))
    return root
