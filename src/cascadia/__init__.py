"""Cascadia: markup and stylesheet parsing with cascade style resolution."""

from cascadia.cascade import resolve_styles
from cascadia.config import CascadiaConfig
from cascadia.markup import parse_markup
from cascadia.model import Element, ElementData, Node, StyledNode, Text
from cascadia.parser.errors import (
    InvalidColorError,
    InvalidNumberError,
    MalformedAttributeError,
    MalformedDeclarationError,
    OutOfBoundsError,
    ParseError,
    UnclosedOrMismatchedTagError,
    UnexpectedEofError,
    UnterminatedBlockError,
)
from cascadia.stylesheet import (
    Color,
    Declaration,
    Keyword,
    Rule,
    Selector,
    Size,
    Specificity,
    Stylesheet,
    Unit,
    parse_stylesheet,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse_markup",
    "parse_stylesheet",
    "resolve_styles",
    "CascadiaConfig",
    # model
    "Node",
    "Text",
    "Element",
    "ElementData",
    "StyledNode",
    "Stylesheet",
    "Rule",
    "Declaration",
    "Selector",
    "Specificity",
    "Unit",
    "Keyword",
    "Size",
    "Color",
    # errors
    "ParseError",
    "OutOfBoundsError",
    "UnexpectedEofError",
    "MalformedAttributeError",
    "UnclosedOrMismatchedTagError",
    "InvalidColorError",
    "InvalidNumberError",
    "MalformedDeclarationError",
    "UnterminatedBlockError",
]
