from cascadia.stylesheet.parser import StylesheetParser, parse_stylesheet, parse_value
from cascadia.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Rule,
    Selector,
    Size,
    Specificity,
    Stylesheet,
    Unit,
    Value,
)

__all__ = [
    "parse_stylesheet",
    "parse_value",
    "StylesheetParser",
    "Stylesheet",
    "Rule",
    "Declaration",
    "Selector",
    "Specificity",
    "Unit",
    "Keyword",
    "Size",
    "Color",
    "Value",
]
