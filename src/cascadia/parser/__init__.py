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
from cascadia.parser.scanner import Scanner

__all__ = [
    "Scanner",
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
