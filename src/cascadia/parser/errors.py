"""Parser error types."""


class ParseError(Exception):
    """Raised when markup or stylesheet source cannot be parsed.

    ``position`` is the scanner offset at the point of failure, when known.
    """

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        super().__init__(message)


class OutOfBoundsError(ParseError):
    """A scanner read was attempted at or past the end of input."""


class UnexpectedEofError(ParseError):
    """Input ended before a construct's required terminator."""


class MalformedAttributeError(ParseError):
    """An attribute is missing ``=`` or its value quotes do not match."""


class UnclosedOrMismatchedTagError(ParseError):
    """A closing tag is not exactly ``</name>`` for the open element."""


class InvalidColorError(ParseError):
    """A ``#``-led value is not exactly six hex digits."""


class InvalidNumberError(ParseError):
    """The numeric part of a size value does not parse."""


class MalformedDeclarationError(ParseError):
    """A declaration is missing its ``:`` or its terminating ``;``."""


class UnterminatedBlockError(ParseError):
    """A declaration block is missing its braces."""
