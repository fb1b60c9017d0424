from cascadia.markup.parser import MarkupParser, parse_markup

__all__ = ["parse_markup", "MarkupParser"]
