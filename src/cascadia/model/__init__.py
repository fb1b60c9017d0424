"""Cascadia model layer -- public type re-exports."""

from cascadia.model.dom import Element, ElementData, Node, Text, element, text
from cascadia.model.styled import StyledNode

__all__ = [
    # dom
    "ElementData",
    "Text",
    "Element",
    "Node",
    "text",
    "element",
    # styled
    "StyledNode",
]
