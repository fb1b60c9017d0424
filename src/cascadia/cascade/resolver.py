"""Cascade resolution: folds matching rules into each element's properties."""

from __future__ import annotations

import logging

from cascadia.cascade.matching import matching_rules
from cascadia.model.dom import Element, ElementData, Node, Text
from cascadia.model.styled import StyledNode
from cascadia.stylesheet.model import Stylesheet, Value

__all__ = ["cascade", "style_tree", "resolve_styles"]

logger = logging.getLogger(__name__)


def cascade(element: ElementData, stylesheet: Stylesheet) -> dict[str, Value]:
    """Compute the property mapping for *element*.

    Matching rules are applied in ascending specificity so higher-specificity
    rules override.  ``sorted`` is stable, so rules of equal specificity keep
    source order and the later one wins.
    """
    matched = matching_rules(element, stylesheet)
    matched.sort(key=lambda pair: pair[0])

    properties: dict[str, Value] = {}
    for _specificity, rule in matched:
        for declaration in rule.declarations:
            properties[declaration.name] = declaration.value

    logger.debug(
        "<%s>: %d matching rule(s), %d resolved value(s)",
        element.tag_name,
        len(matched),
        len(properties),
    )
    return properties


def style_tree(node: Node, stylesheet: Stylesheet) -> StyledNode:
    """Build the styled tree for *node* and its descendants."""
    if isinstance(node, Text):
        return StyledNode(node=node)
    if isinstance(node, Element):
        return StyledNode(
            node=node,
            properties=cascade(node.data, stylesheet),
            children=tuple(style_tree(child, stylesheet) for child in node.children),
        )
    raise TypeError(f"Not a document node: {node!r}")


def resolve_styles(root: Node, sheet: Stylesheet) -> StyledNode:
    """Resolve styles for a whole document tree.

    The result has exactly the shape of *root*.
    """
    return style_tree(root, sheet)
