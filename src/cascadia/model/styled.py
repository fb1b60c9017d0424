"""Styled tree model: a document node paired with its resolved properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from cascadia.model.dom import Node
from cascadia.stylesheet.model import Value


@dataclass(frozen=True)
class StyledNode:
    """One node of the styled tree.

    Mirrors its source node: ``children`` has the same length and order as
    the source element's children.  Text nodes carry no properties.
    """

    node: Node
    properties: dict[str, Value] = field(default_factory=dict)
    children: tuple[StyledNode, ...] = ()

    def value(self, name: str) -> Value | None:
        """Return the resolved value for property *name*, if any."""
        return self.properties.get(name)
