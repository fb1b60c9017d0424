"""Document tree model: ElementData, Text, and Element dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ElementData:
    """Tag name and attributes of one element."""

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)

    def id(self) -> str | None:
        """Return the ``id`` attribute, or None when absent."""
        return self.attributes.get("id")

    def classes(self) -> frozenset[str]:
        """Return the whitespace-split tokens of the ``class`` attribute."""
        return frozenset(self.attributes.get("class", "").split())


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    content: str


@dataclass(frozen=True)
class Element:
    """An element node owning its ordered children."""

    data: ElementData
    children: tuple[Node, ...] = ()

    @property
    def tag_name(self) -> str:
        return self.data.tag_name


Node = Union[Text, Element]


def text(content: str) -> Text:
    return Text(content)


def element(
    name: str,
    attributes: dict[str, str] | None = None,
    children: list[Node] | tuple[Node, ...] = (),
) -> Element:
    """Build an Element from a tag name, attributes and children."""
    return Element(ElementData(name, dict(attributes or {})), tuple(children))
