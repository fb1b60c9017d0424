"""Text and dict renderings of styled trees, for display and JSON output."""

from __future__ import annotations

from typing import Any

from cascadia.model.dom import Element, Text
from cascadia.model.styled import StyledNode
from cascadia.stylesheet.model import Color, Keyword, Size, Unit, Value

__all__ = ["format_value", "render_tree", "to_dict"]

_UNIT_TEXT = {
    Unit.PX: "px",
    Unit.PERCENT: "%",
    Unit.EM: "em",
    Unit.REM: "rem",
    Unit.NONE: "",
}


def format_value(value: Value) -> str:
    """Format a value back into stylesheet notation."""
    if isinstance(value, Keyword):
        return value.text
    if isinstance(value, Size):
        number = int(value.number) if value.number.is_integer() else value.number
        return f"{number}{_UNIT_TEXT[value.unit]}"
    if isinstance(value, Color):
        return f"#{value.r:02x}{value.g:02x}{value.b:02x}"
    raise TypeError(f"Not a stylesheet value: {value!r}")


def _label(styled: StyledNode) -> str:
    node = styled.node
    if isinstance(node, Text):
        content = node.content
        return repr(content[:40] + "..." if len(content) > 40 else content)
    parts = [f"<{node.tag_name}"]
    for name, value in node.data.attributes.items():
        parts.append(f' {name}="{value}"')
    parts.append(">")
    return "".join(parts)


def render_tree(styled: StyledNode, indent: int = 2) -> str:
    """Render a styled tree as an indented outline.

    Each element line is followed by its resolved properties in
    declaration-fold order.
    """
    lines: list[str] = []

    def walk(current: StyledNode, depth: int) -> None:
        pad = " " * (indent * depth)
        lines.append(pad + _label(current))
        for name, value in current.properties.items():
            lines.append(f"{pad}{' ' * indent}| {name}: {format_value(value)}")
        for child in current.children:
            walk(child, depth + 1)

    walk(styled, 0)
    return "\n".join(lines)


def to_dict(styled: StyledNode) -> dict[str, Any]:
    """Convert a styled tree to plain JSON-serialisable data."""
    node = styled.node
    if isinstance(node, Text):
        return {"text": node.content}
    if not isinstance(node, Element):
        raise TypeError(f"Not a document node: {node!r}")
    return {
        "tag": node.tag_name,
        "attributes": dict(node.data.attributes),
        "properties": {
            name: format_value(value) for name, value in styled.properties.items()
        },
        "children": [to_dict(child) for child in styled.children],
    }
