"""Stylesheet model: selectors, values, declarations, rules and stylesheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union


class Specificity(NamedTuple):
    """Precedence weight of a selector.

    Tuple comparison gives the cascade order: id presence first, then the
    number of class tokens, then tag presence.
    """

    ids: int
    classes: int
    tags: int


@dataclass(frozen=True)
class Selector:
    """A simple selector: optional tag, optional id, required classes.

    An empty selector (no tag, id or class) matches every element.
    """

    tag: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    def specificity(self) -> Specificity:
        return Specificity(
            ids=1 if self.id is not None else 0,
            classes=len(self.classes),
            tags=1 if self.tag is not None else 0,
        )


class Unit(Enum):
    """Unit attached to a Size value."""

    PX = "px"
    PERCENT = "percent"
    EM = "em"
    REM = "rem"
    NONE = "none"


@dataclass(frozen=True)
class Keyword:
    text: str


@dataclass(frozen=True)
class Size:
    number: float
    unit: Unit = Unit.NONE


@dataclass(frozen=True)
class Color:
    """An opaque RGB color, one byte per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")


Value = Union[Keyword, Size, Color]


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """A selector list paired with its declarations.

    The selectors are alternatives: the rule applies to an element when any
    one of them matches.
    """

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order; the order breaks specificity ties."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
