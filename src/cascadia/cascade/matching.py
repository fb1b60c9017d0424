"""Selector matching against element data."""

from __future__ import annotations

from cascadia.model.dom import ElementData
from cascadia.stylesheet.model import Rule, Selector, Specificity, Stylesheet

__all__ = ["matches", "matching_rules", "MatchedRule"]

MatchedRule = tuple[Specificity, Rule]


def matches(element: ElementData, selector: Selector) -> bool:
    """Check whether *selector* matches *element*.

    Tag, id and classes must all agree; a constraint the selector leaves
    out always passes.
    """
    if selector.tag is not None and selector.tag != element.tag_name:
        return False
    if selector.id is not None and selector.id != element.id():
        return False
    if selector.classes:
        element_classes = element.classes()
        if any(cls not in element_classes for cls in selector.classes):
            return False
    return True


def matching_rules(element: ElementData, stylesheet: Stylesheet) -> list[MatchedRule]:
    """Return ``(specificity, rule)`` for each rule that matches *element*.

    Rules keep stylesheet order.  Within a rule only the first matching
    selector counts, so a rule contributes at most once.
    """
    matched: list[MatchedRule] = []
    for rule in stylesheet.rules:
        for selector in rule.selectors:
            if matches(element, selector):
                matched.append((selector.specificity(), rule))
                break
    return matched
