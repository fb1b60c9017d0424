from cascadia.cascade.matching import matches, matching_rules
from cascadia.cascade.resolver import cascade, resolve_styles, style_tree

__all__ = ["matches", "matching_rules", "cascade", "style_tree", "resolve_styles"]
