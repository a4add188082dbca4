"""Nesting of generated feature selectors under a context selector."""

from __future__ import annotations

from featurecss.selectors.model import FeatureSelector
from featurecss.stylesheet import split_top_level


def split_selector_list(text: str) -> list[str]:
    """Split a grouped selector on top-level commas.

    Commas inside brackets, parentheses or quoted strings are kept, so
    ``:is(.a, .b)`` stays a single selector. Empty entries are dropped.
    """
    parts = split_top_level(text, ",")
    return [" ".join(p.split()) for p in parts if p.strip()]


def nest(feature_selector: FeatureSelector, context: str) -> tuple[str, ...]:
    """Scope *feature_selector* under every selector in *context*.

    Each feature alternative becomes an ancestor of each context selector.
    With no feature predicates at all the context is returned unchanged.
    """
    contexts = split_selector_list(context)
    prefixes = [p for p in feature_selector.selectors() if p]
    if not prefixes:
        return tuple(contexts)
    return tuple(f"{prefix} {ctx}" for prefix in prefixes for ctx in contexts)
