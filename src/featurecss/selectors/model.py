"""Selector model: polarity and the tagged feature-selector accumulator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Polarity(Enum):
    """Whether a rule targets documents where features are present or absent."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FeatureSelector:
    """Class predicates combined either as one compound or as alternatives.

    kinds:
        compound      parts are concatenated into a single selector
        alternatives  each part is its own selector in a grouped list
    """

    kind: str  # "compound", "alternatives"
    parts: tuple[str, ...] = ()

    @classmethod
    def compound(cls, parts: tuple[str, ...] = ()) -> FeatureSelector:
        return cls(kind="compound", parts=parts)

    @classmethod
    def alternatives(cls, parts: tuple[str, ...] = ()) -> FeatureSelector:
        return cls(kind="alternatives", parts=parts)

    def add(self, predicate: str) -> FeatureSelector:
        return FeatureSelector(kind=self.kind, parts=self.parts + (predicate,))

    def selectors(self) -> tuple[str, ...]:
        """Return the finalized selector texts, before nesting.

        A compound always yields exactly one selector, possibly empty. An
        empty alternative set yields none.
        """
        if self.kind == "compound":
            return ("".join(self.parts),)
        if self.kind == "alternatives":
            return self.parts
        raise ValueError(f"Unknown feature selector kind: {self.kind!r}")
