"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StyleRule:
    """A rule pairing a selector list with property declarations.

    ``selectors`` holds the grouped alternatives in output order; a
    compound selector is a one-element tuple. ``declarations`` keeps
    source order and repeated properties.
    """

    selectors: tuple[str, ...]
    declarations: tuple[tuple[str, str], ...] = ()

    @property
    def selector(self) -> str:
        return ", ".join(self.selectors)

    def to_css(self, indent: str = "  ") -> str:
        """Render the rule as CSS text."""
        lines = [f"{self.selector} {{"]
        for prop, value in self.declarations:
            lines.append(f"{indent}{prop}: {value};")
        lines.append("}")
        return "\n".join(lines)


@dataclass(frozen=True)
class Stylesheet:
    """The output rules are emitted into, in emission order."""

    rules: list[StyleRule] = field(default_factory=list)

    def add(self, rule: StyleRule) -> StyleRule:
        self.rules.append(rule)
        return rule

    def to_css(self, indent: str = "  ") -> str:
        return "\n\n".join(rule.to_css(indent) for rule in self.rules)
