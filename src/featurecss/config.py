from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorConfig:
    negation_prefix: str = "no-"
    no_script_class: str = "no-js"  # set on the root when scripts are off
    indent: str = "  "


DEFAULT_CONFIG = SelectorConfig()
