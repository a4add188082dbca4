"""Parser for declaration blocks passed as rule content.

Syntax example:
    display: -webkit-box; display: flex;
    background: url(data:image/png;base64,iVBO...)
"""

from __future__ import annotations

import re

__all__ = ["parse_declarations", "split_top_level"]

# Start of a declaration: property name followed by a colon.
_PROP_RE = re.compile(r"(?P<key>-{0,2}[a-zA-Z_][a-zA-Z0-9_-]*)\s*:\s*")

_OPEN = "([{"
_CLOSE = ")]}"


def split_top_level(text: str, separator: str) -> list[str]:
    """Split *text* on *separator* outside brackets and quoted strings."""
    parts: list[str] = []
    depth = 0
    quote = ""
    start = 0
    for i, ch in enumerate(text):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in _OPEN:
            depth += 1
        elif ch in _CLOSE:
            depth = max(depth - 1, 0)
        elif ch == separator and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


def parse_declarations(body: str) -> tuple[tuple[str, str], ...]:
    """Parse a rule body into ``(property, value)`` pairs in source order.

    Repeated properties are all kept, so fallback declarations survive.
    Within one statement, a line that starts with ``name:`` opens a new
    declaration; other lines continue the previous value.
    """
    decls: list[tuple[str, str]] = []
    for statement in split_top_level(body, ";"):
        opened = False
        for line in split_top_level(statement, "\n"):
            line = line.strip()
            if not line:
                continue
            match = _PROP_RE.match(line)
            if match:
                decls.append((match.group("key"), line[match.end():].strip()))
                opened = True
            elif opened:
                key, value = decls[-1]
                decls[-1] = (key, f"{value} {line}".lstrip())
    return tuple((key, value) for key, value in decls if value)
