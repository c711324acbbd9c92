"""Color grammar accepted for fill and stroke values.

Deliberately small: custom palettes are legal CSS but cannot be verified
exhaustively, so an unrecognized form is reported as a warning, never an error.
"""

from __future__ import annotations

import re

_COLOR_PATTERNS = (
    re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$"),
    re.compile(r"^rgb\s*\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*\)$"),
    re.compile(r"^rgba\s*\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*,\s*(0|1|0?\.\d+)\s*\)$"),
    re.compile(r"^hsl\s*\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*\)$"),
    re.compile(r"^hsla\s*\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%\s*,\s*(0|1|0?\.\d+)\s*\)$"),
)

KEYWORD_COLORS = frozenset({"none", "transparent", "currentColor"})

NAMED_COLORS = frozenset({
    "red", "green", "blue", "black", "white", "yellow",
    "orange", "purple", "pink", "brown", "gray", "grey",
})


def is_valid_color(color: str) -> bool:
    """True if ``color`` is one of the accepted color forms."""
    if color in KEYWORD_COLORS:
        return True
    if color.lower() in NAMED_COLORS:
        return True
    return any(pattern.fullmatch(color) for pattern in _COLOR_PATTERNS)


def is_none_paint(color: str | None) -> bool:
    """True for a missing paint or an explicit ``none``."""
    return color is None or color == "none"
