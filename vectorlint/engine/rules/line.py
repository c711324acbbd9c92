"""Line rules: coordinates, length, stroke visibility."""

from __future__ import annotations

import math

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.registry import element_rule
from vectorlint.models.svg_document import LineElement
from vectorlint.utils.colors import is_none_paint

MAX_LENGTH = 10_000


@element_rule("line", description="Coordinate, length and stroke checks")
def line_rules(line: LineElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
    for name in ("x1", "y1", "x2", "y2"):
        value = getattr(line, name)
        if not math.isfinite(value):
            issues.error(
                "INVALID_COORDINATE",
                f"Line coordinate {name} must be a finite number",
                line,
                name,
                value,
            )

    length = math.hypot(line.x2 - line.x1, line.y2 - line.y1)
    if length == 0:
        issues.warning("ZERO_LENGTH_LINE", "Line has zero length and will not be visible", line)
    elif length > MAX_LENGTH:
        issues.warning("VERY_LONG_LINE", "Very long line may impact performance", line)

    # Lines have no fill area; only the stroke is painted
    if line.style is None or is_none_paint(line.style.stroke):
        issues.warning("INVISIBLE_LINE", "Line has no stroke and will not be visible", line)
