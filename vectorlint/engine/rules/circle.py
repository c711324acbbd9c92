"""Circle rules: radius, center, visibility and dash-pattern cost."""

from __future__ import annotations

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.registry import element_rule
from vectorlint.engine.rules.common import check_fill_visibility, is_finite
from vectorlint.models.svg_document import CircleElement

MAX_RADIUS = 10_000
MAX_COORDINATE = 1_000_000
# Radius above which dashed strokes get expensive to rasterize
DASHED_RADIUS_HINT = 1_000


@element_rule("circle", description="Radius, center and visibility checks")
def circle_rules(circle: CircleElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
    if circle.r < 0:
        issues.error("NEGATIVE_RADIUS", "Circle radius cannot be negative", circle, "r", circle.r)
    elif circle.r == 0:
        issues.warning("ZERO_RADIUS", "Circle with zero radius will not be visible", circle, "r", circle.r)
    elif circle.r > MAX_RADIUS:
        issues.warning("LARGE_RADIUS", "Very large radius may impact performance", circle, "r", circle.r)

    center = {"cx": circle.cx, "cy": circle.cy}
    if not is_finite(circle.cx, circle.cy):
        issues.error(
            "INVALID_CENTER",
            "Circle center coordinates must be finite numbers",
            circle,
            "cx,cy",
            center,
        )
    if abs(circle.cx) > MAX_COORDINATE or abs(circle.cy) > MAX_COORDINATE:
        issues.warning(
            "EXTREME_COORDINATES",
            "Circle center coordinates are very large",
            circle,
            "cx,cy",
            center,
        )

    check_fill_visibility(circle, issues, "Circle")

    if circle.r > DASHED_RADIUS_HINT and circle.style is not None and circle.style.stroke_dasharray:
        issues.suggest(
            "PERFORMANCE_OPTIMIZATION",
            "Large circle with stroke dash array may impact performance",
            "Consider simplifying the stroke pattern or reducing the radius",
            circle,
        )
