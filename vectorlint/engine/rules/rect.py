"""Rectangle rules: dimensions, position, corner radii, visibility."""

from __future__ import annotations

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.registry import element_rule
from vectorlint.engine.rules.common import check_fill_visibility, is_finite
from vectorlint.models.svg_document import RectElement

MAX_DIMENSION = 10_000


@element_rule("rect", description="Dimension, position and corner radius checks")
def rect_rules(rect: RectElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
    _check_dimensions(rect, issues)

    if not is_finite(rect.x, rect.y):
        issues.error(
            "INVALID_POSITION",
            "Rectangle position coordinates must be finite numbers",
            rect,
            "x,y",
            {"x": rect.x, "y": rect.y},
        )

    _check_corner_radius(rect, issues, "rx", rect.rx, rect.width, "width")
    _check_corner_radius(rect, issues, "ry", rect.ry, rect.height, "height")

    check_fill_visibility(rect, issues, "Rectangle")


def _check_dimensions(rect: RectElement, issues: IssueCollector) -> None:
    if rect.width < 0:
        issues.error("NEGATIVE_WIDTH", "Rectangle width cannot be negative", rect, "width", rect.width)
    elif rect.width == 0:
        issues.warning("ZERO_WIDTH", "Rectangle with zero width will not be visible", rect, "width", rect.width)

    if rect.height < 0:
        issues.error("NEGATIVE_HEIGHT", "Rectangle height cannot be negative", rect, "height", rect.height)
    elif rect.height == 0:
        issues.warning("ZERO_HEIGHT", "Rectangle with zero height will not be visible", rect, "height", rect.height)

    if rect.width > MAX_DIMENSION or rect.height > MAX_DIMENSION:
        issues.warning(
            "LARGE_DIMENSIONS",
            "Very large rectangle dimensions may impact performance",
            rect,
            "width,height",
            {"width": rect.width, "height": rect.height},
        )


def _check_corner_radius(
    rect: RectElement,
    issues: IssueCollector,
    name: str,
    radius: float | None,
    extent: float,
    extent_name: str,
) -> None:
    if radius is None:
        return
    if radius < 0:
        issues.error("NEGATIVE_CORNER_RADIUS", f"Corner radius {name} cannot be negative", rect, name, radius)
    elif radius > extent / 2:
        issues.warning(
            "EXCESSIVE_CORNER_RADIUS",
            f"Corner radius {name} is larger than half the {extent_name}",
            rect,
            name,
            radius,
        )
