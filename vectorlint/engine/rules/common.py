"""Checks shared by every element type: identifier, class, transform, references, style."""

from __future__ import annotations

import math
import re

from vectorlint.engine.context import IssueCollector
from vectorlint.models.svg_document import SvgElement
from vectorlint.utils.colors import is_none_paint, is_valid_color

_CLASS_NAME_RE = re.compile(r"^[a-zA-Z][\w\-]*$")

_TRANSFORM_FN = r"(matrix|translate|scale|rotate|skewX|skewY)\s*\([^)]*\)"
_TRANSFORM_RE = re.compile(rf"^{_TRANSFORM_FN}(\s+{_TRANSFORM_FN})*\s*$")

_URL_REF_RE = re.compile(r"^url\(#([^)]+)\)$")

_OPACITY_FIELDS = (
    ("opacity", "INVALID_OPACITY", "Opacity"),
    ("fill_opacity", "INVALID_FILL_OPACITY", "Fill opacity"),
    ("stroke_opacity", "INVALID_STROKE_OPACITY", "Stroke opacity"),
)


def check_common_properties(element: SvgElement, issues: IssueCollector) -> None:
    if element.id is not None and element.id.strip() == "":
        issues.error("INVALID_ID", "Element ID cannot be empty", element, "id", element.id)

    if element.class_name and not _CLASS_NAME_RE.fullmatch(element.class_name):
        issues.warning(
            "INVALID_CLASS_NAME",
            "Class name contains invalid characters",
            element,
            "className",
            element.class_name,
        )

    if element.transform and not _TRANSFORM_RE.fullmatch(element.transform.strip()):
        issues.error(
            "INVALID_TRANSFORM",
            "Transform contains invalid syntax",
            element,
            "transform",
            element.transform,
        )

    for prop, value in (("clipPath", element.clip_path), ("mask", element.mask)):
        if value is not None and not _URL_REF_RE.fullmatch(value.strip()):
            issues.error(
                "INVALID_REFERENCE_SYNTAX",
                f"{prop} must use url(#id) syntax",
                element,
                prop,
                value,
            )

    if element.style is not None:
        _check_style(element, issues)


def _check_style(element: SvgElement, issues: IssueCollector) -> None:
    style = element.style

    for field_name, code, label in _OPACITY_FIELDS:
        value = getattr(style, field_name)
        if value is not None and not 0 <= value <= 1:
            alias = type(style).model_fields[field_name].alias or field_name
            issues.error(code, f"{label} must be between 0 and 1", element, f"style.{alias}", value)

    if style.stroke_width is not None and style.stroke_width < 0:
        issues.error(
            "INVALID_STROKE_WIDTH",
            "Stroke width cannot be negative",
            element,
            "style.strokeWidth",
            style.stroke_width,
        )

    if style.fill and not is_valid_color(style.fill):
        issues.warning(
            "INVALID_COLOR_FORMAT",
            "Fill color format may not be valid",
            element,
            "style.fill",
            style.fill,
        )

    if style.stroke and not is_valid_color(style.stroke):
        issues.warning(
            "INVALID_COLOR_FORMAT",
            "Stroke color format may not be valid",
            element,
            "style.stroke",
            style.stroke,
        )


def check_fill_visibility(element: SvgElement, issues: IssueCollector, label: str) -> None:
    """Filled shapes disappear when fill is ``none`` and there is no stroke."""
    style = element.style
    if style is not None and style.fill == "none" and is_none_paint(style.stroke):
        issues.warning(
            "INVISIBLE_ELEMENT",
            f"{label} has no fill or stroke and will not be visible",
            element,
        )


def is_finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)
