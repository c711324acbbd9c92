"""Tests for the per-element rule sets."""

import math

from vectorlint.engine.context import ValidationContext
from vectorlint.engine.registry import get_registry
from vectorlint.engine.validators import validate_element
from vectorlint.models.svg_document import (
    CircleElement,
    GroupElement,
    LineElement,
    PathElement,
    RectElement,
    SvgStyle,
    TextElement,
    TextStyle,
    UnknownElement,
)


def _codes(issues) -> list[str]:
    return [issue.code for issue in issues]


class TestCircle:
    def test_negative_radius(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=-5))
        assert not result.valid
        assert "NEGATIVE_RADIUS" in _codes(result.errors)
        assert result.errors[0].property == "r"
        assert result.errors[0].value == -5

    def test_zero_radius_single_warning(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=0))
        assert result.valid
        assert result.errors == []
        assert _codes(result.warnings) == ["ZERO_RADIUS"]

    def test_large_radius(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=20_000, style=SvgStyle(fill="red")))
        assert _codes(result.warnings) == ["LARGE_RADIUS"]

    def test_non_finite_center(self):
        result = validate_element(CircleElement(cx=math.inf, cy=0, r=1))
        assert "INVALID_CENTER" in _codes(result.errors)

    def test_extreme_coordinates(self):
        result = validate_element(CircleElement(cx=2_000_000, cy=0, r=1))
        assert "EXTREME_COORDINATES" in _codes(result.warnings)

    def test_invisible(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=1, style=SvgStyle(fill="none")))
        assert "INVISIBLE_ELEMENT" in _codes(result.warnings)

    def test_stroked_outline_is_visible(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=1, style=SvgStyle(fill="none", stroke="black")))
        assert "INVISIBLE_ELEMENT" not in _codes(result.warnings)

    def test_dashed_large_circle_suggestion(self):
        circle = CircleElement(cx=0, cy=0, r=1_500, style=SvgStyle(fill="red", stroke_dasharray="4 2"))
        result = validate_element(circle)
        assert _codes(result.suggestions) == ["PERFORMANCE_OPTIMIZATION"]


class TestRect:
    def test_zero_dimensions_two_warnings(self):
        result = validate_element(RectElement(x=0, y=0, width=0, height=0))
        assert result.errors == []
        assert _codes(result.warnings) == ["ZERO_WIDTH", "ZERO_HEIGHT"]

    def test_negative_dimensions(self):
        result = validate_element(RectElement(x=0, y=0, width=-1, height=-2))
        assert _codes(result.errors) == ["NEGATIVE_WIDTH", "NEGATIVE_HEIGHT"]

    def test_corner_radius(self):
        result = validate_element(RectElement(x=0, y=0, width=10, height=10, rx=-1, ry=6))
        assert "NEGATIVE_CORNER_RADIUS" in _codes(result.errors)
        assert "EXCESSIVE_CORNER_RADIUS" in _codes(result.warnings)

    def test_large_dimensions(self):
        result = validate_element(RectElement(x=0, y=0, width=20_000, height=5))
        assert "LARGE_DIMENSIONS" in _codes(result.warnings)


class TestLine:
    def test_zero_length(self):
        line = LineElement(x1=1, y1=1, x2=1, y2=1, style=SvgStyle(stroke="black"))
        assert _codes(validate_element(line).warnings) == ["ZERO_LENGTH_LINE"]

    def test_no_stroke_is_invisible(self):
        line = LineElement(x1=0, y1=0, x2=10, y2=0)
        assert _codes(validate_element(line).warnings) == ["INVISIBLE_LINE"]

    def test_invalid_coordinate(self):
        line = LineElement(x1=math.nan, y1=0, x2=10, y2=0, style=SvgStyle(stroke="black"))
        result = validate_element(line)
        assert _codes(result.errors) == ["INVALID_COORDINATE"]
        assert result.errors[0].property == "x1"


class TestPath:
    def test_empty_path_data(self):
        result = validate_element(PathElement(d="  "))
        assert _codes(result.errors) == ["EMPTY_PATH_DATA"]
        assert result.warnings == []

    def test_invalid_characters(self):
        result = validate_element(PathElement(d="M0 0 X 5"))
        assert "INVALID_PATH_DATA" in _codes(result.errors)

    def test_exponent_numbers_accepted(self):
        result = validate_element(PathElement(d="M1e-3 0 L+5 5 Z"))
        assert result.valid

    def test_questionable_structure(self):
        result = validate_element(PathElement(d="L0 0 10 10"))
        assert "QUESTIONABLE_PATH_STRUCTURE" in _codes(result.warnings)

    def test_complex_path(self):
        d = "M0 0" + " L1 1" * 2_500
        result = validate_element(PathElement(d=d))
        assert "COMPLEX_PATH" in _codes(result.warnings)
        assert "HIGH_COMMAND_COUNT" in _codes(result.warnings)
        assert _codes(result.suggestions) == ["OPTIMIZE_PATH"]


class TestText:
    def test_empty_content(self):
        result = validate_element(TextElement(x=0, y=0, content="   "))
        assert _codes(result.warnings) == ["EMPTY_TEXT_CONTENT"]

    def test_font_size(self):
        assert "INVALID_FONT_SIZE" in _codes(
            validate_element(TextElement(x=0, y=0, content="a", style=TextStyle(font_size=0))).errors
        )
        assert "VERY_LARGE_FONT" in _codes(
            validate_element(TextElement(x=0, y=0, content="a", style=TextStyle(font_size=2_000))).warnings
        )

    def test_small_font_suggestion(self):
        result = validate_element(TextElement(x=0, y=0, content="a", style=TextStyle(font_size=6)))
        assert _codes(result.suggestions) == ["ACCESSIBILITY_IMPROVEMENT"]
        assert result.suggestions[0].suggested_value == 8

    def test_low_contrast(self):
        text = TextElement(x=0, y=0, content="a", style=TextStyle(fill="black", stroke="black"))
        assert "LOW_CONTRAST" in _codes(validate_element(text).warnings)


class TestGroup:
    def test_empty_group(self):
        assert _codes(validate_element(GroupElement()).warnings) == ["EMPTY_GROUP"]

    def test_deep_nesting_uses_context_depth(self):
        group = GroupElement(children=[CircleElement(cx=0, cy=0, r=1)])
        shallow = validate_element(group, ValidationContext(depth=10))
        deep = validate_element(group, ValidationContext(depth=11))
        assert "DEEP_NESTING" not in _codes(shallow.warnings)
        assert "DEEP_NESTING" in _codes(deep.warnings)


class TestCommon:
    def test_empty_id(self):
        result = validate_element(CircleElement(id="", cx=0, cy=0, r=1))
        assert "INVALID_ID" in _codes(result.errors)

    def test_class_name(self):
        result = validate_element(CircleElement(class_name="9bad", cx=0, cy=0, r=1))
        assert "INVALID_CLASS_NAME" in _codes(result.warnings)

    def test_transform(self):
        ok = validate_element(CircleElement(transform="translate(10, 5) rotate(45)", cx=0, cy=0, r=1))
        bad = validate_element(CircleElement(transform="spin(45)", cx=0, cy=0, r=1))
        assert ok.valid
        assert "INVALID_TRANSFORM" in _codes(bad.errors)

    def test_reference_syntax(self):
        result = validate_element(CircleElement(clip_path="#clip", cx=0, cy=0, r=1))
        assert "INVALID_REFERENCE_SYNTAX" in _codes(result.errors)

    def test_opacity_range(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=1, style=SvgStyle(opacity=1.5, fill_opacity=-0.1)))
        assert _codes(result.errors) == ["INVALID_OPACITY", "INVALID_FILL_OPACITY"]
        assert result.errors[1].property == "style.fillOpacity"

    def test_unrecognized_color_is_warning(self):
        result = validate_element(CircleElement(cx=0, cy=0, r=1, style=SvgStyle(fill="chartreuse")))
        assert result.valid
        assert "INVALID_COLOR_FORMAT" in _codes(result.warnings)


def test_unknown_element_type():
    result = validate_element(UnknownElement(type="ellipse"))
    assert _codes(result.errors) == ["UNKNOWN_ELEMENT_TYPE"]


def test_wrong_element_type():
    rect = RectElement(x=0, y=0, width=1, height=1)
    result = get_registry().get("circle").validate(rect)
    assert _codes(result.errors) == ["WRONG_ELEMENT_TYPE"]
    assert result.warnings == []


def test_rules_are_stateless():
    circle = CircleElement(cx=0, cy=0, r=-1)
    first = validate_element(circle)
    second = validate_element(circle)
    assert first == second
    assert len(second.errors) == 1
