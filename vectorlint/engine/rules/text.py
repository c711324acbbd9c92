"""Text rules: content, position, font size, legibility."""

from __future__ import annotations

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.registry import element_rule
from vectorlint.engine.rules.common import check_fill_visibility, is_finite
from vectorlint.models.svg_document import TextElement

MAX_CONTENT_LENGTH = 10_000
MAX_FONT_SIZE = 1_000
MIN_READABLE_FONT_SIZE = 8


@element_rule("text", description="Content, position, font size and contrast checks")
def text_rules(text: TextElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
    if not text.content.strip():
        issues.warning("EMPTY_TEXT_CONTENT", "Text element has no content", text, "content", text.content)
    if len(text.content) > MAX_CONTENT_LENGTH:
        issues.warning("VERY_LONG_TEXT", "Very long text content may impact performance", text, "content")

    if not is_finite(text.x, text.y):
        issues.error(
            "INVALID_POSITION",
            "Text position coordinates must be finite numbers",
            text,
            "x,y",
            {"x": text.x, "y": text.y},
        )

    style = text.style
    if style is None:
        return

    font_size = style.font_size
    if font_size is not None:
        if font_size <= 0:
            issues.error("INVALID_FONT_SIZE", "Font size must be positive", text, "style.fontSize", font_size)
        elif font_size > MAX_FONT_SIZE:
            issues.warning("VERY_LARGE_FONT", "Very large font size may impact layout", text, "style.fontSize", font_size)

    if style.fill and style.fill == style.stroke:
        issues.warning(
            "LOW_CONTRAST",
            "Text fill and stroke colors are the same, may reduce readability",
            text,
        )

    check_fill_visibility(text, issues, "Text")

    if font_size is not None and 0 < font_size < MIN_READABLE_FONT_SIZE:
        issues.suggest(
            "ACCESSIBILITY_IMPROVEMENT",
            "Very small text may be hard to read",
            "Consider increasing font size for better accessibility",
            text,
            "style.fontSize",
            suggested_value=MIN_READABLE_FONT_SIZE,
        )
