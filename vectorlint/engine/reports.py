"""Document statistics and the compliance, accessibility and performance reports.

All functions here are pure: they read the document and the pre-order node
list and return fresh report models.
"""

from __future__ import annotations

import logging
from collections import Counter

from pydantic_core import PydanticSerializationError

from vectorlint.engine.identifiers import IdentifierGraph
from vectorlint.engine.walker import ElementNode
from vectorlint.models.results import (
    AccessibilityReport,
    ComplianceReport,
    ComplianceViolation,
    Complexity,
    DocumentSize,
    DocumentStats,
    PerformanceIssue,
    PerformanceReport,
    TextSizeIssue,
)
from vectorlint.models.svg_document import GroupElement, SvgDocument, TextElement

logger = logging.getLogger(__name__)

# (max elements, max depth) upper bounds, both exclusive
_COMPLEXITY_BUCKETS: tuple[tuple[Complexity, int, int], ...] = (
    ("low", 10, 3),
    ("medium", 100, 6),
    ("high", 1_000, 10),
)

DEFAULT_FONT_SIZE = 16
MIN_ACCESSIBLE_FONT_SIZE = 12

_RENDER_WEIGHTS: dict[str, float] = {
    "circle": 1,
    "rect": 1,
    "line": 1,
    "text": 2,
    "path": 3,
    "group": 0.5,
}

LARGE_ELEMENT_COUNT = 1_000
DEEP_NESTING = 10
LARGE_DOCUMENT_BYTES = 1_000_000


def classify_complexity(element_count: int, max_depth: int) -> Complexity:
    for bucket, count_limit, depth_limit in _COMPLEXITY_BUCKETS:
        if element_count < count_limit and max_depth < depth_limit:
            return bucket
    return "extreme"


def estimate_document_bytes(document: SvgDocument, nodes: list[ElementNode]) -> int:
    """Length of the canonical JSON form.

    Trees nested deeper than the serializer allows are measured node by node
    (each element without its children) plus the document frame.
    """
    try:
        return len(document.to_json())
    except PydanticSerializationError as e:
        logger.debug("Canonical serialization failed, estimating per node: %s", e)

    frame = document.model_dump_json(by_alias=True, exclude_none=True, exclude={"elements"})
    return len(frame) + sum(
        len(node.element.model_dump_json(by_alias=True, exclude_none=True, exclude={"children"}))
        for node in nodes
    )


def build_document_stats(
    document: SvgDocument,
    nodes: list[ElementNode],
    graph: IdentifierGraph,
) -> DocumentStats:
    element_types = Counter(node.element.type for node in nodes)
    max_depth = max((node.depth for node in nodes), default=0)
    estimated_bytes = estimate_document_bytes(document, nodes)

    return DocumentStats(
        total_elements=len(nodes),
        element_types=dict(element_types),
        max_nesting_depth=max_depth,
        total_ids=len(graph.defined_ids),
        duplicate_ids=graph.duplicate_ids,
        unreferenced_ids=graph.unreferenced_ids,
        missing_references=graph.missing_references,
        document_size=DocumentSize(
            estimated_bytes=estimated_bytes,
            complexity=classify_complexity(len(nodes), max_depth),
        ),
    )


def build_compliance_report(
    document: SvgDocument,
    nodes: list[ElementNode],
    standard: str,
) -> ComplianceReport:
    violations: list[ComplianceViolation] = []
    recommendations: list[str] = []

    # Only the SVG 2.0 rule subset is implemented
    if standard == "svg20":
        if document.view_box is None:
            violations.append(
                ComplianceViolation(
                    rule="SVG2.0-VIEWBOX-REQUIRED",
                    description="ViewBox is recommended for SVG 2.0 documents",
                    severity="warning",
                )
            )

        empty_groups = [
            node.element
            for node in nodes
            if isinstance(node.element, GroupElement) and not node.element.children
        ]
        if empty_groups:
            violations.append(
                ComplianceViolation(
                    rule="SVG2.0-EMPTY-GROUPS",
                    description="Empty group elements should be avoided",
                    elements=empty_groups,
                    severity="warning",
                )
            )

        recommendations.append("Consider adding accessibility metadata (title, description)")
        recommendations.append("Use semantic grouping with meaningful IDs")

    return ComplianceReport(
        standard="SVG",
        version=standard,
        compliant=not any(v.severity == "error" for v in violations),
        violations=violations,
        recommendations=recommendations,
    )


def build_accessibility_report(document: SvgDocument, nodes: list[ElementNode]) -> AccessibilityReport:
    score = 100
    recommendations: list[str] = []

    has_title = bool(document.title)
    has_description = bool(document.description)

    if not has_title:
        score -= 20
        recommendations.append("Add a title for screen readers")

    if not has_description:
        score -= 15
        recommendations.append("Add a description for better accessibility")

    has_aria_labels = any(
        node.element.style is not None and node.element.style.aria_label is not None
        for node in nodes
    )
    if not has_aria_labels:
        score -= 10
        recommendations.append("Consider adding aria-label attributes to important elements")

    text_size_issues: list[TextSizeIssue] = []
    for node in nodes:
        if not isinstance(node.element, TextElement):
            continue
        style = node.element.style
        font_size = (style.font_size if style is not None else None) or DEFAULT_FONT_SIZE
        if font_size < MIN_ACCESSIBLE_FONT_SIZE:
            text_size_issues.append(
                TextSizeIssue(
                    element=node.element,
                    font_size=font_size,
                    recommended=MIN_ACCESSIBLE_FONT_SIZE,
                )
            )
            score -= 5

    if text_size_issues:
        recommendations.append("Increase font sizes for better readability")

    return AccessibilityReport(
        score=max(0, score),
        has_title=has_title,
        has_description=has_description,
        has_aria_labels=has_aria_labels,
        text_size_issues=text_size_issues,
        recommendations=recommendations,
    )


def build_performance_report(nodes: list[ElementNode], stats: DocumentStats) -> PerformanceReport:
    score = 100
    issues: list[PerformanceIssue] = []
    optimizations: list[str] = []

    render_complexity = sum(_RENDER_WEIGHTS.get(node.element.type, 0) for node in nodes)

    if stats.total_elements > LARGE_ELEMENT_COUNT:
        issues.append(PerformanceIssue(type="complexity", description="Document has many elements", impact="high"))
        score -= 30
        optimizations.append("Consider grouping similar elements or using patterns")

    if stats.max_nesting_depth > DEEP_NESTING:
        issues.append(PerformanceIssue(type="nesting", description="Deep element nesting detected", impact="medium"))
        score -= 15
        optimizations.append("Flatten deeply nested structures where possible")

    estimated_bytes = stats.document_size.estimated_bytes
    if estimated_bytes > LARGE_DOCUMENT_BYTES:
        issues.append(PerformanceIssue(type="size", description="Document is very large", impact="high"))
        score -= 25
        optimizations.append("Consider optimizing path data and removing unused elements")

    return PerformanceReport(
        score=max(0, score),
        render_complexity=render_complexity,
        memory_estimate=max(1, estimated_bytes / 1024),
        issues=issues,
        optimizations=optimizations,
    )
