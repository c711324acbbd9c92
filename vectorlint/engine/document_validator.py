"""Document validator: structure, identifier graph, per-element rules, reports."""

from __future__ import annotations

import logging
import time

from vectorlint.config import settings
from vectorlint.engine.config import DocumentValidationOptions
from vectorlint.engine.context import ValidationContext
from vectorlint.engine.identifiers import IdentifierGraph, build_identifier_graph
from vectorlint.engine.registry import RuleRegistry
from vectorlint.engine.reports import (
    build_accessibility_report,
    build_compliance_report,
    build_document_stats,
    build_performance_report,
)
from vectorlint.engine.validators import validate_element_isolated
from vectorlint.engine.walker import ElementNode, collect
from vectorlint.errors import NestingDepthExceededError
from vectorlint.models.results import (
    AccessibilityReport,
    ComplianceReport,
    DocumentValidationResult,
    PerformanceReport,
    ValidationIssue,
    ValidationResult,
    ValidationSuggestion,
)
from vectorlint.models.svg_document import SvgDocument, UnknownElement, ViewBox

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "SVG Document"
DEFAULT_DESCRIPTION = "An SVG graphic"

MAX_VIEWBOX_DIMENSION = 100_000
MIN_ASPECT_RATIO = 0.01
MAX_ASPECT_RATIO = 100


class DocumentValidator:
    """Validates a whole document and derives its analytical reports."""

    def __init__(
        self,
        options: DocumentValidationOptions | None = None,
        registry: RuleRegistry | None = None,
        max_traversal_depth: int | None = None,
    ) -> None:
        self.options = options or DocumentValidationOptions()
        self.registry = registry
        if max_traversal_depth is None:
            max_traversal_depth = settings.max_traversal_depth
        self.max_traversal_depth = max_traversal_depth

    def validate_document(self, document: SvgDocument) -> DocumentValidationResult:
        start = time.perf_counter()

        try:
            nodes = collect(document.elements, self.max_traversal_depth)
        except NestingDepthExceededError as e:
            logger.warning("Document rejected: %s", e)
            return DocumentValidationResult(
                valid=False,
                errors=[
                    ValidationIssue(
                        code="MAX_DEPTH_EXCEEDED",
                        message=str(e),
                        severity="error",
                        value=e.depth,
                    )
                ],
            )

        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []
        suggestions: list[ValidationSuggestion] = []

        self._validate_structure(document, nodes, errors, warnings)

        graph = build_identifier_graph(nodes, document.defs or ())

        if document.view_box is not None:
            self._validate_view_box(document.view_box, errors, warnings)

        element_results = self._validate_elements(nodes, graph)
        for result in element_results.values():
            errors.extend(result.errors)
            warnings.extend(result.warnings)
            suggestions.extend(result.suggestions)

        self._validate_references(graph, errors, warnings)
        self._validate_id_uniqueness(graph, errors)

        stats = build_document_stats(document, nodes, graph)
        if stats.max_nesting_depth > self.options.max_nesting_depth:
            warnings.append(
                ValidationIssue(
                    code="EXCESSIVE_NESTING",
                    message=f"Document nesting depth exceeds maximum of {self.options.max_nesting_depth}",
                    severity="warning",
                    value=stats.max_nesting_depth,
                )
            )

        self._suggest_metadata(document, suggestions)

        options = self.options
        compliance = (
            build_compliance_report(document, nodes, options.target_compliance)
            if options.check_compliance
            else ComplianceReport()
        )
        accessibility = (
            build_accessibility_report(document, nodes)
            if options.check_accessibility
            else AccessibilityReport()
        )
        performance = (
            build_performance_report(nodes, stats)
            if options.check_performance
            else PerformanceReport()
        )

        logger.info(
            "Validated document: %d elements, %d errors, %d warnings in %.1fms",
            len(nodes),
            len(errors),
            len(warnings),
            (time.perf_counter() - start) * 1000,
        )

        return DocumentValidationResult(
            valid=not errors,
            errors=errors,
            warnings=warnings,
            suggestions=suggestions,
            element_results=element_results,
            document_stats=stats,
            compliance=compliance,
            accessibility=accessibility,
            performance=performance,
        )

    def _validate_structure(
        self,
        document: SvgDocument,
        nodes: list[ElementNode],
        errors: list[ValidationIssue],
        warnings: list[ValidationIssue],
    ) -> None:
        if document.view_box is None:
            errors.append(
                ValidationIssue(code="MISSING_VIEWBOX", message="Document must have a viewBox", severity="error")
            )

        if not document.elements:
            warnings.append(
                ValidationIssue(code="EMPTY_DOCUMENT", message="Document has no elements", severity="warning")
            )

        if len(nodes) > self.options.max_elements:
            errors.append(
                ValidationIssue(
                    code="TOO_MANY_ELEMENTS",
                    message=f"Document exceeds maximum element limit of {self.options.max_elements}",
                    severity="error",
                    value=len(nodes),
                )
            )

        if not document.title and not document.description:
            warnings.append(
                ValidationIssue(
                    code="MISSING_ACCESSIBILITY_METADATA",
                    message="Document should have a title or description for accessibility",
                    severity="warning",
                )
            )

    def _validate_view_box(
        self,
        view_box: ViewBox,
        errors: list[ValidationIssue],
        warnings: list[ValidationIssue],
    ) -> None:
        if view_box.width <= 0:
            errors.append(
                ValidationIssue(
                    code="INVALID_VIEWBOX_WIDTH",
                    message="ViewBox width must be positive",
                    severity="error",
                    property="viewBox.width",
                    value=view_box.width,
                )
            )

        if view_box.height <= 0:
            errors.append(
                ValidationIssue(
                    code="INVALID_VIEWBOX_HEIGHT",
                    message="ViewBox height must be positive",
                    severity="error",
                    property="viewBox.height",
                    value=view_box.height,
                )
            )

        if view_box.width > MAX_VIEWBOX_DIMENSION or view_box.height > MAX_VIEWBOX_DIMENSION:
            warnings.append(
                ValidationIssue(
                    code="VERY_LARGE_VIEWBOX",
                    message="Very large viewBox dimensions may impact performance",
                    severity="warning",
                    property="viewBox",
                    value=view_box.model_dump(by_alias=True),
                )
            )

        if view_box.width > 0 and view_box.height > 0:
            aspect_ratio = view_box.width / view_box.height
            if not MIN_ASPECT_RATIO <= aspect_ratio <= MAX_ASPECT_RATIO:
                warnings.append(
                    ValidationIssue(
                        code="EXTREME_ASPECT_RATIO",
                        message="Extreme aspect ratio may cause rendering issues",
                        severity="warning",
                        property="viewBox",
                        value=aspect_ratio,
                    )
                )

    def _validate_elements(
        self,
        nodes: list[ElementNode],
        graph: IdentifierGraph,
    ) -> dict[int, ValidationResult]:
        document_ids = graph.defined_ids
        referenced_ids = graph.referenced_ids
        results: dict[int, ValidationResult] = {}

        for node in nodes:
            if isinstance(node.element, UnknownElement) and self.options.allow_unknown_elements:
                results[node.index] = unknown_element_result(node.element)
                continue

            context = ValidationContext(
                element_index=node.sibling_index,
                parent_element=node.parent,
                sibling_elements=node.siblings,
                document_ids=document_ids,
                referenced_ids=referenced_ids,
                depth=node.depth,
            )
            results[node.index] = validate_element_isolated(node.element, node.index, context, self.registry)

        return results

    def _validate_references(
        self,
        graph: IdentifierGraph,
        errors: list[ValidationIssue],
        warnings: list[ValidationIssue],
    ) -> None:
        for referenced_id in graph.missing_references:
            errors.append(
                ValidationIssue(
                    code="MISSING_REFERENCE",
                    message=f"Referenced ID '{referenced_id}' not found in document",
                    severity="error",
                    value=referenced_id,
                )
            )

        if not self.options.flag_unreferenced_ids:
            return

        for element_id in graph.unreferenced_ids:
            warnings.append(
                ValidationIssue(
                    code="UNREFERENCED_ID",
                    message=f"ID '{element_id}' is defined but never referenced",
                    severity="warning",
                    value=element_id,
                )
            )

    def _validate_id_uniqueness(self, graph: IdentifierGraph, errors: list[ValidationIssue]) -> None:
        for duplicate_id in graph.duplicate_ids:
            errors.append(
                ValidationIssue(
                    code="DUPLICATE_ID",
                    message=f"Duplicate ID found: '{duplicate_id}'",
                    severity="error",
                    value=duplicate_id,
                )
            )

    def _suggest_metadata(self, document: SvgDocument, suggestions: list[ValidationSuggestion]) -> None:
        if not document.title:
            suggestions.append(
                ValidationSuggestion(
                    code="MISSING_TITLE",
                    message="Add a title for screen readers",
                    suggestion=f"Set the document title, e.g. '{DEFAULT_TITLE}'",
                    property="title",
                    suggested_value=DEFAULT_TITLE,
                )
            )
        if not document.description:
            suggestions.append(
                ValidationSuggestion(
                    code="MISSING_DESCRIPTION",
                    message="Add a description for better accessibility",
                    suggestion=f"Set the document description, e.g. '{DEFAULT_DESCRIPTION}'",
                    property="description",
                    suggested_value=DEFAULT_DESCRIPTION,
                )
            )


def unknown_element_result(element: UnknownElement) -> ValidationResult:
    """Result for an element skipped because unknown tags are allowed."""
    tag = element.type or "<missing>"
    return ValidationResult(
        warnings=[
            ValidationIssue(
                code="UNKNOWN_ELEMENT",
                message=f"Element type '{tag}' is not validated",
                severity="warning",
                element=element,
            )
        ],
    )
