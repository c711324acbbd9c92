"""Validation suite orchestrator: presets, scoring, quick fixes and auto-fix."""

from __future__ import annotations

import logging
import math

from vectorlint.config import settings
from vectorlint.engine.config import (
    DocumentValidationOptions,
    ValidationSuiteConfig,
    preset_options,
)
from vectorlint.engine.context import ValidationContext
from vectorlint.engine.document_validator import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    DocumentValidator,
    unknown_element_result,
)
from vectorlint.engine.registry import RuleRegistry
from vectorlint.engine.validators import validate_element_isolated
from vectorlint.errors import SvgValidationError
from vectorlint.models.results import (
    AutoFixResult,
    DocumentValidationResult,
    OverallResult,
    Priority,
    QuickFix,
    QuickValidationResult,
    ValidationResult,
    ValidationSuiteResult,
    ValidationSuggestion,
)
from vectorlint.models.svg_document import SvgDocument, UnknownElement

logger = logging.getLogger(__name__)

_HIGH_PRIORITY_CODES = ("MISSING_REQUIRED_ATTRIBUTE", "INVALID_DIMENSION", "NEGATIVE_DIMENSION")
_LOW_PRIORITY_CODES = ("STYLE_OPTIMIZATION", "PERFORMANCE_SUGGESTION")
_AUTOMATABLE_CODES = ("MISSING_TITLE", "MISSING_DESCRIPTION", "EMPTY_ATTRIBUTE", "REDUNDANT_ATTRIBUTE")

# Score penalties
ELEMENT_ERROR_PENALTY = 10
ELEMENT_WARNING_PENALTY = 2
DOCUMENT_ERROR_PENALTY = 15
DOCUMENT_WARNING_PENALTY = 3
ACCESSIBILITY_WEIGHT = 0.2
PERFORMANCE_WEIGHT = 0.1


def suggestion_priority(code: str) -> Priority:
    if any(marker in code for marker in _HIGH_PRIORITY_CODES):
        return "high"
    if any(marker in code for marker in _LOW_PRIORITY_CODES):
        return "low"
    return "medium"


def is_automatable(code: str) -> bool:
    return any(marker in code for marker in _AUTOMATABLE_CODES)


def calculate_overall(
    element_results: dict[int, ValidationResult] | None,
    document_result: DocumentValidationResult | None,
) -> OverallResult:
    """Aggregate score in [0, 100], rounded half up."""
    score = 100.0
    total_errors = 0
    total_warnings = 0

    for result in (element_results or {}).values():
        total_errors += len(result.errors)
        total_warnings += len(result.warnings)
        score -= len(result.errors) * ELEMENT_ERROR_PENALTY
        score -= len(result.warnings) * ELEMENT_WARNING_PENALTY

    if document_result is not None:
        total_errors += len(document_result.errors)
        total_warnings += len(document_result.warnings)
        score -= len(document_result.errors) * DOCUMENT_ERROR_PENALTY
        score -= len(document_result.warnings) * DOCUMENT_WARNING_PENALTY
        score -= (100 - document_result.accessibility.score) * ACCESSIBILITY_WEIGHT
        score -= (100 - document_result.performance.score) * PERFORMANCE_WEIGHT

    score = max(0.0, min(100.0, score))

    if total_errors == 0 and total_warnings == 0:
        summary = "Document is valid with no issues detected"
    elif total_errors == 0:
        summary = f"Document is valid with {total_warnings} warning(s)"
    else:
        summary = f"Document has {total_errors} error(s) and {total_warnings} warning(s)"

    return OverallResult(
        valid=total_errors == 0,
        score=math.floor(score + 0.5),
        summary=summary,
    )


def _fix_from_suggestion(suggestion: ValidationSuggestion, fix_type: str) -> QuickFix:
    return QuickFix(
        type=fix_type,
        description=suggestion.message,
        property=suggestion.property,
        suggested_value=suggestion.suggested_value,
        priority=suggestion_priority(suggestion.code),
        automated=is_automatable(suggestion.code),
    )


class ValidationSuite:
    """Runs element and document validation under a named preset."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry

    def resolve_options(self, config: ValidationSuiteConfig) -> DocumentValidationOptions:
        return preset_options(config.preset).merged(config.document_options)

    def validate_document(
        self,
        document: SvgDocument,
        config: ValidationSuiteConfig | None = None,
    ) -> ValidationSuiteResult:
        config = config or ValidationSuiteConfig(preset=settings.default_preset)
        options = self.resolve_options(config)

        recommendations: list[str] = []
        quick_fixes: list[QuickFix] = []
        document_fixes: list[QuickFix] = []
        warning_fixes: list[QuickFix] = []
        element_results: dict[int, ValidationResult] | None = None
        document_result: DocumentValidationResult | None = None

        if config.element_validation:
            element_results = {}
            siblings = tuple(document.elements)
            for index, element in enumerate(document.elements):
                if isinstance(element, UnknownElement) and options.allow_unknown_elements:
                    element_results[index] = unknown_element_result(element)
                    continue
                context = ValidationContext(element_index=index, sibling_elements=siblings)
                result = validate_element_isolated(element, index, context, self.registry)
                element_results[index] = result

        if config.document_validation:
            validator = DocumentValidator(options, registry=self.registry)
            document_result = validator.validate_document(document)

            recommendations.extend(document_result.accessibility.recommendations)
            recommendations.extend(document_result.performance.optimizations)
            recommendations.extend(document_result.compliance.recommendations)

            document_fixes = [_fix_from_suggestion(s, "add") for s in document_result.suggestions if s.element is None]
            warning_fixes = [
                QuickFix(type="modify", description=w.message, priority="medium", automated=False)
                for w in document_result.warnings
            ]

        # The document pass covers every node of the tree; the root-only pass
        # is the source only when the document pass is off
        element_sources = document_result.element_results if document_result is not None else element_results
        for result in (element_sources or {}).values():
            quick_fixes.extend(_fix_from_suggestion(s, "modify") for s in result.suggestions)
        quick_fixes.extend(document_fixes)
        quick_fixes.extend(warning_fixes)

        overall = calculate_overall(element_results, document_result)
        logger.info("Suite (%s): score %d, %s", config.preset, overall.score, overall.summary)

        return ValidationSuiteResult(
            overall=overall,
            element_results=element_results,
            document_result=document_result,
            recommendations=list(dict.fromkeys(recommendations)),
            quick_fixes=quick_fixes,
        )

    def quick_validate(self, document: SvgDocument) -> QuickValidationResult:
        """Cheap structural admission check; does not run the rule engine."""
        critical_issues: list[str] = []

        if document.view_box is None:
            critical_issues.append("Missing viewBox")
        elif document.view_box.width <= 0 or document.view_box.height <= 0:
            critical_issues.append("Invalid viewBox dimensions")

        if not document.elements:
            critical_issues.append("No elements in document")

        untyped = sum(1 for element in document.elements if not getattr(element, "type", None))
        if untyped:
            critical_issues.append(f"{untyped} elements missing type information")

        return QuickValidationResult(
            valid=not critical_issues,
            critical_issues=critical_issues,
            element_count=len(document.elements),
        )

    def validate_with_auto_fix(self, document: SvgDocument, preset: str | None = None) -> AutoFixResult:
        """Validate, then apply the automatable fixes to a copy of the document.

        The fixed copy is not re-validated; callers validate it again to see
        the new score.
        """
        validation_result = self.validate_document(
            document, ValidationSuiteConfig(preset=preset or settings.default_preset)
        )
        automatable = [fix for fix in validation_result.quick_fixes if fix.automated]
        if not automatable:
            return AutoFixResult(validation_result=validation_result)

        fixed = document.model_copy()
        applied: list[str] = []
        for fix in automatable:
            try:
                _apply_fix(fixed, fix)
                applied.append(fix.description)
            except Exception as e:
                logger.warning("Failed to apply auto-fix %r: %s", fix.description, e)

        return AutoFixResult(
            validation_result=validation_result,
            auto_fixed_document=fixed,
            applied_fixes=applied,
        )

    def ensure_valid(self, document: SvgDocument, preset: str | None = None) -> ValidationSuiteResult:
        """Return the suite result, or raise SvgValidationError when it has errors."""
        result = self.validate_document(document, ValidationSuiteConfig(preset=preset or settings.default_preset))
        if result.overall.valid:
            return result

        errors = [issue for r in (result.element_results or {}).values() for issue in r.errors]
        warnings = [issue for r in (result.element_results or {}).values() for issue in r.warnings]
        if result.document_result is not None:
            # Document results already aggregate every element's findings
            errors = list(result.document_result.errors)
            warnings = list(result.document_result.warnings)
        raise SvgValidationError(result.overall.summary, errors=errors, warnings=warnings)


def _apply_fix(document: SvgDocument, fix: QuickFix) -> None:
    if fix.property == "title":
        if not document.title:
            document.title = fix.suggested_value or DEFAULT_TITLE
    elif fix.property == "description":
        if not document.description:
            document.description = fix.suggested_value or DEFAULT_DESCRIPTION
    else:
        raise ValueError(f"No automatic fix for property {fix.property!r}")


_default_suite = ValidationSuite()


def create_suite(registry: RuleRegistry | None = None) -> ValidationSuite:
    """Factory function for creating a suite instance."""
    return ValidationSuite(registry=registry)


def validate_document(document: SvgDocument, config: ValidationSuiteConfig | None = None) -> ValidationSuiteResult:
    return _default_suite.validate_document(document, config)


def quick_validate(document: SvgDocument) -> QuickValidationResult:
    return _default_suite.quick_validate(document)


def validate_with_auto_fix(document: SvgDocument, preset: str | None = None) -> AutoFixResult:
    return _default_suite.validate_with_auto_fix(document, preset)
