"""Per-element validation context and the issue accumulator rules write into.

Both are created fresh for every call; nothing here is shared between
validation runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vectorlint.models.results import ValidationIssue, ValidationResult, ValidationSuggestion
from vectorlint.models.svg_document import SvgElement


@dataclass(frozen=True)
class ValidationContext:
    """Read-only view of where an element sits in its document."""

    element_index: int | None = None
    parent_element: SvgElement | None = None
    sibling_elements: tuple[SvgElement, ...] = ()
    document_ids: frozenset[str] = frozenset()
    referenced_ids: frozenset[str] = frozenset()
    # Number of group ancestors (0 for root elements)
    depth: int = 0


@dataclass
class IssueCollector:
    """Accumulates the findings of one rule invocation."""

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    suggestions: list[ValidationSuggestion] = field(default_factory=list)

    def error(
        self,
        code: str,
        message: str,
        element: SvgElement | None = None,
        property: str | None = None,
        value: Any = None,
    ) -> None:
        self.errors.append(
            ValidationIssue(
                code=code,
                message=message,
                severity="error",
                element=element,
                property=property,
                value=value,
            )
        )

    def warning(
        self,
        code: str,
        message: str,
        element: SvgElement | None = None,
        property: str | None = None,
        value: Any = None,
    ) -> None:
        self.warnings.append(
            ValidationIssue(
                code=code,
                message=message,
                severity="warning",
                element=element,
                property=property,
                value=value,
            )
        )

    def suggest(
        self,
        code: str,
        message: str,
        suggestion: str,
        element: SvgElement | None = None,
        property: str | None = None,
        suggested_value: Any = None,
    ) -> None:
        self.suggestions.append(
            ValidationSuggestion(
                code=code,
                message=message,
                suggestion=suggestion,
                element=element,
                property=property,
                suggested_value=suggested_value,
            )
        )

    def result(self) -> ValidationResult:
        return ValidationResult(
            valid=not self.errors,
            errors=self.errors,
            warnings=self.warnings,
            suggestions=self.suggestions,
        )
