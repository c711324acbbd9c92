"""Result models returned by the validation engine.

Field names serialize to camelCase (``model_dump(by_alias=True)``); they are
the wire contract consumed by renderers, optimizers and tool layers.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from vectorlint.models.svg_document import AnyElement, CamelModel, SvgDocument

Severity = Literal["error", "warning", "info"]
Complexity = Literal["low", "medium", "high", "extreme"]
Priority = Literal["high", "medium", "low"]


class ValidationIssue(CamelModel):
    code: str
    message: str
    severity: Severity
    element: AnyElement | None = None
    property: str | None = None
    value: Any = None


class ValidationSuggestion(ValidationIssue):
    severity: Severity = "info"
    suggestion: str
    suggested_value: Any = None


class ValidationResult(CamelModel):
    valid: bool = True
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    suggestions: list[ValidationSuggestion] = Field(default_factory=list)


class DocumentSize(CamelModel):
    estimated_bytes: int = 0
    complexity: Complexity = "low"


class DocumentStats(CamelModel):
    total_elements: int = 0
    element_types: dict[str, int] = Field(default_factory=dict)
    max_nesting_depth: int = 0
    total_ids: int = 0
    duplicate_ids: list[str] = Field(default_factory=list)
    unreferenced_ids: list[str] = Field(default_factory=list)
    missing_references: list[str] = Field(default_factory=list)
    document_size: DocumentSize = Field(default_factory=DocumentSize)


class ComplianceViolation(CamelModel):
    rule: str
    description: str
    elements: list[AnyElement] = Field(default_factory=list)
    severity: Literal["error", "warning"]


class ComplianceReport(CamelModel):
    standard: str = "N/A"
    version: str = "N/A"
    compliant: bool = True
    violations: list[ComplianceViolation] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class ColorContrastIssue(CamelModel):
    element: AnyElement
    foreground: str
    background: str
    ratio: float
    minimum_required: float


class TextSizeIssue(CamelModel):
    element: AnyElement
    font_size: float
    recommended: float


class AccessibilityReport(CamelModel):
    score: float = 0
    has_title: bool = False
    has_description: bool = False
    has_aria_labels: bool = False
    color_contrast_issues: list[ColorContrastIssue] = Field(default_factory=list)
    text_size_issues: list[TextSizeIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class PerformanceIssue(CamelModel):
    type: Literal["complexity", "size", "nesting", "redundancy"]
    description: str
    impact: Literal["low", "medium", "high"]
    elements: list[AnyElement] | None = None


class PerformanceReport(CamelModel):
    score: float = 0
    render_complexity: float = 0
    memory_estimate: float = 0  # KB
    issues: list[PerformanceIssue] = Field(default_factory=list)
    optimizations: list[str] = Field(default_factory=list)


class DocumentValidationResult(ValidationResult):
    element_results: dict[int, ValidationResult] = Field(default_factory=dict)
    document_stats: DocumentStats = Field(default_factory=DocumentStats)
    compliance: ComplianceReport = Field(default_factory=ComplianceReport)
    accessibility: AccessibilityReport = Field(default_factory=AccessibilityReport)
    performance: PerformanceReport = Field(default_factory=PerformanceReport)


class QuickFix(CamelModel):
    type: Literal["add", "remove", "modify"]
    description: str
    property: str | None = None
    suggested_value: Any = None
    priority: Priority = "medium"
    automated: bool = False


class OverallResult(CamelModel):
    valid: bool
    score: int
    summary: str


class ValidationSuiteResult(CamelModel):
    overall: OverallResult
    element_results: dict[int, ValidationResult] | None = None
    document_result: DocumentValidationResult | None = None
    recommendations: list[str] = Field(default_factory=list)
    quick_fixes: list[QuickFix] = Field(default_factory=list)


class QuickValidationResult(CamelModel):
    valid: bool
    critical_issues: list[str] = Field(default_factory=list)
    element_count: int = 0


class AutoFixResult(CamelModel):
    validation_result: ValidationSuiteResult
    auto_fixed_document: SvgDocument | None = None
    applied_fixes: list[str] = Field(default_factory=list)
