"""vectorlint validation engine."""

from vectorlint.engine.registry import element_rule, get_registry, RuleRegistry, RuleSpec
from vectorlint.engine.context import ValidationContext, IssueCollector
from vectorlint.engine.config import DocumentValidationOptions, ValidationSuiteConfig, PRESETS
from vectorlint.engine.document_validator import DocumentValidator
from vectorlint.engine.suite import ValidationSuite, create_suite

__all__ = [
    "element_rule",
    "get_registry",
    "RuleRegistry",
    "RuleSpec",
    "ValidationContext",
    "IssueCollector",
    "DocumentValidationOptions",
    "ValidationSuiteConfig",
    "PRESETS",
    "DocumentValidator",
    "ValidationSuite",
    "create_suite",
]
