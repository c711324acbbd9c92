"""vectorlint: validation and quality scoring for declarative SVG documents."""

from vectorlint.engine.suite import (
    ValidationSuite,
    create_suite,
    quick_validate,
    validate_document,
    validate_with_auto_fix,
)
from vectorlint.engine.validators import validate_element
from vectorlint.models.svg_document import SvgDocument

__version__ = "0.1.0"

__all__ = [
    "SvgDocument",
    "ValidationSuite",
    "create_suite",
    "quick_validate",
    "validate_document",
    "validate_element",
    "validate_with_auto_fix",
]
