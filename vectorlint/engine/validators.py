"""Element dispatch: route an element to the rules registered for its type tag."""

from __future__ import annotations

import logging

from vectorlint.engine.context import ValidationContext
from vectorlint.engine.registry import RuleRegistry, get_registry
from vectorlint.models.results import ValidationIssue, ValidationResult
from vectorlint.models.svg_document import SvgElement

logger = logging.getLogger(__name__)


def validate_element(
    element: SvgElement,
    context: ValidationContext | None = None,
    registry: RuleRegistry | None = None,
) -> ValidationResult:
    """Validate one element (not its children) against its type's rules."""
    registry = registry or get_registry()
    spec = registry.get(getattr(element, "type", ""))
    if spec is None:
        tag = getattr(element, "type", "")
        return ValidationResult(
            valid=False,
            errors=[
                ValidationIssue(
                    code="UNKNOWN_ELEMENT_TYPE",
                    message=f"Unknown element type: {tag or '<missing>'}",
                    severity="error",
                    element=element,
                )
            ],
        )
    return spec.validate(element, context)


def validate_element_isolated(
    element: SvgElement,
    index: int,
    context: ValidationContext | None = None,
    registry: RuleRegistry | None = None,
) -> ValidationResult:
    """Like validate_element, but an internal fault becomes an error entry for ``index``."""
    try:
        return validate_element(element, context, registry)
    except Exception as e:
        logger.warning("  element %d validation FAILED: %s", index, e)
        return ValidationResult(
            valid=False,
            errors=[
                ValidationIssue(
                    code="ELEMENT_VALIDATION_FAILURE",
                    message=f"Internal error while validating element {index}: {e}",
                    severity="error",
                    element=element,
                    value=index,
                )
            ],
        )


def supported_element_types() -> list[str]:
    return get_registry().element_types()
