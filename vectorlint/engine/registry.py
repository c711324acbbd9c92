"""Element rule registry: every element type's rules are one function registered via decorator.

Usage:
    @element_rule("circle", description="Radius, center and visibility checks")
    def circle_rules(circle: CircleElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
        if circle.r < 0:
            issues.error("NEGATIVE_RADIUS", "Circle radius cannot be negative", circle, "r", circle.r)

Rule functions are stateless: each invocation gets its own IssueCollector, so a
single registry can be shared by concurrent callers.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import threading
from dataclasses import dataclass
from typing import Any, Callable

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.rules.common import check_common_properties
from vectorlint.errors import RuleRegistrationError
from vectorlint.models.results import ValidationResult
from vectorlint.models.svg_document import ELEMENT_TYPES

logger = logging.getLogger(__name__)

RuleFn = Callable[[Any, IssueCollector, "ValidationContext | None"], None]


@dataclass(frozen=True)
class RuleSpec:
    element_type: str
    fn: RuleFn
    description: str = ""

    def validate(self, element: Any, context: ValidationContext | None = None) -> ValidationResult:
        """Run the common checks, then this element type's rules."""
        issues = IssueCollector()

        if element.type != self.element_type:
            issues.error(
                "WRONG_ELEMENT_TYPE",
                f"Expected {self.element_type} element, got {element.type}",
                element,
            )
            return issues.result()

        check_common_properties(element, issues)
        self.fn(element, issues, context)
        return issues.result()


class RuleRegistry:
    """Registry of rule sets keyed by element type tag."""

    def __init__(self) -> None:
        self._rules: dict[str, RuleSpec] = {}

    def register(self, spec: RuleSpec) -> None:
        if spec.element_type in self._rules:
            raise RuleRegistrationError(f"Duplicate rules for element type: {spec.element_type}")
        self._rules[spec.element_type] = spec
        logger.debug("Registered rules for %s", spec.element_type)

    def get(self, element_type: str) -> RuleSpec | None:
        return self._rules.get(element_type)

    def element_types(self) -> list[str]:
        return list(self._rules)

    def check_complete(self) -> None:
        """Every element variant of the document model must have rules."""
        missing = [t for t in ELEMENT_TYPES if t not in self._rules]
        if missing:
            raise RuleRegistrationError(f"No rules registered for element types: {missing}")

    @property
    def count(self) -> int:
        return len(self._rules)


# Module-level singleton
_registry = RuleRegistry()
_loaded = False
_load_lock = threading.Lock()


def get_registry() -> RuleRegistry:
    load_rules()
    return _registry


def load_rules() -> None:
    """Import every rule module so @element_rule decorators fire."""
    global _loaded
    with _load_lock:
        if _loaded:
            return

        package_name = "vectorlint.engine.rules"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")

        _registry.check_complete()
        _loaded = True
    logger.debug("Loaded rules for %d element types", _registry.count)


def element_rule(element_type: str, *, description: str = ""):
    """Decorator to register the rule function for one element type."""

    def decorator(fn: RuleFn) -> RuleFn:
        _registry.register(RuleSpec(element_type=element_type, fn=fn, description=description))
        return fn

    return decorator
