"""Exception types.

Invalid document content never raises; it is reported in a ValidationResult.
These are reserved for integration errors and for callers that want a typed
failure value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vectorlint.models.results import ValidationIssue


class VectorLintError(Exception):
    """Base class for all vectorlint errors."""


class SvgValidationError(VectorLintError):
    """A document failed validation; carries the accumulated findings."""

    def __init__(
        self,
        message: str,
        errors: list[ValidationIssue] | None = None,
        warnings: list[ValidationIssue] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []
        self.warnings = warnings or []


class NestingDepthExceededError(VectorLintError):
    """The element tree is deeper than the hard traversal ceiling."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"Element nesting depth {depth} exceeds hard limit of {limit}")
        self.depth = depth
        self.limit = limit


class UnknownPresetError(VectorLintError, ValueError):
    def __init__(self, preset: str) -> None:
        super().__init__(f"Unknown validation preset: {preset}")
        self.preset = preset


class RuleRegistrationError(VectorLintError):
    """Rule registry is inconsistent (duplicate or missing element type)."""


class UnknownOptionError(VectorLintError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown document validation option: {name}")
        self.name = name
