"""Validation configuration: thresholds and which reports to compute."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

from pydantic.alias_generators import to_camel

from vectorlint.errors import UnknownOptionError, UnknownPresetError

ValidationPreset = Literal["strict", "standard", "minimal", "performance", "accessibility", "custom"]


@dataclass(frozen=True)
class DocumentValidationOptions:
    """Controls the document-level checks and report generation."""

    check_accessibility: bool = True
    check_performance: bool = True
    check_compliance: bool = True
    target_compliance: Literal["svg11", "svg20", "svg21"] = "svg20"

    # Advisory limits: exceeding them is reported, never truncated
    max_elements: int = 10_000
    max_nesting_depth: int = 20

    allow_unknown_elements: bool = False

    # Warn about ids never referenced through clip-path/mask
    flag_unreferenced_ids: bool = True

    def merged(self, overrides: Mapping[str, Any] | None) -> DocumentValidationOptions:
        """Copy with the caller's explicitly set fields replacing ours.

        Keys may use the Python names or the camelCase wire names.
        """
        if not overrides:
            return self
        names = {f.name: f.name for f in dataclasses.fields(self)}
        names.update({to_camel(f.name): f.name for f in dataclasses.fields(self)})
        changes = {}
        for key, value in overrides.items():
            if key not in names:
                raise UnknownOptionError(key)
            changes[names[key]] = value
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ValidationSuiteConfig:
    preset: ValidationPreset = "standard"
    element_validation: bool = True
    document_validation: bool = True
    document_options: Mapping[str, Any] | None = None


_STANDARD = DocumentValidationOptions(
    max_elements=10_000,
    max_nesting_depth=20,
    allow_unknown_elements=True,
)

PRESETS: Mapping[str, DocumentValidationOptions] = MappingProxyType({
    "strict": DocumentValidationOptions(
        max_elements=5_000,
        max_nesting_depth=15,
        allow_unknown_elements=False,
    ),
    "standard": _STANDARD,
    "minimal": DocumentValidationOptions(
        check_accessibility=False,
        check_performance=False,
        check_compliance=False,
        max_elements=50_000,
        max_nesting_depth=50,
        allow_unknown_elements=True,
    ),
    "performance": DocumentValidationOptions(
        check_accessibility=False,
        check_performance=True,
        check_compliance=False,
        max_elements=1_000,
        max_nesting_depth=10,
        allow_unknown_elements=True,
    ),
    "accessibility": DocumentValidationOptions(
        check_accessibility=True,
        check_performance=False,
        check_compliance=True,
        max_elements=50_000,
        max_nesting_depth=50,
        allow_unknown_elements=True,
    ),
    # Caller overrides are merged over the standard defaults
    "custom": _STANDARD,
})


def preset_options(preset: str) -> DocumentValidationOptions:
    try:
        return PRESETS[preset]
    except KeyError:
        raise UnknownPresetError(preset) from None
