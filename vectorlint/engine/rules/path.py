"""Path rules: command alphabet, structure, complexity, visibility."""

from __future__ import annotations

import re

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.registry import element_rule
from vectorlint.engine.rules.common import check_fill_visibility
from vectorlint.models.svg_document import PathElement

MAX_PATH_LENGTH = 10_000
MAX_COMMANDS = 1_000

# Command letters, numbers (including exponents), separators
_PATH_ALPHABET_RE = re.compile(r"^[MmLlHhVvCcSsQqTtAaZz\d\s,.\-+eE]+$")
_COMMAND_RE = re.compile(r"[MmLlHhVvCcSsQqTtAaZz]")


@element_rule("path", description="Path data syntax and complexity checks")
def path_rules(path: PathElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
    d = path.d
    if not d.strip():
        issues.error("EMPTY_PATH_DATA", "Path data (d attribute) cannot be empty", path, "d", d)
        return

    if not _PATH_ALPHABET_RE.fullmatch(d):
        issues.error("INVALID_PATH_DATA", "Path data contains invalid characters", path, "d", d)

    if d.strip()[0] not in "Mm":
        issues.warning("QUESTIONABLE_PATH_STRUCTURE", "Path data structure may be malformed", path, "d", d)

    if len(d) > MAX_PATH_LENGTH:
        issues.warning("COMPLEX_PATH", "Very long path data may impact performance", path, "d")
        issues.suggest(
            "OPTIMIZE_PATH",
            "Path is very complex",
            "Consider simplifying the path or breaking it into smaller segments",
            path,
            "d",
        )

    if len(_COMMAND_RE.findall(d)) > MAX_COMMANDS:
        issues.warning("HIGH_COMMAND_COUNT", "Path has many commands and may impact performance", path, "d")

    check_fill_visibility(path, issues, "Path")
