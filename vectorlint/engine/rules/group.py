"""Group rules: child count and ancestor depth."""

from __future__ import annotations

from vectorlint.engine.context import IssueCollector, ValidationContext
from vectorlint.engine.registry import element_rule
from vectorlint.models.svg_document import GroupElement

MAX_CHILDREN = 1_000
DEEP_NESTING_DEPTH = 10


@element_rule("group", description="Child count and nesting depth checks")
def group_rules(group: GroupElement, issues: IssueCollector, ctx: ValidationContext | None) -> None:
    if not group.children:
        issues.warning("EMPTY_GROUP", "Group element has no children", group, "children")
    elif len(group.children) > MAX_CHILDREN:
        issues.warning("LARGE_GROUP", "Group has many children and may impact performance", group, "children")

    if ctx is not None and ctx.depth > DEEP_NESTING_DEPTH:
        issues.warning(
            "DEEP_NESTING",
            "Deep group nesting may impact performance",
            group,
            value=ctx.depth,
        )
