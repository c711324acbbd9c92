"""Iterative pre-order traversal of the element tree.

Uses an explicit work stack, so a hostile nesting depth cannot exhaust the
interpreter stack; past ``max_depth`` the walk stops with
NestingDepthExceededError.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from vectorlint.config import settings
from vectorlint.errors import NestingDepthExceededError
from vectorlint.models.svg_document import GroupElement, SvgElement


@dataclass(frozen=True)
class ElementNode:
    element: SvgElement
    # Position in document order (pre-order, depth-first)
    index: int
    depth: int
    parent: GroupElement | None
    siblings: tuple[SvgElement, ...]
    sibling_index: int


def walk(elements: Sequence[SvgElement], max_depth: int | None = None) -> Iterator[ElementNode]:
    """Yield every element of the tree in document order."""
    limit = settings.max_traversal_depth if max_depth is None else max_depth

    roots = tuple(elements)
    stack: list[tuple[SvgElement, int, GroupElement | None, tuple[SvgElement, ...], int]] = [
        (element, 0, None, roots, i) for i, element in reversed(list(enumerate(roots)))
    ]

    index = 0
    while stack:
        element, depth, parent, siblings, position = stack.pop()
        if depth > limit:
            raise NestingDepthExceededError(depth, limit)

        yield ElementNode(
            element=element,
            index=index,
            depth=depth,
            parent=parent,
            siblings=siblings,
            sibling_index=position,
        )
        index += 1

        if isinstance(element, GroupElement) and element.children:
            children = tuple(element.children)
            stack.extend(
                (child, depth + 1, element, children, i)
                for i, child in reversed(list(enumerate(children)))
            )


def collect(elements: Sequence[SvgElement], max_depth: int | None = None) -> list[ElementNode]:
    return list(walk(elements, max_depth))
