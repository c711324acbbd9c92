"""Shared test fixtures."""

from __future__ import annotations

import copy

import pytest

from vectorlint.models.svg_document import CircleElement, GroupElement, SvgDocument, SvgStyle, ViewBox


# Sample documents in wire form (camelCase keys)

CLEAN_DOC = {
    "viewBox": {"x": 0, "y": 0, "width": 100, "height": 100},
    "title": "Logo",
    "description": "A red square",
    "elements": [
        {
            "type": "rect",
            "x": 10,
            "y": 10,
            "width": 80,
            "height": 80,
            "style": {"fill": "red", "aria-label": "Square"},
        },
    ],
}

SMILEY_DOC = {
    "viewBox": {"width": 24, "height": 24},
    "elements": [
        {"type": "circle", "cx": 12, "cy": 12, "r": 10, "style": {"fill": "none", "stroke": "black"}},
        {"type": "circle", "cx": 8, "cy": 9, "r": 1, "style": {"fill": "black"}},
        {"type": "circle", "cx": 16, "cy": 9, "r": 1, "style": {"fill": "black"}},
        {"type": "path", "d": "M8 14s1.5 2 4 2 4-2 4-2", "style": {"fill": "none", "stroke": "black"}},
    ],
}

GROUPED_DOC = {
    "viewBox": {"width": 200, "height": 100},
    "title": "Chart",
    "description": "Two bars and a caption",
    "defs": [{"id": "fade", "type": "mask", "content": "<rect width='1' height='1'/>"}],
    "elements": [
        {
            "type": "group",
            "id": "bars",
            "children": [
                {"type": "rect", "id": "bar-a", "x": 10, "y": 40, "width": 20, "height": 60, "style": {"fill": "#4ECDC4"}},
                {"type": "rect", "id": "bar-b", "x": 40, "y": 20, "width": 20, "height": 80, "mask": "url(#fade)"},
            ],
        },
        {"type": "text", "x": 100, "y": 50, "content": "Sales", "style": {"fontSize": 10, "fill": "black"}},
    ],
}

FRAMELESS_DOC = {
    "elements": [{"type": "circle", "cx": 5, "cy": 5, "r": 2}],
}


def make_document(data: dict) -> SvgDocument:
    return SvgDocument.model_validate(copy.deepcopy(data))


def nested_groups(depth: int) -> dict:
    """A document whose single leaf sits under ``depth`` groups."""
    node: dict = {"type": "circle", "cx": 1, "cy": 1, "r": 1, "style": {"fill": "black"}}
    for _ in range(depth):
        node = {"type": "group", "children": [node]}
    return {"viewBox": {"width": 10, "height": 10}, "title": "Deep", "elements": [node]}


@pytest.fixture
def clean_doc() -> SvgDocument:
    return make_document(CLEAN_DOC)


@pytest.fixture
def smiley_doc() -> SvgDocument:
    return make_document(SMILEY_DOC)


@pytest.fixture
def grouped_doc() -> SvgDocument:
    return make_document(GROUPED_DOC)


@pytest.fixture
def frameless_doc() -> SvgDocument:
    return make_document(FRAMELESS_DOC)


def deep_group_tree(depth: int) -> SvgDocument:
    """Built from instances; parsing a tree this deep from JSON is not possible."""
    node = CircleElement(cx=1, cy=1, r=1, style=SvgStyle(fill="black"))
    for _ in range(depth):
        node = GroupElement(children=[node])
    return SvgDocument(view_box=ViewBox(width=10, height=10), title="Deep", elements=[node])
