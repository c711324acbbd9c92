"""Tests for tree traversal and the identifier graph."""

import pytest

from tests.conftest import GROUPED_DOC, make_document, nested_groups
from vectorlint.engine.identifiers import build_identifier_graph, extract_url_id
from vectorlint.engine.walker import collect, walk
from vectorlint.errors import NestingDepthExceededError
from vectorlint.models.svg_document import CircleElement, GroupElement


def test_walk_is_preorder():
    doc = make_document(GROUPED_DOC)
    nodes = collect(doc.elements)
    assert [n.element.type for n in nodes] == ["group", "rect", "rect", "text"]
    assert [n.index for n in nodes] == [0, 1, 2, 3]
    assert [n.depth for n in nodes] == [0, 1, 1, 0]


def test_walk_tracks_parent_and_siblings():
    doc = make_document(GROUPED_DOC)
    nodes = collect(doc.elements)
    group = nodes[0].element
    assert nodes[0].parent is None
    assert nodes[2].parent is group
    assert nodes[2].sibling_index == 1
    assert len(nodes[2].siblings) == 2
    assert nodes[3].sibling_index == 1


def test_walk_is_lazy():
    elements = [CircleElement(cx=0, cy=0, r=1), GroupElement(children=[CircleElement(cx=0, cy=0, r=1)])]
    it = walk(elements)
    assert next(it).index == 0


def test_depth_ceiling():
    doc = make_document(nested_groups(12))
    assert len(collect(doc.elements, max_depth=12)) == 13
    with pytest.raises(NestingDepthExceededError) as exc_info:
        collect(doc.elements, max_depth=5)
    assert exc_info.value.limit == 5


def test_deep_tree_does_not_recurse():
    node = CircleElement(cx=0, cy=0, r=1)
    for _ in range(3_000):
        node = GroupElement(children=[node])
    nodes = collect([node], max_depth=5_000)
    assert nodes[-1].depth == 3_000


@pytest.mark.parametrize(
    "value,expected",
    [("url(#clip1)", "clip1"), ("url(#a-b)", "a-b"), ("#clip1", None), (None, None), ("", None)],
)
def test_extract_url_id(value, expected):
    assert extract_url_id(value) == expected


def test_identifier_graph():
    doc = make_document(GROUPED_DOC)
    graph = build_identifier_graph(collect(doc.elements), doc.defs)
    assert graph.defined_ids == {"fade", "bars", "bar-a", "bar-b"}
    assert graph.referenced_ids == {"fade"}
    assert graph.missing_references == []
    assert graph.duplicate_ids == []
    assert graph.unreferenced_ids == ["bars", "bar-a", "bar-b"]


def test_identifier_graph_counts_duplicates():
    elements = [
        CircleElement(id="a", cx=0, cy=0, r=1),
        GroupElement(children=[CircleElement(id="a", cx=0, cy=0, r=1, clip_path="url(#gone)")]),
    ]
    graph = build_identifier_graph(collect(elements))
    assert graph.duplicate_ids == ["a"]
    assert graph.missing_references == ["gone"]
