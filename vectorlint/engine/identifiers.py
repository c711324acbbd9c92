"""Identifier graph: defined ids versus ids referenced through clip-path/mask."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from vectorlint.engine.walker import ElementNode
from vectorlint.models.svg_document import SvgDefinition

_URL_ID_RE = re.compile(r"url\(#([^)]+)\)")


def extract_url_id(value: str | None) -> str | None:
    """``url(#clip1)`` -> ``clip1``; None when there is no url() reference."""
    if not value:
        return None
    match = _URL_ID_RE.search(value)
    return match.group(1) if match else None


@dataclass(frozen=True)
class IdentifierGraph:
    # Every non-empty id in document order, repeats included
    defined: tuple[str, ...] = ()
    # Referenced ids, first occurrence order
    referenced: tuple[str, ...] = ()

    @property
    def defined_ids(self) -> frozenset[str]:
        return frozenset(self.defined)

    @property
    def referenced_ids(self) -> frozenset[str]:
        return frozenset(self.referenced)

    @property
    def unique_defined(self) -> list[str]:
        return list(dict.fromkeys(self.defined))

    @property
    def duplicate_ids(self) -> list[str]:
        counts = Counter(self.defined)
        return [element_id for element_id in self.unique_defined if counts[element_id] > 1]

    @property
    def missing_references(self) -> list[str]:
        defined = self.defined_ids
        return [ref for ref in self.referenced if ref not in defined]

    @property
    def unreferenced_ids(self) -> list[str]:
        referenced = self.referenced_ids
        return [element_id for element_id in self.unique_defined if element_id not in referenced]


def build_identifier_graph(
    nodes: Iterable[ElementNode],
    definitions: Iterable[SvgDefinition] = (),
) -> IdentifierGraph:
    """Collect ids from elements and from the raw <defs> entries clip-path/mask point at."""
    defined: list[str] = [definition.id for definition in definitions if definition.id]
    referenced: dict[str, None] = {}

    for node in nodes:
        element = node.element
        if element.id:
            defined.append(element.id)
        for value in (element.clip_path, element.mask):
            ref = extract_url_id(value)
            if ref:
                referenced.setdefault(ref, None)

    return IdentifierGraph(defined=tuple(defined), referenced=tuple(referenced))
