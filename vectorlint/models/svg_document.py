"""Declarative SVG document model: the tree every engine pass works over."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

ELEMENT_TYPES: tuple[str, ...] = ("circle", "rect", "line", "path", "text", "group")


class CamelModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ViewBox(CamelModel):
    x: float = 0.0
    y: float = 0.0
    width: float
    height: float


class SvgStyle(CamelModel):
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    stroke_linecap: Literal["butt", "round", "square"] | None = None
    stroke_linejoin: Literal["miter", "round", "bevel"] | None = None
    stroke_dasharray: str | None = None
    opacity: float | None = None
    fill_opacity: float | None = None
    stroke_opacity: float | None = None
    aria_label: str | None = Field(default=None, alias="aria-label")


class TextStyle(SvgStyle):
    font_family: str | None = None
    font_size: float | None = None
    font_weight: Literal["normal", "bold", "bolder", "lighter"] | float | None = None
    font_style: Literal["normal", "italic", "oblique"] | None = None
    text_anchor: Literal["start", "middle", "end"] | None = None
    dominant_baseline: str | None = None


class SvgElement(CamelModel):
    """Attributes shared by every element variant."""

    id: str | None = None
    class_name: str | None = None
    style: SvgStyle | None = None
    transform: str | None = None
    clip_path: str | None = None
    mask: str | None = None


class CircleElement(SvgElement):
    type: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float


class RectElement(SvgElement):
    type: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    rx: float | None = None
    ry: float | None = None


class LineElement(SvgElement):
    type: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float


class PathElement(SvgElement):
    type: Literal["path"] = "path"
    d: str


class TextElement(SvgElement):
    type: Literal["text"] = "text"
    x: float
    y: float
    content: str
    style: TextStyle | None = None


class GroupElement(SvgElement):
    type: Literal["group"] = "group"
    children: list[AnyElement] = Field(default_factory=list)


class UnknownElement(SvgElement):
    """An element whose tag is missing or unsupported; kept so it can be reported."""

    model_config = ConfigDict(extra="allow")

    type: str = ""


def _element_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    return tag if tag in ELEMENT_TYPES else "unknown"


AnyElement = Annotated[
    Union[
        Annotated[CircleElement, Tag("circle")],
        Annotated[RectElement, Tag("rect")],
        Annotated[LineElement, Tag("line")],
        Annotated[PathElement, Tag("path")],
        Annotated[TextElement, Tag("text")],
        Annotated[GroupElement, Tag("group")],
        Annotated[UnknownElement, Tag("unknown")],
    ],
    Discriminator(_element_tag),
]

GroupElement.model_rebuild()


class SvgDefinition(CamelModel):
    id: str
    type: Literal["linearGradient", "radialGradient", "pattern", "clipPath", "mask"]
    content: str


class SvgDocument(CamelModel):
    """A vector graphic: a viewBox frame plus an ordered element tree."""

    view_box: ViewBox | None = None
    width: float | None = None
    height: float | None = None
    title: str | None = None
    description: str | None = None
    elements: list[AnyElement] = Field(default_factory=list)
    defs: list[SvgDefinition] | None = None
    style: str | None = None

    def to_json(self) -> str:
        """Canonical serialization: camelCase keys, unset fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
