"""Typed document nodes consumed and produced by the sectionizer."""

from __future__ import annotations

from typing import Annotated, Any, Iterable, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator


class HeadingNode(BaseModel):
    """A heading carrying its outline rank.

    Attributes:
        tag_name: Element name of the heading (defaults to ``h{rank}``).
        rank: Outline depth, lower is shallower. Supplied by the caller.
        id: Identifier of the heading. Moved onto the enclosing section
            by the transform.
        href: Back-reference to the promoted identifier, set by the transform.
        as_tag: Original element type, set by the transform.
        attributes: Remaining HTML attributes of the heading.
        inner_html: Markup of the heading contents.
        text: Plain text of the heading, used for outlines.
    """

    kind: Literal["heading"] = "heading"
    tag_name: str | None = None
    rank: int = Field(..., ge=1)
    id: str | None = None
    href: str | None = None
    as_tag: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    inner_html: str = ""
    text: str = ""

    @model_validator(mode="after")
    def default_tag_name(self) -> HeadingNode:
        if self.tag_name is None:
            self.tag_name = f"h{self.rank}"
        return self


class ContentNode(BaseModel):
    """Any non-heading node. Opaque to the transform."""

    kind: Literal["content"] = "content"
    html: str = ""
    tag_name: str | None = None


class DoctypeNode(BaseModel):
    """Document-level preamble marker; never valid inside a fragment."""

    kind: Literal["doctype"] = "doctype"
    name: str = "html"


class SectionNode(BaseModel):
    """A synthesized container for one outline level."""

    kind: Literal["section"] = "section"
    rank: int = Field(..., ge=0)
    id: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    children: list[Node] = Field(default_factory=list)

    @property
    def heading(self) -> HeadingNode | None:
        """The heading that opened this section, if any."""
        if self.children and isinstance(self.children[0], HeadingNode):
            return self.children[0]
        return None


Node = Annotated[
    Union[HeadingNode, ContentNode, DoctypeNode, SectionNode],
    Field(discriminator="kind"),
]

SectionNode.model_rebuild()

_NODE_LIST_ADAPTER: TypeAdapter[list[Node]] = TypeAdapter(list[Node])


def load_nodes(data: Iterable[Any]) -> list[Node]:
    """Validate JSON-like data (or node instances) into a list of nodes."""
    return _NODE_LIST_ADAPTER.validate_python(list(data))


def dump_nodes(nodes: Iterable[Node]) -> list[dict[str, Any]]:
    """Dump nodes to JSON-compatible dictionaries."""
    return _NODE_LIST_ADAPTER.dump_python(list(nodes), mode="json")
