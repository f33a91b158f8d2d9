"""Shared schemas for sectionize."""

from sectionize.schemas.nodes import (
    ContentNode,
    DoctypeNode,
    HeadingNode,
    Node,
    SectionNode,
    dump_nodes,
    load_nodes,
)
from sectionize.schemas.options import SectionizeOptions, resolve_options

__all__ = [
    "ContentNode",
    "DoctypeNode",
    "HeadingNode",
    "Node",
    "SectionNode",
    "SectionizeOptions",
    "dump_nodes",
    "load_nodes",
    "resolve_options",
]
