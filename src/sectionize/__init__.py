"""sectionize: nest flat heading-ranked content into section containers."""

from sectionize.exceptions import (
    ConfigurationError,
    FetchError,
    FragmentError,
    RankError,
    SectionizeError,
)
from sectionize.html_parser import parse_fragment
from sectionize.html_serializer import render_nodes
from sectionize.pipeline import sectionize_html
from sectionize.schemas import (
    ContentNode,
    DoctypeNode,
    HeadingNode,
    Node,
    SectionizeOptions,
    SectionNode,
    dump_nodes,
    load_nodes,
)
from sectionize.sections import count_sections, format_section_tree, iter_sections
from sectionize.sectionizer import Sectionizer, sectionize

__all__ = [
    "ConfigurationError",
    "ContentNode",
    "DoctypeNode",
    "FetchError",
    "FragmentError",
    "HeadingNode",
    "Node",
    "RankError",
    "SectionNode",
    "SectionizeError",
    "SectionizeOptions",
    "Sectionizer",
    "count_sections",
    "dump_nodes",
    "format_section_tree",
    "iter_sections",
    "load_nodes",
    "parse_fragment",
    "render_nodes",
    "sectionize",
    "sectionize_html",
]
