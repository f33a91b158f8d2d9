"""Serialize a (sectionized) node tree back to HTML."""

from __future__ import annotations

from typing import Iterable

from sectionize.html_utils import FORMATTER, attribute_name, attribute_value
from sectionize.schemas import ContentNode, DoctypeNode, HeadingNode, Node, SectionNode

try:
    from bs4 import BeautifulSoup
    from bs4.element import Doctype, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML processing (pip install beautifulsoup4)."
    ) from exc


def render_nodes(nodes: Iterable[Node], *, include_metadata: bool = True) -> str:
    """Render nodes as an HTML fragment.

    Parameters
    ----------
    nodes : Iterable[Node]
        Top-level nodes, usually the output of ``sectionize``.
    include_metadata : bool
        If True (default), section metadata is written as attributes, with
        camelCase keys mapped to HTML names (``dataHeadingRank`` becomes
        ``data-heading-rank``).
    """
    soup = BeautifulSoup("", "html.parser")
    for node in nodes:
        _append_node(soup, soup, node, include_metadata=include_metadata)
    return soup.decode(formatter=FORMATTER)


def _append_node(
    soup: BeautifulSoup, parent: Tag, node: Node, *, include_metadata: bool
) -> None:
    if isinstance(node, SectionNode):
        section = soup.new_tag("section", attrs=_section_attrs(node, include_metadata))
        parent.append(section)
        for child in node.children:
            _append_node(soup, section, child, include_metadata=include_metadata)
    elif isinstance(node, HeadingNode):
        heading = soup.new_tag(node.tag_name or f"h{node.rank}", attrs=_heading_attrs(node))
        parent.append(heading)
        _append_markup(heading, node.inner_html)
    elif isinstance(node, DoctypeNode):
        parent.append(Doctype(node.name))
    elif isinstance(node, ContentNode):
        _append_markup(parent, node.html)
    else:
        raise TypeError(f"Cannot render node of type {type(node).__name__}")


def _section_attrs(section: SectionNode, include_metadata: bool) -> dict[str, str]:
    attrs: dict[str, str] = {}
    if section.id is not None:
        attrs["id"] = section.id
    if include_metadata:
        for key, value in section.metadata.items():
            rendered = attribute_value(value)
            if rendered is not None:
                attrs[attribute_name(key)] = rendered
    return attrs


def _heading_attrs(heading: HeadingNode) -> dict[str, str]:
    attrs: dict[str, str] = {}
    if heading.id is not None:
        attrs["id"] = heading.id
    for key, value in heading.attributes.items():
        rendered = attribute_value(value)
        if rendered is not None:
            attrs[key] = rendered
    if heading.href is not None:
        attrs["href"] = heading.href
    if heading.as_tag is not None:
        attrs["as"] = heading.as_tag
    return attrs


def _append_markup(parent: Tag, markup: str) -> None:
    if not markup:
        return
    fragment = BeautifulSoup(markup, "html.parser")
    for child in list(fragment.contents):
        parent.append(child.extract())
