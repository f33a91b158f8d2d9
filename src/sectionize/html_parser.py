"""Parse an HTML fragment into a flat sequence of typed nodes."""

from __future__ import annotations

import re
from typing import Any

from sectionize.config import DEFAULT_PARSER
from sectionize.html_utils import element_markup, heading_rank
from sectionize.schemas import ContentNode, DoctypeNode, HeadingNode, Node

try:
    from bs4 import BeautifulSoup
    from bs4.element import Doctype, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML processing (pip install beautifulsoup4)."
    ) from exc


_HTML_TAG_RE = re.compile(r"<html[\s>]", re.IGNORECASE)


def parse_fragment(html: str, *, features: str = DEFAULT_PARSER) -> list[Node]:
    """Map the top-level children of an HTML fragment to nodes.

    Parameters
    ----------
    html : str
        The fragment markup.
    features : str
        BeautifulSoup tree builder. The default ``html.parser`` keeps the
        fragment as-is; ``lxml`` wraps it in ``<html><head><body>``, which
        is flattened back into the fragment's top-level elements in order.
        Markup that carries its own ``<html>`` element is not unwrapped.
    """
    soup = BeautifulSoup(html, features)
    return nodes_from_elements(_fragment_children(soup, html))


def nodes_from_elements(elements: list[PageElement]) -> list[Node]:
    """Convert BeautifulSoup elements into nodes, one per element."""
    return [_to_node(element) for element in elements]


def _fragment_children(soup: BeautifulSoup, markup: str) -> list[PageElement]:
    children = list(soup.children)
    if any(isinstance(child, Doctype) for child in children) or _HTML_TAG_RE.search(markup):
        return children
    # Tree builders such as lxml wrap bare fragments in <html><head><body>;
    # flatten the wrapper, keeping everything in document order.
    elements: list[PageElement] = []
    for child in children:
        if isinstance(child, Tag) and child.name == "html":
            elements.extend(_unwrap_html(child))
        else:
            elements.append(child)
    return elements


def _unwrap_html(html: Tag) -> list[PageElement]:
    elements: list[PageElement] = []
    for child in html.children:
        if isinstance(child, Tag) and child.name in {"head", "body"}:
            elements.extend(child.children)
        else:
            elements.append(child)
    return elements


def _to_node(element: PageElement) -> Node:
    if isinstance(element, Doctype):
        return DoctypeNode(name=str(element))
    if isinstance(element, Tag):
        rank = heading_rank(element)
        if rank is not None:
            return _heading_node(element, rank)
        return ContentNode(html=element_markup(element), tag_name=element.name)
    return ContentNode(html=element_markup(element))


def _heading_node(tag: Tag, rank: int) -> HeadingNode:
    attributes: dict[str, Any] = dict(tag.attrs)
    heading_id = attributes.pop("id", None)
    if isinstance(heading_id, list):
        heading_id = " ".join(heading_id)
    return HeadingNode(
        tag_name=tag.name,
        rank=rank,
        id=heading_id,
        attributes=attributes,
        inner_html="".join(element_markup(child) for child in tag.children),
        text=tag.get_text(" ", strip=True),
    )
