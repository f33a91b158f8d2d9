"""Outline inspection for sectionized trees."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from sectionize.schemas import Node, SectionNode


def iter_sections(nodes: Iterable[Node], depth: int = 0) -> Iterator[tuple[int, SectionNode]]:
    """Yield ``(depth, section)`` pairs depth-first in document order."""
    for node in nodes:
        if isinstance(node, SectionNode):
            yield depth, node
            yield from iter_sections(node.children, depth + 1)


def count_sections(nodes: Iterable[Node]) -> int:
    """Count sections in the tree, including a root section if present."""
    return sum(1 for _ in iter_sections(nodes))


def section_title(section: SectionNode) -> str:
    """Return the opening heading's text, or a placeholder for the root."""
    heading = section.heading
    if heading is None:
        return "(root)" if section.rank == 0 else "(untitled)"
    return re.sub(r"\s+", " ", heading.text).strip() or "(untitled)"


def format_section_tree(nodes: Iterable[Node]) -> str:
    """Render an indented outline of the sections in ``nodes``."""
    lines = ["Sections:"]
    for depth, section in iter_sections(nodes):
        line = " " * (depth * 4) + f"[{section.rank}] {section_title(section)}"
        if section.id:
            line += f" (#{section.id})"
        lines.append(line)
    return "\n".join(lines)
