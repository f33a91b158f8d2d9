"""Wrap a flat run of headings and content into nested sections."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from sectionize.exceptions import FragmentError, RankError
from sectionize.schemas import (
    DoctypeNode,
    HeadingNode,
    Node,
    SectionizeOptions,
    SectionNode,
    resolve_options,
)

logger = logging.getLogger(__name__)

_ROOT_RANK = 0


class Sectionizer:
    """Reusable transform bound to one set of options.

    Options are validated when the sectionizer is created, so configuration
    errors surface before any input is processed.
    """

    def __init__(
        self, options: SectionizeOptions | Mapping[str, Any] | None = None
    ) -> None:
        self.options = resolve_options(options)
        self.options.check_reserved_keys()

    def run(self, nodes: Iterable[Node]) -> list[Node]:
        """Nest ``nodes`` under section containers.

        Args:
            nodes: Flat, ordered fragment children.

        Returns:
            The root section alone when ``enable_root_section`` is set,
            otherwise the root's children.

        Raises:
            ConfigurationError: If ``properties`` gained the rank key after
                the sectionizer was created.
            FragmentError: If the input contains a doctype.
            RankError: If a heading or open section has no usable rank.
        """
        self.options.check_reserved_keys()
        root = self._create_section(_ROOT_RANK)
        stack: list[SectionNode] = [root]
        opened = 0

        for node in nodes:
            if isinstance(node, HeadingNode):
                rank = _heading_rank(node)
                # The root ranks 0 and headings rank >= 1, so the root is never popped.
                while rank <= self._wrapping_rank(stack[-1]):
                    stack.pop()
                section = self._create_section(rank, node)
                stack[-1].children.append(section)
                stack.append(section)
                opened += 1
            elif isinstance(node, DoctypeNode):
                raise FragmentError("sectionize must be used on a fragment, not a document")
            else:
                stack[-1].children.append(node)

        logger.debug(
            "Created %d sections (root section enabled: %s)",
            opened,
            self.options.enable_root_section,
        )

        if self.options.enable_root_section:
            return [root]
        return list(root.children)

    __call__ = run

    def _create_section(self, rank: int, heading: HeadingNode | None = None) -> SectionNode:
        section_id = None
        if heading is not None:
            section_id = heading.id
            heading.id = None
            if section_id is not None:
                heading.href = f"#{section_id}"
            heading.as_tag = heading.tag_name

        section = SectionNode(
            rank=rank,
            id=section_id,
            metadata=self.options.build_metadata(rank, section_id),
        )
        if heading is not None:
            section.children.append(heading)
        return section

    def _wrapping_rank(self, section: SectionNode) -> int:
        key = self.options.rank_property_name
        if key not in section.metadata:
            raise RankError(f"Section is missing its rank metadata ({key!r})")
        rank = section.metadata[key]
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise RankError(f"Section rank metadata ({key!r}) must be an integer, got {rank!r}")
        return rank


def _heading_rank(heading: HeadingNode) -> int:
    rank = heading.rank
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise RankError(f"Heading rank must be an integer, got {rank!r}")
    if rank <= _ROOT_RANK:
        raise RankError(f"Heading rank must be at least 1, got {rank}")
    return rank


def sectionize(
    nodes: Iterable[Node],
    options: SectionizeOptions | Mapping[str, Any] | None = None,
) -> list[Node]:
    """Sectionize ``nodes`` in one call. See :meth:`Sectionizer.run`."""
    return Sectionizer(options).run(nodes)
