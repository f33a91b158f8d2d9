"""Tests for HTML rendering and the end-to-end pipeline."""

from __future__ import annotations

import pytest

from sectionize.exceptions import ConfigurationError, FragmentError
from sectionize.html_serializer import render_nodes
from sectionize.pipeline import sectionize_html
from sectionize.schemas import ContentNode, HeadingNode, SectionNode


class TestRenderNodes:
    """Tests for render_nodes."""

    def test_renders_section_with_metadata(self) -> None:
        """Section metadata is written as kebab-case attributes."""
        section = SectionNode(
            rank=1, id="a", metadata={"dataHeadingRank": 1, "ariaLabelledby": "a"}
        )
        section.children.append(HeadingNode(rank=1, href="#a", as_tag="h1", inner_html="A"))
        section.children.append(ContentNode(html="<p>x</p>"))

        html = render_nodes([section])

        assert html == (
            '<section id="a" data-heading-rank="1" aria-labelledby="a">'
            '<h1 href="#a" as="h1">A</h1><p>x</p></section>'
        )

    def test_metadata_can_be_omitted(self) -> None:
        """include_metadata=False writes only the id."""
        section = SectionNode(rank=2, id="b", metadata={"dataHeadingRank": 2})

        assert render_nodes([section], include_metadata=False) == '<section id="b"></section>'

    def test_root_section_without_id(self) -> None:
        """A root section has no id attribute."""
        root = SectionNode(rank=0, metadata={"dataHeadingRank": 0})

        assert render_nodes([root]) == '<section data-heading-rank="0"></section>'

    def test_heading_keeps_attributes(self) -> None:
        """Other heading attributes are rendered."""
        heading = HeadingNode(rank=2, id="h", attributes={"class": ["x", "y"]}, inner_html="T")

        assert render_nodes([heading]) == '<h2 id="h" class="x y">T</h2>'

    def test_content_markup_is_kept(self) -> None:
        """Content markup passes through, including escaped text."""
        nodes = [ContentNode(html="a &lt; b"), ContentNode(html="<ul><li>i</li></ul>")]

        assert render_nodes(nodes) == "a &lt; b<ul><li>i</li></ul>"


    def test_attributes_keep_insertion_order(self) -> None:
        """Attributes are written in insertion order, not sorted."""
        section = SectionNode(rank=1, id="z", metadata={"role": "region", "dataHeadingRank": 1})

        assert render_nodes([section]) == '<section id="z" role="region" data-heading-rank="1"></section>'


class TestSectionizeHtml:
    """Tests for sectionize_html."""

    def test_nests_sections(self) -> None:
        """Headings and content are wrapped in nested sections."""
        html = '<h1 id="intro">Intro</h1><p>text</p><h2 id="sub">Sub</h2><p>more</p>'

        result = sectionize_html(html)

        assert result == (
            '<section id="intro" data-heading-rank="1" aria-labelledby="intro">'
            '<h1 href="#intro" as="h1">Intro</h1><p>text</p>'
            '<section id="sub" data-heading-rank="2" aria-labelledby="sub">'
            '<h2 href="#sub" as="h2">Sub</h2><p>more</p>'
            "</section></section>"
        )

    def test_sibling_sections(self) -> None:
        """Same-rank headings become sibling sections."""
        result = sectionize_html("<h2>A</h2><h2>B</h2>", include_metadata=False)

        assert result == '<section><h2 as="h2">A</h2></section><section><h2 as="h2">B</h2></section>'

    def test_root_section(self) -> None:
        """The root section wraps content without headings."""
        result = sectionize_html("<p>orphan text</p>", {"enableRootSection": True})

        assert result == '<section data-heading-rank="0"><p>orphan text</p></section>'

    def test_static_properties(self) -> None:
        """Static properties appear on every section."""
        result = sectionize_html("<h1>A</h1>", {"properties": {"className": "part"}})

        assert result == '<section data-heading-rank="1" class="part"><h1 as="h1">A</h1></section>'

    def test_rejects_documents(self) -> None:
        """Full documents are not fragments."""
        with pytest.raises(FragmentError):
            sectionize_html("<!DOCTYPE html><h1>A</h1>")

    def test_rejects_reserved_key(self) -> None:
        """Configuration errors are raised before parsing."""
        with pytest.raises(ConfigurationError):
            sectionize_html("<h1>A</h1>", {"properties": {"dataHeadingRank": 1}})
