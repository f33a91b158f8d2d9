"""End-to-end helper: HTML fragment in, sectionized HTML out."""

from __future__ import annotations

from typing import Any, Mapping

from sectionize.config import DEFAULT_PARSER
from sectionize.html_parser import parse_fragment
from sectionize.html_serializer import render_nodes
from sectionize.schemas import SectionizeOptions
from sectionize.sectionizer import Sectionizer


def sectionize_html(
    html: str,
    options: SectionizeOptions | Mapping[str, Any] | None = None,
    *,
    include_metadata: bool = True,
    features: str = DEFAULT_PARSER,
) -> str:
    """Parse, sectionize and re-serialize an HTML fragment.

    Args:
        html: Fragment markup. Full documents (with a doctype) are rejected.
        options: Sectionizer options; defaults are used if None.
        include_metadata: Write section metadata as HTML attributes.
        features: BeautifulSoup tree builder used for parsing.

    Returns:
        The sectionized fragment markup.

    Raises:
        ConfigurationError: If the options are invalid.
        FragmentError: If the markup is a full document.
    """
    sectionizer = Sectionizer(options)
    nodes = parse_fragment(html, features=features)
    return render_nodes(sectionizer.run(nodes), include_metadata=include_metadata)
