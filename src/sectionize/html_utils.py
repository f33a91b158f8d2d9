"""Shared HTML helpers for mapping between BeautifulSoup and nodes."""

from __future__ import annotations

import re

try:
    from bs4.dammit import EntitySubstitution
    from bs4.element import NavigableString, PageElement, Tag
    from bs4.formatter import HTMLFormatter
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML processing (pip install beautifulsoup4)."
    ) from exc


_HEADING_RE = re.compile(r"^h([1-6])$")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")
# Property names whose HTML attribute is not the kebab-cased name.
_ATTRIBUTE_ALIASES = {
    "className": "class",
    "htmlFor": "for",
    "acceptCharset": "accept-charset",
    "httpEquiv": "http-equiv",
}


class InsertionOrderFormatter(HTMLFormatter):
    """The "minimal" HTML formatter, without sorting attributes."""

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag: Tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FORMATTER = InsertionOrderFormatter()


def heading_rank(tag: PageElement) -> int | None:
    """Return the rank of an ``h1``..``h6`` element, or None."""
    if not isinstance(tag, Tag) or not tag.name:
        return None
    match = _HEADING_RE.match(tag.name.lower())
    if not match:
        return None
    return int(match.group(1))


def is_heading(tag: PageElement) -> bool:
    """Check whether an element is an ``h1``..``h6`` heading."""
    return heading_rank(tag) is not None


def attribute_name(property_name: str) -> str:
    """Map a camelCase property name to its HTML attribute name.

    ``dataHeadingRank`` becomes ``data-heading-rank`` and ``ariaLabelledby``
    becomes ``aria-labelledby``. Names that are already lower case or
    hyphenated pass through unchanged.
    """
    if property_name in _ATTRIBUTE_ALIASES:
        return _ATTRIBUTE_ALIASES[property_name]
    return _CAMEL_BOUNDARY_RE.sub("-", property_name).lower()


def attribute_value(value: object) -> str | None:
    """Render a property value as an attribute value; None drops it."""
    if value is None or value is False:
        return None
    if value is True:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def element_markup(element: PageElement) -> str:
    """Serialize a single element, escaping text nodes."""
    if isinstance(element, NavigableString):
        return element.output_ready(FORMATTER)
    return element.decode(formatter=FORMATTER)
