"""Custom exceptions for sectionize."""


class SectionizeError(Exception):
    """Base exception for sectionize operations."""


class ConfigurationError(SectionizeError):
    """Invalid or conflicting sectionize options."""


class FragmentError(SectionizeError):
    """Input is not a flat fragment (e.g. it contains a doctype)."""


class RankError(SectionizeError):
    """A heading or section rank is missing or not an integer."""


class FetchError(SectionizeError):
    """Error while fetching remote HTML."""
