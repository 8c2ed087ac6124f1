"""citestyle - Citation and bibliography formatting in common academic styles."""

from citestyle.models.reference import (
    Author,
    CitationFormatOptions,
    Identifiers,
    IssuedDate,
    LocatorType,
    PatentInfo,
    Publisher,
    Reference,
    ReferenceType,
    ThesisInfo,
    ThesisKind,
    Venue,
)
from citestyle.references import (
    CitationStyle,
    Markup,
    StyleCategory,
    StyleConfig,
    format_bibliography,
    format_bibliography_entry,
    format_citation,
    get_citation_style,
    get_styles_for_discipline,
)

__version__ = "0.1.0"
__all__ = [
    "Author",
    "CitationFormatOptions",
    "Identifiers",
    "IssuedDate",
    "LocatorType",
    "PatentInfo",
    "Publisher",
    "Reference",
    "ReferenceType",
    "ThesisInfo",
    "ThesisKind",
    "Venue",
    "CitationStyle",
    "Markup",
    "StyleCategory",
    "StyleConfig",
    "format_citation",
    "format_bibliography_entry",
    "format_bibliography",
    "get_citation_style",
    "get_styles_for_discipline",
]
