"""Citation style formatting for citestyle.

This module renders references in ten built-in citation styles:
- In-text citation markers (author-date and numeric)
- Bibliography entries
- Complete, ordered and numbered bibliographies
- Style catalog lookups

Example usage:
    from citestyle.models import CitationFormatOptions
    from citestyle.references import CitationStyle, format_bibliography, format_citation

    # In-text marker
    format_citation(reference, CitationStyle.APA_7)  # "(Smith, 2023)"

    # Numeric styles need the citation number
    format_citation(reference, "ieee", CitationFormatOptions(position=5))  # "[5]"

    # Full bibliography, sorted or numbered as the style requires
    print(format_bibliography(references, "vancouver"))
"""

from citestyle.references.assembler import (
    FormattedEntry,
    assemble_bibliography,
    format_bibliography,
    order_references,
)
from citestyle.references.authors import AuthorLayout, format_author, initials, join_names
from citestyle.references.bibliography import format_bibliography_entry
from citestyle.references.citation import format_citation
from citestyle.references.dates import (
    format_full_date,
    format_month_day,
    format_month_year,
    format_year,
)
from citestyle.references.labels import generate_cite_key, get_short_citation
from citestyle.references.markup import Markup
from citestyle.references.styles import (
    STYLE_CONFIGS,
    AuthorDate,
    CitationStyle,
    Note,
    Numeric,
    StyleCategory,
    StyleConfig,
    StyleFamily,
    get_citation_style,
    get_style_config,
    get_styles_for_discipline,
    list_styles,
    parse_style,
    style_family,
)

__all__ = [
    # Styles
    "CitationStyle",
    "StyleCategory",
    "StyleConfig",
    "STYLE_CONFIGS",
    "StyleFamily",
    "AuthorDate",
    "Numeric",
    "Note",
    "get_style_config",
    "get_citation_style",
    "get_styles_for_discipline",
    "list_styles",
    "parse_style",
    "style_family",
    # Authors and dates
    "AuthorLayout",
    "format_author",
    "initials",
    "join_names",
    "format_year",
    "format_full_date",
    "format_month_day",
    "format_month_year",
    # Formatting
    "Markup",
    "format_citation",
    "format_bibliography_entry",
    # Assembly
    "FormattedEntry",
    "assemble_bibliography",
    "format_bibliography",
    "order_references",
    # Labels
    "get_short_citation",
    "generate_cite_key",
]
