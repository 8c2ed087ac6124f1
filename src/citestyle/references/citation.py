"""In-text citation markers for every catalog style.

Author-date styles render "(Smith et al., 2023)"-like markers; numeric
styles render the caller-assigned position, e.g. "[5]" or "(5)".
"""

from __future__ import annotations

from typing import assert_never

from citestyle.models.reference import CitationFormatOptions, LocatorType, Reference
from citestyle.references.authors import family_names, join_names
from citestyle.references.dates import format_year
from citestyle.references.fragments import join_parts
from citestyle.references.styles import (
    CitationStyle,
    Numeric,
    StyleConfig,
    get_style_config,
    parse_style,
)

# Labels for author-date locators, e.g. "(Smith, 2023, Chapter 4)"
LOCATOR_LABELS: dict[LocatorType, str] = {
    LocatorType.PAGE: "p.",
    LocatorType.CHAPTER: "Chapter",
    LocatorType.SECTION: "Section",
    LocatorType.PARAGRAPH: "para.",
    LocatorType.FIGURE: "Figure",
    LocatorType.TABLE: "Table",
}

SHORT_TITLE_LENGTH = 20


def format_citation(
    reference: Reference,
    style_id: CitationStyle | str,
    options: CitationFormatOptions | None = None,
) -> str:
    """Format an in-text citation marker.

    Args:
        reference: Reference being cited
        style_id: Style enum or id string; unknown ids render as APA 7
        options: Per-citation options (prefix, locator, position, ...)

    Returns:
        Marker text such as "(Smith & Jones, 2023)" or "[5]"
    """
    style = parse_style(style_id)
    options = options or CitationFormatOptions()

    if style is CitationStyle.APA_7:
        return _format_apa(reference, options)
    elif style is CitationStyle.MLA_9:
        return _format_mla(reference, options)
    elif style is CitationStyle.HARVARD:
        return _format_harvard(reference, options)
    elif style is CitationStyle.CHICAGO_AUTHOR or style is CitationStyle.CHICAGO_NOTES:
        # Footnotes are not modeled; notes style cites inline like author-date
        return _format_chicago_author(reference, options, get_style_config(style))
    elif style is CitationStyle.CELL:
        return _format_cell(reference, options)
    elif (
        style is CitationStyle.VANCOUVER
        or style is CitationStyle.IEEE
        or style is CitationStyle.AMA
        or style is CitationStyle.NATURE
    ):
        return _format_numeric(options, Numeric(style, get_style_config(style).bracket))
    else:
        assert_never(style)


# =============================================================================
# Shared pieces
# =============================================================================


def _wrap(core: str, options: CitationFormatOptions, opening: str = "(", closing: str = ")") -> str:
    """Place prefix/suffix just inside the brackets."""
    return opening + join_parts([options.prefix, core, options.suffix], " ") + closing


def _author_segment(reference: Reference, config: StyleConfig, conjunction: str) -> str:
    """Family names collapsed to "First et al." past the style's threshold."""
    names = family_names(reference.authors)
    if not names:
        return ""
    if config.in_text_threshold is not None and len(names) > config.in_text_threshold:
        return f"{names[0]} et al."
    return join_names(names, conjunction)


def _short_title(title: str) -> str:
    title = title.strip()
    if len(title) <= SHORT_TITLE_LENGTH:
        return title
    return title[:SHORT_TITLE_LENGTH].rstrip() + "..."


def _labeled_locator(options: CitationFormatOptions) -> str:
    if not options.locator:
        return ""
    label = LOCATOR_LABELS.get(options.locator_type, "p.")
    return f"{label} {options.locator}"


# =============================================================================
# Author-date renderers
# =============================================================================


def _format_apa(reference: Reference, options: CitationFormatOptions) -> str:
    """(Author, Year) or (Author, Year, p. 42)."""
    config = get_style_config(CitationStyle.APA_7)
    year = format_year(reference.issued)

    if options.suppress_author:
        core = year
    else:
        lead = _author_segment(reference, config, "&") or _short_title(reference.title)
        core = join_parts([lead, year], ", ")

    core = join_parts([core, _labeled_locator(options)], ", ")
    return _wrap(core, options)


def _format_mla(reference: Reference, options: CitationFormatOptions) -> str:
    """(Author Page): no year, no comma and no "p." before the page."""
    config = get_style_config(CitationStyle.MLA_9)

    if options.suppress_author:
        core = options.locator or format_year(reference.issued)
    else:
        lead = _author_segment(reference, config, "and")
        if not lead and reference.title.strip():
            lead = f'"{_short_title(reference.title)}"'
        core = join_parts([lead, options.locator], " ") or format_year(reference.issued)

    return _wrap(core, options)


def _format_harvard(reference: Reference, options: CitationFormatOptions) -> str:
    """(Author Year) or (Author Year, p. 42)."""
    config = get_style_config(CitationStyle.HARVARD)
    year = format_year(reference.issued)

    if options.suppress_author:
        core = year
    else:
        core = join_parts([_author_segment(reference, config, "and"), year], " ")

    core = join_parts([core, _labeled_locator(options)], ", ")
    return _wrap(core, options)


def _format_chicago_author(
    reference: Reference, options: CitationFormatOptions, config: StyleConfig
) -> str:
    """(Author Year, page): the locator carries no label."""
    year = format_year(reference.issued)

    if options.suppress_author:
        core = year
    else:
        core = join_parts([_author_segment(reference, config, "and"), year], " ")

    core = join_parts([core, options.locator], ", ")
    return _wrap(core, options)


def _format_cell(reference: Reference, options: CitationFormatOptions) -> str:
    """(Author et al., Year)."""
    config = get_style_config(CitationStyle.CELL)
    year = format_year(reference.issued)

    if options.suppress_author:
        core = year
    else:
        core = join_parts([_author_segment(reference, config, "and"), year], ", ")

    core = join_parts([core, _labeled_locator(options)], ", ")
    return _wrap(core, options)


# =============================================================================
# Numeric renderer
# =============================================================================


def _format_numeric(options: CitationFormatOptions, family: Numeric) -> str:
    """[1], (1) or [1, p. 42]; author and title are never shown."""
    position = options.position if options.position is not None else 1
    core = str(position)
    if options.locator and options.locator_type == LocatorType.PAGE:
        core += f", p. {options.locator}"

    return _wrap(core, options, family.bracket, family.closing_bracket)
