"""Bibliography assembly: ordering, numbering and joining entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from citestyle.models.reference import Reference
from citestyle.references.bibliography import format_bibliography_entry
from citestyle.references.markup import Markup
from citestyle.references.styles import CitationStyle, Numeric, parse_style, style_family

ENTRY_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class FormattedEntry:
    """A formatted reference-list entry.

    Attributes:
        reference: The source reference
        text: The formatted entry text
        number: Position in the list (1-indexed)
    """

    reference: Reference
    text: str
    number: int


def _sort_key(reference: Reference) -> tuple[str, int]:
    first = reference.first_author
    family = first.family.casefold() if first else ""
    return family, reference.issued.year or 0


def order_references(
    references: Sequence[Reference], style_id: CitationStyle | str
) -> list[Reference]:
    """Order references the way the style's reference list expects.

    Numeric styles keep citation (input) order. Author-date and note
    styles sort by first-author family name, then year. The sort is
    stable, so works with the same first author and year keep their input
    order; no "2020a"/"2020b" suffixes are added.
    """
    style = parse_style(style_id)
    if isinstance(style_family(style), Numeric):
        return list(references)
    return sorted(references, key=_sort_key)


def assemble_bibliography(
    references: Sequence[Reference],
    style_id: CitationStyle | str,
    markup: Markup = Markup.PLAIN,
) -> list[FormattedEntry]:
    """Order, number and format every reference.

    Args:
        references: References in citation order
        style_id: Style enum or id string; unknown ids render as APA 7
        markup: Emphasis markup for italic/bold parts

    Returns:
        Formatted entries in reference-list order
    """
    style = parse_style(style_id)
    return [
        FormattedEntry(
            reference=reference,
            text=format_bibliography_entry(reference, style, position=i, markup=markup),
            number=i,
        )
        for i, reference in enumerate(order_references(references, style), start=1)
    ]


def format_bibliography(
    references: Sequence[Reference],
    style_id: CitationStyle | str,
    markup: Markup = Markup.PLAIN,
) -> str:
    """Format a complete bibliography, entries separated by a blank line.

    Args:
        references: References in citation order
        style_id: Style enum or id string; unknown ids render as APA 7
        markup: Emphasis markup for italic/bold parts

    Returns:
        Bibliography text ("" for no references)
    """
    entries = assemble_bibliography(references, style_id, markup)
    return ENTRY_SEPARATOR.join(entry.text for entry in entries)
