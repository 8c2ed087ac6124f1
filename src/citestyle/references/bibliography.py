"""Bibliography entries for every catalog style.

Each renderer lists the entry's fragments in order (authors, date, title,
venue, publisher, identifier) with the separator each one takes, and
leaves joining to EntryBuilder. Missing data simply contributes no
fragment.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from citestyle.models.reference import Author, Reference, ReferenceType, ThesisKind
from citestyle.references.authors import AuthorLayout, format_author, join_names
from citestyle.references.dates import format_month_day, format_month_year, format_year
from citestyle.references.fragments import EntryBuilder, join_parts
from citestyle.references.markup import Markup
from citestyle.references.styles import (
    CitationStyle,
    StyleConfig,
    get_style_config,
    parse_style,
)

THESIS_LABELS: dict[ThesisKind, str] = {
    ThesisKind.PHD: "Doctoral dissertation",
    ThesisKind.DOCTORAL: "Doctoral dissertation",
    ThesisKind.MASTERS: "Master's thesis",
    ThesisKind.BACHELOR: "Bachelor's thesis",
    ThesisKind.OTHER: "Thesis",
}


def format_bibliography_entry(
    reference: Reference,
    style_id: CitationStyle | str,
    position: int = 1,
    markup: Markup = Markup.PLAIN,
) -> str:
    """Format one reference-list entry.

    Args:
        reference: Reference to format
        style_id: Style enum or id string; unknown ids render as APA 7
        position: Entry number, used by numeric styles only
        markup: Emphasis markup for italic/bold parts

    Returns:
        Entry text, e.g. "Smith, John. (2023). A Study. Journal of X, 12, 1-10."
    """
    style = parse_style(style_id)
    config = get_style_config(style)

    if style is CitationStyle.APA_7 or style is CitationStyle.CELL:
        # Cell follows the APA layout
        return _format_apa(reference, config, markup)
    elif style is CitationStyle.MLA_9:
        return _format_mla(reference, config, markup)
    elif style is CitationStyle.HARVARD:
        return _format_harvard(reference, config, markup)
    elif style is CitationStyle.CHICAGO_AUTHOR or style is CitationStyle.CHICAGO_NOTES:
        # Both Chicago variants share one bibliography format
        return _format_chicago(reference, config, markup)
    elif style is CitationStyle.VANCOUVER:
        return f"{position}. {_format_vancouver(reference, config, markup)}"
    elif style is CitationStyle.IEEE:
        return f"[{position}] {_format_ieee(reference, config, markup)}"
    elif style is CitationStyle.AMA:
        return f"{position}. {_format_ama(reference, config, markup)}"
    elif style is CitationStyle.NATURE:
        return f"{position}. {_format_nature(reference, config, markup)}"
    else:
        assert_never(style)


# =============================================================================
# Shared blocks
# =============================================================================


def _names(authors: Sequence[Author], layout: AuthorLayout) -> list[str]:
    return [n for n in (format_author(a, layout) for a in authors) if n]


def _is_truncated(authors: Sequence[Author], config: StyleConfig) -> bool:
    return len(authors) > config.et_al_threshold


def _title(reference: Reference, markup: Markup) -> str:
    """Title text: component works stay plain (styles quote them), others italic."""
    title = reference.title.strip()
    if reference.type.is_component:
        return title
    return markup.italic(title)


def _quote_for(reference: Reference, quote: str) -> str:
    return quote if reference.type.is_component and reference.title.strip() else ""


def _type_detail(reference: Reference) -> str:
    """Thesis/patent description, e.g. "Doctoral dissertation, MIT"."""
    if reference.type is ReferenceType.THESIS and reference.thesis:
        thesis = reference.thesis
        return join_parts(
            [THESIS_LABELS[thesis.kind], thesis.department, thesis.institution], ", "
        )
    if reference.type is ReferenceType.PATENT and reference.patent:
        patent = reference.patent
        return join_parts([patent.country, "Patent", patent.number], " ")
    return ""


def _publisher(reference: Reference) -> str:
    """"Location: Name" (either part may be missing)."""
    if not reference.publisher:
        return ""
    return join_parts([reference.publisher.location, reference.publisher.name], ": ")


def _link(reference: Reference) -> str:
    """DOI as a URL, else the plain URL."""
    if reference.identifiers.doi:
        return f"https://doi.org/{reference.identifiers.doi}"
    return reference.identifiers.url or ""


def _venue_name(reference: Reference, abbreviated: bool = False) -> str:
    venue = reference.venue
    if not venue:
        return ""
    if abbreviated and venue.abbreviation:
        return venue.abbreviation
    return venue.name


def _volume_issue(reference: Reference) -> str:
    """"12(3)", "12", or "" when there is no volume."""
    venue = reference.venue
    if not venue or not venue.volume:
        return ""
    if venue.issue:
        return f"{venue.volume}({venue.issue})"
    return venue.volume


def _editors(reference: Reference, layout: AuthorLayout, conjunction: str) -> str:
    return join_names(_names(reference.editors, layout), conjunction)


# =============================================================================
# Author-date renderers
# =============================================================================


def _format_apa(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """APA 7th edition.

    Format:
    Family, Given, & Family, Given. (Year). Title. Journal, Volume(Issue),
    Pages. https://doi.org/xxxxx

    21+ authors: first 19, ". . .", then the last author.
    """
    entry = EntryBuilder(markup)

    names = _names(reference.authors, AuthorLayout.LAST_FIRST)
    if _is_truncated(reference.authors, config):
        last = format_author(reference.authors[-1], AuthorLayout.LAST_FIRST)
        entry.add(", ".join(names[: config.et_al_first]) + f", . . . {last}")
    else:
        entry.add(join_names(names, "&", pair_comma=True))

    entry.add(f"({format_year(reference.issued)})")

    title = _title(reference, markup)
    if title and reference.publisher and reference.publisher.edition:
        title += f" ({reference.publisher.edition} ed.)"
    detail = _type_detail(reference)
    if detail:
        title = join_parts([title, f"[{detail}]"], " ")
    entry.add(title)

    venue = reference.venue
    if reference.type is ReferenceType.CHAPTER and venue and venue.name:
        editors = _editors(reference, AuthorLayout.INITIALS_FIRST, "&")
        label = "(Ed.)" if len(reference.editors) == 1 else "(Eds.)"
        book = markup.italic(venue.name)
        if venue.pages:
            book += f" (pp. {venue.pages})"
        entry.add(f"In {editors} {label}, {book}" if editors else f"In {book}")
        entry.add(reference.publisher.name if reference.publisher else "")
    elif venue and venue.name:
        volume = markup.italic(venue.volume or "")
        if volume and venue.issue:
            volume += f"({venue.issue})"
        entry.add(join_parts([markup.italic(venue.name), volume, venue.pages], ", "))
    elif reference.publisher:
        entry.add(reference.publisher.name)

    entry.add(_link(reference), sep="", final_period=False)
    return entry.render()


def _format_mla(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """MLA 9th edition.

    Format:
    Family, Given, and Given Family. "Title." Container, vol. V, no. I,
    Publisher, Year, pp. P. doi:xxxxx.
    """
    entry = EntryBuilder(markup)

    authors = reference.authors
    if authors:
        first = format_author(authors[0], AuthorLayout.LAST_FIRST)
        if _is_truncated(authors, config):
            entry.add(f"{first}, et al.")
        elif len(authors) == 2:
            second = format_author(authors[1], AuthorLayout.FIRST_LAST)
            entry.add(f"{first}, and {second}")
        else:
            entry.add(first)

    entry.add(_title(reference, markup), quote=_quote_for(reference, '"'))
    entry.add(_type_detail(reference))

    venue = reference.venue
    editors = _editors(reference, AuthorLayout.FIRST_LAST, "and")
    container = join_parts(
        [
            markup.italic(venue.name) if venue else "",
            f"edited by {editors}" if editors and reference.type is ReferenceType.CHAPTER else "",
            f"vol. {venue.volume}" if venue and venue.volume else "",
            f"no. {venue.issue}" if venue and venue.issue else "",
            reference.publisher.name if reference.publisher else "",
            format_year(reference.issued),
            f"pp. {venue.pages}" if venue and venue.pages else "",
        ],
        ", ",
    )
    entry.add(container)

    if reference.identifiers.doi:
        entry.add(f"doi:{reference.identifiers.doi}")
    else:
        entry.add(reference.identifiers.url)
    return entry.render()


def _format_harvard(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """Harvard.

    Format:
    Family, Given, Family, Given, and Family, Given (Year) 'Title', Journal,
    Volume(Issue), pp. Pages. Available at: https://doi.org/xxxxx
    """
    entry = EntryBuilder(markup)

    names = _names(reference.authors, AuthorLayout.LAST_FIRST)
    if _is_truncated(reference.authors, config):
        first = format_author(reference.authors[0], AuthorLayout.LAST_FIRST)
        entry.add(f"{first} et al.", sep="")
    else:
        entry.add(join_names(names, "and"), sep="")

    entry.add(f"({format_year(reference.issued)})", sep="")

    title = _title(reference, markup)
    if title and reference.type.is_component:
        title = f"'{title}'"
    entry.add(title, sep=",")
    entry.add(_type_detail(reference), sep=",")

    if reference.venue:
        venue = reference.venue
        entry.add(
            join_parts(
                [
                    markup.italic(venue.name),
                    _volume_issue(reference),
                    f"pp. {venue.pages}" if venue.pages else "",
                ],
                ", ",
            )
        )

    entry.add(_publisher(reference))

    link = _link(reference)
    entry.add(f"Available at: {link}" if link else "", sep="", final_period=False)
    return entry.render()


def _format_chicago(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """Chicago author-date (used for the notes variant too).

    Format:
    Family, Given, Given Family, and Given Family. Year. "Title." Journal
    Volume, no. Issue: Pages. https://doi.org/xxxxx.
    """
    entry = EntryBuilder(markup)

    authors = reference.authors
    names = [
        format_author(a, AuthorLayout.LAST_FIRST if i == 0 else AuthorLayout.FIRST_LAST)
        for i, a in enumerate(authors)
    ]
    if _is_truncated(authors, config):
        entry.add(", ".join(names[: config.et_al_first]) + ", et al.")
    else:
        entry.add(join_names(names, "and", pair_comma=True))

    entry.add(format_year(reference.issued))
    entry.add(_title(reference, markup), quote=_quote_for(reference, '"'))
    entry.add(_type_detail(reference))

    venue = reference.venue
    if venue and venue.name:
        if reference.type is ReferenceType.CHAPTER:
            editors = _editors(reference, AuthorLayout.FIRST_LAST, "and")
            entry.add(
                "In "
                + join_parts(
                    [
                        markup.italic(venue.name),
                        f"edited by {editors}" if editors else "",
                        venue.pages,
                    ],
                    ", ",
                )
            )
        else:
            text = markup.italic(venue.name)
            if venue.volume:
                text += f" {venue.volume}"
            if venue.issue:
                text += f", no. {venue.issue}" if venue.volume else f" no. {venue.issue}"
            if venue.pages:
                text += f": {venue.pages}"
            entry.add(text)

    entry.add(_publisher(reference))
    entry.add(_link(reference))
    return entry.render()


# =============================================================================
# Numeric renderers (position prefix added by the dispatcher)
# =============================================================================


def _format_vancouver(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """Vancouver (ICMJE).

    Format:
    Family AB, Family CD. Title. Journal Abbrev. Year Mon Day;Volume(Issue):Pages.
    doi: xxxxx
    7+ authors: first 6 et al.
    """
    entry = EntryBuilder(markup)

    names = _names(reference.authors, AuthorLayout.INITIALS)
    if _is_truncated(reference.authors, config):
        entry.add(", ".join(names[: config.et_al_first]) + ", et al.")
    else:
        entry.add(", ".join(names))

    entry.add(_title(reference, markup))
    entry.add(_type_detail(reference))

    venue = reference.venue
    date = format_month_day(reference.issued) or format_year(reference.issued)
    if venue and venue.name:
        entry.add(_venue_name(reference, abbreviated=True))
        text = date
        location = _volume_issue(reference)
        if location:
            text += f";{location}"
        if venue.pages:
            text += f":{venue.pages}"
        entry.add(text)
    else:
        entry.add(join_parts([_publisher(reference), date], "; "))

    if reference.identifiers.doi:
        entry.add(f"doi: {reference.identifiers.doi}", sep="", final_period=False)
    elif reference.identifiers.pmid:
        entry.add(f"PMID: {reference.identifiers.pmid}", sep="", final_period=False)
    return entry.render()


def _format_ama(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """AMA 11th edition.

    Format:
    Family AB, Family CD. Title. *Journal Abbrev*. Year;Volume(Issue):Pages.
    doi:xxxxx
    7+ authors: first 3 et al.
    """
    entry = EntryBuilder(markup)

    names = _names(reference.authors, AuthorLayout.INITIALS)
    if _is_truncated(reference.authors, config):
        entry.add(", ".join(names[: config.et_al_first]) + ", et al.")
    else:
        entry.add(", ".join(names))

    entry.add(_title(reference, markup))
    entry.add(_type_detail(reference))

    venue = reference.venue
    year = format_year(reference.issued)
    if venue and venue.name:
        entry.add(markup.italic(_venue_name(reference, abbreviated=True)))
        text = year
        location = _volume_issue(reference)
        if location:
            text += f";{location}"
        if venue.pages:
            text += f":{venue.pages}"
        entry.add(text)
    else:
        entry.add(join_parts([reference.publisher.name if reference.publisher else "", year], "; "))

    if reference.identifiers.doi:
        entry.add(f"doi:{reference.identifiers.doi}", sep="", final_period=False)
    else:
        entry.add(reference.identifiers.url, sep="", final_period=False)
    return entry.render()


def _format_nature(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """Nature.

    Format:
    Family AB, Family CD & Family EF. Title. *Journal* **Volume**, Pages (Year).
    6+ authors: first author et al.
    """
    entry = EntryBuilder(markup)

    names = _names(reference.authors, AuthorLayout.INITIALS)
    if _is_truncated(reference.authors, config):
        entry.add(f"{format_author(reference.authors[0], AuthorLayout.INITIALS)} et al.")
    else:
        entry.add(join_names(names, "&", serial_comma=False))

    entry.add(_title(reference, markup))
    entry.add(_type_detail(reference))

    venue = reference.venue
    year = f"({format_year(reference.issued)})"
    if venue and venue.name:
        text = markup.italic(_venue_name(reference, abbreviated=True))
        if venue.volume:
            text += f" {markup.bold(venue.volume)}"
        if venue.pages:
            text += f", {venue.pages}" if venue.volume else f" {venue.pages}"
        entry.add(f"{text} {year}")
    else:
        entry.add(join_parts([reference.publisher.name if reference.publisher else "", year], " "))

    entry.add(_link(reference), sep="", final_period=False)
    return entry.render()


def _format_ieee(reference: Reference, config: StyleConfig, markup: Markup) -> str:
    """IEEE.

    Format:
    A. B. Family, C. Family, and E. Family, "Title," *Journal*, vol. V,
    no. I, pp. P, Mon. Year. doi: xxxxx.
    7+ authors: first author et al.
    """
    entry = EntryBuilder(markup)

    names = _names(reference.authors, AuthorLayout.INITIALS_FIRST)
    if _is_truncated(reference.authors, config):
        first = format_author(reference.authors[0], AuthorLayout.INITIALS_FIRST)
        entry.add(f"{first} et al.", sep=",")
    else:
        entry.add(join_names(names, "and"), sep=",")

    entry.add(_title(reference, markup), sep=",", quote=_quote_for(reference, '"'))
    entry.add(_type_detail(reference), sep=",")

    venue = reference.venue
    if venue:
        entry.add(markup.italic(venue.name), sep=",")
        entry.add(f"vol. {venue.volume}" if venue.volume else "", sep=",")
        entry.add(f"no. {venue.issue}" if venue.issue else "", sep=",")
        entry.add(f"pp. {venue.pages}" if venue.pages else "", sep=",")

    entry.add(_publisher(reference), sep=",")
    entry.add(format_month_year(reference.issued))

    if reference.identifiers.doi:
        entry.add(f"doi: {reference.identifiers.doi}")
    elif reference.identifiers.url:
        entry.add(f"[Online]. Available: {reference.identifiers.url}", sep="", final_period=False)
    return entry.render()
