"""Short, informal labels for references (not formal citations)."""

from __future__ import annotations

import re

from citestyle.models.reference import Reference
from citestyle.references.dates import format_year

_NON_LETTERS = re.compile(r"[^a-z]")


def get_short_citation(reference: Reference) -> str:
    """Quick display label such as "Smith et al., 2024".

    Always uses "&" and collapses three or more authors, whatever the
    active style.
    """
    families = [a.family for a in reference.authors]
    if not families:
        author = "Unknown"
    elif len(families) > 2:
        author = f"{families[0]} et al."
    else:
        author = " & ".join(families)
    return f"{author}, {format_year(reference.issued)}"


def generate_cite_key(reference: Reference, pattern: str = "[auth][year]") -> str:
    """Build a BibTeX-style citation key from a pattern.

    Tokens:
        [auth] / [Auth]: first author's family name, letters only
        [year]: publication year ("nodate" when unknown)
        [title] / [Title]: first word of the title, letters only
    """
    first = reference.first_author
    author = _NON_LETTERS.sub("", first.family.lower()) if first else ""
    author = author or "unknown"

    year = str(reference.issued.year) if reference.issued.year else "nodate"

    words = reference.title.split()
    title = _NON_LETTERS.sub("", words[0].lower()) if words else ""

    return (
        pattern.replace("[auth]", author)
        .replace("[Auth]", author.capitalize())
        .replace("[year]", year)
        .replace("[title]", title)
        .replace("[Title]", title.capitalize())
    )
