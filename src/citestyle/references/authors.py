"""Author name rendering shared by all styles."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from citestyle.models.reference import Author

_NAME_PARTS = re.compile(r"[\s-]+")


class AuthorLayout(str, Enum):
    """How a single name is laid out."""

    LAST_FIRST = "last_first"  # Smith, John
    FIRST_LAST = "first_last"  # John Smith
    INITIALS = "initials"  # Smith J.R.
    INITIALS_FIRST = "initials_first"  # J.R. Smith


def initials(given: str) -> str:
    """Turn given names into period-suffixed initials.

    "John Ronald" -> "J.R.", "Jean-Paul" -> "J.P."
    """
    parts = [p for p in _NAME_PARTS.split(given.strip()) if p]
    return "".join(f"{p[0].upper()}." for p in parts)


def format_author(author: Author, layout: AuthorLayout) -> str:
    """Format one author name.

    The suffix always follows the given-name component. A missing given
    name leaves just the family name (plus suffix).

    Args:
        author: Author to render
        layout: Name layout requested by the style

    Returns:
        Rendered name
    """
    family = author.family.strip()
    given = author.given.strip()
    suffix = f" {author.suffix.strip()}" if author.suffix and author.suffix.strip() else ""

    if layout == AuthorLayout.LAST_FIRST:
        if not given:
            return f"{family}{suffix}"
        return f"{family}, {given}{suffix}"

    if layout == AuthorLayout.FIRST_LAST:
        return " ".join(p for p in (given, family) if p) + suffix

    short = initials(given)
    if layout == AuthorLayout.INITIALS:
        return " ".join(p for p in (family, short) if p) + suffix

    return " ".join(p for p in (short, family) if p) + suffix


def join_names(
    names: Sequence[str],
    conjunction: str = "and",
    serial_comma: bool = True,
    pair_comma: bool = False,
) -> str:
    """Join rendered names into a list.

    Examples:
        ["A", "B"] -> "A and B"
        ["A", "B", "C"] -> "A, B, and C" (serial_comma) / "A, B and C"
        pair_comma=True gives "A, & B" for inverted names such as APA's.
    """
    names = [n for n in names if n]
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        sep = ", " if pair_comma else " "
        return f"{names[0]}{sep}{conjunction} {names[1]}"

    head = ", ".join(names[:-1])
    sep = ", " if serial_comma else " "
    return f"{head}{sep}{conjunction} {names[-1]}"


def family_names(authors: Sequence[Author]) -> list[str]:
    """Family names in author order, for in-text markers."""
    return [a.family.strip() for a in authors if a.family.strip()]
