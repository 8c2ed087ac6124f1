"""Date rendering at year, month and day precision."""

from __future__ import annotations

from citestyle.models.reference import IssuedDate

NO_DATE = "n.d."

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Abbreviated forms used in periodical entries; May is never shortened
MONTH_ABBREVIATIONS = (
    "Jan.",
    "Feb.",
    "Mar.",
    "Apr.",
    "May",
    "Jun.",
    "Jul.",
    "Aug.",
    "Sep.",
    "Oct.",
    "Nov.",
    "Dec.",
)


def _month_index(date: IssuedDate) -> int | None:
    if date.month is None or not 1 <= date.month <= 12:
        return None
    return date.month - 1


def format_year(date: IssuedDate | None) -> str:
    """Year for citations: literal override, numeric year, or "n.d."."""
    if date is None:
        return NO_DATE
    if date.literal:
        return date.literal
    if date.year is None:
        return NO_DATE
    return str(date.year)


def format_full_date(date: IssuedDate | None) -> str:
    """Full date, e.g. "March 5, 2024", "March 2024" or "2024"."""
    if date is None:
        return NO_DATE
    if date.literal:
        return date.literal

    year = format_year(date)
    month = _month_index(date)
    if month is None:
        return year
    if date.day:
        return f"{MONTHS[month]} {date.day}, {year}"
    return f"{MONTHS[month]} {year}"


def format_month_day(date: IssuedDate | None) -> str:
    """Periodical date, e.g. "2024 Mar. 5"; empty when the month is unknown."""
    if date is None or date.literal:
        return ""
    month = _month_index(date)
    if month is None:
        return ""

    year = format_year(date)
    if date.day:
        return f"{year} {MONTH_ABBREVIATIONS[month]} {date.day}"
    return f"{year} {MONTH_ABBREVIATIONS[month]}"


def format_month_year(date: IssuedDate | None) -> str:
    """Month and year, e.g. "Mar. 2024"; the year alone without a month."""
    if date is None or date.literal:
        return format_year(date)
    month = _month_index(date)
    if month is None:
        return format_year(date)
    return f"{MONTH_ABBREVIATIONS[month]} {format_year(date)}"
