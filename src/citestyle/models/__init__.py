"""Data models for citestyle."""

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
]
