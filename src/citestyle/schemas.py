"""Pydantic schemas for reading references from untyped sources.

The reference library stores records as JSON with camelCase keys
(e.g. "suppressAuthor", "locatorType"). These schemas validate that
data and convert it into the immutable models used by the formatters.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from citestyle.exceptions import ReferenceLoadError
from citestyle.logging import get_logger, log_failure
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

logger = get_logger("schemas")


class _Schema(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class AuthorSchema(_Schema):
    """An author, editor or translator."""

    family: str
    given: str = ""
    suffix: Optional[str] = None

    def to_author(self) -> Author:
        return Author(family=self.family, given=self.given, suffix=self.suffix)


class DateSchema(_Schema):
    """A publication date; every part is optional."""

    year: Optional[int] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    literal: Optional[str] = None

    def to_date(self) -> IssuedDate:
        return IssuedDate(year=self.year, month=self.month, day=self.day, literal=self.literal)


class IdentifiersSchema(_Schema):
    """External identifiers."""

    doi: Optional[str] = None
    pmid: Optional[str] = None
    pmcid: Optional[str] = None
    arxiv: Optional[str] = None
    isbn: Optional[str] = None
    issn: Optional[str] = None
    url: Optional[str] = None

    def to_identifiers(self) -> Identifiers:
        return Identifiers(**self.model_dump())


class VenueSchema(_Schema):
    """Journal or container."""

    name: str
    abbreviation: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    pages: Optional[str] = None

    def to_venue(self) -> Venue:
        return Venue(**self.model_dump())


class PublisherSchema(_Schema):
    """Publisher information."""

    name: str
    location: Optional[str] = None
    edition: Optional[str] = None

    def to_publisher(self) -> Publisher:
        return Publisher(**self.model_dump())


class ThesisSchema(_Schema):
    """Thesis details; the degree arrives under "type"."""

    kind: ThesisKind = Field(default=ThesisKind.OTHER, alias="type")
    institution: str
    department: Optional[str] = None

    def to_thesis(self) -> ThesisInfo:
        return ThesisInfo(kind=self.kind, institution=self.institution, department=self.department)


class PatentSchema(_Schema):
    """Patent details."""

    number: str
    country: Optional[str] = None

    def to_patent(self) -> PatentInfo:
        return PatentInfo(number=self.number, country=self.country)


class ReferenceSchema(_Schema):
    """A reference record as stored by the reference library."""

    id: str = ""
    type: ReferenceType = ReferenceType.ARTICLE_JOURNAL
    title: str = ""
    authors: list[AuthorSchema] = Field(default_factory=list)
    editors: list[AuthorSchema] = Field(default_factory=list)
    translators: list[AuthorSchema] = Field(default_factory=list)
    issued: DateSchema = Field(default_factory=DateSchema)
    identifiers: IdentifiersSchema = Field(default_factory=IdentifiersSchema)
    venue: Optional[VenueSchema] = None
    publisher: Optional[PublisherSchema] = None
    thesis: Optional[ThesisSchema] = None
    patent: Optional[PatentSchema] = None

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type_is_other(cls, value: Any) -> Any:
        if isinstance(value, str) and value not in {t.value for t in ReferenceType}:
            return ReferenceType.OTHER
        return value

    def to_reference(self) -> Reference:
        """Convert to the immutable model used for formatting."""
        return Reference(
            id=self.id,
            type=self.type,
            title=self.title,
            authors=tuple(a.to_author() for a in self.authors),
            editors=tuple(a.to_author() for a in self.editors),
            translators=tuple(a.to_author() for a in self.translators),
            issued=self.issued.to_date(),
            identifiers=self.identifiers.to_identifiers(),
            venue=self.venue.to_venue() if self.venue else None,
            publisher=self.publisher.to_publisher() if self.publisher else None,
            thesis=self.thesis.to_thesis() if self.thesis else None,
            patent=self.patent.to_patent() if self.patent else None,
        )


class CitationOptionsSchema(_Schema):
    """Per-citation options as sent by the editor."""

    suppress_author: bool = Field(default=False, alias="suppressAuthor")
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    locator: Optional[str] = None
    locator_type: LocatorType = Field(default=LocatorType.PAGE, alias="locatorType")
    position: Optional[int] = Field(default=None, ge=1)

    def to_options(self) -> CitationFormatOptions:
        return CitationFormatOptions(
            suppress_author=self.suppress_author,
            prefix=self.prefix,
            suffix=self.suffix,
            locator=self.locator,
            locator_type=self.locator_type,
            position=self.position,
        )


def parse_references(data: Any, source: str = "<data>") -> list[Reference]:
    """Validate decoded JSON and convert it to references.

    Args:
        data: A list of reference objects, or an object with a "references" list
        source: Name used in error messages

    Returns:
        References in input order

    Raises:
        ReferenceLoadError: If the data does not match the schema
    """
    if isinstance(data, dict) and "references" in data:
        data = data["references"]
    if not isinstance(data, list):
        raise ReferenceLoadError(source, "expected a list of references")

    references = []
    for index, item in enumerate(data):
        try:
            references.append(ReferenceSchema.model_validate(item).to_reference())
        except ValidationError as e:
            log_failure(logger, "parse_references", e, {"source": source, "index": index})
            raise ReferenceLoadError(source, f"entry {index} is invalid: {e}") from e
    return references


def load_references(path: str | Path) -> list[Reference]:
    """Read references from a JSON file.

    Raises:
        ReferenceLoadError: If the file is missing, not UTF-8 JSON, or invalid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        log_failure(logger, "load_references", e, {"path": str(path)})
        raise ReferenceLoadError(str(path), str(e)) from e
    except UnicodeDecodeError as e:
        log_failure(logger, "load_references", e, {"path": str(path)})
        raise ReferenceLoadError(str(path), f"not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        log_failure(logger, "load_references", e, {"path": str(path)})
        raise ReferenceLoadError(str(path), f"invalid JSON: {e}") from e

    return parse_references(data, source=str(path))
