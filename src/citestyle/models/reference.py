"""Data models for bibliographic references and citation options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ReferenceType(str, Enum):
    """Kind of bibliographic record (CSL type names)."""

    ARTICLE_JOURNAL = "article-journal"
    ARTICLE_MAGAZINE = "article-magazine"
    ARTICLE_NEWSPAPER = "article-newspaper"
    BOOK = "book"
    CHAPTER = "chapter"
    PAPER_CONFERENCE = "paper-conference"
    THESIS = "thesis"
    REPORT = "report"
    PATENT = "patent"
    WEBPAGE = "webpage"
    DATASET = "dataset"
    SOFTWARE = "software"
    PREPRINT = "preprint"
    MANUSCRIPT = "manuscript"
    PERSONAL_COMMUNICATION = "personal-communication"
    INTERVIEW = "interview"
    BROADCAST = "broadcast"
    MOTION_PICTURE = "motion-picture"
    GRAPHIC = "graphic"
    MAP = "map"
    LEGAL_CASE = "legal-case"
    LEGISLATION = "legislation"
    BILL = "bill"
    STANDARD = "standard"
    REVIEW = "review"
    ENTRY_ENCYCLOPEDIA = "entry-encyclopedia"
    ENTRY_DICTIONARY = "entry-dictionary"
    POST_WEBLOG = "post-weblog"
    POST = "post"
    SPEECH = "speech"
    DOCUMENT = "document"
    OTHER = "other"

    @property
    def is_component(self) -> bool:
        """True for works published inside a larger work (quoted titles)."""
        return self in _COMPONENT_TYPES


_COMPONENT_TYPES = frozenset(
    {
        ReferenceType.ARTICLE_JOURNAL,
        ReferenceType.ARTICLE_MAGAZINE,
        ReferenceType.ARTICLE_NEWSPAPER,
        ReferenceType.CHAPTER,
        ReferenceType.PAPER_CONFERENCE,
        ReferenceType.REVIEW,
        ReferenceType.ENTRY_ENCYCLOPEDIA,
        ReferenceType.ENTRY_DICTIONARY,
        ReferenceType.POST_WEBLOG,
        ReferenceType.POST,
    }
)


class LocatorType(str, Enum):
    """Kind of sub-reference pointer cited alongside a reference."""

    PAGE = "page"
    CHAPTER = "chapter"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    FIGURE = "figure"
    TABLE = "table"


class ThesisKind(str, Enum):
    """Degree a thesis was submitted for."""

    PHD = "phd"
    MASTERS = "masters"
    BACHELOR = "bachelor"
    DOCTORAL = "doctoral"
    OTHER = "other"


@dataclass(frozen=True)
class Author:
    """Author (or editor/translator) name.

    Names are used exactly as supplied; no diacritic or nickname handling.
    """

    family: str
    given: str = ""
    suffix: str | None = None

    def __str__(self) -> str:
        return f"{self.given} {self.family}".strip()


@dataclass(frozen=True)
class IssuedDate:
    """Partially specified publication date.

    `literal` overrides everything else for imprecise dates such as
    "circa 2020".
    """

    year: int | None = None
    month: int | None = None  # 1-12
    day: int | None = None
    literal: str | None = None


@dataclass(frozen=True)
class Identifiers:
    """External identifiers; every one is independently optional."""

    doi: str | None = None
    pmid: str | None = None
    pmcid: str | None = None
    arxiv: str | None = None
    isbn: str | None = None
    issn: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class Venue:
    """Journal or other container a work appeared in."""

    name: str
    abbreviation: str | None = None
    volume: str | None = None
    issue: str | None = None
    pages: str | None = None  # e.g. "123-145" or "e12345"


@dataclass(frozen=True)
class Publisher:
    """Book/report publisher."""

    name: str
    location: str | None = None
    edition: str | None = None


@dataclass(frozen=True)
class ThesisInfo:
    """Thesis-specific information."""

    kind: ThesisKind
    institution: str
    department: str | None = None


@dataclass(frozen=True)
class PatentInfo:
    """Patent-specific information."""

    number: str
    country: str | None = None


@dataclass(frozen=True)
class Reference:
    """Normalized bibliographic record supplied by the reference library.

    Author order is significant: the first author anchors sorting and
    et al. truncation.
    """

    title: str = ""
    type: ReferenceType = ReferenceType.ARTICLE_JOURNAL
    authors: tuple[Author, ...] = ()
    editors: tuple[Author, ...] = ()
    translators: tuple[Author, ...] = ()
    issued: IssuedDate = field(default_factory=IssuedDate)
    identifiers: Identifiers = field(default_factory=Identifiers)
    venue: Venue | None = None
    publisher: Publisher | None = None
    thesis: ThesisInfo | None = None
    patent: PatentInfo | None = None
    id: str = ""

    def __post_init__(self) -> None:
        # Accept lists from callers but store immutable tuples
        for name in ("authors", "editors", "translators"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def first_author(self) -> Author | None:
        return self.authors[0] if self.authors else None

    @property
    def year(self) -> int | None:
        return self.issued.year


@dataclass(frozen=True)
class CitationFormatOptions:
    """Per-occurrence options for an in-text citation.

    Attributes:
        suppress_author: Render the year (or number) without the author
        prefix: Free text placed just inside the opening bracket
        suffix: Free text placed just inside the closing bracket
        locator: Page, chapter, etc. being pointed at
        locator_type: Kind of locator (default: page)
        position: Citation number, used by numeric styles
    """

    suppress_author: bool = False
    prefix: str | None = None
    suffix: str | None = None
    locator: str | None = None
    locator_type: LocatorType = LocatorType.PAGE
    position: int | None = None
