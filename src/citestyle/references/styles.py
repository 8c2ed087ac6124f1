"""Citation style definitions for reference formatting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from citestyle.logging import get_logger, log_warning

logger = get_logger("styles")


class CitationStyle(str, Enum):
    """Supported citation styles."""

    APA_7 = "apa-7"
    MLA_9 = "mla-9"
    CHICAGO_NOTES = "chicago-notes"
    CHICAGO_AUTHOR = "chicago-author"
    VANCOUVER = "vancouver"
    HARVARD = "harvard"
    IEEE = "ieee"
    AMA = "ama"
    NATURE = "nature"
    CELL = "cell"


class StyleCategory(str, Enum):
    """Citation system a style belongs to."""

    AUTHOR_DATE = "author-date"
    NUMERIC = "numeric"
    NOTE = "note"


@dataclass(frozen=True)
class StyleConfig:
    """Configuration for a citation style.

    Attributes:
        name: Human-readable style name
        style: CitationStyle enum value
        category: Citation system (author-date, numeric, note)
        fields: Disciplines the style is common in
        et_al_threshold: Most authors listed in full in a bibliography entry
        et_al_first: Authors listed before "et al." (or the ellipsis) once truncated
        in_text_threshold: Most family names shown in-text before "et al."
        use_ampersand: Use "&" before the last author
        bracket: Opening bracket for numeric in-text markers
    """

    name: str
    style: CitationStyle
    category: StyleCategory
    fields: tuple[str, ...]
    et_al_threshold: int
    et_al_first: int
    in_text_threshold: int | None
    use_ampersand: bool
    bracket: str = "("

    @property
    def id(self) -> str:
        return self.style.value

    @property
    def is_numeric(self) -> bool:
        return self.category == StyleCategory.NUMERIC


# Pre-defined style configurations, in catalog order
STYLE_CONFIGS: dict[CitationStyle, StyleConfig] = {
    CitationStyle.APA_7: StyleConfig(
        name="APA 7th Edition",
        style=CitationStyle.APA_7,
        category=StyleCategory.AUTHOR_DATE,
        fields=("psychology", "education", "social-sciences"),
        et_al_threshold=20,
        et_al_first=19,
        in_text_threshold=2,
        use_ampersand=True,
    ),
    CitationStyle.MLA_9: StyleConfig(
        name="MLA 9th Edition",
        style=CitationStyle.MLA_9,
        category=StyleCategory.AUTHOR_DATE,
        fields=("humanities", "literature"),
        et_al_threshold=2,
        et_al_first=1,
        in_text_threshold=2,
        use_ampersand=False,
    ),
    CitationStyle.CHICAGO_NOTES: StyleConfig(
        name="Chicago (Notes)",
        style=CitationStyle.CHICAGO_NOTES,
        category=StyleCategory.NOTE,
        fields=("history", "arts"),
        et_al_threshold=10,
        et_al_first=7,
        in_text_threshold=3,
        use_ampersand=False,
    ),
    CitationStyle.CHICAGO_AUTHOR: StyleConfig(
        name="Chicago (Author-Date)",
        style=CitationStyle.CHICAGO_AUTHOR,
        category=StyleCategory.AUTHOR_DATE,
        fields=("sciences", "social-sciences"),
        et_al_threshold=10,
        et_al_first=7,
        in_text_threshold=3,
        use_ampersand=False,
    ),
    CitationStyle.VANCOUVER: StyleConfig(
        name="Vancouver",
        style=CitationStyle.VANCOUVER,
        category=StyleCategory.NUMERIC,
        fields=("medicine", "nursing", "biomedical"),
        et_al_threshold=6,
        et_al_first=6,
        in_text_threshold=None,
        use_ampersand=False,
        bracket="(",
    ),
    CitationStyle.HARVARD: StyleConfig(
        name="Harvard",
        style=CitationStyle.HARVARD,
        category=StyleCategory.AUTHOR_DATE,
        fields=("business", "general"),
        et_al_threshold=3,
        et_al_first=1,
        in_text_threshold=3,
        use_ampersand=False,
    ),
    CitationStyle.IEEE: StyleConfig(
        name="IEEE",
        style=CitationStyle.IEEE,
        category=StyleCategory.NUMERIC,
        fields=("engineering", "computer-science", "electronics"),
        et_al_threshold=6,
        et_al_first=1,
        in_text_threshold=None,
        use_ampersand=False,
        bracket="[",
    ),
    CitationStyle.AMA: StyleConfig(
        name="AMA 11th Edition",
        style=CitationStyle.AMA,
        category=StyleCategory.NUMERIC,
        fields=("medicine", "health-sciences"),
        et_al_threshold=6,
        et_al_first=3,
        in_text_threshold=None,
        use_ampersand=False,
        bracket="(",
    ),
    CitationStyle.NATURE: StyleConfig(
        name="Nature",
        style=CitationStyle.NATURE,
        category=StyleCategory.NUMERIC,
        fields=("natural-sciences", "biology", "multidisciplinary"),
        et_al_threshold=5,
        et_al_first=1,
        in_text_threshold=None,
        use_ampersand=True,
        bracket="(",
    ),
    CitationStyle.CELL: StyleConfig(
        name="Cell",
        style=CitationStyle.CELL,
        category=StyleCategory.AUTHOR_DATE,
        fields=("biology", "life-sciences"),
        et_al_threshold=20,
        et_al_first=19,
        in_text_threshold=2,
        use_ampersand=False,
    ),
}

# Extra spellings accepted when reading stored preferences
_STYLE_ALIASES: dict[str, CitationStyle] = {
    "apa": CitationStyle.APA_7,
    "apa7": CitationStyle.APA_7,
    "mla": CitationStyle.MLA_9,
    "mla9": CitationStyle.MLA_9,
    "chicago": CitationStyle.CHICAGO_AUTHOR,
    "ama-11": CitationStyle.AMA,
}

DEFAULT_STYLE = CitationStyle.APA_7


# =============================================================================
# Style families
# =============================================================================


@dataclass(frozen=True)
class AuthorDate:
    """Author-date family: (Author, Year) markers, alphabetical bibliography."""

    style: CitationStyle


@dataclass(frozen=True)
class Numeric:
    """Numeric family: bracketed ordinals, bibliography in citation order."""

    style: CitationStyle
    bracket: str

    @property
    def closing_bracket(self) -> str:
        return "]" if self.bracket == "[" else ")"


@dataclass(frozen=True)
class Note:
    """Note family: footnote styles, alphabetical bibliography."""

    style: CitationStyle


StyleFamily = Union[AuthorDate, Numeric, Note]


def get_style_config(style: CitationStyle) -> StyleConfig:
    """Get the configuration for a citation style.

    Args:
        style: The citation style

    Returns:
        StyleConfig for the requested style
    """
    return STYLE_CONFIGS[style]


def style_family(style: CitationStyle) -> StyleFamily:
    """Classify a style into its citation family."""
    config = STYLE_CONFIGS[style]
    if config.category == StyleCategory.NUMERIC:
        return Numeric(style=style, bracket=config.bracket)
    if config.category == StyleCategory.NOTE:
        return Note(style=style)
    return AuthorDate(style=style)


def parse_style(value: CitationStyle | str | None) -> CitationStyle:
    """Resolve a style id from an untyped source.

    Unrecognized or missing ids resolve to APA 7 so that a stale stored
    preference never breaks rendering. This is the only place the
    fallback happens.

    Args:
        value: Style enum, id string (e.g. "vancouver"), or None

    Returns:
        The matching CitationStyle, or APA 7
    """
    if isinstance(value, CitationStyle):
        return value

    if value is None:
        return DEFAULT_STYLE

    key = str(value).strip().lower()
    try:
        return CitationStyle(key)
    except ValueError:
        pass

    if key in _STYLE_ALIASES:
        return _STYLE_ALIASES[key]

    log_warning(
        logger,
        "parse_style",
        f"Unknown citation style, using {DEFAULT_STYLE.value}",
        {"style_id": value},
    )
    return DEFAULT_STYLE


def get_citation_style(style_id: CitationStyle | str) -> StyleConfig | None:
    """Look up catalog metadata for a style id.

    Unlike parse_style, this does not fall back: unknown ids return None.
    """
    if isinstance(style_id, CitationStyle):
        return STYLE_CONFIGS[style_id]
    try:
        return STYLE_CONFIGS[CitationStyle(style_id)]
    except ValueError:
        return None


def list_styles() -> list[StyleConfig]:
    """List all catalog styles in catalog order."""
    return list(STYLE_CONFIGS.values())


def get_styles_for_discipline(discipline: str) -> list[StyleConfig]:
    """Shortlist styles commonly used in a discipline.

    A style matches when one of its field tags contains the discipline or
    the discipline contains the tag (case-insensitive), so "medicine"
    matches "medicine" and "clinical-medicine" matches too.
    """
    needle = discipline.strip().lower()
    if not needle:
        return []
    return [
        config
        for config in STYLE_CONFIGS.values()
        if any(needle in f.lower() or f.lower() in needle for f in config.fields)
    ]
