"""Tests for bibliography assembly."""

import pytest

from citestyle.models.reference import Author, IssuedDate, Reference, Venue
from citestyle.references import (
    CitationStyle,
    FormattedEntry,
    Markup,
    assemble_bibliography,
    format_bibliography,
    format_bibliography_entry,
    order_references,
)
from citestyle.references.assembler import ENTRY_SEPARATOR


# ============================================================================
# Fixtures
# ============================================================================


def make_reference(family, year, title="A Study"):
    return Reference(
        title=title,
        authors=[Author(family=family, given="Alex")],
        issued=IssuedDate(year=year),
        venue=Venue(name="Journal of X", volume="12", pages="1-10"),
    )


@pytest.fixture
def zhao():
    return make_reference("Zhao", 2020, "Zhao Paper")


@pytest.fixture
def adams():
    return make_reference("Adams", 2021, "Adams Paper")


@pytest.fixture
def citation_order(zhao, adams):
    """References in the order they were cited."""
    return [zhao, adams]


# ============================================================================
# Tests for ordering
# ============================================================================


class TestOrderReferences:
    """Tests for order_references."""

    def test_author_date_sorted_by_family(self, citation_order, adams, zhao):
        """Test author-date styles sort alphabetically."""
        assert order_references(citation_order, "apa-7") == [adams, zhao]

    def test_sort_ignores_case(self, zhao):
        """Test lowercase family names sort with the rest."""
        lower = make_reference("de Vries", 2020)
        assert order_references([zhao, lower], "harvard") == [lower, zhao]

    def test_year_breaks_ties(self):
        """Test same-author works sort by year."""
        later = make_reference("Smith", 2022, "Later")
        earlier = make_reference("Smith", 2019, "Earlier")
        assert order_references([later, earlier], "mla-9") == [earlier, later]

    def test_ties_keep_input_order(self):
        """Test same author and year keep input order."""
        first = make_reference("Smith", 2020, "First")
        second = make_reference("Smith", 2020, "Second")
        assert order_references([first, second], "apa-7") == [first, second]
        assert order_references([second, first], "apa-7") == [second, first]

    @pytest.mark.parametrize("style", ["vancouver", "ieee", "ama", "nature"])
    def test_numeric_keeps_citation_order(self, citation_order, style):
        """Test numeric styles never reorder."""
        assert order_references(citation_order, style) == citation_order

    def test_no_authors_sort_first(self, adams):
        """Test references without authors sort before named ones."""
        anonymous = Reference(title="Anonymous", issued=IssuedDate(year=2020))
        assert order_references([adams, anonymous], "apa-7") == [anonymous, adams]

    def test_input_not_modified(self, citation_order, zhao, adams):
        """Test ordering returns a new list."""
        order_references(citation_order, "apa-7")
        assert citation_order == [zhao, adams]


# ============================================================================
# Tests for assembly
# ============================================================================


class TestAssembleBibliography:
    """Tests for assemble_bibliography."""

    def test_entries_numbered(self, citation_order, zhao, adams):
        """Test numbering follows list order."""
        entries = assemble_bibliography(citation_order, "vancouver")
        assert all(isinstance(e, FormattedEntry) for e in entries)
        assert [e.number for e in entries] == [1, 2]
        assert [e.reference for e in entries] == [zhao, adams]
        assert entries[0].text.startswith("1. Zhao A.")
        assert entries[1].text.startswith("2. Adams A.")

    def test_entry_text_matches_single_entry(self, citation_order, adams):
        """Test assembled text equals the single-entry formatter."""
        entries = assemble_bibliography(citation_order, "apa-7")
        assert entries[0].text == format_bibliography_entry(adams, "apa-7")

    def test_markup_passed_through(self, citation_order):
        """Test markup reaches every entry."""
        entries = assemble_bibliography(citation_order, "nature", Markup.MARKDOWN)
        assert all("**12**" in e.text for e in entries)


class TestFormatBibliography:
    """Tests for format_bibliography."""

    def test_alphabetical(self, citation_order):
        """Test Adams precedes Zhao for author-date styles."""
        text = format_bibliography(citation_order, "apa-7")
        assert text.index("Adams") < text.index("Zhao")

    def test_numeric_order(self, citation_order):
        """Test numeric styles keep citation order."""
        text = format_bibliography(citation_order, "vancouver")
        assert text.index("Zhao") < text.index("Adams")
        assert text.startswith("1. Zhao")

    def test_separator(self, citation_order):
        """Test entries are separated by a blank line."""
        text = format_bibliography(citation_order, "apa-7")
        assert ENTRY_SEPARATOR == "\n\n"
        assert len(text.split(ENTRY_SEPARATOR)) == 2
        assert not text.endswith("\n")

    def test_empty(self):
        """Test no references give an empty string."""
        assert format_bibliography([], "apa-7") == ""
        assert format_bibliography([], "ieee") == ""

    def test_no_disambiguation_suffixes(self):
        """Test same-author same-year works are not lettered."""
        first = make_reference("Smith", 2020, "First")
        second = make_reference("Smith", 2020, "Second")
        text = format_bibliography([first, second], "apa-7")
        assert "2020a" not in text
        assert "2020b" not in text
        assert text.index("First") < text.index("Second")

    @pytest.mark.parametrize("style", list(CitationStyle))
    def test_idempotent(self, citation_order, style):
        """Test repeated calls give identical output."""
        assert format_bibliography(citation_order, style) == format_bibliography(
            citation_order, style
        )

    def test_unknown_style_matches_apa(self, citation_order):
        """Test unknown style ids render byte-identical APA 7 output."""
        assert format_bibliography(citation_order, "unknown-style") == format_bibliography(
            citation_order, "apa-7"
        )
