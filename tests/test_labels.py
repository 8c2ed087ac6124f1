"""Tests for short labels and cite keys."""

import pytest

from citestyle.models.reference import Author, IssuedDate, Reference
from citestyle.references import generate_cite_key, get_short_citation


@pytest.fixture
def reference():
    return Reference(
        title="The Effects of Sleep on Memory",
        authors=[Author(family="O'Brien", given="Kate"), Author(family="Lee", given="Min")],
        issued=IssuedDate(year=2024),
    )


class TestShortCitation:
    """Tests for get_short_citation."""

    def test_no_authors(self):
        """Test the Unknown placeholder."""
        assert get_short_citation(Reference(issued=IssuedDate(year=2024))) == "Unknown, 2024"

    def test_one_author(self):
        """Test a single family name."""
        reference = Reference(authors=[Author(family="Smith")], issued=IssuedDate(year=2020))
        assert get_short_citation(reference) == "Smith, 2020"

    def test_two_authors(self, reference):
        """Test two authors always use an ampersand."""
        assert get_short_citation(reference) == "O'Brien & Lee, 2024"

    def test_three_authors(self):
        """Test three or more authors collapse to et al."""
        reference = Reference(
            authors=[Author(family="A"), Author(family="B"), Author(family="C")],
            issued=IssuedDate(year=2021),
        )
        assert get_short_citation(reference) == "A et al., 2021"

    def test_no_year(self):
        """Test n.d. for undated references."""
        assert get_short_citation(Reference(authors=[Author(family="Smith")])) == "Smith, n.d."


class TestCiteKey:
    """Tests for generate_cite_key."""

    def test_default_pattern(self, reference):
        """Test the author-year default, letters only."""
        assert generate_cite_key(reference) == "obrien2024"

    def test_title_tokens(self, reference):
        """Test title and capitalized tokens."""
        assert generate_cite_key(reference, "[Auth][year][Title]") == "Obrien2024The"
        assert generate_cite_key(reference, "[auth]_[title]") == "obrien_the"

    def test_missing_fields(self):
        """Test placeholders for missing author and year."""
        assert generate_cite_key(Reference()) == "unknownnodate"
