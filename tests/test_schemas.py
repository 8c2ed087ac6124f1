"""Tests for reading references from JSON."""

import json

import pytest
from pydantic import ValidationError

from citestyle.exceptions import CitestyleError, ReferenceLoadError
from citestyle.models.reference import (
    CitationFormatOptions,
    LocatorType,
    Reference,
    ReferenceType,
    ThesisKind,
)
from citestyle.references import format_bibliography_entry
from citestyle.schemas import (
    CitationOptionsSchema,
    DateSchema,
    ReferenceSchema,
    load_references,
    parse_references,
)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def article_data():
    """Reference record as stored by the reference library."""
    return {
        "id": "ref-1",
        "type": "article-journal",
        "title": "A Study",
        "authors": [{"family": "Smith", "given": "John"}],
        "issued": {"year": 2023},
        "venue": {"name": "Journal of X", "volume": 12, "pages": "1-10"},
        "identifiers": {"doi": "10.1234/x"},
        "tags": ["ignored"],
    }


@pytest.fixture
def references_file(tmp_path, article_data):
    """JSON file with two references."""
    second = {
        "type": "thesis",
        "title": "My Thesis",
        "authors": [{"family": "Adams"}],
        "thesis": {"type": "phd", "institution": "MIT"},
    }
    path = tmp_path / "refs.json"
    path.write_text(json.dumps([article_data, second]), encoding="utf-8")
    return path


# ============================================================================
# Tests for schemas
# ============================================================================


class TestReferenceSchema:
    """Tests for ReferenceSchema."""

    def test_to_reference(self, article_data):
        """Test conversion to the immutable model."""
        reference = ReferenceSchema.model_validate(article_data).to_reference()
        assert isinstance(reference, Reference)
        assert reference.id == "ref-1"
        assert reference.type is ReferenceType.ARTICLE_JOURNAL
        assert reference.authors[0].family == "Smith"
        assert reference.identifiers.doi == "10.1234/x"

    def test_numeric_volume_coerced(self, article_data):
        """Test numbers in string fields become strings."""
        reference = ReferenceSchema.model_validate(article_data).to_reference()
        assert reference.venue.volume == "12"
        assert format_bibliography_entry(reference, "apa-7").startswith(
            "Smith, John. (2023). A Study. Journal of X, 12, 1-10."
        )

    def test_unknown_type_becomes_other(self):
        """Test unrecognized types map to other."""
        reference = ReferenceSchema.model_validate({"type": "hologram"}).to_reference()
        assert reference.type is ReferenceType.OTHER

    def test_defaults(self):
        """Test an empty record is valid."""
        reference = ReferenceSchema.model_validate({}).to_reference()
        assert reference.title == ""
        assert reference.authors == ()
        assert reference.issued.year is None
        assert reference.venue is None

    def test_thesis_kind_from_type_key(self):
        """Test the thesis degree arrives under "type"."""
        data = {"type": "thesis", "thesis": {"type": "masters", "institution": "Oxford"}}
        reference = ReferenceSchema.model_validate(data).to_reference()
        assert reference.thesis.kind is ThesisKind.MASTERS

    def test_invalid_month_rejected(self):
        """Test months outside 1-12 fail validation."""
        with pytest.raises(ValidationError):
            DateSchema.model_validate({"year": 2020, "month": 13})


class TestCitationOptionsSchema:
    """Tests for CitationOptionsSchema."""

    def test_camel_case_aliases(self):
        """Test the editor's camelCase keys."""
        options = CitationOptionsSchema.model_validate(
            {"suppressAuthor": True, "locator": 42, "locatorType": "chapter", "position": 3}
        ).to_options()
        assert options == CitationFormatOptions(
            suppress_author=True,
            locator="42",
            locator_type=LocatorType.CHAPTER,
            position=3,
        )

    def test_snake_case_accepted(self):
        """Test field names work as well as aliases."""
        options = CitationOptionsSchema.model_validate({"suppress_author": True}).to_options()
        assert options.suppress_author is True

    def test_position_must_be_positive(self):
        """Test positions start at 1."""
        with pytest.raises(ValidationError):
            CitationOptionsSchema.model_validate({"position": 0})


# ============================================================================
# Tests for loading
# ============================================================================


class TestParseReferences:
    """Tests for parse_references."""

    def test_list(self, article_data):
        """Test a bare list."""
        assert len(parse_references([article_data, article_data])) == 2

    def test_wrapped_object(self, article_data):
        """Test an object with a references list."""
        references = parse_references({"references": [article_data]})
        assert references[0].title == "A Study"

    def test_not_a_list(self):
        """Test non-list data is rejected."""
        with pytest.raises(ReferenceLoadError, match="expected a list"):
            parse_references({"title": "A Study"})

    def test_invalid_entry(self):
        """Test the failing entry index is reported."""
        with pytest.raises(ReferenceLoadError, match="entry 1 is invalid"):
            parse_references([{"title": "ok"}, {"authors": [{"given": "No Family"}]}])


class TestLoadReferences:
    """Tests for load_references."""

    def test_load_file(self, references_file):
        """Test references load in file order."""
        references = load_references(references_file)
        assert [r.title for r in references] == ["A Study", "My Thesis"]
        assert references[1].thesis.kind is ThesisKind.PHD

    def test_accepts_str_path(self, references_file):
        """Test string paths."""
        assert len(load_references(str(references_file))) == 2

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ReferenceLoadError."""
        with pytest.raises(ReferenceLoadError) as exc_info:
            load_references(tmp_path / "missing.json")
        assert "missing.json" in str(exc_info.value)
        assert isinstance(exc_info.value, CitestyleError)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ReferenceLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ReferenceLoadError, match="invalid JSON"):
            load_references(path)

    def test_not_utf8(self, tmp_path):
        """Test undecodable bytes raise ReferenceLoadError."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"title": "\xff\xfe bad"}]')
        with pytest.raises(ReferenceLoadError, match="not UTF-8"):
            load_references(path)
