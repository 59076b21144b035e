"""Tests for document-specific field declarations."""

from typing import List, Optional

from beanie import BackLink, Document, Indexed, Link
from pydantic import Field
from pymongo import DESCENDING

from schema_extractor.extractor import extract_relationships
from schema_extractor.models.options import ExtractionFlags
from schema_extractor.walker import extract_model


class Article(Document):
    slug: Indexed(str, unique=True)
    views: Indexed(int, index_type=DESCENDING)
    code: Indexed(str, sparse=True)
    secret: str = Field(default="", exclude=True)
    locked: str = Field(default="draft", frozen=True)


class Writer(Document):
    name: str
    books: List[BackLink["Book"]] = Field(json_schema_extra={"original_field": "writer"})
    latest: Optional[BackLink["Book"]] = Field(default=None, json_schema_extra={"original_field": "writer"})


class Book(Document):
    title: str
    writer: Link[Writer]


Writer.model_rebuild()


def test_indexes():
    """Test index declarations when indexes are included."""
    schema = extract_model(Article, ExtractionFlags(include_indexes=True))
    assert schema["slug"] == {"type": "String", "required": True, "unique": True, "indexed": True}
    assert schema["views"] == {"type": "Number", "required": True, "indexed": DESCENDING}
    assert schema["code"] == {"type": "String", "required": True, "indexed": True, "sparse": True}


def test_indexes_excluded():
    """Test uniqueness survives while index details are dropped."""
    schema = extract_model(Article, ExtractionFlags())
    assert schema["slug"] == {"type": "String", "required": True, "unique": True}
    assert "sparse" not in schema["code"]


def test_select_and_immutable():
    """Test excluded fields are not selected and frozen fields are immutable."""
    schema = extract_model(Article, ExtractionFlags())
    assert schema["secret"] == {"type": "String", "select": False}
    assert schema["locked"] == {"type": "String", "immutable": True}


def test_back_links_as_virtuals():
    """Test back-references are virtual fields naming their target."""
    schema = extract_model(Writer, ExtractionFlags(include_virtuals=True))
    assert schema["latest"] == {"type": "Virtual", "computed": True, "ref": "Book"}
    assert schema["books"]["items"] == {"type": "Virtual", "computed": True, "ref": "Book"}


def test_back_links_skipped_without_virtuals():
    """Test back-references are dropped when virtuals are excluded."""
    schema = extract_model(Writer, ExtractionFlags())
    assert "latest" not in schema
    assert "books" not in schema
    assert schema["name"] == {"type": "String", "required": True}


def test_back_links_are_not_relationships():
    """Test only stored references are listed as relationships."""
    relationships = extract_relationships([Writer, Book])
    assert "Writer" not in relationships
    assert relationships["Book"] == [{"field": "writer", "type": "reference", "target": "Writer", "required": True}]
