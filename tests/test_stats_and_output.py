"""Tests for conversion statistics and output files."""

import json

import pytest

from bloom_gen.core.diagnostics import Diagnostics
from bloom_gen.core.output_writer import OutputWriter
from bloom_gen.core.stats import compute_stats
from bloom_gen.models.book import Book, ImageElement, PageContent, TextBlockElement
from bloom_gen.models.layout import Layout


@pytest.fixture
def book(metadata) -> Book:
    return Book(
        metadata=metadata,
        pages=[
            PageContent(
                layout=Layout.IMAGE_TOP_TEXT_BOTTOM,
                elements=[
                    ImageElement(src="cover.png"),
                    TextBlockElement(content={"es": "<p>Hola</p>", "en": "<p>Hello</p>"}),
                ],
                appears_to_be_bilingual=True,
            ),
            PageContent(
                layout=Layout.IMAGE_ONLY,
                elements=[ImageElement(src="end.png")],
            ),
            PageContent(
                layout=Layout.IMAGE_ONLY,
                elements=[ImageElement(src="back.png")],
            ),
        ],
    )


def test_compute_stats(book):
    stats = compute_stats(book)

    assert stats.pages == 3
    assert stats.images == 3
    assert stats.languages == ["en", "es"]
    assert stats.layouts == {"image-top-text-bottom": 1, "image-only": 2}


def test_compute_stats_empty_book(metadata):
    stats = compute_stats(Book(metadata=metadata))
    assert stats.pages == 0
    assert stats.languages == []
    assert stats.layouts == {}


class TestOutputWriter:
    def test_creates_output_directory(self, tmp_path):
        output_dir = tmp_path / "nested" / "out"
        OutputWriter(output_dir, tmp_path / "book.md")
        assert output_dir.is_dir()

    def test_write_book_uses_camel_case_names(self, tmp_path, book):
        writer = OutputWriter(tmp_path / "out", tmp_path / "book.md")
        path = writer.write_book(book)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert path.name == "book.json"
        assert data["metadata"]["allTitles"]["en"] == "Test Book"
        assert data["pages"][0]["appearsToBeBilingualPage"] is True
        assert data["pages"][0]["elements"][0] == {"type": "image", "src": "cover.png"}
        assert list(data["pages"][0]["elements"][1]["content"]) == ["es", "en"]

    def test_write_html_named_after_source(self, tmp_path):
        writer = OutputWriter(tmp_path / "out", tmp_path / "My Book.md")

        assert writer.write_html("<html></html>").name == "My Book.htm"
        assert writer.write_html("<html></html>", "custom.html").name == "custom.html"

    def test_write_manifest(self, tmp_path, book):
        diagnostics = Diagnostics()
        diagnostics.add_warning("Image not found: end.png (page 2)")
        writer = OutputWriter(tmp_path / "out", tmp_path / "book.md")
        writer.write_book(book)
        writer.write_html("<html></html>")

        path = writer.write_manifest(book, compute_stats(book), diagnostics.entries)

        manifest = json.loads(path.read_text(encoding="utf-8"))
        assert manifest["book_title"] == "Test Book"
        assert manifest["l1"] == "en"
        assert manifest["l2"] == "es"
        assert manifest["files"] == ["book.json", "book.htm"]
        assert manifest["stats"]["pages"] == 3
        assert manifest["diagnostics"] == [
            {"type": "warning", "message": "Image not found: end.png (page 2)", "line": None}
        ]
