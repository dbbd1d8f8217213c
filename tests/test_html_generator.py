"""Tests for Bloom HTML generation."""

import pytest
from bs4 import BeautifulSoup, Comment

from bloom_gen.core.html_generator import (
    HtmlGenerator,
    fill_placeholders,
    image_html,
    translation_group_html,
)
from bloom_gen.core.origami import Orientation, generate_origami_html
from bloom_gen.errors import HtmlGenerationError
from bloom_gen.models.book import (
    Book,
    BookMetadata,
    ImageElement,
    PageContent,
    TextBlockElement,
)
from bloom_gen.models.layout import Layout


def text_page(content: dict[str, str], bilingual: bool = False) -> PageContent:
    return PageContent(
        layout=Layout.TEXT_ONLY,
        elements=[TextBlockElement(content=content)],
        appears_to_be_bilingual=bilingual,
    )


def data_fields(html: str) -> dict[tuple[str, str], str]:
    soup = BeautifulSoup(html, "html.parser")
    return {
        (div["data-book"], div["lang"]): div.get_text()
        for div in soup.select("#bloomDataDiv > div[data-book]")
    }


@pytest.fixture
def book(metadata) -> Book:
    return Book(
        metadata=metadata,
        pages=[
            PageContent(
                layout=Layout.IMAGE_TOP_TEXT_BOTTOM,
                elements=[
                    ImageElement(src="cover.png"),
                    TextBlockElement(content={"en": "<p>Hello</p>", "es": "<p>Hola</p>"}),
                ],
                appears_to_be_bilingual=True,
            ),
            text_page({"en": "<p>The end</p>", "es": "<p>Fin</p>"}, bilingual=True),
        ],
    )


class TestFillPlaceholders:
    def test_replaces_in_order(self):
        scaffold = generate_origami_html(["text", "image"])
        html = fill_placeholders(scaffold, ["<p>first</p>", "<span>second</span>"])
        soup = BeautifulSoup(html, "html.parser")

        assert soup.select_one(".position-top p").get_text() == "first"
        assert soup.select_one(".position-bottom span").get_text() == "second"
        assert soup.find_all(string=lambda s: isinstance(s, Comment)) == []

    def test_fills_any_item_kind(self):
        scaffold = generate_origami_html(["Text", "video_clip"])
        html = fill_placeholders(scaffold, ["<p>a</p>", "<p>b</p>"])
        paragraphs = BeautifulSoup(html, "html.parser").find_all("p")

        assert [p.get_text() for p in paragraphs] == ["a", "b"]

    def test_count_mismatch_raises(self):
        scaffold = generate_origami_html(["text", "image"])
        with pytest.raises(HtmlGenerationError, match="Expected 2 fragment"):
            fill_placeholders(scaffold, ["<p>only one</p>"])


class TestFragments:
    def test_translation_group(self):
        html = translation_group_html({"en": "<p>Hello</p>", "es": "Hola"}, ["V"])
        soup = BeautifulSoup(html, "html.parser")

        group = soup.select_one("div.bloom-translationGroup")
        assert group["data-default-languages"] == "V"
        editables = group.select("div.bloom-editable")
        assert [e["lang"] for e in editables] == ["en", "es"]
        assert editables[1].p.get_text() == "Hola"

    def test_translation_group_without_defaults(self):
        html = translation_group_html({"en": "<h1>Title</h1>"})
        assert "data-default-languages" not in html
        assert "<p><h1>" not in html

    def test_default_languages_are_escaped(self):
        html = translation_group_html({"en": "Hi"}, ['"V"'])
        group = BeautifulSoup(html, "html.parser").select_one(".bloom-translationGroup")

        assert "&quot;V&quot;" in html
        assert group["data-default-languages"] == '"V"'

    def test_image_src_is_escaped(self):
        soup = BeautifulSoup(image_html('a "b".png'), "html.parser")
        assert soup.img["src"] == 'a "b".png'
        assert soup.select_one(".bloom-canvas .bloom-imageContainer img") is not None


class TestGenerateDocument:
    def test_document_structure(self, book):
        html = HtmlGenerator().generate_document(book)
        soup = BeautifulSoup(html, "html.parser")

        assert html.startswith("<!doctype html>")
        assert soup.title.get_text() == "Test Book"
        pages = soup.select("div.bloom-page")
        assert len(pages) == 2
        assert pages[0].select_one("img")["src"] == "cover.png"
        assert [e["lang"] for e in pages[1].select(".bloom-editable")] == ["en", "es"]
        assert "goes here" not in html

    def test_pages_use_portrait_dividers_by_default(self, book):
        html = HtmlGenerator().generate_document(book)
        assert "horizontal-percent" in html
        assert "vertical-percent" not in html

    def test_landscape(self, book):
        html = HtmlGenerator(Orientation.LANDSCAPE).generate_document(book)
        assert "vertical-percent" in html

    def test_data_div(self, book):
        fields = data_fields(HtmlGenerator().generate_document(book))

        assert fields[("contentLanguage1", "*")] == "en"
        assert fields[("contentLanguage2", "*")] == "es"
        assert fields[("bookTitle", "en")] == "Test Book"
        assert fields[("bookTitle", "es")] == "Libro de Prueba"
        assert fields[("coverImage", "*")] == "cover.png"

    def test_second_language_needs_mostly_bilingual_pages(self, metadata):
        book = Book(
            metadata=metadata,
            pages=[
                text_page({"en": "<p>A</p>", "es": "<p>B</p>"}, bilingual=True),
                text_page({"en": "<p>C</p>"}),
            ],
        )
        fields = data_fields(HtmlGenerator().generate_document(book))
        assert ("contentLanguage2", "*") not in fields

    def test_optional_metadata_fields(self, book):
        book.metadata.cover_image = "front.jpg"
        book.metadata.isbn = "978-1"
        book.metadata.copyright = "Copyright © 2024"
        book.metadata.license = "cc-by-sa"

        fields = data_fields(HtmlGenerator().generate_document(book))

        assert fields[("coverImage", "*")] == "front.jpg"
        assert fields[("ISBN", "*")] == "978-1"
        assert fields[("copyright", "*")] == "Copyright © 2024"
        assert fields[("licenseUrl", "*")] == "http://creativecommons.org/licenses/by-sa/4.0/"

    def test_missing_primary_title_raises(self):
        metadata = BookMetadata(
            all_titles={"es": "Libro"}, languages={"en": "English"}, l1="en"
        )
        with pytest.raises(HtmlGenerationError, match=r"primary language \(en\)"):
            HtmlGenerator().generate_document(Book(metadata=metadata, pages=[]))


class TestDefaultLanguages:
    def test_second_language_only_page(self, metadata):
        book = Book(metadata=metadata, pages=[text_page({"es": "<p>Hola</p>"})])
        soup = BeautifulSoup(HtmlGenerator().generate_document(book), "html.parser")

        group = soup.select_one(".bloom-page .bloom-translationGroup")
        assert group["data-default-languages"] == "N1"

    def test_bilingual_text_image_text(self, metadata):
        page = PageContent(
            layout=Layout.TEXT_ONLY,
            elements=[
                TextBlockElement(content={"en": "<p>A</p>", "es": "<p>B</p>"}),
                ImageElement(src="a.png"),
                TextBlockElement(content={"en": "<p>C</p>"}),
            ],
            appears_to_be_bilingual=True,
        )
        soup = BeautifulSoup(
            HtmlGenerator().generate_page(page, metadata), "html.parser"
        )

        groups = soup.select(".bloom-translationGroup")
        assert [g.get("data-default-languages") for g in groups] == ["V", "N1"]

    def test_first_language_page_has_no_hint(self, metadata):
        soup = BeautifulSoup(
            HtmlGenerator().generate_page(text_page({"en": "<p>Hi</p>"}), metadata),
            "html.parser",
        )
        assert soup.select_one(".bloom-translationGroup").get("data-default-languages") is None
