"""Generate a Bloom HTML document from a parsed book."""

import logging
import re
from collections.abc import Sequence
from html import escape

from bs4 import BeautifulSoup, Comment

from bloom_gen.core.licenses import get_url_from_license
from bloom_gen.core.markdown_html import BLOCK_TAG
from bloom_gen.core.origami import Orientation, generate_origami_html
from bloom_gen.errors import HtmlGenerationError
from bloom_gen.models.book import (
    Book,
    BookMetadata,
    ImageElement,
    PageContent,
    PageElement,
    TextBlockElement,
)

log = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"^\s*[\w-]+-block goes here !?\s*$")

DOCUMENT_TEMPLATE = """<!doctype html>
<html>
  <head>
    <meta charset="UTF-8" />
    <meta name="Generator" content="bloom-gen" />
    <meta name="BloomFormatVersion" content="2.1" />
    <title>{title}</title>
  </head>
  <body>
{data_div}
{pages}
  </body>
</html>
"""

IMAGE_TEMPLATE = """<div class="bloom-canvas bloom-leadingElement bloom-has-canvas-element">
  <div class="bloom-canvas-element bloom-backgroundImage">
    <div class="bloom-leadingElement bloom-imageContainer">
      <img src="{src}" />
    </div>
  </div>
</div>"""


def fill_placeholders(scaffold: str, fragments: Sequence[str]) -> str:
    """Replace the placeholder comments of origami markup, in order.

    Raises:
        HtmlGenerationError: If the number of placeholders and fragments differ
    """
    soup = BeautifulSoup(scaffold, "html.parser")
    placeholders = [
        comment
        for comment in soup.find_all(string=lambda s: isinstance(s, Comment))
        if PLACEHOLDER_PATTERN.match(comment)
    ]

    if len(placeholders) != len(fragments):
        raise HtmlGenerationError(
            f"Expected {len(placeholders)} fragment(s) for the page, got {len(fragments)}"
        )

    for comment, fragment in zip(placeholders, fragments):
        comment.replace_with(BeautifulSoup(fragment, "html.parser"))

    return str(soup)


def translation_group_html(
    content: dict[str, str], default_languages: list[str] | None = None
) -> str:
    """One bloom-editable per language inside a bloom-translationGroup."""
    editables = []
    for lang, text in content.items():
        body = text if BLOCK_TAG.match(text) else f"<p>{text}</p>"
        editables.append(
            f'  <div class="bloom-editable" lang="{escape(lang)}">\n'
            f"    {body}\n"
            f"  </div>"
        )

    attributes = ""
    if default_languages:
        attributes = f' data-default-languages="{escape(",".join(default_languages))}"'

    return "\n".join(
        [f'<div class="bloom-translationGroup"{attributes}>', *editables, "</div>"]
    )


def image_html(src: str) -> str:
    return IMAGE_TEMPLATE.format(src=escape(src))


class HtmlGenerator:
    """Render a Book as a Bloom HTML document."""

    def __init__(self, orientation: Orientation = Orientation.PORTRAIT):
        self.orientation = orientation

    def generate_document(self, book: Book) -> str:
        """Generate the full HTML document.

        Raises:
            HtmlGenerationError: If there is no title in the primary language
        """
        metadata = book.metadata
        title = metadata.all_titles.get(metadata.l1)
        if not title:
            raise HtmlGenerationError(
                f"Book title does not contain an entry for the primary "
                f"language ({metadata.l1})."
            )

        pages = "\n".join(self.generate_page(page, metadata) for page in book.pages)
        html = DOCUMENT_TEMPLATE.format(
            title=escape(title),
            data_div=self.generate_data_div(book),
            pages=pages,
        )
        log.info(f"Generated Bloom HTML with {len(book.pages)} page(s)")
        return html

    def generate_data_div(self, book: Book) -> str:
        """Book-level fields Bloom reads from ``#bloomDataDiv``."""
        metadata = book.metadata
        fields: list[tuple[str, str, str]] = [("contentLanguage1", "*", metadata.l1)]

        if metadata.l2:
            bilingual_pages = sum(1 for page in book.pages if page.appears_to_be_bilingual)
            if bilingual_pages > len(book.pages) / 2:
                fields.append(("contentLanguage2", "*", metadata.l2))

        for lang, title in metadata.all_titles.items():
            fields.append(("bookTitle", lang, title))

        cover_image = metadata.cover_image or self._first_page_image(book)
        if cover_image:
            fields.append(("coverImage", "*", cover_image))
        if metadata.isbn:
            fields.append(("ISBN", "*", metadata.isbn))
        if metadata.copyright:
            fields.append(("copyright", "*", metadata.copyright))
        if metadata.license:
            fields.append(("licenseUrl", "*", get_url_from_license(metadata.license)))

        lines = [
            f'  <div data-book="{name}" lang="{escape(lang)}">{escape(value)}</div>'
            for name, lang, value in fields
        ]
        return "\n".join(['<div id="bloomDataDiv">', *lines, "</div>"])

    def generate_page(self, page: PageContent, metadata: BookMetadata) -> str:
        """One bloom-page with the page's elements laid out in split panes."""
        kinds = [element.type for element in page.elements]
        scaffold = generate_origami_html(kinds, self.orientation)
        fragments = [
            self._element_html(index, page, metadata)
            for index in range(len(page.elements))
        ]
        content = fill_placeholders(scaffold, fragments)

        return "\n".join(
            [
                '<div class="bloom-page customPage">',
                '  <div class="marginBox">',
                content,
                "  </div>",
                "</div>",
            ]
        )

    def _element_html(self, index: int, page: PageContent, metadata: BookMetadata) -> str:
        element = page.elements[index]
        if isinstance(element, ImageElement):
            return image_html(element.src)
        return translation_group_html(
            element.content, self._default_languages(index, element, page, metadata)
        )

    def _default_languages(
        self,
        index: int,
        element: TextBlockElement,
        page: PageContent,
        metadata: BookMetadata,
    ) -> list[str] | None:
        """Default-language hints Bloom uses to choose what a block shows."""
        # A page holding only l2 text
        if (
            len(page.elements) == 1
            and metadata.l2
            and list(element.content) == [metadata.l2]
        ):
            return ["N1"]

        # Bilingual text-image-text: vernacular first, national language last
        if page.appears_to_be_bilingual and _is_text_image_text(page.elements):
            return {0: ["V"], 2: ["N1"]}.get(index)

        return None

    def _first_page_image(self, book: Book) -> str | None:
        if not book.pages:
            return None

        images = [e for e in book.pages[0].elements if isinstance(e, ImageElement)]
        if not images:
            log.warning("No cover image found on the first page.")
            return None
        if len(images) > 1:
            log.warning("Multiple cover images found on the first page. Using the first one.")
        return images[0].src


def _is_text_image_text(elements: Sequence[PageElement]) -> bool:
    return [e.type for e in elements] == ["text", "image", "text"]
