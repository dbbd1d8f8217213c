"""Line-scan parser for the pages of an enriched Markdown book.

Each page is scanned top to bottom. A line is one of:

- an image reference ``![alt](path)``, which closes any open text block
  and adds an image element;
- a language marker ``<!-- lang=xx -->``, which switches the language
  receiving text, opening a text block if needed;
- anything else, which is text for the active language.

A language marker for a language that already holds text in the open
block starts a new text block.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from bloom_gen.core.diagnostics import Diagnostics
from bloom_gen.core.layout import determine_page_layout
from bloom_gen.core.markdown_html import markdown_to_html
from bloom_gen.models.book import (
    BookMetadata,
    ImageElement,
    PageContent,
    PageElement,
    TextBlockElement,
)
from bloom_gen.models.layout import ElementFlavor

log = logging.getLogger(__name__)

PAGE_BREAK = "<!-- page-break -->"

IMAGE_PATTERN = re.compile(r"!\[.*?\]\(([^)]+)\)")

# <!-- lang=en -->, also tolerating <!-- text lang="en" -->
LANG_MARKER_PATTERN = re.compile(
    r"<!--\s*(?:text\s+)?lang=[\"']?([a-z]{2,3})[\"']?\s*-->"
)


def split_pages(body: str) -> list[tuple[int, str]]:
    """Split the body on page-break markers.

    Returns:
        ``(page_number, text)`` for every non-blank page, numbered from 1
        in source order. Blank pages are dropped.
    """
    segments = (segment.strip() for segment in body.split(PAGE_BREAK))
    return list(enumerate((s for s in segments if s), start=1))


# =============================================================================
# Scanner state
# =============================================================================


@dataclass
class Idle:
    """No text block is open."""


@dataclass
class OpenBlock:
    """A text block is open and ``lang`` is receiving text."""

    block: TextBlockElement
    lang: str
    lines: list[str] = field(default_factory=list)

    def commit(self) -> None:
        """Store buffered text for the active language in the block."""
        text = "".join(self.lines).strip()
        if text:
            self.block.content[self.lang] = markdown_to_html(text)
        self.lines = []


ScanState = Idle | OpenBlock


def _split_markers(line: str) -> list[str]:
    """Split language markers out of a line, keeping the text around them."""
    pieces: list[str] = []
    last = 0
    for match in LANG_MARKER_PATTERN.finditer(line):
        before = line[last:match.start()].strip()
        if before:
            pieces.append(before)
        pieces.append(match.group(0))
        last = match.end()

    if last == 0:
        return [line]

    after = line[last:].strip()
    if after:
        pieces.append(after)
    return pieces


# =============================================================================
# Page Parser
# =============================================================================


class PageParser:
    """Turn the text of one page into image and text-block elements."""

    def __init__(
        self,
        metadata: BookMetadata,
        diagnostics: Diagnostics,
        base_path: Path | None = None,
        validate_images: bool = True,
    ):
        """Initialize page parser.

        Args:
            metadata: Book metadata; declares the valid languages and l1
            diagnostics: Collector that receives warnings and errors
            base_path: Directory image paths are resolved against
            validate_images: Warn about images missing under ``base_path``
        """
        self.metadata = metadata
        self.diagnostics = diagnostics
        self.base_path = base_path
        self.validate_images = validate_images

    def parse_page(self, text: str, page_number: int) -> PageContent | None:
        """Parse one page.

        Returns:
            The page, or None when it has no elements
        """
        elements: list[PageElement] = []
        state: ScanState = Idle()

        for raw_line in text.split("\n"):
            line = raw_line.strip()

            image_match = IMAGE_PATTERN.search(line)
            if image_match:
                state = self._close_block(state, elements)
                src = image_match.group(1)
                elements.append(ImageElement(src=src))
                self._check_image(src, page_number)
                continue

            for piece in _split_markers(line):
                state = self._scan(piece, state, elements, page_number)

        self._close_block(state, elements)

        if not elements:
            log.debug(f"Page {page_number}: no content, dropped")
            return None

        signature = [self._flavor(element, page_number) for element in elements]
        layout = determine_page_layout(signature)
        log.debug(f"Page {page_number}: {len(elements)} element(s), layout {layout.value}")

        return PageContent(
            layout=layout,
            elements=elements,
            appears_to_be_bilingual=ElementFlavor.MULTIPLE_LANGUAGES in signature,
        )

    def _scan(
        self,
        piece: str,
        state: ScanState,
        elements: list[PageElement],
        page_number: int,
    ) -> ScanState:
        marker = LANG_MARKER_PATTERN.fullmatch(piece)
        if marker:
            return self._switch_language(marker.group(1), state, elements, page_number)

        if isinstance(state, OpenBlock):
            state.lines.append(piece + "\n")
        elif piece:
            self.diagnostics.add_warning(
                f'Found text outside of a language block (page {page_number}): "{piece}"'
            )
        return state

    def _switch_language(
        self,
        lang: str,
        state: ScanState,
        elements: list[PageElement],
        page_number: int,
    ) -> OpenBlock:
        if isinstance(state, OpenBlock):
            state.commit()
            block = state.block
            # Same language again: this is the start of the next block
            if block.content.get(lang):
                elements.append(block)
                block = TextBlockElement()
        else:
            block = TextBlockElement()

        block.content[lang] = ""

        if lang not in self.metadata.languages:
            self.diagnostics.add_warning(
                f'Encountered lang="{lang}" but this language is not defined '
                f"in the metadata languages (page {page_number})."
            )

        return OpenBlock(block=block, lang=lang)

    def _close_block(self, state: ScanState, elements: list[PageElement]) -> Idle:
        if isinstance(state, OpenBlock):
            state.commit()
            elements.append(state.block)
        return Idle()

    def _check_image(self, src: str, page_number: int) -> None:
        if not self.validate_images or self.base_path is None:
            return
        try:
            found = (self.base_path / src).exists()
        except OSError as e:
            log.debug(f"Cannot check image {src}: {e}")
            found = False
        if not found:
            self.diagnostics.add_warning(f"Image not found: {src} (page {page_number})")

    def _flavor(self, element: PageElement, page_number: int) -> ElementFlavor:
        if isinstance(element, ImageElement):
            return ElementFlavor.IMAGE

        languages = list(element.content)
        if len(languages) == 1:
            if languages[0] == self.metadata.l1:
                return ElementFlavor.L1_ONLY
            return ElementFlavor.L2_ONLY
        if len(languages) > 1:
            return ElementFlavor.MULTIPLE_LANGUAGES

        self.diagnostics.add_error(
            f"Text block without languages found on page {page_number}"
        )
        return ElementFlavor.L1_ONLY
