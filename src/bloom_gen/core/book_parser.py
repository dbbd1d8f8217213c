"""Parse an enriched Markdown document into a Book."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from bloom_gen.config import ConversionConfig
from bloom_gen.core.diagnostics import Diagnostics
from bloom_gen.core.frontmatter import (
    LANGUAGE_FIELDS,
    MAPPING_FIELDS,
    REQUIRED_FIELDS,
    parse_metadata,
    split_frontmatter,
)
from bloom_gen.core.page_parser import PageParser, split_pages
from bloom_gen.errors import MetadataParseFailure, ValidationFailure
from bloom_gen.models.book import Book, BookMetadata, PageContent
from bloom_gen.models.diagnostics import ValidationError

log = logging.getLogger(__name__)


class BookParser:
    """Parse enriched Markdown into a Book, collecting diagnostics.

    Diagnostics from the most recent parse stay available on
    ``diagnostics`` until the next parse or ``clear_diagnostics()``.
    Use one instance per concurrent conversion.
    """

    def __init__(self, config: ConversionConfig | None = None):
        self.config = config or ConversionConfig()
        self.diagnostics = Diagnostics()

    def parse_file(self, path: Path) -> Book:
        """Parse a Markdown file, resolving images against its directory.

        Raises:
            FileNotFoundError: If the file does not exist
            MetadataParseFailure: If the frontmatter has no usable metadata
            ValidationFailure: If any error was recorded
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        log.info(f"Parsing {path}")
        return self.parse_markdown(
            path.read_text(encoding="utf-8"), base_path=path.parent
        )

    def parse_markdown(self, markdown: str, base_path: Path | None = None) -> Book:
        """Parse a Markdown document.

        Args:
            markdown: Document text with YAML frontmatter
            base_path: Directory image paths are resolved against;
                defaults to ``config.base_path``

        Returns:
            The parsed book. Warnings are left in ``diagnostics``.

        Raises:
            MetadataParseFailure: If the frontmatter has no usable metadata
            ValidationFailure: If any error was recorded
        """
        self.diagnostics = Diagnostics()

        frontmatter, body = split_frontmatter(markdown, self.diagnostics)
        raw_metadata = parse_metadata(frontmatter, self.diagnostics)
        metadata = self._build_metadata(raw_metadata)
        if metadata is None:
            raise MetadataParseFailure(self.diagnostics)

        pages = self._parse_pages(body, metadata, base_path or self.config.base_path)

        if self.diagnostics.has_errors:
            raise ValidationFailure(self.diagnostics)

        log.info(
            f"Parsed {len(pages)} page(s) with {len(self.diagnostics.warnings)} warning(s)"
        )
        return Book(metadata=metadata, pages=pages)

    def get_errors(self) -> list[ValidationError]:
        """Errors and warnings from the most recent parse."""
        return self.diagnostics.entries

    def clear_diagnostics(self) -> None:
        self.diagnostics.clear()

    def _build_metadata(self, raw: dict[str, Any]) -> BookMetadata | None:
        """Build metadata, or return None if required fields are unusable."""
        if any(not raw.get(name) for name in REQUIRED_FIELDS):
            return None
        if any(not isinstance(raw[name], dict) for name in MAPPING_FIELDS):
            return None
        if any(raw.get(name) and not isinstance(raw[name], str) for name in LANGUAGE_FIELDS):
            return None

        try:
            return BookMetadata.model_validate(raw)
        except PydanticValidationError as e:
            for error in e.errors():
                location = ".".join(str(part) for part in error["loc"])
                self.diagnostics.add_error(f"Invalid metadata field {location}: {error['msg']}")
            return None

    def _parse_pages(
        self,
        body: str,
        metadata: BookMetadata,
        base_path: Path | None,
    ) -> list[PageContent]:
        page_parser = PageParser(
            metadata,
            self.diagnostics,
            base_path=base_path,
            validate_images=self.config.validate_images,
        )

        pages = []
        for page_number, text in split_pages(body):
            page = page_parser.parse_page(text, page_number)
            if page is not None:
                pages.append(page)
        return pages
