"""Data models."""

from bloom_gen.models.book import (
    Book,
    BookMetadata,
    ImageElement,
    PageContent,
    PageElement,
    TextBlockElement,
)
from bloom_gen.models.diagnostics import Severity, ValidationError
from bloom_gen.models.layout import ElementFlavor, Layout
from bloom_gen.models.output import BookManifest, ConversionStats

__all__ = [
    # Book models
    "BookMetadata",
    "ImageElement",
    "TextBlockElement",
    "PageElement",
    "PageContent",
    "Book",
    # Layout models
    "Layout",
    "ElementFlavor",
    # Diagnostics
    "Severity",
    "ValidationError",
    # Output models
    "ConversionStats",
    "BookManifest",
]
