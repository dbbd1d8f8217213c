"""Errors raised by the conversion pipeline."""

from collections.abc import Iterable

from bloom_gen.models.diagnostics import ValidationError


class BloomGenError(Exception):
    """Base class for bloom-gen errors."""


class ValidationFailure(BloomGenError):
    """
    Raised when a parsed document has error-level diagnostics.

    Attributes:
        diagnostics: Every error and warning recorded during the parse,
            so callers can report all problems at once
    """

    summary = "Validation failed"

    def __init__(self, diagnostics: Iterable[ValidationError]) -> None:
        self.diagnostics = list(diagnostics)
        details = "\n".join(d.format() for d in self.diagnostics)
        message = f"{self.summary}:\n{details}" if details else self.summary
        super().__init__(message)

    @property
    def errors(self) -> list[ValidationError]:
        return [d for d in self.diagnostics if d.type == "error"]


class MetadataParseFailure(ValidationFailure):
    """
    Raised when the frontmatter does not yield usable metadata.

    Pages cannot be interpreted without ``allTitles``, ``languages`` and
    ``l1``, so parsing stops before the page scan.
    """

    summary = "Failed to parse metadata from frontmatter"


class EmptyInputError(BloomGenError, ValueError):
    """Raised when the split-pane generator is given no items."""

    def __init__(self) -> None:
        super().__init__("Input sequence cannot be empty.")


class HtmlGenerationError(BloomGenError):
    """Raised when a book cannot be rendered to Bloom HTML."""
