"""Data models for conversion output."""

from datetime import datetime

from pydantic import BaseModel, Field

from bloom_gen.models.diagnostics import ValidationError


class ConversionStats(BaseModel):
    """Summary numbers for a converted book."""

    pages: int
    languages: list[str] = Field(default_factory=list)
    images: int = 0
    layouts: dict[str, int] = Field(default_factory=dict)


class BookManifest(BaseModel):
    """Manifest written next to the converted book."""

    book_title: str
    source_path: str
    output_directory: str
    created_at: datetime = Field(default_factory=datetime.now)
    l1: str
    l2: str | None = None
    stats: ConversionStats
    files: list[str] = Field(default_factory=list)
    diagnostics: list[ValidationError] = Field(default_factory=list)
