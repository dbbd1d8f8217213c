"""Write converted books to an output directory."""

from datetime import datetime
from pathlib import Path

from bloom_gen.models.book import Book
from bloom_gen.models.diagnostics import ValidationError
from bloom_gen.models.output import BookManifest, ConversionStats


class OutputWriter:
    """Write book JSON, Bloom HTML and a manifest."""

    BOOK_FILE = "book.json"
    MANIFEST_FILE = "manifest.json"

    def __init__(self, output_dir: Path, source_path: Path):
        """Initialize output writer.

        Args:
            output_dir: Directory to write output files
            source_path: Path to the source Markdown file
        """
        self.output_dir = output_dir
        self.source_path = source_path
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.written: list[Path] = []

    def write_book(self, book: Book) -> Path:
        """Write the book as JSON using the document's camelCase field names."""
        filepath = self.output_dir / self.BOOK_FILE
        filepath.write_text(
            book.model_dump_json(indent=2, by_alias=True), encoding="utf-8"
        )
        self.written.append(filepath)
        return filepath

    def write_html(self, html: str, filename: str | None = None) -> Path:
        """Write a Bloom HTML document, named after the source by default."""
        filepath = self.output_dir / (filename or f"{self.source_path.stem}.htm")
        filepath.write_text(html, encoding="utf-8")
        self.written.append(filepath)
        return filepath

    def write_manifest(
        self,
        book: Book,
        stats: ConversionStats,
        diagnostics: list[ValidationError],
    ) -> Path:
        """Write the manifest listing stats, files and diagnostics."""
        metadata = book.metadata
        manifest = BookManifest(
            book_title=metadata.all_titles.get(metadata.l1, ""),
            source_path=str(self.source_path),
            output_directory=str(self.output_dir),
            created_at=datetime.now(),
            l1=metadata.l1,
            l2=metadata.l2,
            stats=stats,
            files=[p.name for p in self.written],
            diagnostics=diagnostics,
        )

        filepath = self.output_dir / self.MANIFEST_FILE
        filepath.write_text(manifest.model_dump_json(indent=2), encoding="utf-8")
        return filepath
