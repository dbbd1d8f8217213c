"""Parse command implementation."""

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from bloom_gen.config import ConversionConfig
from bloom_gen.core.book_parser import BookParser
from bloom_gen.core.output_writer import OutputWriter
from bloom_gen.core.stats import compute_stats
from bloom_gen.models.book import Book, ImageElement
from bloom_gen.models.diagnostics import Severity, ValidationError
from bloom_gen.models.output import ConversionStats


def get_default_output_dir(book_path: Path) -> Path:
    """Get default output directory based on the Markdown filename."""
    stem = book_path.stem
    # Clean up the filename for directory name
    clean_stem = re.sub(r"[^\w\s-]", "", stem).strip()
    clean_stem = re.sub(r"[-\s]+", "_", clean_stem)
    return book_path.parent / f"{clean_stem}_bloom"


def parse_book(
    book_path: Path,
    validate_images: bool,
    quiet: bool,
    console: Console,
) -> tuple[Book, list[ValidationError]]:
    """Parse a book file, showing a spinner unless quiet."""
    parser = BookParser(ConversionConfig(validate_images=validate_images))

    if quiet:
        book = parser.parse_file(book_path)
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task(f"Parsing {book_path.name}...", total=None)
            book = parser.parse_file(book_path)

    return book, parser.get_errors()


def display_diagnostics(diagnostics: list[ValidationError], console: Console) -> None:
    """Print errors in red and warnings in yellow."""
    for entry in diagnostics:
        if entry.type == Severity.ERROR:
            console.print(f"[red]✗ {escape(entry.message)}[/]")
        else:
            console.print(f"[yellow]⚠ {escape(entry.message)}[/]")


def display_book_info(
    book: Book,
    stats: ConversionStats,
    console: Console,
) -> None:
    """Display metadata panel and page table."""
    metadata = book.metadata
    title = metadata.all_titles.get(metadata.l1, "Untitled")

    info_lines = [
        f"[bold]{title}[/]",
        "",
        f"[dim]Primary language:[/] {metadata.languages.get(metadata.l1, metadata.l1)} ({metadata.l1})",
    ]
    if metadata.l2:
        info_lines.append(
            f"[dim]Secondary language:[/] {metadata.languages.get(metadata.l2, metadata.l2)} ({metadata.l2})"
        )
    info_lines.append(f"[dim]Pages:[/] {stats.pages}")
    info_lines.append(f"[dim]Images:[/] {stats.images}")
    info_lines.append(f"[dim]Languages used:[/] {', '.join(stats.languages) or 'None'}")
    if metadata.license:
        info_lines.append(f"[dim]License:[/] {metadata.license}")

    console.print()
    console.print(Panel("\n".join(info_lines), title="Book Information", border_style="green"))

    console.print()
    table = Table(title="Pages", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Layout", style="white")
    table.add_column("Elements", style="green")

    for index, page in enumerate(book.pages):
        elements = ", ".join(
            "image" if isinstance(e, ImageElement) else f"text ({', '.join(e.content)})"
            for e in page.elements
        )
        table.add_row(str(index + 1), page.layout.value, elements)

    console.print(table)
    console.print()


def execute_parse(
    book_path: Path,
    output_dir: Path | None,
    validate_images: bool,
    quiet: bool,
    console: Console,
) -> None:
    """Execute the parse command."""
    book, diagnostics = parse_book(book_path, validate_images, quiet, console)
    stats = compute_stats(book)

    if not quiet:
        display_book_info(book, stats, console)
        display_diagnostics(diagnostics, console)

    final_output_dir = output_dir or get_default_output_dir(book_path)
    writer = OutputWriter(final_output_dir, book_path)
    book_file = writer.write_book(book)
    manifest_path = writer.write_manifest(book, stats, diagnostics)

    if not quiet:
        console.print()
        console.print(
            Panel(
                "\n".join(
                    [
                        f"[green]Parsed {stats.pages} page(s)[/]",
                        "",
                        f"[dim]Output directory:[/] {final_output_dir}",
                        f"[dim]Book:[/] {book_file.name}",
                        f"[dim]Manifest:[/] {manifest_path.name}",
                    ]
                ),
                title="Complete",
                border_style="green",
            )
        )
