"""HTML command implementation."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from bloom_gen.commands.parse import display_diagnostics, get_default_output_dir, parse_book
from bloom_gen.core.html_generator import HtmlGenerator
from bloom_gen.core.origami import Orientation
from bloom_gen.core.output_writer import OutputWriter
from bloom_gen.core.stats import compute_stats


def execute_html(
    book_path: Path,
    output_file: Path | None,
    orientation: Orientation,
    validate_images: bool,
    quiet: bool,
    console: Console,
) -> Path:
    """Execute the html command. Returns the written HTML path."""
    book, diagnostics = parse_book(book_path, validate_images, quiet, console)

    html = HtmlGenerator(orientation).generate_document(book)

    if output_file is not None:
        writer = OutputWriter(output_file.parent, book_path)
        html_path = writer.write_html(html, output_file.name)
    else:
        writer = OutputWriter(get_default_output_dir(book_path), book_path)
        html_path = writer.write_html(html)

    if not quiet:
        display_diagnostics(diagnostics, console)
        stats = compute_stats(book)
        layouts = ", ".join(f"{name}: {count}" for name, count in sorted(stats.layouts.items()))
        console.print()
        console.print(
            Panel(
                "\n".join(
                    [
                        f"[green]Generated {stats.pages} Bloom page(s)[/]",
                        "",
                        f"[dim]Layouts:[/] {layouts or 'None'}",
                        f"[dim]Output:[/] {html_path}",
                    ]
                ),
                title="Complete",
                border_style="green",
            )
        )

    return html_path
