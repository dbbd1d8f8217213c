"""Main CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from bloom_gen.commands.parse import display_book_info, display_diagnostics, parse_book
from bloom_gen.core.origami import Orientation, generate_origami_html
from bloom_gen.core.stats import compute_stats
from bloom_gen.errors import EmptyInputError, ValidationFailure
from bloom_gen.logging_config import configure_logging

app = typer.Typer(
    name="bloom-gen",
    help="Convert enriched Markdown books into Bloom HTML.",
    add_completion=False,
)

console = Console()

BookPathArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to the enriched Markdown file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]

NoImageCheckOption = Annotated[
    bool,
    typer.Option(
        "--no-image-check",
        help="Skip checking that referenced images exist next to the Markdown file",
    ),
]

QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Suppress progress output",
    ),
]

LandscapeOption = Annotated[
    bool,
    typer.Option(
        "--landscape",
        help="Lay out panes for landscape pages (vertical dividers)",
    ),
]


def report_failure(error: Exception) -> None:
    """Print an error, listing every diagnostic for validation failures."""
    if isinstance(error, ValidationFailure):
        console.print(f"[red]Error: {error.summary}[/]")
        display_diagnostics(error.diagnostics, console)
    else:
        console.print(f"[red]Error: {escape(str(error))}[/]")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging, including each diagnostic as it is found",
        ),
    ] = False,
) -> None:
    """Convert enriched Markdown books into Bloom HTML."""
    configure_logging(verbose=verbose)


@app.command()
def info(
    book_path: BookPathArgument,
    no_image_check: NoImageCheckOption = False,
) -> None:
    """Display book metadata, page layouts and diagnostics."""
    try:
        book, diagnostics = parse_book(
            book_path, validate_images=not no_image_check, quiet=True, console=console
        )
    except Exception as e:
        report_failure(e)
        raise typer.Exit(1)

    display_book_info(book, compute_stats(book), console)
    display_diagnostics(diagnostics, console)


@app.command()
def parse(
    book_path: BookPathArgument,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Output directory (default: {book_name}_bloom/)",
        ),
    ] = None,
    no_image_check: NoImageCheckOption = False,
    quiet: QuietOption = False,
) -> None:
    """Parse a Markdown book and write book.json and manifest.json."""
    try:
        from bloom_gen.commands.parse import execute_parse

        execute_parse(
            book_path=book_path,
            output_dir=output_dir,
            validate_images=not no_image_check,
            quiet=quiet,
            console=console,
        )
    except Exception as e:
        report_failure(e)
        raise typer.Exit(1)


@app.command()
def html(
    book_path: BookPathArgument,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output HTML file (default: {book_name}_bloom/{book_name}.htm)",
        ),
    ] = None,
    landscape: LandscapeOption = False,
    no_image_check: NoImageCheckOption = False,
    quiet: QuietOption = False,
) -> None:
    """Convert a Markdown book into a Bloom HTML document."""
    try:
        from bloom_gen.commands.html import execute_html

        execute_html(
            book_path=book_path,
            output_file=output,
            orientation=Orientation.LANDSCAPE if landscape else Orientation.PORTRAIT,
            validate_images=not no_image_check,
            quiet=quiet,
            console=console,
        )
    except Exception as e:
        report_failure(e)
        raise typer.Exit(1)


@app.command()
def origami(
    kinds: Annotated[
        list[str],
        typer.Argument(help="Item kinds in page order, e.g. text image text"),
    ],
    landscape: LandscapeOption = False,
) -> None:
    """Print split-pane scaffolding for a sequence of item kinds."""
    orientation = Orientation.LANDSCAPE if landscape else Orientation.PORTRAIT
    try:
        markup = generate_origami_html(kinds, orientation)
    except (EmptyInputError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)

    typer.echo(markup)


if __name__ == "__main__":
    app()
