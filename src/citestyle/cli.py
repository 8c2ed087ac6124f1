"""CLI interface for citestyle."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from citestyle.config import get_settings
from citestyle.exceptions import ReferenceLoadError
from citestyle.logging import setup_logging
from citestyle.models.reference import CitationFormatOptions, LocatorType
from citestyle.references import (
    Markup,
    format_bibliography,
    format_citation,
    get_styles_for_discipline,
    list_styles,
    parse_style,
)
from citestyle.schemas import load_references

app = typer.Typer(
    name="citestyle",
    help="Format citations and bibliographies in common academic styles",
)
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: from CITESTYLE_LOG_LEVEL)"
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Append log records to a file (default: CITESTYLE_LOG_FILE)"
    ),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    setup_logging(
        level=log_level or settings.log_level,
        log_file=log_file or settings.log_file,
    )


def _load(input_file: str):
    try:
        return load_references(input_file)
    except ReferenceLoadError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def styles(
    discipline: Optional[str] = typer.Option(
        None, "--discipline", "-d", help="Only show styles common in this discipline"
    ),
):
    """
    List the available citation styles.
    """
    configs = get_styles_for_discipline(discipline) if discipline else list_styles()

    if not configs:
        console.print(f"[yellow]No styles found for discipline '{discipline}'[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Citation Styles")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Fields", style="dim")

    for config in configs:
        table.add_row(config.id, config.name, config.category.value, ", ".join(config.fields))

    console.print(table)


@app.command()
def cite(
    input_file: str = typer.Argument(..., help="JSON file with references"),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="Citation style id"),
    position: Optional[int] = typer.Option(
        None,
        "--position",
        "-p",
        help="Citation number for numeric styles (default: order in the file)",
    ),
    locator: Optional[str] = typer.Option(None, "--locator", "-l", help="Page, chapter, etc."),
    locator_type: LocatorType = typer.Option(
        LocatorType.PAGE, "--locator-type", help="Kind of locator"
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Text before the citation"),
    suffix: Optional[str] = typer.Option(None, "--suffix", help="Text after the citation"),
    suppress_author: bool = typer.Option(
        False, "--suppress-author", help="Show the year (or number) only"
    ),
):
    """
    Print the in-text citation for each reference in a file.
    """
    references = _load(input_file)
    style_id = parse_style(style or get_settings().default_style)

    for i, reference in enumerate(references, 1):
        options = CitationFormatOptions(
            suppress_author=suppress_author,
            prefix=prefix,
            suffix=suffix,
            locator=locator,
            locator_type=locator_type,
            position=position if position is not None else i,
        )
        citation = format_citation(reference, style_id, options)
        console.print(citation, markup=False, highlight=False, soft_wrap=True)


@app.command()
def bibliography(
    input_file: str = typer.Argument(..., help="JSON file with references"),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="Citation style id"),
    markdown: Optional[bool] = typer.Option(
        None,
        "--markdown/--plain",
        help="Mark italics and bold with Markdown (default: from CITESTYLE_MARKUP)",
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write the bibliography to a file"
    ),
):
    """
    Format the references in a file as a complete bibliography.

    Author-date styles are sorted by first author and year; numeric
    styles keep the order of the file.
    """
    settings = get_settings()
    references = _load(input_file)
    style_id = parse_style(style or settings.default_style)

    if markdown is None:
        markup = Markup.MARKDOWN if settings.markup.lower() == "markdown" else Markup.PLAIN
    else:
        markup = Markup.MARKDOWN if markdown else Markup.PLAIN

    text = format_bibliography(references, style_id, markup)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        console.print(
            f"[green]Wrote {len(references)} references ({style_id.value}) to {output}[/green]"
        )
    else:
        console.print(text, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
