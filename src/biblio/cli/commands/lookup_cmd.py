# ABOUTME: The `biblio lookup` command for ISBN metadata lookup.
# ABOUTME: Also provides the lookup-and-render helper the add/edit commands use.

import asyncio

import click
from rich.console import Console
from rich.table import Table

from biblio.config import Settings
from biblio.metadata import Found, LookupFailed, LookupOutcome, NotFound, resolve_metadata
from biblio.metadata.types import BookMetadata

console = Console()

EXIT_NOT_FOUND = 1
EXIT_LOOKUP_FAILED = 2


def lookup_isbn(raw: str, settings: Settings) -> LookupOutcome:
    """Run the async resolver to completion for one identifier."""
    return asyncio.run(resolve_metadata(raw, settings))


def render_metadata(out: Console, metadata: BookMetadata, source: str) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")
    table.add_row("Title", metadata.title or "[dim]-[/dim]")
    table.add_row("Author", metadata.author or "[dim]-[/dim]")
    table.add_row("Publisher", metadata.publisher or "[dim]-[/dim]")
    table.add_row("Year", str(metadata.year) if metadata.year else "[dim]-[/dim]")
    table.add_row("Cover", metadata.cover_image_url or "[dim]-[/dim]")
    out.print(table)
    out.print(f"[dim]Source: {source}[/dim]")


def report_outcome(out: Console, outcome: LookupOutcome) -> BookMetadata | None:
    """Print a lookup outcome and return the metadata if one was found."""
    if isinstance(outcome, Found):
        render_metadata(out, outcome.metadata, outcome.source)
        return outcome.metadata
    if isinstance(outcome, LookupFailed):
        out.print(f"[red]Lookup failed: {outcome.message}[/red]")
        out.print("[dim]Something went wrong. Check your internet connection.[/dim]")
        return None

    out.print("[yellow]No book found for that ISBN.[/yellow]")
    if isinstance(outcome, NotFound) and outcome.skipped_sources:
        out.print(f"[dim]Skipped (not configured): {', '.join(outcome.skipped_sources)}[/dim]")
    return None


@click.command()
@click.argument("isbn")
@click.option(
    "--google-books-key",
    envvar="GOOGLE_BOOKS_API_KEY",
    default=None,
    help="Google Books API key (default: $GOOGLE_BOOKS_API_KEY).",
)
@click.option("--timeout", type=float, default=None, help="Per-request timeout in seconds.")
def lookup(isbn: str, google_books_key: str | None, timeout: float | None) -> None:
    """Look up book metadata by ISBN."""
    settings = Settings.from_env()
    if google_books_key:
        settings.google_books_api_key = google_books_key
    if timeout:
        settings.lookup_timeout = timeout

    outcome = lookup_isbn(isbn, settings)
    report_outcome(console, outcome)

    if isinstance(outcome, LookupFailed):
        raise SystemExit(EXIT_LOOKUP_FAILED)
    if not isinstance(outcome, Found):
        raise SystemExit(EXIT_NOT_FOUND)
