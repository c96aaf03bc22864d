# ABOUTME: The `biblio info` command for displaying a single book.
# ABOUTME: Shows every stored field for a book by ID.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from biblio.api.models import kind_label, status_label
from biblio.cli.options import api_errors, api_options, load_settings, open_api
from biblio.library import book_initials

console = Console()


@click.command("info")
@click.argument("book_id", type=int)
@api_options
def info(book_id: int, api_url: str | None, token_file: Path | None) -> None:
    """Show details for a book by ID."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        book = api.get_book(book_id)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", book.title)
    table.add_row("Author", book.author or "unknown")
    if book.publisher:
        table.add_row("Publisher", book.publisher)
    if book.year:
        table.add_row("Year", str(book.year))
    table.add_row("Status", status_label(book.status))
    table.add_row("Read", "yes" if book.read else "no")
    table.add_row("Kind", kind_label(book.kind))
    if book.isbn:
        table.add_row("ISBN", book.isbn)
    table.add_row("Cover", book.cover_url or f"[dim]{book_initials(book.title)}[/dim]")
    if book.registered_at:
        table.add_row("Added", book.registered_at)

    console.print(table)
