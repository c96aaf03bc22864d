# ABOUTME: The `biblio ls` command for listing books in the library.
# ABOUTME: Fetches all books and applies search, status, and kind filters client-side.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from biblio.api.models import BOOK_KINDS, kind_label, status_label
from biblio.cli.options import api_errors, api_options, load_settings, open_api
from biblio.library.filters import STATUS_FILTERS, filter_books

console = Console()


@click.command("ls")
@click.option("-s", "--search", default=None, help="Match title or author.")
@click.option(
    "--status",
    "status_filter",
    type=click.Choice(list(STATUS_FILTERS)),
    default="all",
    show_default=True,
    help="Shelf status, or 'leido' for read books.",
)
@click.option(
    "--kind",
    type=click.Choice(["all", *BOOK_KINDS]),
    default="all",
    show_default=True,
    help="Media type.",
)
@api_options
def ls(
    search: str | None,
    status_filter: str,
    kind: str,
    api_url: str | None,
    token_file: Path | None,
) -> None:
    """List the books in your library."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        books = api.list_books()

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    records = filter_books(books, search=search, status_filter=status_filter, kind=kind)
    if not records:
        console.print("[yellow]No books match those filters.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", width=5)
    table.add_column("Status")
    table.add_column("Read", width=4)
    table.add_column("Kind")

    for book in records:
        table.add_row(
            str(book.id),
            book.title,
            book.author or "[dim]unknown[/dim]",
            str(book.year) if book.year else "",
            status_label(book.status),
            "yes" if book.read else "no",
            kind_label(book.kind),
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} of {len(books)} book(s)[/dim]")
