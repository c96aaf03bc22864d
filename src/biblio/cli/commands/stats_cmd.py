# ABOUTME: The `biblio stats` command for library statistics.
# ABOUTME: Computes counts from the book list, or asks the API with --server.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from biblio.cli.options import api_errors, api_options, load_settings, open_api
from biblio.library import compute_stats

console = Console()


@click.command()
@click.option(
    "--server",
    is_flag=True,
    default=False,
    help="Use the API's statistics endpoint instead of counting locally.",
)
@api_options
def stats(server: bool, api_url: str | None, token_file: Path | None) -> None:
    """Show how many books you have, lent, and read."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        summary = api.get_stats() if server else compute_stats(api.list_books())

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Stat", style="bold", width=12)
    table.add_column("Count", justify="right")
    table.add_row("Total", str(summary.total))
    table.add_row("On shelf", str(summary.on_shelf))
    table.add_row("Lent", str(summary.lent))
    table.add_row("Read", str(summary.read))
    table.add_row("Unread", str(summary.unread))
    console.print(table)
