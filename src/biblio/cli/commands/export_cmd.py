# ABOUTME: The `biblio export` command for writing the library to CSV.
# ABOUTME: Writes to biblioteca_<date>.csv by default, or to stdout with "-".

import sys
from pathlib import Path

import click
from rich.console import Console

from biblio.cli.options import api_errors, api_options, load_settings, open_api
from biblio.library import default_export_name, export_csv

console = Console(stderr=True)


@click.command()
@click.argument("path", type=click.Path(dir_okay=False, allow_dash=True), required=False)
@api_options
def export(path: str | None, api_url: str | None, token_file: Path | None) -> None:
    """Export every book to a CSV file (use - for stdout)."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        books = api.list_books()

    if path == "-":
        export_csv(books, sys.stdout)
        return

    target = Path(path or default_export_name())
    try:
        with target.open("w", encoding="utf-8", newline="") as stream:
            count = export_csv(books, stream)
    except OSError as exc:
        console.print(f"[red]Error writing {target}: {exc}[/red]")
        raise SystemExit(1) from exc

    console.print(f"[green]Exported {count} book(s) to {target}.[/green]")
