# ABOUTME: Book editing commands: `biblio add`, `edit`, and `rm`.
# ABOUTME: Optionally auto-fills the form from an ISBN lookup before saving.

from pathlib import Path

import click
from rich.console import Console

from biblio.api.models import BOOK_KINDS, BOOK_STATUSES, BookForm
from biblio.cli.commands import lookup_cmd
from biblio.cli.options import api_errors, api_options, load_settings, open_api
from biblio.config import Settings
from biblio.library import merge_metadata

console = Console()


def _book_fields(func):
    """Options shared by add and edit; None means "not given"."""
    options = [
        click.option("--title", default=None, help="Title."),
        click.option("--author", default=None, help="Author(s), comma separated."),
        click.option("--publisher", default=None, help="Publisher."),
        click.option("--year", type=int, default=None, help="Publication year."),
        click.option("--status", type=click.Choice(BOOK_STATUSES), default=None),
        click.option("--read/--unread", "read", default=None, help="Mark as read or unread."),
        click.option("--isbn", default=None, help="ISBN."),
        click.option("--cover-url", default=None, help="Cover image URL."),
        click.option("--kind", type=click.Choice(BOOK_KINDS), default=None, help="Media type."),
        click.option(
            "--lookup/--no-lookup",
            "do_lookup",
            default=False,
            help="Fill empty fields from an ISBN lookup.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _apply(form: BookForm, values: dict) -> BookForm:
    for name, value in values.items():
        if value is not None:
            setattr(form, name, value)
    return form


def _fill_from_isbn(form: BookForm, settings: Settings) -> BookForm:
    if not form.isbn:
        console.print("[yellow]--lookup needs an ISBN.[/yellow]")
        return form
    outcome = lookup_cmd.lookup_isbn(form.isbn, settings)
    metadata = lookup_cmd.report_outcome(console, outcome)
    if metadata is None:
        return form
    return merge_metadata(form, metadata)


@click.command()
@_book_fields
@api_options
def add(do_lookup: bool, api_url: str | None, token_file: Path | None, **values) -> None:
    """Add a book to your library."""
    settings = load_settings(api_url, token_file)
    form = _apply(BookForm(), values)
    if do_lookup:
        form = _fill_from_isbn(form, settings)

    if not form.title or not form.author:
        console.print("[red]Title and author are required.[/red]")
        raise SystemExit(1)

    with open_api(settings) as api, api_errors(console):
        book = api.create_book(form)

    label = f" (id {book.id})" if book.id else ""
    console.print(f"[green]Added '{form.title}'{label}.[/green]")


@click.command()
@click.argument("book_id", type=int)
@_book_fields
@api_options
def edit(
    book_id: int, do_lookup: bool, api_url: str | None, token_file: Path | None, **values
) -> None:
    """Change fields of an existing book."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        form = _apply(api.get_book(book_id).to_form(), values)
        if do_lookup:
            form = _fill_from_isbn(form, settings)
        api.update_book(book_id, form)

    console.print(f"[green]Updated book {book_id}.[/green]")


@click.command()
@click.argument("book_id", type=int)
@click.option("-y", "--yes", is_flag=True, default=False, help="Don't ask for confirmation.")
@api_options
def rm(book_id: int, yes: bool, api_url: str | None, token_file: Path | None) -> None:
    """Delete a book from your library."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        book = api.get_book(book_id)
        if not yes and not click.confirm(f"Delete '{book.title}'?", default=False):
            console.print("Cancelled.")
            return
        api.delete_book(book_id)

    console.print(f"[green]Deleted '{book.title}'.[/green]")
