# ABOUTME: CLI package for Biblio, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from biblio.cli.commands import (
    auth_cmd,
    book_cmd,
    export_cmd,
    info_cmd,
    lookup_cmd,
    ls_cmd,
    stats_cmd,
)


@click.group()
@click.version_option(package_name="biblio")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Biblio - track the books you own from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


cli.add_command(auth_cmd.login)
cli.add_command(auth_cmd.register)
cli.add_command(auth_cmd.logout)
cli.add_command(auth_cmd.whoami)
cli.add_command(ls_cmd.ls)
cli.add_command(info_cmd.info)
cli.add_command(book_cmd.add)
cli.add_command(book_cmd.edit)
cli.add_command(book_cmd.rm)
cli.add_command(lookup_cmd.lookup)
cli.add_command(stats_cmd.stats)
cli.add_command(export_cmd.export)
