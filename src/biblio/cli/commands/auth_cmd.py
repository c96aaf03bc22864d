# ABOUTME: Account commands: `biblio login`, `register`, `logout`, and `whoami`.
# ABOUTME: Exchange credentials with the library API and keep the session token on disk.

from pathlib import Path

import click
from rich.console import Console

from biblio.cli.options import api_errors, api_options, load_settings, open_api

console = Console()


@click.command()
@click.option("--email", prompt=True, help="Account email.")
@click.password_option("--password", confirmation_prompt=False, help="Account password.")
@api_options
def login(email: str, password: str, api_url: str | None, token_file: Path | None) -> None:
    """Sign in and store the session token."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        api.login(email, password)
        user = api.current_user()

    name = user.name if user else email
    console.print(f"[green]Signed in as {name}.[/green]")


@click.command()
@click.option("--name", prompt=True, help="Display name.")
@click.option("--email", prompt=True, help="Account email.")
@click.password_option("--password", help="Account password.")
@api_options
def register(
    name: str, email: str, password: str, api_url: str | None, token_file: Path | None
) -> None:
    """Create an account and sign in."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api, api_errors(console):
        api.register(name, email, password)

    console.print(f"[green]Account created. Signed in as {name}.[/green]")


@click.command()
@api_options
def logout(api_url: str | None, token_file: Path | None) -> None:
    """Forget the stored session token."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api:
        api.logout()
    console.print("Signed out.")


@click.command()
@api_options
def whoami(api_url: str | None, token_file: Path | None) -> None:
    """Show the signed-in user."""
    settings = load_settings(api_url, token_file)
    with open_api(settings) as api:
        if not api.is_authenticated:
            console.print("[yellow]Not signed in.[/yellow]")
            raise SystemExit(1)
        user = api.current_user()

    if user is None:
        console.print("[red]Stored session token is invalid. Run `biblio login`.[/red]")
        raise SystemExit(1)
    console.print(f"{user.name} <{user.email}> (id {user.id})")
