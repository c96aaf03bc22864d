# ABOUTME: Shared Click options and session helpers for Biblio CLI commands.
# ABOUTME: Resolves settings, opens the API client, and turns ApiError into a clean exit.

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from biblio.api import ApiError, LibraryApiClient
from biblio.api.auth import FileTokenStore
from biblio.config import DEFAULT_API_URL, DEFAULT_TOKEN_FILE, Settings

api_url_option = click.option(
    "--api-url",
    "api_url",
    default=None,
    help=f"Library API base URL (default: $BIBLIO_API_URL or {DEFAULT_API_URL})",
)

token_file_option = click.option(
    "--token-file",
    "token_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Where the session token is kept (default: {DEFAULT_TOKEN_FILE})",
)


def api_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply --api-url and --token-file to a command."""
    return api_url_option(token_file_option(func))


def load_settings(api_url: str | None = None, token_file: Path | None = None) -> Settings:
    """Environment settings with any command-line overrides applied."""
    settings = Settings.from_env()
    overrides: dict[str, Any] = {}
    if api_url:
        overrides["api_url"] = api_url.rstrip("/")
    if token_file:
        overrides["token_file"] = token_file
    return replace(settings, **overrides)


def open_api(settings: Settings) -> LibraryApiClient:
    return LibraryApiClient(FileTokenStore(settings.token_file), base_url=settings.api_url)


@contextmanager
def api_errors(console: Console) -> Iterator[None]:
    """Report ApiError as a red message and exit 1 instead of a traceback."""
    try:
        yield
    except ApiError as exc:
        console.print(f"[red]Error: {exc.message}[/red]")
        if exc.is_unauthorized:
            console.print("[dim]Your session may have expired. Run `biblio login`.[/dim]")
        raise SystemExit(1) from exc
