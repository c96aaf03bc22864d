# ABOUTME: Shared pytest fixtures for Biblio tests.
# ABOUTME: Provides a clean environment, settings, and a fake API backend for CLI commands.

from collections.abc import Callable
from functools import partial
from pathlib import Path

import httpx
import pytest

from biblio.api import LibraryApiClient
from biblio.config import Settings
from tests.fixtures.api_responses import TOKEN
from tests.fixtures.fake_backend import RecordingBackend

API_URL = "https://library.test/api"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep real credentials and .env files out of tests."""
    for name in (
        "BIBLIO_API_URL",
        "GOOGLE_BOOKS_API_KEY",
        "BIBLIO_TOKEN_FILE",
        "BIBLIO_LOOKUP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "token"


@pytest.fixture
def settings(token_file: Path) -> Settings:
    """Settings pointing at a temp token file, with Google Books enabled."""
    return Settings(
        api_url=API_URL,
        google_books_api_key="test-key",
        token_file=token_file,
        lookup_timeout=5.0,
    )


@pytest.fixture
def signed_in(token_file: Path) -> Path:
    """A token file holding a valid session token."""
    token_file.parent.mkdir(parents=True, exist_ok=True)
    token_file.write_text(TOKEN, encoding="utf-8")
    return token_file


@pytest.fixture
def use_backend(
    monkeypatch: pytest.MonkeyPatch, token_file: Path
) -> Callable[[dict], RecordingBackend]:
    """Point CLI commands at a fake backend built from a (method, path) route table."""

    def install(routes: dict[tuple[str, str], httpx.Response | Exception]) -> RecordingBackend:
        backend = RecordingBackend(routes)
        monkeypatch.setenv("BIBLIO_API_URL", API_URL)
        monkeypatch.setenv("BIBLIO_TOKEN_FILE", str(token_file))
        monkeypatch.setattr(
            "biblio.cli.options.LibraryApiClient",
            partial(LibraryApiClient, transport=backend.transport),
        )
        return backend

    return install
