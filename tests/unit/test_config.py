# ABOUTME: Unit tests for environment-based settings.
# ABOUTME: Covers defaults, overrides, .env loading, and invalid timeout values.

from pathlib import Path

import pytest

from biblio.config import DEFAULT_API_URL, DEFAULT_LOOKUP_TIMEOUT, DEFAULT_TOKEN_FILE, Settings


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env()
        assert settings.api_url == DEFAULT_API_URL
        assert settings.google_books_api_key is None
        assert settings.token_file == DEFAULT_TOKEN_FILE
        assert settings.lookup_timeout == DEFAULT_LOOKUP_TIMEOUT

    def test_environment_values(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("BIBLIO_API_URL", "https://example.test/api/")
        monkeypatch.setenv("GOOGLE_BOOKS_API_KEY", "abc")
        monkeypatch.setenv("BIBLIO_TOKEN_FILE", str(tmp_path / "tok"))
        monkeypatch.setenv("BIBLIO_LOOKUP_TIMEOUT", "2.5")
        settings = Settings.from_env()
        assert settings.api_url == "https://example.test/api"
        assert settings.google_books_api_key == "abc"
        assert settings.token_file == tmp_path / "tok"
        assert settings.lookup_timeout == 2.5

    def test_empty_key_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_BOOKS_API_KEY", "")
        assert Settings.from_env().google_books_api_key is None

    def test_invalid_timeout_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BIBLIO_LOOKUP_TIMEOUT", "soon")
        assert Settings.from_env().lookup_timeout == DEFAULT_LOOKUP_TIMEOUT

    def test_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """A .env in the working directory is read."""
        # register the variable so load_dotenv's write is undone at teardown
        monkeypatch.setenv("GOOGLE_BOOKS_API_KEY", "")
        monkeypatch.delenv("GOOGLE_BOOKS_API_KEY")
        (tmp_path / ".env").write_text("GOOGLE_BOOKS_API_KEY=from-dotenv\n")
        assert Settings.from_env().google_books_api_key == "from-dotenv"

    def test_environment_beats_dotenv(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("GOOGLE_BOOKS_API_KEY", "from-env")
        (tmp_path / ".env").write_text("GOOGLE_BOOKS_API_KEY=from-dotenv\n")
        assert Settings.from_env().google_books_api_key == "from-env"

    def test_dotenv_can_be_disabled(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("BIBLIO_LOOKUP_TIMEOUT=3\n")
        assert Settings.from_env(dotenv=False).lookup_timeout == DEFAULT_LOOKUP_TIMEOUT
