# ABOUTME: End-to-end tests for the Biblio CLI.
# ABOUTME: Drives commands via Click's CliRunner against a fake library backend.

import re
from pathlib import Path

import httpx
from click.testing import CliRunner

from biblio.cli import cli
from biblio.library import default_export_name
from tests.fixtures.api_responses import BOOK_ROSE, BOOKS_RESPONSE, STATS_RESPONSE, TOKEN

BOOKS_ROUTE = {("GET", "/api/libros"): httpx.Response(200, json=BOOKS_RESPONSE)}


class TestCliBasics:
    """E2e tests for the root command group."""

    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("login", "ls", "add", "lookup", "export", "stats"):
            assert name in result.output

    def test_unknown_command_fails(self) -> None:
        result = CliRunner().invoke(cli, ["shelve"])
        assert result.exit_code != 0


class TestCliSession:
    """E2e tests for login, whoami, logout, and register."""

    def test_login_whoami_logout(self, use_backend, token_file: Path) -> None:
        backend = use_backend(
            {("POST", "/api/usuarios/login"): httpx.Response(200, json={"token": TOKEN})}
        )
        runner = CliRunner()

        result = runner.invoke(
            cli, ["login", "--email", "ana@example.com", "--password", "secret"]
        )
        assert result.exit_code == 0
        assert "Signed in as Ana García." in result.output
        assert token_file.read_text(encoding="utf-8") == TOKEN
        assert backend.last_json() == {"email": "ana@example.com", "password": "secret"}

        result = runner.invoke(cli, ["whoami"])
        assert result.exit_code == 0
        assert "Ana García <ana@example.com> (id 7)" in result.output

        result = runner.invoke(cli, ["logout"])
        assert result.exit_code == 0
        assert not token_file.exists()

        result = runner.invoke(cli, ["whoami"])
        assert result.exit_code == 1
        assert "Not signed in." in result.output

    def test_login_prompts_for_credentials(self, use_backend, token_file: Path) -> None:
        use_backend({("POST", "/api/usuarios/login"): httpx.Response(200, json={"token": TOKEN})})
        result = CliRunner().invoke(cli, ["login"], input="ana@example.com\nsecret\n")
        assert result.exit_code == 0
        assert token_file.exists()

    def test_login_rejected(self, use_backend, token_file: Path) -> None:
        use_backend(
            {
                ("POST", "/api/usuarios/login"): httpx.Response(
                    401, json={"error": "Credenciales inválidas"}
                )
            }
        )
        result = CliRunner().invoke(
            cli, ["login", "--email", "ana@example.com", "--password", "wrong"]
        )
        assert result.exit_code == 1
        assert "Credenciales inválidas" in result.output
        assert not token_file.exists()

    def test_register(self, use_backend, token_file: Path) -> None:
        backend = use_backend(
            {("POST", "/api/usuarios/register"): httpx.Response(201, json={"token": TOKEN})}
        )
        result = CliRunner().invoke(
            cli,
            ["register", "--name", "Ana", "--email", "ana@example.com", "--password", "pw"],
        )
        assert result.exit_code == 0
        assert "Account created." in result.output
        assert backend.last_json()["nombre"] == "Ana"
        assert token_file.exists()

    def test_whoami_with_garbage_token(self, use_backend, token_file: Path) -> None:
        use_backend({})
        token_file.parent.mkdir(parents=True)
        token_file.write_text("not-a-token", encoding="utf-8")
        result = CliRunner().invoke(cli, ["whoami"])
        assert result.exit_code == 1
        assert "invalid" in result.output

    def test_token_file_option(self, use_backend, tmp_path: Path) -> None:
        use_backend({("POST", "/api/usuarios/login"): httpx.Response(200, json={"token": TOKEN})})
        other = tmp_path / "elsewhere" / "token"
        result = CliRunner().invoke(
            cli,
            ["login", "--email", "a@b.c", "--password", "pw", "--token-file", str(other)],
        )
        assert result.exit_code == 0
        assert other.read_text(encoding="utf-8") == TOKEN


class TestCliLs:
    """E2e tests for `biblio ls`."""

    def test_ls_lists_all_books(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["ls"])
        assert result.exit_code == 0
        assert "Umberto" in result.output
        assert "Akira" in result.output
        assert "Dune" in result.output
        assert "3 of 3 book(s)" in result.output

    def test_ls_search(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["ls", "--search", "ECO"])
        assert result.exit_code == 0
        assert "1 of 3 book(s)" in result.output
        assert "Dune" not in result.output

    def test_ls_status_filter(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["ls", "--status", "prestado"])
        assert "Akira" in result.output
        assert "1 of 3 book(s)" in result.output

    def test_ls_read_filter(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["ls", "--status", "leido"])
        assert "Umberto" in result.output
        assert "1 of 3 book(s)" in result.output

    def test_ls_kind_counts_untyped_as_book(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["ls", "--kind", "libro"])
        assert "Dune" in result.output
        assert "2 of 3 book(s)" in result.output

    def test_ls_no_matches(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["ls", "--search", "zzz"])
        assert result.exit_code == 0
        assert "No books match those filters." in result.output

    def test_ls_empty_library(self, use_backend, signed_in) -> None:
        use_backend({("GET", "/api/libros"): httpx.Response(200, json={"libros": []})})
        result = CliRunner().invoke(cli, ["ls"])
        assert result.exit_code == 0
        assert "No books in the library." in result.output

    def test_ls_server_error(self, use_backend, signed_in) -> None:
        use_backend({("GET", "/api/libros"): httpx.Response(500, text="")})
        result = CliRunner().invoke(cli, ["ls"])
        assert result.exit_code == 1
        assert "HTTP error! status: 500" in result.output


class TestCliInfo:
    """E2e tests for `biblio info`."""

    def test_info_shows_fields(self, use_backend, signed_in) -> None:
        use_backend({("GET", "/api/libros/1"): httpx.Response(200, json=BOOK_ROSE)})
        result = CliRunner().invoke(cli, ["info", "1"])
        assert result.exit_code == 0
        assert "The Name of the Rose" in result.output
        assert "Harcourt" in result.output
        assert "1983" in result.output
        assert "En estante" in result.output
        assert "9780156001311" in result.output

    def test_info_missing_book(self, use_backend, signed_in) -> None:
        use_backend({})
        result = CliRunner().invoke(cli, ["info", "404"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestCliStats:
    """E2e tests for `biblio stats`."""

    def test_stats_counts_locally(self, use_backend, signed_in) -> None:
        backend = use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["stats"])
        assert result.exit_code == 0
        assert re.search(r"Total\s+3", result.output)
        assert re.search(r"Lent\s+1", result.output)
        assert re.search(r"Unread\s+2", result.output)
        assert backend.calls() == [("GET", "/api/libros")]

    def test_stats_from_server(self, use_backend, signed_in) -> None:
        backend = use_backend(
            {("GET", "/api/libros/stats/estadisticas"): httpx.Response(200, json=STATS_RESPONSE)}
        )
        result = CliRunner().invoke(cli, ["stats", "--server"])
        assert result.exit_code == 0
        assert re.search(r"On shelf\s+1", result.output)
        assert backend.calls() == [("GET", "/api/libros/stats/estadisticas")]


class TestCliExport:
    """E2e tests for `biblio export`."""

    def test_export_to_file(self, use_backend, signed_in, tmp_path: Path) -> None:
        use_backend(BOOKS_ROUTE)
        target = tmp_path / "library.csv"
        result = CliRunner().invoke(cli, ["export", str(target)])
        assert result.exit_code == 0
        assert "Exported 3 book(s)" in result.output
        lines = target.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("ID,Título,Autor")
        assert len(lines) == 4

    def test_export_default_name(self, use_backend, signed_in, tmp_path: Path) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["export"])
        assert result.exit_code == 0
        assert (tmp_path / default_export_name()).exists()

    def test_export_to_stdout(self, use_backend, signed_in) -> None:
        use_backend(BOOKS_ROUTE)
        result = CliRunner().invoke(cli, ["export", "-"])
        assert result.exit_code == 0
        assert "ID,Título,Autor" in result.output
        assert "Dune" in result.output

    def test_export_unwritable_path(self, use_backend, signed_in, tmp_path: Path) -> None:
        use_backend(BOOKS_ROUTE)
        target = tmp_path / "missing-dir" / "out.csv"
        result = CliRunner().invoke(cli, ["export", str(target)])
        assert result.exit_code == 1
        assert "Error writing" in result.output
