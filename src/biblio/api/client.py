# ABOUTME: HTTP client for the library REST API (accounts, books, stats).
# ABOUTME: Sends the bearer token from an injected TokenStore and raises ApiError on failures.

import json
import logging
from typing import Any

import httpx

from biblio.api.models import Book, BookForm, LibraryStats, User
from biblio.api.auth import TokenStore, decode_token_user
from biblio.config import DEFAULT_API_URL

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the library API rejects a request or cannot be reached.

    status_code is 0 for transport failures.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code in (401, 403)


def _error_message(response: httpx.Response) -> str:
    """Pick the most useful error text from a failed response."""
    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return text or f"HTTP error! status: {response.status_code}"

    if isinstance(data, dict):
        for key in ("error", "message"):
            if data.get(key):
                return str(data[key])
    elif isinstance(data, str) and data:
        return data
    return f"HTTP error! status: {response.status_code}"


class LibraryApiClient:
    """Client for the remote library backend.

    The backend owns all storage and session issuance; this class only
    forwards requests and keeps the returned token in the TokenStore.
    """

    def __init__(
        self,
        tokens: TokenStore,
        *,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "base_url": base_url.rstrip("/"),
            "headers": {"Content-Type": "application/json", "User-Agent": "biblio/0.1.0"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._tokens = tokens

    def __enter__(self) -> "LibraryApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        headers = {}
        token = self._tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._client.request(
                method,
                path,
                headers=headers,
                params=params,
                content=json.dumps(payload) if payload is not None else None,
            )
        except httpx.HTTPError as exc:
            raise ApiError(f"Request failed: {method} {path}: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.debug("%s %s -> %d: %s", method, path, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"Invalid JSON from {method} {path}", response.status_code) from exc

    # Accounts

    def login(self, email: str, password: str) -> dict[str, Any]:
        response = self._request("POST", "/usuarios/login", {"email": email, "password": password})
        self._store_token(response)
        return response

    def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        response = self._request(
            "POST",
            "/usuarios/register",
            {"nombre": name, "email": email, "password": password},
        )
        self._store_token(response)
        return response

    def _store_token(self, response: Any) -> None:
        if isinstance(response, dict) and response.get("token"):
            self._tokens.set(response["token"])

    def logout(self) -> None:
        self._tokens.clear()

    @property
    def is_authenticated(self) -> bool:
        return bool(self._tokens.get())

    def current_user(self) -> User | None:
        """The signed-in user as recorded in the token, without a request."""
        token = self._tokens.get()
        if not token:
            return None
        return decode_token_user(token)

    def get_profile(self) -> dict[str, Any]:
        return self._request("GET", "/usuarios/profile")

    def update_profile(self, name: str | None = None, email: str | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if name is not None:
            payload["nombre"] = name
        if email is not None:
            payload["email"] = email
        return self._request("PUT", "/usuarios/profile", payload)

    def delete_account(self) -> dict[str, Any]:
        response = self._request("DELETE", "/usuarios/profile")
        self._tokens.clear()
        return response

    # Books

    @staticmethod
    def _books(response: Any) -> list[Book]:
        items = response.get("libros", []) if isinstance(response, dict) else []
        return [Book.from_payload(item) for item in items or []]

    @staticmethod
    def _book(response: Any) -> Book:
        # Single-book endpoints wrap the record in "libro" on some routes
        if isinstance(response, dict) and isinstance(response.get("libro"), dict):
            response = response["libro"]
        return Book.from_payload(response)

    def list_books(self) -> list[Book]:
        return self._books(self._request("GET", "/libros"))

    def get_book(self, book_id: int) -> Book:
        return self._book(self._request("GET", f"/libros/{book_id}"))

    def create_book(self, form: BookForm) -> Book:
        return self._book(self._request("POST", "/libros", form.to_payload()))

    def update_book(self, book_id: int, form: BookForm) -> Book:
        return self._book(self._request("PUT", f"/libros/{book_id}", form.to_payload(partial=True)))

    def delete_book(self, book_id: int) -> None:
        self._request("DELETE", f"/libros/{book_id}")

    def search_books(self, query: str) -> list[Book]:
        return self._books(self._request("GET", "/libros/search", params={"q": query}))

    def books_by_status(self, status: str) -> list[Book]:
        return self._books(self._request("GET", f"/libros/estado/{status}"))

    def books_by_read(self, read: bool) -> list[Book]:
        return self._books(self._request("GET", f"/libros/leido/{'true' if read else 'false'}"))

    def get_stats(self) -> LibraryStats:
        response = self._request("GET", "/libros/stats/estadisticas")
        return LibraryStats.from_payload(response.get("estadisticas", {}))
