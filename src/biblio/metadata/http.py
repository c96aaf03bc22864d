# ABOUTME: Async HTTP client abstraction for bibliographic source API calls.
# ABOUTME: One request per call, per-request timeout, injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "biblio/0.1.0"


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a bibliographic source fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecordNotFoundError(MetadataFetchError):
    """Raised when a source confirms it has no record for the request."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for async HTTP GET operations against bibliographic APIs."""

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        not_found_statuses: frozenset[int] = ...,
    ) -> dict[str, Any]: ...


class BiblioHttpClient:
    """Async HTTP client for metadata API calls.

    Wraps httpx.AsyncClient with a fixed User-Agent and timeout. There is no
    retry or rate limiting: each call issues exactly one request. Use it as
    an async context manager, or call aclose() when done.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> "BiblioHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        not_found_statuses: frozenset[int] = frozenset({404}),
    ) -> dict[str, Any]:
        """Send a single GET request and decode the JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters.
            not_found_statuses: Statuses the source uses to say "no such record".

        Returns:
            Parsed JSON response body.

        Raises:
            RecordNotFoundError: On a status in not_found_statuses.
            MetadataFetchError: On transport errors, other non-200 statuses,
                or a body that is not a JSON object.
        """
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

        if response.status_code in not_found_statuses:
            raise RecordNotFoundError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )
        if response.status_code != 200:
            raise MetadataFetchError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Invalid JSON from {url}: {exc}") from exc
        if not isinstance(data, dict):
            raise MetadataFetchError(f"Unexpected response shape from {url}")
        return data
