# ABOUTME: Open Library metadata source (fallback).
# ABOUTME: Looks up an edition by ISBN and resolves author keys via the authors endpoint.

import logging

from biblio.metadata.http import HttpClient, MetadataFetchError, RecordNotFoundError
from biblio.metadata.openlibrary_parser import parse_author_name
from biblio.metadata.types import (
    OpenLibraryRecord,
    SourceFailure,
    SourceHit,
    SourceMiss,
    SourceResult,
)

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"


class OpenLibraryProvider:
    """Metadata source backed by the Open Library API.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient, base_url: str = _OL_BASE) -> None:
        self._http = http_client
        self._base = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "openlibrary"

    async def lookup(self, isbn: str) -> SourceResult:
        """Fetch the edition for an ISBN from /isbn/<isbn>.json."""
        try:
            data = await self._http.get(f"{self._base}/isbn/{isbn.upper()}.json")
        except RecordNotFoundError:
            return SourceMiss(source=self.name)
        except MetadataFetchError as exc:
            logger.warning("Open Library lookup failed for %s: %s", isbn, exc)
            return SourceFailure(source=self.name, message=f"Open Library: {exc}")

        return SourceHit(record=OpenLibraryRecord(edition=data, isbn=isbn))

    async def fetch_author_name(self, key: str) -> str | None:
        """Resolve an author key like "/authors/OL1A" to a display name.

        Raises:
            MetadataFetchError: If the author endpoint request fails.
        """
        if not key.startswith("/"):
            key = f"/authors/{key}"
        data = await self._http.get(f"{self._base}{key}.json")
        return parse_author_name(data)
