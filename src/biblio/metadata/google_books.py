# ABOUTME: Google Books metadata source (primary).
# ABOUTME: Looks up a volume by ISBN; skipped entirely when no API key is configured.

import logging

from biblio.metadata.extract import list_field
from biblio.metadata.http import HttpClient, MetadataFetchError, RecordNotFoundError
from biblio.metadata.types import (
    GoogleBooksRecord,
    SourceFailure,
    SourceHit,
    SourceMiss,
    SourceResult,
)

logger = logging.getLogger(__name__)

_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"
# Google answers malformed ISBN queries with 400 rather than an empty result.
_NOT_FOUND_STATUSES = frozenset({400, 404})


class GoogleBooksProvider:
    """Metadata source backed by the Google Books volumes API.

    Requires an API key. Without one, lookups report a skipped miss and no
    request is made, so the resolver moves straight on to the next source.
    """

    def __init__(self, http_client: HttpClient, api_key: str | None) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "google_books"

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    async def lookup(self, isbn: str) -> SourceResult:
        """Query volumes?q=isbn:<isbn> and return the first volume."""
        if not self._api_key:
            logger.debug("Google Books API key not configured, skipping lookup for %s", isbn)
            return SourceMiss(source=self.name, reason="skipped")

        try:
            data = await self._http.get(
                _VOLUMES_URL,
                params={"q": f"isbn:{isbn}", "key": self._api_key},
                not_found_statuses=_NOT_FOUND_STATUSES,
            )
        except RecordNotFoundError:
            return SourceMiss(source=self.name)
        except MetadataFetchError as exc:
            logger.warning("Google Books lookup failed for %s: %s", isbn, exc)
            return SourceFailure(source=self.name, message=f"Google Books: {exc}")

        items = list_field(data, "items")
        if not items or not isinstance(items[0], dict):
            return SourceMiss(source=self.name)
        return SourceHit(record=GoogleBooksRecord(volume=items[0], isbn=isbn))

    async def fetch_author_name(self, key: str) -> str | None:
        # Volumes carry author names inline; there are no keys to resolve.
        return None
