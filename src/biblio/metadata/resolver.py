# ABOUTME: Fallback orchestrator for ISBN metadata lookups.
# ABOUTME: Tries providers in priority order and returns the first reconciled match.

import logging
from collections.abc import Sequence

import httpx

from biblio.config import Settings
from biblio.metadata.authors import resolve_authors
from biblio.metadata.google_books import GoogleBooksProvider
from biblio.metadata.http import BiblioHttpClient, HttpClient
from biblio.metadata.identifier import normalize_isbn
from biblio.metadata.openlibrary import OpenLibraryProvider
from biblio.metadata.provider import MetadataProvider
from biblio.metadata.reconcile import author_refs, reconcile
from biblio.metadata.types import (
    Found,
    LookupFailed,
    LookupOutcome,
    NotFound,
    SourceFailure,
    SourceHit,
    SourceMiss,
    SourceResult,
)

logger = logging.getLogger(__name__)


def default_providers(
    http_client: HttpClient, google_books_api_key: str | None
) -> list[MetadataProvider]:
    """Providers in priority order: Google Books first, Open Library as fallback."""
    return [
        GoogleBooksProvider(http_client, api_key=google_books_api_key),
        OpenLibraryProvider(http_client),
    ]


class MetadataResolver:
    """Resolves raw identifier text into canonical book metadata.

    Providers are queried one at a time in the given order. The first hit is
    reconciled and returned without touching the remaining providers. Misses
    and failures fall through to the next provider; only a failure from the
    last provider is reported as LookupFailed, so a total network outage is
    distinguishable from "no such book".
    """

    def __init__(self, providers: Sequence[MetadataProvider]) -> None:
        self._providers = list(providers)

    async def resolve(self, raw: str) -> LookupOutcome:
        isbn = normalize_isbn(raw)
        if not isbn:
            return NotFound()

        attempts: list[SourceResult] = []
        for provider in self._providers:
            result = await provider.lookup(isbn)
            attempts.append(result)

            if isinstance(result, SourceHit):
                refs = author_refs(result.record)
                names = await resolve_authors(refs, provider.fetch_author_name)
                metadata = reconcile(result.record, names)
                logger.info("Found %s via %s", isbn, provider.name)
                return Found(metadata=metadata, source=provider.name, attempts=tuple(attempts))

            if isinstance(result, SourceMiss) and result.reason == "skipped":
                logger.info("Skipped %s for %s", provider.name, isbn)
            else:
                logger.debug("No match for %s from %s", isbn, provider.name)

        last = attempts[-1] if attempts else None
        if isinstance(last, SourceFailure):
            return LookupFailed(message=last.message, source=last.source, attempts=tuple(attempts))
        return NotFound(attempts=tuple(attempts))


async def resolve_metadata(
    raw: str,
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LookupOutcome:
    """Look up metadata for user-entered ISBN text with the default providers.

    Args:
        raw: Identifier text as typed by the user; it is normalized here.
        settings: Supplies the Google Books key and request timeout.
            Defaults to Settings.from_env().
        transport: Optional httpx transport, for tests.
    """
    settings = settings or Settings.from_env()
    async with BiblioHttpClient(timeout=settings.lookup_timeout, transport=transport) as http:
        resolver = MetadataResolver(default_providers(http, settings.google_books_api_key))
        return await resolver.resolve(raw)
