# ABOUTME: MetadataProvider protocol defining the contract for bibliographic lookup adapters.
# ABOUTME: Google Books, Open Library, and any future source implement this.

from typing import Protocol, runtime_checkable

from biblio.metadata.types import SourceResult


@runtime_checkable
class MetadataProvider(Protocol):
    """Protocol for a single bibliographic source.

    lookup() issues one request for a canonical ISBN and reports the result
    as a SourceHit, SourceMiss, or SourceFailure; it never raises for
    network or HTTP problems. fetch_author_name() resolves an opaque author
    key for sources whose records reference authors indirectly; it may raise,
    since callers treat each author lookup as best-effort.
    """

    @property
    def name(self) -> str: ...

    async def lookup(self, isbn: str) -> SourceResult: ...

    async def fetch_author_name(self, key: str) -> str | None: ...
