# ABOUTME: Core data structures for the ISBN metadata-resolution pipeline.
# ABOUTME: Canonical BookMetadata, source record variants, adapter results, and lookup outcomes.

from dataclasses import dataclass, field, fields
from typing import Any, Literal


@dataclass(frozen=True)
class BookMetadata:
    """Canonical book metadata produced by reconciliation.

    Every field is optional: None means the source did not supply it, never
    that something went wrong. This is the only shape that leaves the
    pipeline; the book form merges it into its editable state.
    """

    title: str | None = None
    author: str | None = None
    publisher: str | None = None
    year: int | None = None
    cover_image_url: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields the source provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @property
    def is_empty(self) -> bool:
        return not self.as_dict()


@dataclass(frozen=True)
class AuthorRef:
    """An author entry from a source record.

    Either carries an inline display name, or only an opaque key that needs
    a supplementary lookup to turn into a name.
    """

    name: str | None = None
    key: str | None = None

    @property
    def needs_lookup(self) -> bool:
        return not (self.name and self.name.strip()) and bool(self.key)


# Source records: one variant per bibliographic source. The payloads are the
# raw decoded JSON bodies and are never mutated after construction.


@dataclass(frozen=True)
class GoogleBooksRecord:
    """First volume returned by the Google Books volumes endpoint."""

    volume: dict[str, Any]
    isbn: str

    source = "google_books"


@dataclass(frozen=True)
class OpenLibraryRecord:
    """Edition returned by the Open Library ISBN endpoint."""

    edition: dict[str, Any]
    isbn: str

    source = "openlibrary"


SourceRecord = GoogleBooksRecord | OpenLibraryRecord


# Adapter results. Errors are ordinary return values at this boundary.


@dataclass(frozen=True)
class SourceHit:
    record: SourceRecord


@dataclass(frozen=True)
class SourceMiss:
    """The source has no such record, or was skipped (e.g. no credential)."""

    source: str
    reason: Literal["not_found", "skipped"] = "not_found"


@dataclass(frozen=True)
class SourceFailure:
    """Network, HTTP, or parse failure at a source."""

    source: str
    message: str


SourceResult = SourceHit | SourceMiss | SourceFailure


# Lookup outcomes returned to callers of the orchestrator.


@dataclass(frozen=True)
class Found:
    metadata: BookMetadata
    source: str
    attempts: tuple[SourceResult, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class NotFound:
    attempts: tuple[SourceResult, ...] = field(default=(), compare=False)

    @property
    def skipped_sources(self) -> list[str]:
        """Sources that were never queried (configuration gaps)."""
        return [
            a.source
            for a in self.attempts
            if isinstance(a, SourceMiss) and a.reason == "skipped"
        ]


@dataclass(frozen=True)
class LookupFailed:
    message: str
    source: str
    attempts: tuple[SourceResult, ...] = field(default=(), compare=False)


LookupOutcome = Found | NotFound | LookupFailed
