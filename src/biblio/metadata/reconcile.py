# ABOUTME: Converts tagged source records into canonical BookMetadata.
# ABOUTME: Dispatches on the record variant to that source's author and field extraction rules.

from collections.abc import Callable
from typing import Any

from biblio.metadata import google_books_parser, openlibrary_parser
from biblio.metadata.types import (
    AuthorRef,
    BookMetadata,
    GoogleBooksRecord,
    OpenLibraryRecord,
    SourceRecord,
)

RefExtractor = Callable[[Any], list[AuthorRef]]
MetadataBuilder = Callable[[Any, list[str]], BookMetadata]

_RULES: dict[type, tuple[RefExtractor, MetadataBuilder]] = {
    GoogleBooksRecord: (
        lambda record: google_books_parser.parse_author_refs(record.volume),
        google_books_parser.parse_volume,
    ),
    OpenLibraryRecord: (
        lambda record: openlibrary_parser.parse_author_refs(record.edition),
        openlibrary_parser.parse_edition,
    ),
}


def _rules_for(record: SourceRecord) -> tuple[RefExtractor, MetadataBuilder]:
    try:
        return _RULES[type(record)]
    except KeyError:
        raise TypeError(f"No reconciliation rules for {type(record).__name__}") from None


def author_refs(record: SourceRecord) -> list[AuthorRef]:
    """Author references carried by a source record, in source order."""
    extract, _ = _rules_for(record)
    return extract(record)


def reconcile(record: SourceRecord, authors: list[str]) -> BookMetadata:
    """Build canonical metadata from a source record and resolved author names.

    Fields the source does not provide, or provides in a malformed shape,
    are left as None.
    """
    _, build = _rules_for(record)
    return build(record, authors)
