# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Extracts author references, cover URLs, and canonical BookMetadata from OL editions.

from typing import Any

from biblio.metadata.extract import (
    first_text,
    join_authors,
    list_field,
    parse_year,
    text_field,
)
from biblio.metadata.types import AuthorRef, BookMetadata, OpenLibraryRecord

_COVERS_BASE_URL = "https://covers.openlibrary.org/b"


def parse_author_refs(edition: dict[str, Any]) -> list[AuthorRef]:
    """Extract author references from an Open Library edition.

    Editions list authors as [{"key": "/authors/OL1A"}], occasionally with an
    inline "name". Entries that are neither are skipped.
    """
    refs: list[AuthorRef] = []
    for entry in list_field(edition, "authors"):
        name = text_field(entry, "name")
        key = text_field(entry, "key")
        if name or key:
            refs.append(AuthorRef(name=name, key=key))
    return refs


def parse_author_name(data: dict[str, Any]) -> str | None:
    """Extract the author name from an Open Library Author response."""
    name = text_field(data, "name")
    return name.strip() if name else None


def build_cover_url(kind: str, value: str | int, size: str = "M") -> str:
    """Build an Open Library cover image URL.

    Args:
        kind: Lookup key type: "id" (cover ID), "olid", or "isbn".
        value: The cover ID, OLID, or ISBN.
        size: Image size: "S" (small), "M" (medium), or "L" (large).
    """
    return f"{_COVERS_BASE_URL}/{kind}/{value}-{size}.jpg"


def select_cover_url(edition: dict[str, Any], isbn: str) -> str | None:
    """Pick a cover URL: cover ID, then the edition's OLID, then the ISBN."""
    covers = list_field(edition, "covers")
    cover_id = covers[0] if covers else None
    # OL uses -1 as a placeholder for removed covers
    if type(cover_id) is int and cover_id > 0:
        return build_cover_url("id", cover_id)

    key = text_field(edition, "key")
    if key:
        olid = key.replace("/works/", "").replace("/books/", "")
        if olid:
            return build_cover_url("olid", olid)

    if isbn:
        return build_cover_url("isbn", isbn)
    return None


def parse_edition(record: OpenLibraryRecord, authors: list[str]) -> BookMetadata:
    """Convert an Open Library edition plus resolved author names to BookMetadata."""
    edition = record.edition
    return BookMetadata(
        title=text_field(edition, "title"),
        author=join_authors(authors),
        publisher=first_text(edition.get("publishers")),
        year=parse_year(edition.get("publish_date")),
        cover_image_url=select_cover_url(edition, record.isbn),
    )
