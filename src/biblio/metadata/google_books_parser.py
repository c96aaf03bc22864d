# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Extracts author references, cover URLs, and canonical BookMetadata from a volume.

from typing import Any

from biblio.metadata.extract import (
    dict_field,
    first_text,
    join_authors,
    list_field,
    parse_year,
    text_field,
)
from biblio.metadata.types import AuthorRef, BookMetadata, GoogleBooksRecord

# Preferred image size first.
_IMAGE_LINK_PRIORITY = (
    "medium",
    "thumbnail",
    "small",
    "large",
    "extraLarge",
    "smallThumbnail",
)


def parse_author_refs(volume: dict[str, Any]) -> list[AuthorRef]:
    """Google Books lists authors inline as plain strings."""
    info = dict_field(volume, "volumeInfo")
    return [
        AuthorRef(name=name)
        for name in list_field(info, "authors")
        if isinstance(name, str) and name.strip()
    ]


def select_cover_url(volume: dict[str, Any]) -> str | None:
    """Pick the first available image link by size preference."""
    links = dict_field(dict_field(volume, "volumeInfo"), "imageLinks")
    for size in _IMAGE_LINK_PRIORITY:
        url = text_field(links, size)
        if url:
            return url
    return None


def parse_volume(record: GoogleBooksRecord, authors: list[str]) -> BookMetadata:
    """Convert a Google Books volume plus resolved author names to BookMetadata."""
    info = dict_field(record.volume, "volumeInfo")
    return BookMetadata(
        title=text_field(info, "title"),
        author=join_authors(authors),
        publisher=first_text(info.get("publisher")),
        year=parse_year(info.get("publishedDate")),
        cover_image_url=select_cover_url(record.volume),
    )
