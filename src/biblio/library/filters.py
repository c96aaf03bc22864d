# ABOUTME: Client-side filtering and statistics over a fetched book list.
# ABOUTME: Mirrors the dashboard's search box, status/read filter, and kind filter.

import re
from collections.abc import Iterable

from biblio.api.models import Book, LibraryStats

STATUS_FILTERS = ("all", "en_estante", "prestado", "leido")

# Words skipped when building cover placeholder initials (Spanish and English).
_INITIALS_STOP_WORDS = frozenset(
    {
        "la", "el", "los", "las", "un", "una", "unos", "unas",
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        "de", "del", "al", "en", "y", "o", "con", "por", "para", "como", "que", "su", "sus",
        "this", "that", "these", "those", "is", "are", "was", "were", "be", "been", "being",
    }
)
_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def filter_books(
    books: Iterable[Book],
    search: str | None = None,
    status_filter: str = "all",
    kind: str | None = None,
) -> list[Book]:
    """Apply the search term, status filter, and kind filter in turn.

    search matches title or author, case-insensitively. status_filter is one
    of STATUS_FILTERS, where "leido" selects read books regardless of shelf
    status. A book without a kind counts as "libro".
    """
    if status_filter not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter {status_filter!r}")

    result = list(books)
    if search:
        term = search.lower()
        result = [b for b in result if term in b.title.lower() or term in b.author.lower()]

    if status_filter == "leido":
        result = [b for b in result if b.read]
    elif status_filter != "all":
        result = [b for b in result if b.status == status_filter]

    if kind and kind != "all":
        result = [b for b in result if (b.kind or "libro") == kind]
    return result


def compute_stats(books: Iterable[Book]) -> LibraryStats:
    """Count books by shelf status and read state."""
    books = list(books)
    read = sum(1 for b in books if b.read)
    return LibraryStats(
        total=len(books),
        on_shelf=sum(1 for b in books if b.status == "en_estante"),
        lent=sum(1 for b in books if b.status == "prestado"),
        read=read,
        unread=len(books) - read,
    )


def book_initials(title: str) -> str:
    """Up to two initials from the significant words of a title.

    Falls back to the first character of the title, then to "B".
    """
    words = [
        w for w in _PUNCTUATION_RE.sub("", title.lower()).split() if w not in _INITIALS_STOP_WORDS
    ]
    if not words:
        clean = _PUNCTUATION_RE.sub("", title).strip()
        return clean[0].upper() if clean else "B"
    return "".join(w[0].upper() for w in words[:2])
