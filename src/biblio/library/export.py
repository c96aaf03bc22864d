# ABOUTME: CSV export of the user's library.
# ABOUTME: Writes one row per book with display labels for status and read state.

import csv
from collections.abc import Iterable
from datetime import date, datetime
from typing import TextIO

from biblio.api.models import Book, status_label

CSV_HEADERS = [
    "ID",
    "Título",
    "Autor",
    "Editorial",
    "Año de Publicación",
    "Estado",
    "Leído",
    "ISBN",
    "Portada URL",
    "Fecha de Registro",
]


def default_export_name(today: date | None = None) -> str:
    return f"biblioteca_{(today or date.today()).isoformat()}.csv"


def _format_registered(value: str | None) -> str:
    """Render an ISO timestamp as dd/mm/yyyy; pass anything else through."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime("%d/%m/%Y")


def export_csv(books: Iterable[Book], stream: TextIO) -> int:
    """Write books as CSV to stream and return the number of rows written."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    count = 0
    for book in books:
        writer.writerow(
            [
                book.id,
                book.title,
                book.author,
                book.publisher or "",
                book.year if book.year is not None else "",
                status_label(book.status),
                "Sí" if book.read else "No",
                book.isbn or "",
                book.cover_url or "",
                _format_registered(book.registered_at),
            ]
        )
        count += 1
    return count
