# ABOUTME: Data structures exchanged with the library REST API.
# ABOUTME: Maps between Biblio's English attribute names and the backend's wire field names.

from dataclasses import asdict, dataclass
from typing import Any, Literal

BookStatus = Literal["en_estante", "prestado", "otro"]
BookKind = Literal["libro", "comic", "manga", "digital", "revista", "audiolibro", "otro"]

BOOK_STATUSES: tuple[str, ...] = ("en_estante", "prestado", "otro")
BOOK_KINDS: tuple[str, ...] = (
    "libro",
    "comic",
    "manga",
    "digital",
    "revista",
    "audiolibro",
    "otro",
)

STATUS_LABELS = {
    "en_estante": "En estante",
    "prestado": "Prestado",
}
KIND_LABELS = {
    "libro": "Libro",
    "comic": "Comic",
    "manga": "Manga",
    "digital": "Digital",
    "revista": "Revista",
    "audiolibro": "Audiolibro",
}

# attribute name -> wire name
_BOOK_FIELDS = {
    "title": "titulo",
    "author": "autor",
    "publisher": "editorial",
    "year": "anio_publicacion",
    "status": "estado",
    "read": "leido",
    "isbn": "isbn",
    "cover_url": "portada_url",
    "kind": "tipo",
}


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, "Otro")


def kind_label(kind: str | None) -> str:
    return KIND_LABELS.get(kind or "", "Otro")


@dataclass
class User:
    id: int
    name: str
    email: str
    created_at: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data.get("id"),
            name=data.get("nombre", ""),
            email=data.get("email", ""),
            created_at=data.get("fecha_creacion"),
        )


@dataclass
class BookForm:
    """Editable book fields, as sent on create and update."""

    title: str = ""
    author: str = ""
    publisher: str | None = None
    year: int | None = None
    status: BookStatus = "en_estante"
    read: bool = False
    isbn: str | None = None
    cover_url: str | None = None
    kind: BookKind | None = None

    def to_payload(self, *, partial: bool = False) -> dict[str, Any]:
        """Serialize to wire names.

        Optional fields that are unset are omitted. With partial=True, empty
        title and author are omitted too, for PUT updates that touch only
        some fields.
        """
        payload: dict[str, Any] = {}
        for attr, wire in _BOOK_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if partial and attr in ("title", "author") and not value:
                continue
            payload[wire] = value
        return payload


@dataclass
class Book(BookForm):
    """A stored book record as returned by the backend."""

    id: int = 0
    user_id: int | None = None
    registered_at: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Book":
        values = {attr: data.get(wire) for attr, wire in _BOOK_FIELDS.items()}
        return cls(
            id=data.get("id", 0),
            user_id=data.get("usuario_id"),
            registered_at=data.get("fecha_registro"),
            title=values["title"] or "",
            author=values["author"] or "",
            publisher=values["publisher"],
            year=values["year"],
            status=values["status"] or "otro",
            read=bool(values["read"]),
            isbn=values["isbn"],
            cover_url=values["cover_url"],
            kind=values["kind"],
        )

    def to_form(self) -> BookForm:
        fields = asdict(self)
        for extra in ("id", "user_id", "registered_at"):
            fields.pop(extra)
        return BookForm(**fields)


@dataclass
class LibraryStats:
    total: int = 0
    on_shelf: int = 0
    lent: int = 0
    read: int = 0
    unread: int = 0

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "LibraryStats":
        return cls(
            total=int(data.get("total_libros", 0)),
            on_shelf=int(data.get("libros_en_estante", 0)),
            lent=int(data.get("libros_prestados", 0)),
            read=int(data.get("libros_leidos", 0)),
            unread=int(data.get("libros_no_leidos", 0)),
        )
