# ABOUTME: Client package for the remote library REST API.
# ABOUTME: Exports the API client, its error type, and the book/user models.

from biblio.api.client import ApiError, LibraryApiClient
from biblio.api.models import Book, BookForm, LibraryStats, User

__all__ = [
    "ApiError",
    "Book",
    "BookForm",
    "LibraryApiClient",
    "LibraryStats",
    "User",
]
