# ABOUTME: Library operations that run client-side over fetched books.
# ABOUTME: Filtering, statistics, CSV export, and metadata form merging.

from biblio.library.export import default_export_name, export_csv
from biblio.library.filters import book_initials, compute_stats, filter_books
from biblio.library.forms import merge_metadata

__all__ = [
    "book_initials",
    "compute_stats",
    "default_export_name",
    "export_csv",
    "filter_books",
    "merge_metadata",
]
