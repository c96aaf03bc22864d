# ABOUTME: Metadata package for ISBN lookup against bibliographic sources.
# ABOUTME: Exports canonical BookMetadata, lookup outcomes, and the resolver entry points.

from biblio.metadata.identifier import normalize_isbn
from biblio.metadata.provider import MetadataProvider
from biblio.metadata.resolver import MetadataResolver, resolve_metadata
from biblio.metadata.types import (
    BookMetadata,
    Found,
    LookupFailed,
    LookupOutcome,
    NotFound,
)

__all__ = [
    "BookMetadata",
    "Found",
    "LookupFailed",
    "LookupOutcome",
    "MetadataProvider",
    "MetadataResolver",
    "NotFound",
    "normalize_isbn",
    "resolve_metadata",
]
