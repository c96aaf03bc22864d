# ABOUTME: Merges looked-up ISBN metadata into an editable book form.
# ABOUTME: Values the user already entered win unless overwrite is requested.

from dataclasses import replace

from biblio.api.models import BookForm
from biblio.metadata.types import BookMetadata

# metadata field -> form field
_MERGE_FIELDS = {
    "title": "title",
    "author": "author",
    "publisher": "publisher",
    "year": "year",
    "cover_image_url": "cover_url",
}


def merge_metadata(form: BookForm, metadata: BookMetadata, *, overwrite: bool = False) -> BookForm:
    """Return a copy of form with empty fields filled from metadata.

    Fields the source did not provide are never touched.
    """
    updates = {}
    for meta_field, form_field in _MERGE_FIELDS.items():
        value = getattr(metadata, meta_field)
        if value is None:
            continue
        current = getattr(form, form_field)
        if overwrite or current in (None, ""):
            updates[form_field] = value
    return replace(form, **updates)
