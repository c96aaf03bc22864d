# ABOUTME: ISBN identifier normalization for metadata lookups.
# ABOUTME: Strips everything except digits and X/x from user-supplied identifier text.

import re

_NON_ISBN_CHARS_RE = re.compile(r"[^0-9Xx]")


def normalize_isbn(text: str) -> str:
    """Reduce user input to its canonical identifier form.

    Keeps ASCII digits and the check character X (case preserved). No length
    or checksum validation is done; an empty result means there is nothing
    to search for.
    """
    return _NON_ISBN_CHARS_RE.sub("", text)
