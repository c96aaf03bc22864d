# ABOUTME: Defensive field-extraction helpers shared by the per-source parsers.
# ABOUTME: Every helper returns None for missing or malformed input instead of raising.

import re
from collections.abc import Iterable
from datetime import date
from typing import Any

_YEAR_RE = re.compile(r"\d{4}")
_MIN_YEAR = 1000


def text_field(data: Any, key: str) -> str | None:
    """Return data[key] if it is a non-blank string."""
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def dict_field(data: Any, key: str) -> dict[str, Any]:
    """Return data[key] if it is a dict, else an empty dict."""
    if not isinstance(data, dict):
        return {}
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def list_field(data: Any, key: str) -> list[Any]:
    """Return data[key] if it is a list, else an empty list."""
    if not isinstance(data, dict):
        return []
    value = data.get(key)
    return value if isinstance(value, list) else []


def first_text(value: Any) -> str | None:
    """First entry of a list of strings, or the value itself if it is a string."""
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, list) and value:
        head = value[0]
        if isinstance(head, str) and head.strip():
            return head
    return None


def parse_year(value: Any, today: date | None = None) -> int | None:
    """Extract a plausible publication year from a date-like string.

    Takes the first run of four digits ("1999-05" -> 1999, "May 1999" -> 1999)
    and accepts it only within [1000, current year].
    """
    if not isinstance(value, str):
        return None
    match = _YEAR_RE.search(value)
    if not match:
        return None
    year = int(match.group(0))
    current_year = (today or date.today()).year
    if _MIN_YEAR <= year <= current_year:
        return year
    return None


def join_authors(names: Iterable[str]) -> str | None:
    """Join author names with ", ", or None when there are none."""
    names = list(names)
    return ", ".join(names) if names else None
