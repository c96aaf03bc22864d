# ABOUTME: Best-effort author name resolution for source records.
# ABOUTME: Uses inline names as-is and resolves opaque author keys concurrently.

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from biblio.metadata.types import AuthorRef

logger = logging.getLogger(__name__)

NameFetcher = Callable[[str], Awaitable[str | None]]


def dedupe_names(names: Sequence[str]) -> list[str]:
    """Drop repeated names, keeping the order of first appearance."""
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


async def resolve_authors(refs: Sequence[AuthorRef], fetch_name: NameFetcher) -> list[str]:
    """Turn author references into distinct display names.

    All key lookups run concurrently and are awaited together. A lookup that
    raises or yields no name drops that author only; the rest still resolve.
    Names come back in the order of the original references.
    """
    keys = list(dict.fromkeys(ref.key for ref in refs if ref.needs_lookup and ref.key))

    results = await asyncio.gather(*(fetch_name(key) for key in keys), return_exceptions=True)

    resolved: dict[str, str] = {}
    for key, result in zip(keys, results):
        if isinstance(result, Exception):
            logger.debug("Author lookup failed for %s: %s", key, result)
            continue
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, str) and result.strip():
            resolved[key] = result.strip()
        else:
            logger.debug("Author lookup for %s returned no name", key)

    names: list[str] = []
    for ref in refs:
        if ref.name and ref.name.strip():
            names.append(ref.name.strip())
        elif ref.key in resolved:
            names.append(resolved[ref.key])
    return dedupe_names(names)
