# ABOUTME: Fake async HTTP client for metadata provider tests.
# ABOUTME: Returns canned responses (or raises canned errors) based on URL substrings.

from typing import Any


class FakeHttpClient:
    """Fake async HTTP client that returns canned responses based on URL patterns.

    The first pattern found in the requested URL wins. Exception values are
    raised instead of returned. Unmatched URLs return an empty dict.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self._responses = responses or {}
        self.request_log: list[str] = []
        self.params_log: list[dict[str, str] | None] = []

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        not_found_statuses: frozenset[int] = frozenset({404}),
    ) -> dict[str, Any]:
        self.request_log.append(url)
        self.params_log.append(params)
        for pattern, response in self._responses.items():
            if pattern in url:
                if isinstance(response, Exception):
                    raise response
                return response
        return {}
