# ABOUTME: Bearer token storage and JWT payload decoding for the library API.
# ABOUTME: TokenStore is injected into the API client instead of relying on global state.

import base64
import json
import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from biblio.api.models import User

logger = logging.getLogger(__name__)


@runtime_checkable
class TokenStore(Protocol):
    """Protocol for wherever the session's bearer token lives."""

    def get(self) -> str | None: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStore:
    """Keeps the token for the lifetime of the object only."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """Persists the token in a private file between CLI invocations."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> str | None:
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(token, encoding="utf-8")
        os.chmod(self._path, 0o600)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


def decode_token_payload(token: str) -> dict | None:
    """Decode the payload segment of a JWT without verifying the signature.

    Returns None (and logs) for anything that isn't a well-formed token.
    """
    try:
        payload = token.split(".")[1]
        padded = payload + "=" * (-len(payload) % 4)
        decoded = json.loads(base64.urlsafe_b64decode(padded))
    except (IndexError, ValueError) as exc:
        logger.warning("Could not decode session token: %s", exc)
        return None
    if not isinstance(decoded, dict):
        logger.warning("Session token payload is not an object")
        return None
    return decoded


def decode_token_user(token: str) -> User | None:
    """Build the signed-in User from the claims in a session token."""
    claims = decode_token_payload(token)
    if claims is None or "id" not in claims:
        return None
    return User.from_payload(claims)
