# ABOUTME: Runtime settings for Biblio, read from the environment (and an optional .env file).
# ABOUTME: Covers the library API base URL, Google Books credential, token file, and lookup timeout.

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://biblio-home-backend.vercel.app/api"
DEFAULT_TOKEN_FILE = Path.home() / ".biblio" / "token"
DEFAULT_LOOKUP_TIMEOUT = 10.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass
class Settings:
    """Resolved configuration for one CLI invocation or library call."""

    api_url: str = DEFAULT_API_URL
    google_books_api_key: str | None = None
    token_file: Path = DEFAULT_TOKEN_FILE
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        """Build settings from BIBLIO_* and GOOGLE_BOOKS_API_KEY variables.

        Values already present in the environment take precedence over a
        .env file in the working directory.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        token_file = os.getenv("BIBLIO_TOKEN_FILE")
        return cls(
            api_url=(os.getenv("BIBLIO_API_URL") or DEFAULT_API_URL).rstrip("/"),
            google_books_api_key=os.getenv("GOOGLE_BOOKS_API_KEY") or None,
            token_file=Path(token_file).expanduser() if token_file else DEFAULT_TOKEN_FILE,
            lookup_timeout=_env_float("BIBLIO_LOOKUP_TIMEOUT", DEFAULT_LOOKUP_TIMEOUT),
        )
