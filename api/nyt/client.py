"""
NYT Connections client. Fetches the authoritative puzzle document for one print date.
No API key required. URL template can be overridden with NYT_CONNECTIONS_URL
(must contain a "{date}" placeholder); loaded from .env in the project root.
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from api.errors import TransportFailure
from api.transport import get_json

# Load .env from project root (api/nyt/client.py -> parent.parent.parent = project root)
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)

NYT_CONNECTIONS_URL = "https://www.nytimes.com/svc/connections/v2/{date}.json"


def puzzle_url(date: str) -> str:
    """Return the per-date document URL for date (YYYY-MM-DD)."""
    template = os.environ.get("NYT_CONNECTIONS_URL") or NYT_CONNECTIONS_URL
    try:
        return template.format(date=date)
    except (KeyError, IndexError, ValueError) as e:
        raise TransportFailure(f"bad NYT_CONNECTIONS_URL template {template!r}: {e!r}") from e


def get_puzzle_document(date: str) -> Any:
    """
    Fetch the raw puzzle document for one print date.

    Args:
        date: Print date YYYY-MM-DD (publisher timezone).

    Returns:
        Decoded JSON: {"id", "print_date", "categories": [{"title", "cards": [...]}]}.
        Shape is not checked here.

    Raises:
        TransportFailure, DecodeFailure (from api.transport).
    """
    url = puzzle_url(date)
    document = get_json(url)
    logger.info("NYT puzzle 200 date=%s url=%s", date, url)
    return document


def get_puzzle_document_cached(date: str) -> Any:
    """Same as get_puzzle_document but uses the in-memory response cache."""
    from api.cache import get_or_fetch

    def _fetch() -> Any:
        return get_puzzle_document(date)

    return get_or_fetch(puzzle_url(date), _fetch)
