"""
Community archive client. One static JSON file holding every past puzzle as
{id, date, answers: [{level, group, members}]}. No position data.
URL can be overridden with CONNECTIONS_ARCHIVE_URL (loaded from .env).
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from api.transport import get_json

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)

CONNECTIONS_ARCHIVE_URL = (
    "https://raw.githubusercontent.com/Eyefyre/NYT-Connections-Answers/main/connections.json"
)


def archive_url() -> str:
    return os.environ.get("CONNECTIONS_ARCHIVE_URL") or CONNECTIONS_ARCHIVE_URL


def get_archive() -> Any:
    """
    Fetch the whole archive.

    Returns:
        Decoded JSON, normally a list of puzzle entries. Shape is not checked here.

    Raises:
        TransportFailure, DecodeFailure (from api.transport).
    """
    url = archive_url()
    entries = get_json(url)
    logger.info(
        "Archive 200 url=%s n_entries=%s",
        url,
        len(entries) if isinstance(entries, list) else "n/a",
    )
    return entries


def get_archive_cached() -> Any:
    """Same as get_archive but uses the in-memory response cache."""
    from api.cache import get_or_fetch

    return get_or_fetch(archive_url(), get_archive)
