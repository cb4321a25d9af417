"""Community-maintained Connections answer archive client."""

from api.archive.client import (
    archive_url,
    get_archive,
    get_archive_cached,
)

__all__ = [
    "archive_url",
    "get_archive",
    "get_archive_cached",
]
