"""NYT Connections per-date puzzle document client."""

from api.nyt.client import (
    get_puzzle_document,
    get_puzzle_document_cached,
    puzzle_url,
)

__all__ = [
    "get_puzzle_document",
    "get_puzzle_document_cached",
    "puzzle_url",
]
