"""
Resolve today's word-grouping puzzle from upstream sources (NYT, community archive).
Route through source adapters in priority order and return one canonical Puzzle.
"""

from daily_puzzle.base import BasePuzzleAdapter
from daily_puzzle.models import Puzzle, ResolutionFailure
from daily_puzzle.router import register_adapter, registered_adapters, resolve_puzzle

# Register built-in adapters; order is priority (NYT has true grid positions)
from daily_puzzle.adapters.nyt import NytAdapter
from daily_puzzle.adapters.archive import ArchiveAdapter

register_adapter(NytAdapter())
register_adapter(ArchiveAdapter())

__all__ = [
    "BasePuzzleAdapter",
    "Puzzle",
    "ResolutionFailure",
    "register_adapter",
    "registered_adapters",
    "resolve_puzzle",
]
