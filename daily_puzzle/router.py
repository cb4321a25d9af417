"""
Resolve today's puzzle by trying registered source adapters in order.
The first adapter that produces a Puzzle wins; later ones are not called.
"""

import json
import logging
from typing import TYPE_CHECKING, Iterable

from daily_puzzle.dates import today_et
from daily_puzzle.models import Puzzle, ResolutionFailure

if TYPE_CHECKING:
    from daily_puzzle.base import BasePuzzleAdapter

logger = logging.getLogger(__name__)

# Registry in priority order (primary first)
_registry: list["BasePuzzleAdapter"] = []


def register_adapter(adapter: "BasePuzzleAdapter") -> None:
    """Append adapter to the fallback chain. Re-registering a source_id replaces it in place."""
    for i, existing in enumerate(_registry):
        if existing.source_id == adapter.source_id:
            _registry[i] = adapter
            return
    _registry.append(adapter)


def registered_adapters() -> list["BasePuzzleAdapter"]:
    return list(_registry)


def resolve_puzzle(
    date: str | None = None,
    adapters: Iterable["BasePuzzleAdapter"] | None = None,
) -> Puzzle | ResolutionFailure:
    """
    Resolve the puzzle for date (default: today in the publisher timezone).

    Each adapter is tried once, in order, until one returns a Puzzle. Never raises.

    Args:
        date: YYYY-MM-DD; None means today_et().
        adapters: Chain to try instead of the registry (e.g. in tests).

    Returns:
        The Puzzle from the first adapter that succeeded, or ResolutionFailure.
    """
    if date is None:
        date = today_et()
    chain = list(_registry if adapters is None else adapters)
    for adapter in chain:
        puzzle = adapter.fetch(date)
        if puzzle is not None:
            return puzzle
    logger.warning("No source produced a puzzle date=%s sources=%s", date, [a.source_id for a in chain])
    return ResolutionFailure()


if __name__ == "__main__":
    # As a script this module is __main__; use the registry the package populated
    from daily_puzzle import resolve_puzzle as _resolve

    logging.basicConfig(level=logging.INFO)
    print(json.dumps(_resolve().to_dict(), indent=2))
