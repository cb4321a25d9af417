"""
Community archive adapter: pick the entry for the requested date (or the latest
one when the archive lags) and rebuild a 16-word grid from its answer groups.

The archive has no positions, so words are interleaved by row across the groups
in level order. This does not match the published layout; it is only a
deterministic stand-in until the NYT document is reachable again.
"""

from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from api.errors import ShapeFailure
from daily_puzzle.base import BasePuzzleAdapter
from daily_puzzle.models import Puzzle

GROUP_SIZE = 4


class ArchiveAnswer(BaseModel):
    level: int
    group: str | None = None
    members: list[str]


class ArchivePuzzle(BaseModel):
    id: int | str | None = None
    date: str
    answers: list[ArchiveAnswer]


# Only the top level is checked up front; old entries may be malformed
_archive_adapter = TypeAdapter(list[Any])


def select_entry(entries: list, date: str) -> dict | None:
    """
    Exact date match if present, else the entry with the latest date; None if no
    entry carries a date. Non-objects and entries without a string date are ignored.
    """
    dated = [entry for entry in entries if isinstance(entry, dict) and isinstance(entry.get("date"), str)]
    for entry in dated:
        if entry["date"] == date:
            return entry
    if not dated:
        return None
    # YYYY-MM-DD sorts lexicographically in date order
    return max(dated, key=lambda entry: entry["date"])


def interleave_members(answers: list[ArchiveAnswer]) -> list[str]:
    """
    Row i of the grid is member i of each group, groups in ascending level.
    Missing members are skipped.
    """
    ordered = sorted(answers, key=lambda answer: answer.level)
    words = []
    for row in range(GROUP_SIZE):
        for answer in ordered:
            if row < len(answer.members) and answer.members[row]:
                words.append(answer.members[row].upper())
    return words


class ArchiveAdapter(BasePuzzleAdapter):
    """Build puzzles from the community archive (group membership only, no images)."""

    @property
    def source_id(self) -> str:
        return "archive"

    def fetch_document(self, date: str) -> Any:
        from api.archive import get_archive_cached

        return get_archive_cached()

    def build_puzzle(self, document: Any, date: str) -> Puzzle:
        try:
            entries = _archive_adapter.validate_python(document)
        except ValidationError as e:
            raise ShapeFailure(f"malformed archive: {e.error_count()} error(s)") from e

        selected = select_entry(entries, date)
        if selected is None:
            raise ShapeFailure("archive has no dated entries")
        try:
            entry = ArchivePuzzle.model_validate(selected)
        except ValidationError as e:
            raise ShapeFailure(f"malformed archive entry {selected['date']}: {e.error_count()} error(s)") from e
        return self._make_puzzle(entry.date, interleave_members(entry.answers))
