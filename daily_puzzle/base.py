"""
Abstract base for source-specific puzzle adapters.
Each adapter knows how to fetch its raw document for a date and turn it into the
canonical Puzzle. Failures of any kind are absorbed here and reported as None.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from api.errors import PuzzleSourceError, ShapeFailure
from daily_puzzle.dates import sequence_number
from daily_puzzle.models import Puzzle

logger = logging.getLogger(__name__)


class BasePuzzleAdapter(ABC):
    """Adapter for one upstream source: fetch a raw document and build a Puzzle."""

    @property
    @abstractmethod
    def source_id(self) -> str:
        """Source identifier (e.g. 'nyt', 'archive')."""
        ...

    @abstractmethod
    def fetch_document(self, date: str) -> Any:
        """
        Fetch the decoded raw document for this source.

        Args:
            date: Requested date YYYY-MM-DD (publisher timezone).

        Raises:
            TransportFailure, DecodeFailure.
        """
        ...

    @abstractmethod
    def build_puzzle(self, document: Any, date: str) -> Puzzle:
        """
        Pure transform from the raw document to a Puzzle.

        Args:
            document: Decoded JSON from fetch_document.
            date: The requested date (sources may use it to pick an entry).

        Raises:
            ShapeFailure if the document does not yield a valid Puzzle.
        """
        ...

    def fetch(self, date: str) -> Puzzle | None:
        """Fetch and build today's puzzle from this source; None on any source failure."""
        try:
            document = self.fetch_document(date)
            puzzle = self.build_puzzle(document, date)
        except PuzzleSourceError as e:
            logger.warning("source=%s date=%s failed: %s: %s", self.source_id, date, type(e).__name__, e)
            return None
        except Exception:
            logger.warning("source=%s date=%s failed unexpectedly", self.source_id, date, exc_info=True)
            return None
        logger.info("source=%s date=%s resolved puzzle id=%s print_date=%s", self.source_id, date, puzzle.id, puzzle.date)
        return puzzle

    @staticmethod
    def _make_puzzle(print_date: str, words: list[str], image_map: dict[str, str] | None = None) -> Puzzle:
        """
        Build the canonical Puzzle, numbering it from its own print date.
        Bad dates and invariant violations (word count, image keys) become ShapeFailure.
        """
        try:
            return Puzzle(
                id=sequence_number(print_date),
                date=print_date,
                words=tuple(words),
                image_map=image_map,
            )
        except ValidationError as e:
            raise ShapeFailure(f"invalid puzzle: {e.error_count()} error(s): {e.errors()[0]['msg']}") from e
        except ValueError as e:
            raise ShapeFailure(f"invalid print date {print_date!r}: {e}") from e
