"""
NYT adapter: fetch the per-date document via the cached NYT client and build the puzzle.
Cards carry absolute grid positions, so this source gives the true layout.
Picture puzzles (any card with an image) take their words from alt text.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from api.errors import ShapeFailure
from daily_puzzle.base import BasePuzzleAdapter
from daily_puzzle.models import Puzzle


class NytCard(BaseModel):
    content: str | None = None
    image_url: str | None = None
    image_alt_text: str | None = None
    position: int = Field(ge=0, le=15)


class NytCategory(BaseModel):
    title: str | None = None
    cards: list[NytCard]


class NytPuzzleDocument(BaseModel):
    id: int | str | None = None
    print_date: str
    categories: list[NytCategory]


def _card_word(card: NytCard, picture: bool) -> str:
    if picture and card.image_alt_text:
        return card.image_alt_text.upper()
    return (card.content or card.image_alt_text or "").upper()


class NytAdapter(BasePuzzleAdapter):
    """Build puzzles from the NYT per-date document (position-ordered cards)."""

    @property
    def source_id(self) -> str:
        return "nyt"

    def fetch_document(self, date: str) -> Any:
        from api.nyt import get_puzzle_document_cached

        return get_puzzle_document_cached(date)

    def build_puzzle(self, document: Any, date: str) -> Puzzle:
        try:
            doc = NytPuzzleDocument.model_validate(document)
        except ValidationError as e:
            raise ShapeFailure(f"malformed NYT document: {e.error_count()} error(s)") from e

        # Flatten across categories; position recovers grid order
        cards = sorted(
            (card for category in doc.categories for card in category.cards),
            key=lambda card: card.position,
        )
        picture = any(card.image_url for card in cards)
        words = [_card_word(card, picture) for card in cards]

        image_map = None
        if picture:
            image_map = {
                card.image_alt_text.upper(): card.image_url
                for card in cards
                if card.image_url and card.image_alt_text
            }
        return self._make_puzzle(doc.print_date, words, image_map)
