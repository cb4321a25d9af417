"""
Canonical puzzle returned to callers, and the uniform failure returned when no
source produced one.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

GRID_SIZE = 16


class Puzzle(BaseModel):
    """One day's puzzle: sequence number, print date, 16 words in grid order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    date: str
    words: tuple[str, ...] = Field(min_length=GRID_SIZE, max_length=GRID_SIZE)
    image_map: dict[str, str] | None = Field(default=None, alias="imageMap")

    @model_validator(mode="after")
    def _image_keys_are_words(self) -> "Puzzle":
        if self.image_map:
            missing = [k for k in self.image_map if k not in self.words]
            if missing:
                raise ValueError(f"imageMap keys not in words: {missing}")
        return self

    @property
    def is_picture_puzzle(self) -> bool:
        return self.image_map is not None

    def to_dict(self) -> dict:
        """JSON-ready dict: {id, date, words, imageMap?}."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResolutionFailure(BaseModel):
    """Every source failed. Carries only a generic, user-actionable message."""

    model_config = ConfigDict(frozen=True)

    error: str = "Failed to fetch today's puzzle"
    message: str = "Please enter words manually using the Edit button"

    def to_dict(self) -> dict:
        return self.model_dump()
