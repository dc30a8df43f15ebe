"""Question and Option value objects — one step of the assessment."""

from pydantic import BaseModel, Field


class Option(BaseModel, frozen=True):
    label: str = Field(min_length=1)
    score: int = Field(ge=0)


class Question(BaseModel, frozen=True):
    """One assessment question with its options ordered from lowest to highest score."""

    id: str = Field(min_length=1)
    prompt: str = Field(min_length=1)
    options: tuple[Option, ...] = Field(min_length=1)

    @property
    def max_score(self) -> int:
        return max(option.score for option in self.options)
