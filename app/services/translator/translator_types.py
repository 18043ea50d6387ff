from enum import Enum
from typing import Annotated, Dict, Union

from pydantic import BaseModel, StringConstraints, model_validator

# an empty term would match the zero-width gap between words
DictionaryTerm = Annotated[str, StringConstraints(min_length=1)]
DictionaryMapping = Dict[DictionaryTerm, DictionaryTerm]


class TranslationDirection(str, Enum):
    AMERICAN_TO_BRITISH = "american-to-british"
    BRITISH_TO_AMERICAN = "british-to-american"


class MatchSpan(BaseModel):
    start: int
    end: int
    original: str
    replacement: str

    @model_validator(mode="after")
    def check_range(self) -> "MatchSpan":
        if not 0 <= self.start < self.end:
            raise ValueError(f"invalid span range [{self.start}, {self.end})")
        return self

    @property
    def key(self) -> tuple:
        return self.start, self.end


class TranslationSuccess(BaseModel):
    text: str
    translation: str


class TranslationError(BaseModel):
    error: str


TranslationResult = Union[TranslationSuccess, TranslationError]


class DictionaryConfig(BaseModel):
    """The four dictionaries the translator is built from."""

    american_only: DictionaryMapping = {}
    british_only: DictionaryMapping = {}
    american_to_british_spelling: DictionaryMapping = {}
    american_to_british_titles: DictionaryMapping = {}

    class Config:
        frozen = True
