"""
Data structures for the static lexicons.

This module defines the shape of lexicon data using Pydantic models.
These schemas enforce type safety and validation throughout the pipeline.
"""

import re
from typing import Dict, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import INCLUSIVE_CATEGORIES


class InclusiveTerm(BaseModel):
    """
    Single entry of the inclusive-language dictionary.

    ``term`` may be a multi-word phrase ("mother tongue"); it is matched as a
    whole word/phrase, case-insensitively.
    """
    model_config = ConfigDict(frozen=True)

    term: str = Field(..., description="Flagged word or phrase (lowercase)")
    suggestion: str = Field(..., description="Preferred alternative")
    category: str = Field(..., description="Gender, Race or Disability")

    @field_validator('term')
    @classmethod
    def term_must_not_be_empty(cls, v: str) -> str:
        """Ensure term is not empty and normalize to lowercase."""
        if not v.strip():
            raise ValueError('Term cannot be empty')
        return v.strip().lower()

    @field_validator('category')
    @classmethod
    def category_must_be_known(cls, v: str) -> str:
        if v not in INCLUSIVE_CATEGORIES:
            raise ValueError(f"Invalid category: {v}. Must be one of {INCLUSIVE_CATEGORIES}")
        return v

    def compile_pattern(self) -> re.Pattern:
        """Whole-word, case-insensitive pattern for this term."""
        return re.compile(rf"\b{re.escape(self.term)}\b", re.IGNORECASE)


class SentimentLexicon(BaseModel):
    """
    Sentiment lexicon with its toxic-trigger and stopword lists.

    Lookups are on lowercase tokens.
    """
    model_config = ConfigDict(frozen=True)

    weights: Dict[str, int] = Field(..., description="Word -> sentiment weight")
    toxic_triggers: Tuple[str, ...] = Field(default=())
    stopwords: FrozenSet[str] = Field(default=frozenset())

    @field_validator('weights')
    @classmethod
    def weights_must_be_in_range(cls, v: Dict[str, int]) -> Dict[str, int]:
        """AFINN weights lie in [-5, 5]."""
        out_of_range = {word: w for word, w in v.items() if not -5 <= w <= 5}
        if out_of_range:
            raise ValueError(f"Weights outside [-5, 5]: {out_of_range}")
        return v

    def weight(self, word: str) -> int:
        """Sentiment weight of ``word``, 0 if unknown."""
        return self.weights.get(word, 0)

    def is_toxic(self, word: str) -> bool:
        return word in self.toxic_triggers

    def is_stopword(self, word: str) -> bool:
        return word in self.stopwords

    def __len__(self) -> int:
        """Return number of weighted words."""
        return len(self.weights)
