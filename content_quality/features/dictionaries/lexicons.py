"""
Accessors for the static lexicons.

Lexicons are built from the constants on first access and cached for the
life of the process; they are immutable, so sharing them is safe.
"""

import logging
from functools import lru_cache
from typing import Tuple

from .constants import (
    INCLUSIVE_TERMS,
    SENTIMENT_LEXICON,
    SENTIMENT_STOPWORDS,
    TOXIC_TRIGGERS,
)
from .schemas import InclusiveTerm, SentimentLexicon

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_sentiment_lexicon() -> SentimentLexicon:
    """Return the shared sentiment lexicon."""
    lexicon = SentimentLexicon(
        weights=dict(SENTIMENT_LEXICON),
        toxic_triggers=TOXIC_TRIGGERS,
        stopwords=SENTIMENT_STOPWORDS,
    )
    logger.debug(f"Loaded sentiment lexicon with {len(lexicon)} words")
    return lexicon


@lru_cache(maxsize=1)
def get_inclusive_terms() -> Tuple[InclusiveTerm, ...]:
    """Return the inclusive-language dictionary, in dictionary order."""
    terms = tuple(
        InclusiveTerm(term=term, suggestion=suggestion, category=category)
        for term, suggestion, category in INCLUSIVE_TERMS
    )
    logger.debug(f"Loaded {len(terms)} inclusive-language terms")
    return terms
