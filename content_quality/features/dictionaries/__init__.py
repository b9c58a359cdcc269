"""
Static lexicons for tone, toxicity, keyword and inclusive-language analysis.

Key components:
- constants: Immutable word lists (sentiment lexicon, triggers, stopwords, inclusive terms)
- schemas: Pydantic models for type-safe lexicon structures
- lexicons: Cached accessors returning the validated lexicons

Usage:
    from content_quality.features.dictionaries import get_sentiment_lexicon

    lexicon = get_sentiment_lexicon()
    lexicon.weight("excellent")   # 5
"""

from .constants import (
    SENTIMENT_LEXICON_VERSION,
    SENTIMENT_LEXICON,
    TOXIC_TRIGGERS,
    SENTIMENT_STOPWORDS,
    KEYWORD_STOPWORDS,
    KEYWORD_MIN_LENGTH,
    INCLUSIVE_CATEGORIES,
    INCLUSIVE_TERMS,
    INCLUSIVITY_PENALTY_PER_TERM,
)

from .schemas import (
    InclusiveTerm,
    SentimentLexicon,
)

from .lexicons import get_inclusive_terms, get_sentiment_lexicon

__all__ = [
    # Constants
    "SENTIMENT_LEXICON_VERSION",
    "SENTIMENT_LEXICON",
    "TOXIC_TRIGGERS",
    "SENTIMENT_STOPWORDS",
    "KEYWORD_STOPWORDS",
    "KEYWORD_MIN_LENGTH",
    "INCLUSIVE_CATEGORIES",
    "INCLUSIVE_TERMS",
    "INCLUSIVITY_PENALTY_PER_TERM",
    # Schemas
    "InclusiveTerm",
    "SentimentLexicon",
    # Accessors
    "get_sentiment_lexicon",
    "get_inclusive_terms",
]
