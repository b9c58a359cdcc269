"""
Sentiment Analysis Feature Extractor

This module scores the tone of a text with a lightweight AFINN-style lexicon
and flags toxic/aggressive wording.

The analyzer:
1. Tokenizes lowercased text with the segmenter's word rule
2. Skips stopwords
3. Sums lexicon weights of matched words
4. Returns a structured SentimentResult

Usage:
    from content_quality.features import SentimentAnalyzer

    analyzer = SentimentAnalyzer()
    result = analyzer.analyze("The support team was helpful and the product is excellent...")

    print(f"Label: {result.label}")
    print(f"Negative words: {result.negative_words}")
"""

import logging
from typing import List, Optional

from pydantic import Field

from content_quality.config import settings
from content_quality.features.base import ReportModel
from content_quality.features.dictionaries import SentimentLexicon, get_sentiment_lexicon
from content_quality.preprocessing.segmenter import tokenize_words

logger = logging.getLogger(__name__)

# (exclusive lower bound, label), checked in order; negatives mirror positives.
_POSITIVE_LABELS = ((10, "Very Positive"), (2, "Positive"))
_NEGATIVE_LABELS = ((-10, "Very Negative"), (-2, "Negative"))
NEUTRAL_LABEL = "Neutral"


class SentimentResult(ReportModel):
    """
    Tone of a text.

    - score: sum of lexicon weights of matched words
    - average: score per matched word (0 when nothing matched)
    - word_count: number of matched (emotional) words
    """
    score: int = 0
    average: float = 0.0
    label: str = NEUTRAL_LABEL
    toxicity: bool = False
    negative_words: List[str] = Field(default_factory=list)
    word_count: int = Field(0, ge=0)


def sentiment_label(score: float) -> str:
    """Map a total sentiment score to its label (2 and 10 themselves are Neutral/Positive)."""
    for bound, label in _POSITIVE_LABELS:
        if score > bound:
            return label
    for bound, label in _NEGATIVE_LABELS:
        if score < bound:
            return label
    return NEUTRAL_LABEL


class SentimentAnalyzer:
    """
    Lexicon-based tone scorer.

    Usage:
        analyzer = SentimentAnalyzer()
        result = analyzer.analyze(text)
    """

    def __init__(self, config: Optional[object] = None, lexicon: Optional[SentimentLexicon] = None):
        """
        Initialize sentiment analyzer.

        Args:
            config: Optional SentimentConfig object. If None, loads from settings.
            lexicon: Optional SentimentLexicon. If None, uses the shared lexicon.
        """
        self.config = config or settings.sentiment
        self.lexicon = lexicon or get_sentiment_lexicon()

        logger.info(
            f"Initialized SentimentAnalyzer with {len(self.lexicon)} lexicon words "
            f"(min_text_length={self.config.text_processing.min_text_length})"
        )

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into lowercase words, dropping stopwords if configured.

        Args:
            text: Input text

        Returns:
            List of tokens (words)
        """
        tokens = tokenize_words(text.lower())
        if self.config.text_processing.skip_stopwords:
            tokens = [t for t in tokens if not self.lexicon.is_stopword(t)]
        return tokens

    def analyze(self, text: Optional[str]) -> SentimentResult:
        """
        Score the tone of a text.

        Texts shorter than the configured minimum get a neutral zero result.

        Args:
            text: Input text to analyze

        Returns:
            SentimentResult
        """
        if not text or len(text) < self.config.text_processing.min_text_length:
            return SentimentResult()

        score = 0
        word_count = 0
        toxic = False
        negative_words = []

        for token in self.tokenize(text):
            if self.lexicon.is_toxic(token):
                toxic = True
            weight = self.lexicon.weight(token)
            if weight:
                score += weight
                word_count += 1
                if weight < 0:
                    negative_words.append(token)

        unique_negatives = list(dict.fromkeys(negative_words))
        limit = self.config.output.negative_words_limit

        logger.debug(f"Sentiment score {score} over {word_count} emotional words")
        return SentimentResult(
            score=score,
            average=score / word_count if word_count > 0 else 0.0,
            label=sentiment_label(score),
            toxicity=toxic,
            negative_words=unique_negatives[:limit],
            word_count=word_count,
        )

    def analyze_batch(self, texts: List[str]) -> List[SentimentResult]:
        """
        Score multiple texts.

        Args:
            texts: List of text strings

        Returns:
            List of SentimentResult objects
        """
        return [self.analyze(text) for text in texts]


def analyze_sentiment(text: Optional[str]) -> SentimentResult:
    """Score ``text`` with a default-configured SentimentAnalyzer."""
    return SentimentAnalyzer().analyze(text)
