"""
Keyword density mapper.

Shows how target keywords (or the most frequent content words when none are
given) are distributed across the paragraphs of a text.

Usage:
    from content_quality.features import generate_keyword_heatmap

    report = generate_keyword_heatmap(text, ["readability"])
    for entry in report.heatmap:
        print(entry.id, entry.density, entry.snippet)
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence

from pydantic import Field

from content_quality.config import settings
from content_quality.features.base import ReportModel
from content_quality.features.dictionaries import KEYWORD_MIN_LENGTH, KEYWORD_STOPWORDS
from content_quality.preprocessing.segmenter import make_snippet, split_paragraphs, tokenize_words
from content_quality.utils.numeric import percentage, round_half_up

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"\d+")


class KeywordDensityEntry(ReportModel):
    """Keyword density of one paragraph."""
    id: int = Field(..., ge=0)
    density: float = Field(..., ge=0.0, le=100.0, description="Matches per 100 words")
    matches: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)
    snippet: str


class KeywordDensityReport(ReportModel):
    heatmap: List[KeywordDensityEntry] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)


def extract_top_keywords(words: Iterable[str], limit: int = 3) -> List[str]:
    """
    Most frequent content words.

    Stopwords, words shorter than four characters and purely numeric tokens
    are skipped. Ties keep first-encountered order.

    Args:
        words: Word tokens (any case)
        limit: Number of keywords to return

    Returns:
        Lowercase keywords, most frequent first
    """
    frequency = {}
    for word in words:
        lower = word.lower()
        if (len(lower) >= KEYWORD_MIN_LENGTH
                and lower not in KEYWORD_STOPWORDS
                and not _NUMERIC_RE.fullmatch(lower)):
            frequency[lower] = frequency.get(lower, 0) + 1

    ranked = sorted(frequency.items(), key=lambda item: -item[1])
    return [word for word, _ in ranked[:limit]]


class KeywordDensityMapper:
    """
    Per-paragraph keyword density.

    Usage:
        mapper = KeywordDensityMapper()
        report = mapper.generate(text, ["seo", "content"])
    """

    def __init__(self, config: Optional[object] = None):
        """
        Args:
            config: Optional ReadabilityHeatmapConfig. If None, loads from settings.
        """
        self.config = config or settings.readability.heatmap

    def paragraphs(self, text: str) -> List[str]:
        """Paragraphs longer than the configured minimum length."""
        min_length = self.config.keyword_min_paragraph_length
        return [p for p in split_paragraphs(text) if len(p) > min_length]

    def generate(
        self,
        text: Optional[str],
        target_keywords: Optional[Sequence[str]] = None,
    ) -> KeywordDensityReport:
        """
        Build the keyword density heatmap.

        Args:
            text: Full text content
            target_keywords: Keywords to track. When empty, the top keywords of
                the whole text are used.

        Returns:
            KeywordDensityReport with the heatmap and the keywords tracked
        """
        if not text:
            return KeywordDensityReport()

        keywords = list(target_keywords or [])
        if not keywords:
            keywords = extract_top_keywords(tokenize_words(text), self.config.top_keywords)
            logger.debug(f"Auto-detected keywords: {keywords}")
        normalized = {k.lower() for k in keywords}

        heatmap = []
        for index, paragraph in enumerate(self.paragraphs(text)):
            words = tokenize_words(paragraph)
            matches = sum(1 for word in words if word.lower() in normalized)
            heatmap.append(KeywordDensityEntry(
                id=index,
                density=round_half_up(percentage(matches, len(words)), 1),
                matches=matches,
                word_count=len(words),
                snippet=make_snippet(paragraph, self.config.snippet_length),
            ))

        return KeywordDensityReport(heatmap=heatmap, keywords=keywords)


def generate_keyword_heatmap(
    text: Optional[str],
    target_keywords: Optional[Sequence[str]] = None,
) -> KeywordDensityReport:
    """Keyword density heatmap of ``text`` with default settings."""
    return KeywordDensityMapper().generate(text, target_keywords)
