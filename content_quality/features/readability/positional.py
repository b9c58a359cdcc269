"""
Positional readability analysis.

- Heatmap: Flesch Reading Ease of each paragraph, rated for the audience
- Flow: Flesch Reading Ease of a sliding window of consecutive sentences,
  plotted against the window's position in the text

Usage:
    from content_quality.features.readability.positional import generate_flow

    for point in generate_flow(text):
        print(point.x, point.y, point.errors)
"""

import logging
from typing import List, Optional, Sequence

from content_quality.preprocessing.segmenter import (
    make_snippet,
    segment_text,
    split_paragraphs,
    tokenize_words,
)
from content_quality.utils.numeric import round_int

from .audience import get_status
from .constants import DEFAULT_AUDIENCE, DIFFICULT_WORD_SYLLABLES
from .formulas import calculate_flesch_score
from .lexical import count_syllables, is_passive_voice
from .schemas import FlowPoint, HeatmapEntry

logger = logging.getLogger(__name__)

SYNTHETIC_SNIPPET_LENGTH = 50


def generate_heatmap(
    text: str,
    audience: Optional[str] = DEFAULT_AUDIENCE,
    snippet_length: int = 100,
    min_paragraph_length: int = 50,
) -> List[HeatmapEntry]:
    """
    Score every paragraph of a text.

    Args:
        text: Full text (paragraphs separated by blank lines or </p><p>)
        audience: Audience profile used to rate each score
        snippet_length: Characters of paragraph text kept in the snippet
        min_paragraph_length: Paragraphs of this many characters or fewer
            (headings, captions) are skipped

    Returns:
        One HeatmapEntry per remaining paragraph, in text order
    """
    paragraphs = [p for p in split_paragraphs(text) if len(p) > min_paragraph_length]

    entries = []
    for index, paragraph in enumerate(paragraphs):
        score = calculate_flesch_score(paragraph)
        entries.append(HeatmapEntry(
            id=index,
            score=score,
            status=get_status(score, "flesch", audience),
            snippet=make_snippet(paragraph, snippet_length),
            length=len(paragraph),
        ))
    return entries


def _count_complex_words(words: Sequence[str]) -> int:
    return sum(1 for word in words if count_syllables(word) >= DIFFICULT_WORD_SYLLABLES)


def _reading_seconds(word_count: int, words_per_minute: int) -> int:
    return round_int(word_count / words_per_minute * 60)


def generate_flow(
    text: str,
    window_size: int = 3,
    complex_word_limit: int = 5,
    snippet_length: int = 40,
    words_per_minute: int = 200,
) -> List[FlowPoint]:
    """
    Readability over the course of a text.

    For every run of ``window_size`` consecutive sentences the window's Flesch
    score, passive sentences, complex words (3+ syllables) and reading time
    are computed. ``errors`` is the passive sentence count plus one when the
    window has more than ``complex_word_limit`` complex words.

    Texts with fewer sentences than the window get a single point scored over
    the whole text.

    Args:
        text: Full text
        window_size: Sentences per window (>= 1)
        complex_word_limit: Complex words a window may hold before it counts an error
        snippet_length: Characters of the window's first sentence kept in the snippet
        words_per_minute: Reading speed

    Returns:
        max(1, N - window_size + 1) FlowPoints for N sentences
    """
    if window_size < 1:
        raise ValueError(f"window_size must be >= 1, got {window_size}")

    segmentation = segment_text(text)
    sentences = segmentation.sentences
    total = len(sentences)

    if total < window_size:
        return [FlowPoint(
            x=0,
            y=calculate_flesch_score(text),
            snippet=(text or "")[:SYNTHETIC_SNIPPET_LENGTH] + "...",
            errors=0,
            time=_reading_seconds(segmentation.word_count, words_per_minute),
            complex=_count_complex_words(segmentation.words),
        )]

    span = total - window_size
    points = []
    for i in range(span + 1):
        window = sentences[i:i + window_size]
        window_text = " ".join(window)
        words = tokenize_words(window_text)

        passive_count = sum(1 for sentence in window if is_passive_voice(sentence))
        complex_words = _count_complex_words(words)
        errors = passive_count + (1 if complex_words > complex_word_limit else 0)

        points.append(FlowPoint(
            x=round_int(i / span * 100) if span > 0 else 0,
            y=calculate_flesch_score(window_text),
            snippet=window[0][:snippet_length] + "...",
            errors=errors,
            time=_reading_seconds(len(words), words_per_minute),
            complex=complex_words,
        ))

    logger.debug(f"Generated {len(points)} flow points from {total} sentences")
    return points
