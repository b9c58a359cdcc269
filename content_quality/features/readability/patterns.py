"""
Pattern scanners for readability analysis.

- Transitional words: whole-word/phrase matches against the transition dictionary
- Complex-word simplification: complex word -> plain English suggestion
- Sentence length buckets and repeated sentence starts
- Paragraph length buckets

Word counts here use the segmenter's word tokens, so "don't" and "3.5" are one
word each and stray punctuation never counts as a word.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from content_quality.preprocessing.segmenter import split_paragraphs, tokenize_words
from content_quality.utils.numeric import round_int

from .constants import (
    COMPLEX_WORD_SUGGESTIONS,
    LONG_PARAGRAPH_WORDS,
    LONG_SENTENCE_WORDS,
    SAME_START_MIN_RUN,
    SAME_START_MIN_WORD_LENGTH,
    SHORT_PARAGRAPH_WORDS,
    SHORT_SENTENCE_WORDS,
    TRANSITIONAL_WORDS,
    VERY_LONG_SENTENCE_WORDS,
)

_NON_LETTERS_RE = re.compile(r"[^a-z]")

# One pattern per distinct phrase, in dictionary order.
_TRANSITION_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (phrase, re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE))
    for phrase in TRANSITIONAL_WORDS
)


# ===========================
# Transitional Words
# ===========================

def count_transitional_words(text: str) -> Tuple[int, List[str]]:
    """
    Count transitional word and phrase occurrences in text.

    Every occurrence of every distinct phrase is counted, so a sentence with
    "however" and "in fact" contributes two.

    Args:
        text: Raw text

    Returns:
        (total match count, matched phrases in dictionary order)
    """
    if not text:
        return 0, []

    count = 0
    found = []
    for phrase, pattern in _TRANSITION_PATTERNS:
        matches = pattern.findall(text)
        if matches:
            count += len(matches)
            found.append(phrase)
    return count, found


def has_transition(sentence: str) -> bool:
    """True if the sentence contains at least one transitional word or phrase."""
    return any(pattern.search(sentence) for _, pattern in _TRANSITION_PATTERNS)


def sentences_without_transitions(sentences: Iterable[str]) -> List[str]:
    return [s for s in sentences if not has_transition(s)]


# ===========================
# Complex Word Simplification
# ===========================

def find_simplifications(words: Iterable[str]) -> List[Dict[str, str]]:
    """
    Find complex words that have a plain-English alternative.

    Args:
        words: Word tokens (any case)

    Returns:
        List of {"word", "suggestion"} dicts, one per distinct word, in
        first-seen order
    """
    seen = set()
    suggestions = []
    for word in words:
        lower = word.lower()
        if lower in seen or lower not in COMPLEX_WORD_SUGGESTIONS:
            continue
        seen.add(lower)
        suggestions.append({"word": lower, "suggestion": COMPLEX_WORD_SUGGESTIONS[lower]})
    return suggestions


# ===========================
# Sentence Analysis
# ===========================

@dataclass(frozen=True)
class SentenceAnalysis:
    """Sentence length buckets and sentence-start repetition."""
    total: int = 0
    average_length: int = 0
    long_sentences: int = 0
    very_long_sentences: int = 0
    short_sentences: int = 0
    consecutive_same_start: int = 0
    sentence_starts: Dict[str, int] = field(default_factory=dict)
    long_sentences_list: Tuple[str, ...] = ()
    very_long_sentences_list: Tuple[str, ...] = ()
    word_counts: Tuple[int, ...] = ()


def _first_word(tokens: Sequence[str]) -> str:
    if not tokens:
        return ""
    return _NON_LETTERS_RE.sub("", tokens[0].lower())


def analyze_sentences(sentences: Sequence[str]) -> SentenceAnalysis:
    """
    Classify sentences by length and detect repeated sentence starts.

    Buckets (word tokens per sentence): more than 25 is very long, 21-25 is
    long, fewer than 10 is short. A run of two or more consecutive sentences
    opening with the same word (letters only, longer than two characters) adds
    its length to ``consecutive_same_start``.

    Args:
        sentences: Segmented sentences

    Returns:
        SentenceAnalysis
    """
    if not sentences:
        return SentenceAnalysis()

    total_words = 0
    long_count = 0
    very_long_count = 0
    short_count = 0
    long_list = []
    very_long_list = []
    word_counts = []

    consecutive_same_start = 0
    sentence_starts: Dict[str, int] = {}
    previous_start = ""
    run_length = 0

    for sentence in sentences:
        tokens = tokenize_words(sentence)
        word_count = len(tokens)
        word_counts.append(word_count)
        total_words += word_count

        if word_count > VERY_LONG_SENTENCE_WORDS:
            very_long_count += 1
            very_long_list.append(sentence)
        elif word_count > LONG_SENTENCE_WORDS:
            long_count += 1
        elif word_count < SHORT_SENTENCE_WORDS:
            short_count += 1
        if word_count > LONG_SENTENCE_WORDS:
            long_list.append(sentence)

        if not tokens:
            continue

        first_word = _first_word(tokens)
        if (first_word and first_word == previous_start
                and len(first_word) >= SAME_START_MIN_WORD_LENGTH):
            run_length += 1
        else:
            if run_length >= SAME_START_MIN_RUN:
                consecutive_same_start += run_length
            run_length = 1
        previous_start = first_word

        if first_word:
            sentence_starts[first_word] = sentence_starts.get(first_word, 0) + 1

    if run_length >= SAME_START_MIN_RUN:
        consecutive_same_start += run_length

    return SentenceAnalysis(
        total=len(sentences),
        average_length=round_int(total_words / len(sentences)),
        long_sentences=long_count,
        very_long_sentences=very_long_count,
        short_sentences=short_count,
        consecutive_same_start=consecutive_same_start,
        sentence_starts=sentence_starts,
        long_sentences_list=tuple(long_list),
        very_long_sentences_list=tuple(very_long_list),
        word_counts=tuple(word_counts),
    )


# ===========================
# Paragraph Analysis
# ===========================

@dataclass(frozen=True)
class ParagraphAnalysis:
    """Paragraph length buckets."""
    total: int = 0
    average_length: int = 0
    long_paragraphs: int = 0
    short_paragraphs: int = 0
    long_paragraphs_list: Tuple[str, ...] = ()


def analyze_paragraphs(text: str) -> ParagraphAnalysis:
    """
    Classify paragraphs by word count: more than 150 is long, fewer than 50 short.

    Args:
        text: Raw text (paragraphs separated by blank lines or </p><p>)

    Returns:
        ParagraphAnalysis
    """
    paragraphs = split_paragraphs(text)
    if not paragraphs:
        return ParagraphAnalysis()

    total_words = 0
    long_count = 0
    short_count = 0
    long_list = []
    for paragraph in paragraphs:
        word_count = len(tokenize_words(paragraph))
        total_words += word_count
        if word_count > LONG_PARAGRAPH_WORDS:
            long_count += 1
            long_list.append(paragraph)
        elif word_count < SHORT_PARAGRAPH_WORDS:
            short_count += 1

    return ParagraphAnalysis(
        total=len(paragraphs),
        average_length=round_int(total_words / len(paragraphs)),
        long_paragraphs=long_count,
        short_paragraphs=short_count,
        long_paragraphs_list=tuple(long_list),
    )
