"""
Segmenter module for readability analysis.

Splits raw page text into sentences, word tokens and paragraphs. Every
analyzer in the package consumes the output of this module, so the rules here
define what a "sentence" and a "word" are for all scores.

Sentence boundaries come from an NLTK Punkt tokenizer built from explicit
English parameters (no trained model download is required). Hard line breaks
always end a sentence, so headings and list items without terminal
punctuation do not merge into the following sentence.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

# Lowercase, without the trailing period (Punkt convention).
DEFAULT_ABBREVIATIONS: FrozenSet[str] = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "mt",
    "e.g", "i.e", "etc", "vs", "cf", "al", "approx", "dept", "est",
    "inc", "ltd", "co", "corp", "fig", "vol",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept",
    "oct", "nov", "dec", "u.s", "u.k", "a.m", "p.m",
})

# Alphanumeric runs; apostrophes and periods may join word characters
# ("don't", "e.g", "3.5") and commas may group digits ("1,000").
WORD_PATTERN = r"\w+(?:[.'’]\w+)*(?:,\d{3})*"

PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n|</p>\s*<p>")

MIN_SENTENCE_LENGTH = 2


@dataclass(frozen=True)
class TextSegmentation:
    """Sentences and word-like tokens of a text."""
    sentences: Tuple[str, ...] = ()
    words: Tuple[str, ...] = ()

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to score (no sentence or no word)."""
        return not self.sentences or not self.words


class TextSegmenter:
    """Locale-aware (English) sentence and word segmenter."""

    def __init__(self, abbreviations: Optional[Iterable[str]] = None):
        """
        Initialize the segmenter

        Args:
            abbreviations: Lowercase abbreviations (without trailing period)
                that never end a sentence. Defaults to DEFAULT_ABBREVIATIONS.
        """
        params = PunktParameters()
        params.abbrev_types = set(
            abbreviations if abbreviations is not None else DEFAULT_ABBREVIATIONS
        )
        # A PunktParameters instance is accepted in place of training text.
        self._sentence_tokenizer = PunktSentenceTokenizer(params)
        self._word_tokenizer = RegexpTokenizer(WORD_PATTERN)

    def split_sentences(self, text: str) -> List[str]:
        """
        Split text into trimmed sentences

        Args:
            text: Raw text

        Returns:
            List[str]: Sentences longer than one character
        """
        if not text or not text.strip():
            return []

        sentences = []
        for line in text.splitlines():
            if not line.strip():
                continue
            for sentence in self._sentence_tokenizer.tokenize(line):
                sentence = sentence.strip()
                if len(sentence) >= MIN_SENTENCE_LENGTH:
                    sentences.append(sentence)
        return sentences

    def tokenize_words(self, text: str) -> List[str]:
        """Return the word-like tokens of ``text`` (punctuation is dropped)."""
        if not text:
            return []
        return self._word_tokenizer.tokenize(text)

    def segment(self, text: str) -> TextSegmentation:
        """Segment text into sentences and words in one call."""
        return TextSegmentation(
            sentences=tuple(self.split_sentences(text)),
            words=tuple(self.tokenize_words(text)),
        )


def split_paragraphs(text: str) -> List[str]:
    """
    Split text on blank lines or adjacent </p><p> boundaries

    Paragraphs are trimmed; empty ones are dropped.
    """
    if not text:
        return []
    paragraphs = PARAGRAPH_SPLIT_RE.split(text)
    return [p.strip() for p in paragraphs if p.strip()]


def make_snippet(text: str, length: int) -> str:
    """Truncate ``text`` to ``length`` characters, marking the cut with '...'."""
    if len(text) > length:
        return text[:length] + "..."
    return text


_DEFAULT_SEGMENTER = TextSegmenter()


def segment_text(text: str) -> TextSegmentation:
    """Segment text with the default English segmenter."""
    return _DEFAULT_SEGMENTER.segment(text)


def split_sentences(text: str) -> List[str]:
    """Split text into sentences with the default English segmenter."""
    return _DEFAULT_SEGMENTER.split_sentences(text)


def tokenize_words(text: str) -> List[str]:
    """Tokenize text into word-like tokens with the default English segmenter."""
    return _DEFAULT_SEGMENTER.tokenize_words(text)
