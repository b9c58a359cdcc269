"""
Readability formula calculator.

Computes the classical readability indices from counts gathered in a single
pass over segmented text:

- Flesch Reading Ease:   206.835 - 1.015 × (W/S) - 84.6 × (Y/W), clamped to 0-100
- Flesch-Kincaid Grade:  0.39 × (W/S) + 11.8 × (Y/W) - 15.59, floored at 0
- Coleman-Liau Index:    0.0588 × L - 0.296 × S100 - 15.8
                         (L = letters per 100 words, S100 = sentences per 100 words)
- LIX:                   (W/S) + 100 × (long words / W), long = more than 6 characters

Usage:
    from content_quality.features.readability.formulas import TextStatistics, flesch_reading_ease

    stats = TextStatistics.from_segmentation(segment_text(text))
    print(flesch_reading_ease(stats))
"""

from dataclasses import dataclass

from content_quality.preprocessing.segmenter import TextSegmentation, segment_text
from content_quality.utils.numeric import clamp, round_half_up, round_int

from .constants import (
    COLEMAN_LIAU_LETTER_WEIGHT,
    COLEMAN_LIAU_OFFSET,
    COLEMAN_LIAU_SENTENCE_WEIGHT,
    DIFFICULT_WORD_SYLLABLES,
    FK_OFFSET,
    FK_SENTENCE_WEIGHT,
    FK_SYLLABLE_WEIGHT,
    FLESCH_BASE,
    FLESCH_LEVEL_FLOOR,
    FLESCH_LEVELS,
    FLESCH_SENTENCE_WEIGHT,
    FLESCH_SYLLABLE_WEIGHT,
    LIX_LONG_WORD_LENGTH,
)
from .lexical import count_syllables


@dataclass(frozen=True)
class TextStatistics:
    """Counts every formula is computed from."""
    sentence_count: int
    word_count: int
    syllable_count: int
    char_count: int
    long_word_count: int
    difficult_word_count: int = 0

    @classmethod
    def from_segmentation(cls, segmentation: TextSegmentation) -> "TextStatistics":
        """Gather syllable, letter, long-word and difficult-word counts in one pass."""
        syllables = 0
        chars = 0
        long_words = 0
        difficult = 0
        for word in segmentation.words:
            word_syllables = count_syllables(word)
            syllables += word_syllables
            chars += sum(1 for ch in word if ch.isalnum())
            if len(word) > LIX_LONG_WORD_LENGTH:
                long_words += 1
            if word_syllables >= DIFFICULT_WORD_SYLLABLES:
                difficult += 1

        return cls(
            sentence_count=segmentation.sentence_count,
            word_count=segmentation.word_count,
            syllable_count=syllables,
            char_count=chars,
            long_word_count=long_words,
            difficult_word_count=difficult,
        )

    @property
    def words_per_sentence(self) -> float:
        self.ensure_scorable()
        return self.word_count / self.sentence_count

    @property
    def syllables_per_word(self) -> float:
        self.ensure_scorable()
        return self.syllable_count / self.word_count

    def ensure_scorable(self) -> None:
        if self.sentence_count <= 0 or self.word_count <= 0:
            raise ValueError(
                "Readability formulas require at least one sentence and one word "
                f"(got {self.sentence_count} sentences, {self.word_count} words)"
            )


def flesch_reading_ease(stats: TextStatistics) -> int:
    """Flesch Reading Ease, rounded and clamped to [0, 100]."""
    score = round_int(
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * stats.words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * stats.syllables_per_word
    )
    return int(clamp(score, 0, 100))


def flesch_kincaid_grade(stats: TextStatistics) -> float:
    """Flesch-Kincaid Grade Level, rounded to one decimal and floored at 0."""
    grade = (
        FK_SENTENCE_WEIGHT * stats.words_per_sentence
        + FK_SYLLABLE_WEIGHT * stats.syllables_per_word
        - FK_OFFSET
    )
    return max(0.0, round_half_up(grade, 1))


def coleman_liau_index(stats: TextStatistics) -> float:
    """Coleman-Liau Index, rounded to one decimal."""
    stats.ensure_scorable()
    letters_per_100 = stats.char_count / stats.word_count * 100
    sentences_per_100 = stats.sentence_count / stats.word_count * 100
    index = (
        COLEMAN_LIAU_LETTER_WEIGHT * letters_per_100
        - COLEMAN_LIAU_SENTENCE_WEIGHT * sentences_per_100
        - COLEMAN_LIAU_OFFSET
    )
    return round_half_up(index, 1)


def lix_score(stats: TextStatistics) -> int:
    """LIX (Läsbarhetsindex), rounded to an integer."""
    return round_int(
        stats.words_per_sentence + stats.long_word_count / stats.word_count * 100
    )


def flesch_level(score: float) -> str:
    """Map a Flesch Reading Ease score to its qualitative level."""
    for minimum, label in FLESCH_LEVELS:
        if score >= minimum:
            return label
    return FLESCH_LEVEL_FLOOR


def calculate_flesch_score(text: str) -> int:
    """
    Flesch Reading Ease of an arbitrary text block.

    Returns 0 when the block has no sentence or no word.
    """
    segmentation = segment_text(text)
    if segmentation.is_empty:
        return 0
    return flesch_reading_ease(TextStatistics.from_segmentation(segmentation))
