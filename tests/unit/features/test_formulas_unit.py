"""
Unit tests for content_quality/features/readability/formulas.py

Tests the four readability formulas and level mapping against hand-computed
values.
No real data dependencies - runs in <1 second.
"""

import pytest

from content_quality.features.readability.formulas import (
    TextStatistics,
    calculate_flesch_score,
    coleman_liau_index,
    flesch_kincaid_grade,
    flesch_level,
    flesch_reading_ease,
    lix_score,
)
from content_quality.preprocessing.segmenter import segment_text


class TestTextStatistics:
    """Tests for TextStatistics.from_segmentation."""

    def test_counts_simple_text(self, simple_text: str):
        """2 sentences, 11 words, 12 syllables ('sunny' has two)."""
        stats = TextStatistics.from_segmentation(segment_text(simple_text))
        assert stats.sentence_count == 2
        assert stats.word_count == 11
        assert stats.syllable_count == 12
        assert stats.char_count == 31
        assert stats.long_word_count == 0
        assert stats.difficult_word_count == 0

    def test_long_and_difficult_words(self):
        """'readability' is long (>6 chars) and difficult (3+ syllables)."""
        stats = TextStatistics.from_segmentation(segment_text("Readability matters."))
        assert stats.long_word_count == 2
        assert stats.difficult_word_count == 1

    def test_zero_counts_raise(self):
        """Ratios are undefined without sentences or words."""
        stats = TextStatistics(
            sentence_count=0, word_count=0, syllable_count=0, char_count=0, long_word_count=0
        )
        with pytest.raises(ValueError):
            _ = stats.words_per_sentence
        with pytest.raises(ValueError):
            flesch_reading_ease(stats)
        with pytest.raises(ValueError):
            coleman_liau_index(stats)


class TestFormulas:
    """Tests for the formula functions on fixed statistics."""

    @pytest.fixture
    def stats(self) -> TextStatistics:
        """10 words, 1 sentence, 15 syllables, 50 letters, 2 long words."""
        return TextStatistics(
            sentence_count=1,
            word_count=10,
            syllable_count=15,
            char_count=50,
            long_word_count=2,
        )

    def test_flesch_reading_ease(self, stats: TextStatistics):
        """206.835 - 10.15 - 126.9 = 69.785 -> 70."""
        assert flesch_reading_ease(stats) == 70

    def test_flesch_kincaid_grade(self, stats: TextStatistics):
        """3.9 + 17.7 - 15.59 = 6.01 -> 6.0."""
        assert flesch_kincaid_grade(stats) == pytest.approx(6.0)

    def test_coleman_liau_index(self, stats: TextStatistics):
        """0.0588*500 - 0.296*10 - 15.8 = 10.64 -> 10.6."""
        assert coleman_liau_index(stats) == pytest.approx(10.6)

    def test_lix_score(self, stats: TextStatistics):
        """10 + 20 = 30."""
        assert lix_score(stats) == 30

    def test_flesch_is_clamped(self, simple_text: str):
        """Very easy text would score above 100 without clamping."""
        stats = TextStatistics.from_segmentation(segment_text(simple_text))
        assert flesch_reading_ease(stats) == 100

    def test_fk_grade_floored_at_zero(self, simple_text: str):
        stats = TextStatistics.from_segmentation(segment_text(simple_text))
        assert flesch_kincaid_grade(stats) == 0.0


class TestFleschLevel:
    """Tests for flesch_level breakpoints."""

    @pytest.mark.parametrize("score,expected", [
        (100, "Very Easy (5th grade)"),
        (90, "Very Easy (5th grade)"),
        (89, "Easy (6th grade)"),
        (70, "Fairly Easy (7th grade)"),
        (60, "Standard (8th-9th grade)"),
        (55, "Fairly Difficult (10th-12th grade)"),
        (30, "Difficult (College)"),
        (29, "Very Difficult (Professional)"),
        (0, "Very Difficult (Professional)"),
    ])
    def test_breakpoints(self, score: int, expected: str):
        assert flesch_level(score) == expected


class TestCalculateFleschScore:
    """Tests for calculate_flesch_score."""

    def test_empty_text_scores_zero(self):
        assert calculate_flesch_score("") == 0

    def test_within_range(self, sample_article: str):
        assert 0 <= calculate_flesch_score(sample_article) <= 100
