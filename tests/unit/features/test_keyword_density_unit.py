"""
Unit tests for content_quality/features/keyword_density.py

Tests keyword extraction and per-paragraph density.
No real data dependencies - runs in <1 second.
"""

import pytest

from content_quality.features.keyword_density import (
    KeywordDensityMapper,
    extract_top_keywords,
    generate_keyword_heatmap,
)

COFFEE = "Coffee beans are roasted to bring out flavor. Good coffee needs fresh beans."
TEA = "Tea leaves are steeped in hot water for several minutes before serving."


class TestExtractTopKeywords:
    """Tests for extract_top_keywords."""

    def test_frequency_and_tie_order(self):
        words = ["apple", "Apple", "banana", "the", "1234", "cherry", "banana", "date"]
        assert extract_top_keywords(words) == ["apple", "banana", "cherry"]

    def test_filters(self):
        """Stopwords, short words and numbers are never keywords."""
        assert extract_top_keywords(["were", "cat", "2024", "because"]) == []

    def test_limit(self):
        assert extract_top_keywords(["alpha", "bravo", "charlie"], limit=1) == ["alpha"]


class TestKeywordDensityMapper:
    """Tests for KeywordDensityMapper.generate."""

    @pytest.fixture
    def mapper(self) -> KeywordDensityMapper:
        return KeywordDensityMapper()

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_text(self, mapper, text):
        report = mapper.generate(text)
        assert report.heatmap == []
        assert report.keywords == []

    def test_target_keywords(self, mapper):
        report = mapper.generate(f"{COFFEE}\n\n{TEA}", ["Coffee"])
        assert report.keywords == ["Coffee"]
        assert [e.id for e in report.heatmap] == [0, 1]

        first, second = report.heatmap
        assert first.matches == 2
        assert first.word_count == 13
        assert first.density == 15.4
        assert first.snippet == COFFEE
        assert second.matches == 0
        assert second.density == 0.0

    def test_short_paragraphs_skipped(self, mapper):
        report = mapper.generate(f"Short one.\n\n{COFFEE}", ["coffee"])
        assert len(report.heatmap) == 1

    def test_auto_keywords(self, mapper):
        report = mapper.generate(f"{COFFEE}\n\n{TEA}")
        assert report.keywords[:2] == ["coffee", "beans"]

    def test_entry_invariants(self, mapper, sample_article):
        for entry in mapper.generate(sample_article).heatmap:
            assert 0 <= entry.matches <= entry.word_count
            assert 0.0 <= entry.density <= 100.0

    def test_module_function(self):
        report = generate_keyword_heatmap(COFFEE, ["beans"])
        assert report.heatmap[0].matches == 2
