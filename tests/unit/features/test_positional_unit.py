"""
Unit tests for content_quality/features/readability/positional.py

Tests the paragraph heatmap and the sentence-window flow.
No real data dependencies - runs in <1 second.
"""

import pytest

from content_quality.features.readability.formulas import calculate_flesch_score
from content_quality.features.readability.positional import generate_flow, generate_heatmap


class TestGenerateHeatmap:
    """Tests for generate_heatmap."""

    def test_one_entry_per_paragraph(self, two_paragraph_text: str):
        entries = generate_heatmap(two_paragraph_text, "general")
        assert [e.id for e in entries] == [0, 1]
        for entry in entries:
            assert 0 <= entry.score <= 100
            assert entry.status in {"good", "warning", "poor"}

    def test_entry_fields(self, two_paragraph_text: str):
        """Score, length and snippet describe the paragraph."""
        first = two_paragraph_text.split("\n\n")[0]
        entry = generate_heatmap(two_paragraph_text)[0]
        assert entry.score == calculate_flesch_score(first)
        assert entry.length == len(first)
        assert entry.snippet == first

    def test_short_blocks_skipped(self, two_paragraph_text: str):
        """Headings of 50 characters or fewer get no entry."""
        entries = generate_heatmap("Title\n\n" + two_paragraph_text)
        assert len(entries) == 2

    def test_snippet_truncated(self):
        paragraph = "This sentence is long enough to be a paragraph for the heatmap. " * 3
        entry = generate_heatmap(paragraph, snippet_length=20)[0]
        assert entry.snippet == paragraph.strip()[:20] + "..."

    def test_empty_text(self):
        assert generate_heatmap("") == []


class TestGenerateFlow:
    """Tests for generate_flow."""

    @pytest.fixture
    def five_sentences(self) -> str:
        return "One cat sat. Two dogs ran. Three birds flew. Four fish swam. Five ants dug."

    def test_window_count(self, five_sentences: str):
        """N sentences and a window of 3 give N - 2 points."""
        points = generate_flow(five_sentences, window_size=3)
        assert len(points) == 3
        assert [p.x for p in points] == [0, 50, 100]

    def test_snippet_is_first_sentence(self, five_sentences: str):
        points = generate_flow(five_sentences, snippet_length=40)
        assert points[1].snippet == "Two dogs ran...."

    def test_exact_window_size_has_x_zero(self):
        points = generate_flow("One cat sat. Two dogs ran. Three birds flew.")
        assert len(points) == 1
        assert points[0].x == 0

    def test_fewer_sentences_than_window(self, simple_text: str):
        """A single synthetic point scored over the whole text."""
        points = generate_flow(simple_text)
        assert len(points) == 1
        assert points[0].x == 0
        assert points[0].errors == 0
        assert points[0].y == calculate_flesch_score(simple_text)

    def test_empty_text(self):
        points = generate_flow("")
        assert len(points) == 1
        assert points[0].y == 0

    def test_passive_sentence_counts_as_error(self):
        points = generate_flow("The ball was thrown by John. It rolled away. We laughed.")
        assert points[0].errors == 1

    def test_complex_words_over_limit_add_error(self):
        """Eight words of 3+ syllables in one window exceed the limit of 5."""
        text = (
            "Beautiful elephants celebrate. Wonderful umbrellas everywhere. "
            "Educational opportunities abound."
        )
        point = generate_flow(text)[0]
        assert point.complex == 8
        assert point.errors == 1
        assert point.time == 2

    def test_invalid_window_size(self):
        with pytest.raises(ValueError):
            generate_flow("Some text here.", window_size=0)
