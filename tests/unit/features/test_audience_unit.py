"""
Unit tests for content_quality/features/readability/audience.py

Tests audience threshold lookup and metric status classification.
No real data dependencies - runs in <1 second.
"""

import logging

import pytest

from content_quality.features.readability.audience import (
    AudienceThresholds,
    get_status,
    get_thresholds,
    resolve_audience,
)


class TestGetThresholds:
    """Tests for get_thresholds and resolve_audience."""

    @pytest.mark.parametrize("audience,flesch_min,sentence_max,paragraph_max,passive_max", [
        ("general", 60, 20, 150, 10),
        ("professional", 50, 25, 200, 15),
        ("academic", 30, 30, 250, 20),
    ])
    def test_profiles(self, audience, flesch_min, sentence_max, paragraph_max, passive_max):
        thresholds = get_thresholds(audience)
        assert isinstance(thresholds, AudienceThresholds)
        assert thresholds.flesch_min == flesch_min
        assert thresholds.sentence_length_max == sentence_max
        assert thresholds.paragraph_length_max == paragraph_max
        assert thresholds.passive_max == passive_max

    def test_case_insensitive(self):
        assert get_thresholds("ACADEMIC").name == "academic"

    def test_unknown_falls_back_to_general(self, caplog):
        """Unknown audiences use the general profile and log a warning."""
        with caplog.at_level(logging.WARNING):
            thresholds = get_thresholds("children")
        assert thresholds.name == "general"
        assert "children" in caplog.text

    def test_none_resolves_to_default(self):
        assert resolve_audience(None) == "general"

    def test_camel_case_serialization(self):
        data = get_thresholds("general").model_dump(by_alias=True)
        assert data["fleschMin"] == 60
        assert data["sentenceLengthMax"] == 20
        assert data["description"] == "General Audience (Standard Web Content)"


class TestGetStatus:
    """Tests for get_status."""

    @pytest.mark.parametrize("value,expected", [(60, "good"), (50, "warning"), (49, "poor")])
    def test_flesch_general(self, value, expected):
        """Higher is better; warning within 10 points of the minimum."""
        assert get_status(value, "flesch", "general") == expected

    def test_flesch_professional(self):
        assert get_status(50, "flesch", "professional") == "good"

    @pytest.mark.parametrize("metric", ["sentence_length", "sentenceLength"])
    @pytest.mark.parametrize("value,expected", [(20, "good"), (25, "warning"), (26, "poor")])
    def test_sentence_length(self, metric, value, expected):
        assert get_status(value, metric, "general") == expected

    @pytest.mark.parametrize("metric", ["paragraph_length", "paragraphLength"])
    @pytest.mark.parametrize("value,expected", [(150, "good"), (200, "warning"), (201, "poor")])
    def test_paragraph_length(self, metric, value, expected):
        assert get_status(value, metric, "general") == expected

    @pytest.mark.parametrize("value,expected", [(10, "good"), (20, "warning"), (21, "poor")])
    def test_passive(self, value, expected):
        assert get_status(value, "passive", "general") == expected

    def test_unknown_metric_is_neutral(self):
        assert get_status(42, "sparkle", "general") == "neutral"
