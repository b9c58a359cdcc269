"""
Unit tests for content_quality/config

Tests YAML defaults, environment overrides and validation.
No real data dependencies - runs in <1 second.
"""

import pytest
from pydantic import ValidationError

from content_quality.config import Settings, clear_config_cache, load_yaml_section, settings
from content_quality.config.features.readability import (
    ReadabilityConfig,
    ReadabilityFlowConfig,
)
from content_quality.config.features.sentiment import SentimentConfig


@pytest.fixture
def fresh_config_cache():
    """Clear the YAML cache before and after a test that changes the configs dir."""
    clear_config_cache()
    yield
    clear_config_cache()


class TestDefaults:
    """Defaults loaded from configs/features/*.yaml."""

    def test_readability_defaults(self):
        config = settings.readability
        assert config.default_audience == "general"
        assert config.text_processing.min_text_length == 20
        assert config.text_processing.words_per_minute == 200
        assert config.flow.window_size == 3
        assert config.flow.complex_word_limit == 5
        assert config.heatmap.min_paragraph_length == 50
        assert config.precision == 1

    def test_sentiment_defaults(self):
        config = settings.sentiment
        assert config.text_processing.min_text_length == 50
        assert config.text_processing.skip_stopwords is True
        assert config.output.negative_words_limit == 5

    def test_yaml_section(self):
        section = load_yaml_section("features/readability.yaml", "readability")
        assert section["flow"]["window_size"] == 3

    def test_missing_file_is_empty(self):
        assert load_yaml_section("features/does_not_exist.yaml") == {}


class TestOverrides:
    """Environment variables and custom config directories."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("READABILITY_FLOW_WINDOW_SIZE", "5")
        assert ReadabilityFlowConfig().window_size == 5

    def test_nested_settings_pick_up_env(self, monkeypatch):
        monkeypatch.setenv("SENTIMENT_OUT_NEGATIVE_WORDS_LIMIT", "2")
        assert Settings().sentiment.output.negative_words_limit == 2

    def test_configs_dir_override(self, monkeypatch, tmp_path, fresh_config_cache):
        features_dir = tmp_path / "features"
        features_dir.mkdir()
        (features_dir / "sentiment.yaml").write_text(
            "sentiment:\n  text_processing:\n    min_text_length: 10\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("CONTENT_QUALITY_CONFIGS_DIR", str(tmp_path))

        config = SentimentConfig()
        assert config.text_processing.min_text_length == 10
        assert config.output.negative_words_limit == 5


class TestValidation:
    """Out-of-range values are rejected."""

    def test_window_size_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("READABILITY_FLOW_WINDOW_SIZE", "0")
        with pytest.raises(ValidationError):
            ReadabilityFlowConfig()

    def test_unknown_default_audience(self, monkeypatch):
        monkeypatch.setenv("READABILITY_DEFAULT_AUDIENCE", "children")
        with pytest.raises(ValidationError):
            ReadabilityConfig()
