"""Readability analysis configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from content_quality.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/readability.yaml", "readability")


class ReadabilityTextProcessingConfig(BaseSettings):
    """Text processing settings for readability analysis."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_TEXT_',
        case_sensitive=False
    )

    min_text_length: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('min_text_length', 20),
        ge=0,
    )
    words_per_minute: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('words_per_minute', 200),
        ge=1,
    )


class ReadabilityFlowConfig(BaseSettings):
    """Sliding-window flow settings."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_FLOW_',
        case_sensitive=False
    )

    window_size: int = Field(
        default_factory=lambda: _get_config().get('flow', {}).get('window_size', 3),
        ge=1,
    )
    complex_word_limit: int = Field(
        default_factory=lambda: _get_config().get('flow', {}).get('complex_word_limit', 5),
        ge=0,
    )
    snippet_length: int = Field(
        default_factory=lambda: _get_config().get('flow', {}).get('snippet_length', 40),
        ge=1,
    )


class ReadabilityHeatmapConfig(BaseSettings):
    """Paragraph heatmap and keyword density settings."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_HEATMAP_',
        case_sensitive=False
    )

    snippet_length: int = Field(
        default_factory=lambda: _get_config().get('heatmap', {}).get('snippet_length', 100),
        ge=1,
    )
    min_paragraph_length: int = Field(
        default_factory=lambda: _get_config().get('heatmap', {}).get('min_paragraph_length', 50),
        ge=0,
    )
    keyword_min_paragraph_length: int = Field(
        default_factory=lambda: _get_config().get('heatmap', {}).get('keyword_min_paragraph_length', 50),
        ge=0,
    )
    top_keywords: int = Field(
        default_factory=lambda: _get_config().get('heatmap', {}).get('top_keywords', 3),
        ge=1,
    )


class ReadabilityOutputConfig(BaseSettings):
    """Output format settings for readability reports."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_OUT_',
        case_sensitive=False
    )

    precision: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('precision', 1),
        ge=0,
    )
    sentence_snippet_length: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('sentence_snippet_length', 200),
        ge=1,
    )
    paragraph_snippet_length: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('paragraph_snippet_length', 300),
        ge=1,
    )
    list_limit: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('list_limit', 10),
        ge=1,
    )


class ReadabilityConfig(BaseSettings):
    """
    Readability analysis configuration.
    Loads from configs/features/readability.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    default_audience: Literal["general", "professional", "academic"] = Field(
        default_factory=lambda: _get_config().get('default_audience', 'general')
    )
    text_processing: ReadabilityTextProcessingConfig = Field(
        default_factory=ReadabilityTextProcessingConfig
    )
    flow: ReadabilityFlowConfig = Field(
        default_factory=ReadabilityFlowConfig
    )
    heatmap: ReadabilityHeatmapConfig = Field(
        default_factory=ReadabilityHeatmapConfig
    )
    output: ReadabilityOutputConfig = Field(
        default_factory=ReadabilityOutputConfig
    )

    @property
    def precision(self) -> int:
        """Shortcut for output precision."""
        return self.output.precision
