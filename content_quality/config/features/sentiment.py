"""Sentiment analysis configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from content_quality.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/sentiment.yaml", "sentiment")


class SentimentTextProcessingConfig(BaseSettings):
    """Text processing settings for sentiment analysis."""
    model_config = SettingsConfigDict(
        env_prefix='SENTIMENT_TEXT_',
        case_sensitive=False
    )

    min_text_length: int = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('min_text_length', 50),
        ge=0,
    )
    skip_stopwords: bool = Field(
        default_factory=lambda: _get_config().get('text_processing', {}).get('skip_stopwords', True)
    )


class SentimentOutputConfig(BaseSettings):
    """Output format settings."""
    model_config = SettingsConfigDict(
        env_prefix='SENTIMENT_OUT_',
        case_sensitive=False
    )

    negative_words_limit: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('negative_words_limit', 5),
        ge=0,
    )


class SentimentConfig(BaseSettings):
    """
    Sentiment analysis configuration.
    Loads from configs/features/sentiment.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='SENTIMENT_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    text_processing: SentimentTextProcessingConfig = Field(
        default_factory=SentimentTextProcessingConfig
    )
    output: SentimentOutputConfig = Field(
        default_factory=SentimentOutputConfig
    )
