"""
Content Quality Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/features/*.yaml
3. Automatically override with environment variables from .env or the shell

Usage:
    from content_quality.config import settings

    # Access readability settings
    window = settings.readability.flow.window_size

    # Access sentiment settings
    min_length = settings.sentiment.text_processing.min_text_length
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from content_quality.config._loader import clear_config_cache, load_yaml_section
from content_quality.config.features import (
    ReadabilityConfig,
    SentimentConfig,
)


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from content_quality.config import settings

        settings.readability.default_audience
        settings.sentiment.output.negative_words_limit
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    readability: ReadabilityConfig = Field(default_factory=ReadabilityConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


__all__ = [
    "settings",
    "Settings",
    "ReadabilityConfig",
    "SentimentConfig",
    "load_yaml_section",
    "clear_config_cache",
]
