"""Feature analysis configuration modules."""

from content_quality.config.features.sentiment import SentimentConfig
from content_quality.config.features.readability import ReadabilityConfig

__all__ = [
    "SentimentConfig",
    "ReadabilityConfig",
]
