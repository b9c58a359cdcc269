"""
Feature Analysis Module

This package contains the content-quality analyzers for page text.

Available features:
- Readability and text complexity analysis (formulas, patterns, heatmap, flow)
- Sentiment/tone analysis using an AFINN-style lexicon
- Inclusive-language checking
- Keyword density mapping

Usage:
    from content_quality.features import ReadabilityAnalyzer, SentimentAnalyzer

    # Full report
    report = ReadabilityAnalyzer().calculate_readability(text)

    # Tone only
    sentiment = SentimentAnalyzer().analyze(text)
"""

# Lazy imports to avoid circular dependency
# Use explicit imports: from content_quality.features.sentiment import SentimentAnalyzer

__all__ = [
    # Sentiment
    "SentimentAnalyzer",
    "SentimentResult",
    "analyze_sentiment",
    # Inclusivity
    "InclusivityChecker",
    "InclusivityResult",
    "check_inclusivity",
    # Keyword density
    "KeywordDensityMapper",
    "KeywordDensityReport",
    "generate_keyword_heatmap",
    # Readability
    "ReadabilityAnalyzer",
    "ReadabilityReport",
    "analyze",
]

_LAZY_ATTRIBUTES = {
    "SentimentAnalyzer": ".sentiment",
    "SentimentResult": ".sentiment",
    "analyze_sentiment": ".sentiment",
    "InclusivityChecker": ".inclusivity",
    "InclusivityResult": ".inclusivity",
    "check_inclusivity": ".inclusivity",
    "KeywordDensityMapper": ".keyword_density",
    "KeywordDensityReport": ".keyword_density",
    "generate_keyword_heatmap": ".keyword_density",
    "ReadabilityAnalyzer": ".readability",
    "ReadabilityReport": ".readability",
    "analyze": ".readability",
}


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    module_name = _LAZY_ATTRIBUTES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    return getattr(import_module(module_name, __name__), name)
