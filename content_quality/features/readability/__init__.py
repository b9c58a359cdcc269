"""
Readability and Content-Quality Analysis Module

This package measures how easy a page's main content is to read and how it
could be improved: classical readability indices, passive voice, transitions,
sentence and paragraph length, a per-paragraph heatmap and a sentence-window
flow, combined into one report with audience-aware recommendations.

Key Components:
- ReadabilityAnalyzer: Main report builder
- ReadabilityReport: Pydantic model for the report (camelCase JSON)
- AudienceThresholds / get_thresholds / get_status: audience policy
- analyze: One-call entry point with default settings

Usage:
    from content_quality.features.readability import analyze

    report = analyze(page_text, audience="general")
    print(f"Score: {report.score} ({report.level})")
    for rec in report.recommendations:
        print(f"[{rec.type}] {rec.message}")
"""

from .analyzer import ReadabilityAnalyzer, analyze
from .audience import AudienceThresholds, get_status, get_thresholds
from .schemas import (
    ReadabilityReport,
    HeatmapEntry,
    FlowPoint,
    Recommendation,
    SimplificationSuggestion,
    DifficultWords,
    PassiveVoiceReport,
    TransitionalWordsReport,
    SentenceReport,
    ParagraphReport,
)
from .constants import (
    READABILITY_MODULE_VERSION,
    AUDIENCE_PROFILES,
    DEFAULT_AUDIENCE,
    TRANSITIONAL_WORDS,
    COMPLEX_WORD_SUGGESTIONS,
)

__all__ = [
    # Main classes
    "ReadabilityAnalyzer",
    "ReadabilityReport",
    "analyze",
    # Audience policy
    "AudienceThresholds",
    "get_thresholds",
    "get_status",
    # Report parts
    "HeatmapEntry",
    "FlowPoint",
    "Recommendation",
    "SimplificationSuggestion",
    "DifficultWords",
    "PassiveVoiceReport",
    "TransitionalWordsReport",
    "SentenceReport",
    "ParagraphReport",
    # Constants
    "READABILITY_MODULE_VERSION",
    "AUDIENCE_PROFILES",
    "DEFAULT_AUDIENCE",
    "TRANSITIONAL_WORDS",
    "COMPLEX_WORD_SUGGESTIONS",
]

__version__ = READABILITY_MODULE_VERSION
