"""
Content Quality: deterministic readability and content-quality analysis.

Usage:
    from content_quality import analyze

    report = analyze(page_text, audience="professional", keywords=["pricing"])
    print(report.get_summary())
    payload = report.model_dump(by_alias=True)   # camelCase for the renderer
"""

from content_quality.features.readability import (
    READABILITY_MODULE_VERSION,
    ReadabilityAnalyzer,
    ReadabilityReport,
    analyze,
)

__version__ = READABILITY_MODULE_VERSION

__all__ = [
    "analyze",
    "ReadabilityAnalyzer",
    "ReadabilityReport",
    "__version__",
]
