"""
Content Quality - Test Suite

Test modules organized by functionality:
- unit/ - Component tests on synthetic strings (segmenter, formulas, patterns, ...)
- features/ - Deterministic end-to-end "golden" tests of the full report
"""
