"""
Feature validation tests for Content Quality.

This package contains end-to-end tests for:
- Golden sentences with deterministic expected values
- Report-level properties (ranges, determinism, serialization, fallbacks)
"""
