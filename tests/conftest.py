"""
Shared pytest fixtures for the Content Quality test suite.

This module provides common fixtures used across test modules:
- Sample texts (short, multi-paragraph, passive-heavy)
- Configuration settings
- Temporary output paths

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import sys
from pathlib import Path

import pytest

# Ensure content_quality is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from content_quality.config import settings


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """
    Create temporary output directory for test outputs.

    Args:
        tmp_path: pytest built-in fixture for temp directory

    Returns:
        Path to temporary output directory
    """
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


# ===========================
# Configuration Fixtures
# ===========================

@pytest.fixture(scope="session")
def readability_config():
    """Return the global readability configuration."""
    return settings.readability


@pytest.fixture(scope="session")
def sentiment_config():
    """Return the global sentiment configuration."""
    return settings.sentiment


# ===========================
# Sample Text Fixtures
# ===========================

@pytest.fixture(scope="session")
def simple_text() -> str:
    """Two very easy sentences (Flesch clamps to 100)."""
    return "The cat sat on the mat. It was a sunny day."


@pytest.fixture(scope="session")
def sample_article() -> str:
    """
    Three paragraphs of ordinary web copy.

    Contains transitions ("However", "In fact", "First", "Next", "Finally"),
    two passive sentences and no inclusive-language issues.
    """
    return (
        "Readable content helps visitors find answers quickly. Short sentences keep "
        "readers engaged. Clear words make every point easier to follow.\n\n"
        "However, many pages are written in a dense style. Long paragraphs were "
        "created by busy teams without an editor. In fact, readers often leave "
        "before they reach the end.\n\n"
        "Writers can improve readability with a few habits. First, use plain words. "
        "Next, vary how each sentence begins. Finally, read the page aloud before "
        "publishing it."
    )


@pytest.fixture(scope="session")
def dense_text() -> str:
    """One long, jargon-heavy paragraph that should trigger many recommendations."""
    sentence = (
        "The organizational methodology necessitates comprehensive utilization of "
        "substantial institutional capabilities, and the implementation was "
        "subsequently evaluated by independent consultants representing numerous "
        "international stakeholders with considerable administrative responsibilities."
    )
    return " ".join([sentence] * 4)
