"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use synthetic strings that run in <1 second.
"""

import pytest


# =============================================================================
# Sentence Fixtures
# =============================================================================

@pytest.fixture
def passive_sentence() -> str:
    """Passive voice with an irregular participle and an agent."""
    return "The ball was thrown by John."


@pytest.fixture
def active_sentence() -> str:
    """Same event in active voice."""
    return "John threw the ball."


@pytest.fixture
def idiom_sentence() -> str:
    """'by' inside an idiom, not a passive agent."""
    return "We met by the way."


@pytest.fixture
def repeated_start_sentences() -> list:
    """Three consecutive sentences opening with 'The', then a different start."""
    return [
        "The cat runs home.",
        "The dog runs after it.",
        "The bird flies away.",
        "A fish swims below.",
    ]


# =============================================================================
# Text Fixtures
# =============================================================================

@pytest.fixture
def abbreviation_text() -> str:
    """Abbreviations and decimals that must not end a sentence."""
    return "Dr. Smith paid $3.5 million for the house. It was worth it, e.g. for the view."


@pytest.fixture
def two_paragraph_text() -> str:
    """Two paragraphs longer than 50 characters separated by a blank line."""
    return (
        "This first paragraph is long enough to be scored by the heatmap code.\n\n"
        "This second paragraph is also long enough to be scored by the heatmap."
    )


@pytest.fixture
def inclusive_issue_text() -> str:
    """'mankind' twice and 'guys' once."""
    return "Mankind has always explored. The history of mankind is long. Hey guys, look."
