"""
Audience threshold policy.

Maps an audience profile name ("general", "professional", "academic") to its
readability thresholds and converts raw metric values into a qualitative
status ("good", "warning", "poor").
"""

import logging
from typing import Optional

from pydantic import Field

from content_quality.features.base import ReportModel

from .constants import (
    AUDIENCE_PROFILES,
    DEFAULT_AUDIENCE,
    FLESCH_WARNING_BAND,
    PARAGRAPH_LENGTH_WARNING_BAND,
    PASSIVE_WARNING_BAND,
    SENTENCE_LENGTH_WARNING_BAND,
)

logger = logging.getLogger(__name__)

STATUS_GOOD = "good"
STATUS_WARNING = "warning"
STATUS_POOR = "poor"
STATUS_NEUTRAL = "neutral"


class AudienceThresholds(ReportModel):
    """Readability limits for one audience profile."""

    name: str
    flesch_min: int = Field(..., ge=0, le=100)
    sentence_length_max: int = Field(..., gt=0)
    paragraph_length_max: int = Field(..., gt=0)
    passive_max: int = Field(..., ge=0, le=100)
    description: str = ""


_THRESHOLDS = {
    name: AudienceThresholds(name=name, **profile)
    for name, profile in AUDIENCE_PROFILES.items()
}


def resolve_audience(audience: Optional[str]) -> str:
    """
    Normalize an audience name, falling back to the default profile.

    Args:
        audience: Profile name (case-insensitive) or None

    Returns:
        A known profile name
    """
    if audience is None:
        return DEFAULT_AUDIENCE
    key = str(audience).strip().lower()
    if key in _THRESHOLDS:
        return key
    logger.warning(f"Unknown audience '{audience}', falling back to '{DEFAULT_AUDIENCE}'")
    return DEFAULT_AUDIENCE


def get_thresholds(audience: Optional[str] = DEFAULT_AUDIENCE) -> AudienceThresholds:
    """Thresholds for ``audience``; unknown names get the general profile."""
    return _THRESHOLDS[resolve_audience(audience)]


def _at_most(value: float, limit: float, band: float) -> str:
    if value <= limit:
        return STATUS_GOOD
    if value <= limit + band:
        return STATUS_WARNING
    return STATUS_POOR


def get_status(value: float, metric: str, audience: Optional[str] = DEFAULT_AUDIENCE) -> str:
    """
    Convert a raw metric value into a qualitative status for an audience.

    Metrics:
        flesch: higher is better (warning within 10 points below the minimum)
        sentence_length / sentenceLength: lower is better (+5 words slack)
        paragraph_length / paragraphLength: lower is better (+50 words slack)
        passive: lower is better (+10 percentage points slack)

    Args:
        value: Metric value
        metric: Metric name
        audience: Audience profile name

    Returns:
        "good", "warning" or "poor"; "neutral" for an unknown metric
    """
    limits = get_thresholds(audience)

    if metric == "flesch":
        if value >= limits.flesch_min:
            return STATUS_GOOD
        if value >= limits.flesch_min - FLESCH_WARNING_BAND:
            return STATUS_WARNING
        return STATUS_POOR
    if metric in ("sentence_length", "sentenceLength"):
        return _at_most(value, limits.sentence_length_max, SENTENCE_LENGTH_WARNING_BAND)
    if metric in ("paragraph_length", "paragraphLength"):
        return _at_most(value, limits.paragraph_length_max, PARAGRAPH_LENGTH_WARNING_BAND)
    if metric == "passive":
        return _at_most(value, limits.passive_max, PASSIVE_WARNING_BAND)

    logger.debug(f"No status rule for metric '{metric}'")
    return STATUS_NEUTRAL
