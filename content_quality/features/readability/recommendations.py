"""
Recommendation generator.

Turns the metrics of one analysis into an ordered list of actionable
messages. Only metrics outside their audience limits produce an entry.
"""

from dataclasses import dataclass
from typing import List

from .audience import AudienceThresholds
from .constants import (
    COLEMAN_LIAU_MAX,
    CONSECUTIVE_START_MAX,
    FK_GRADE_MAX,
    LIX_MAX,
    TRANSITIONAL_GOOD_PCT,
    TRANSITIONAL_MIN_PCT,
    VERY_LONG_SENTENCE_WORDS,
)
from .schemas import Recommendation


@dataclass(frozen=True)
class RecommendationMetrics:
    """Metric values the recommendations are derived from."""
    flesch_score: int
    flesch_kincaid_grade: float
    coleman_liau_index: float
    lix_score: int
    simplification_count: int
    passive_percentage: int
    average_sentence_length: int
    consecutive_same_start: int
    transitional_percentage: int
    very_long_sentences: int = 0
    average_paragraph_length: int = 0


def _error(message: str) -> Recommendation:
    return Recommendation(type="error", message=message)


def _warning(message: str) -> Recommendation:
    return Recommendation(type="warning", message=message)


def generate_recommendations(
    metrics: RecommendationMetrics,
    thresholds: AudienceThresholds,
) -> List[Recommendation]:
    """
    Build recommendations in a fixed order.

    Order: Flesch, Flesch-Kincaid, Coleman-Liau, LIX, simplifications, passive
    voice, sentence length, repeated starts, transitions, very long sentences,
    paragraph length.

    Args:
        metrics: Values measured on the text
        thresholds: Limits of the target audience

    Returns:
        List of Recommendation (type "error" or "warning")
    """
    recommendations = []

    if metrics.flesch_score < thresholds.flesch_min:
        difficulty = "Very Difficult" if metrics.flesch_score < 30 else "Difficult"
        recommendations.append(_error(
            f"Flesch Reading Ease score is {metrics.flesch_score} ({difficulty}). "
            f"Aim for {thresholds.flesch_min}+ for a {thresholds.description}."
        ))

    if metrics.flesch_kincaid_grade > FK_GRADE_MAX:
        recommendations.append(_warning(
            f"Flesch-Kincaid grade level is {metrics.flesch_kincaid_grade:g}. "
            f"Text above grade {FK_GRADE_MAX:g} is hard for most readers."
        ))

    if metrics.coleman_liau_index > COLEMAN_LIAU_MAX:
        recommendations.append(_warning(
            f"Coleman-Liau index is {metrics.coleman_liau_index:g}. "
            f"Use shorter words to bring it below {COLEMAN_LIAU_MAX:g}."
        ))

    if metrics.lix_score > LIX_MAX:
        recommendations.append(_warning(
            f"LIX score is {metrics.lix_score} (very difficult). "
            f"Reduce long words and sentence length to get below {LIX_MAX:g}."
        ))

    if metrics.simplification_count > 0:
        recommendations.append(_warning(
            f"Found {metrics.simplification_count} complex word(s) with simpler alternatives. "
            f"Consider plain English replacements."
        ))

    if metrics.passive_percentage > thresholds.passive_max:
        recommendations.append(_error(
            f"{metrics.passive_percentage}% of sentences use passive voice. "
            f"Try to use active voice more often (aim for < {thresholds.passive_max}%)."
        ))

    if metrics.average_sentence_length > thresholds.sentence_length_max:
        recommendations.append(_error(
            f"Average sentence length is {metrics.average_sentence_length} words. "
            f"Aim for {thresholds.sentence_length_max} words or less."
        ))

    if metrics.consecutive_same_start > CONSECUTIVE_START_MAX:
        recommendations.append(_warning(
            f"{metrics.consecutive_same_start} consecutive sentences start with the same word. "
            f"Vary your sentence beginnings."
        ))

    if metrics.transitional_percentage < TRANSITIONAL_MIN_PCT:
        recommendations.append(_warning(
            f"Only {metrics.transitional_percentage}% of sentences contain transitional words. "
            f"Add more to improve flow (aim for {TRANSITIONAL_GOOD_PCT:g}%+)."
        ))

    if metrics.very_long_sentences > 0:
        recommendations.append(_warning(
            f"{metrics.very_long_sentences} sentence(s) exceed {VERY_LONG_SENTENCE_WORDS} words. "
            f"Consider breaking them into shorter sentences."
        ))

    if metrics.average_paragraph_length > thresholds.paragraph_length_max:
        recommendations.append(_warning(
            f"Average paragraph length is {metrics.average_paragraph_length} words. "
            f"Consider shorter paragraphs (aim for {thresholds.paragraph_length_max} words or less)."
        ))

    return recommendations
