"""
Readability Analyzer for web page content

Segments the text once, computes the classical readability indices, runs the
pattern, tone, inclusivity, keyword and positional analyzers, then merges
everything into one ReadabilityReport with a heuristic overall score and
ordered recommendations.

Usage:
    from content_quality.features.readability import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    report = analyzer.calculate_readability(page_text, audience="professional")
    print(f"Score: {report.score} ({report.level})")
"""

import logging
import math
from functools import lru_cache
from typing import List, Optional, Sequence

from content_quality.config import settings
from content_quality.features.inclusivity import InclusivityChecker
from content_quality.features.keyword_density import KeywordDensityMapper
from content_quality.features.sentiment import SentimentAnalyzer
from content_quality.preprocessing.segmenter import TextSegmenter
from content_quality.utils.numeric import clamp, percentage, round_half_up, round_int

from .audience import get_status, get_thresholds, resolve_audience
from .constants import (
    CONSECUTIVE_START_PENALTY,
    DIFFICULT_WORD_PENALTY,
    INSUFFICIENT_CONTENT_MESSAGE,
    LONG_SENTENCE_PENALTIES,
    NO_READABLE_CONTENT_MESSAGE,
    PASSIVE_PENALTIES,
    TRANSITION_BONUSES,
    TRANSITIONAL_GOOD_PCT,
    TRANSITIONAL_MIN_PCT,
)
from .formulas import (
    TextStatistics,
    coleman_liau_index,
    flesch_kincaid_grade,
    flesch_level,
    flesch_reading_ease,
    lix_score,
)
from .lexical import is_passive_voice
from .patterns import (
    analyze_paragraphs,
    analyze_sentences,
    count_transitional_words,
    find_simplifications,
    sentences_without_transitions,
)
from .positional import generate_flow, generate_heatmap
from .recommendations import RecommendationMetrics, generate_recommendations
from .schemas import (
    DifficultWords,
    ParagraphReport,
    PassiveVoiceReport,
    ReadabilityReport,
    SentenceReport,
    SimplificationSuggestion,
    TransitionalWordsReport,
)

logger = logging.getLogger(__name__)


def transitional_status(percent: float) -> str:
    """More transitions is better: good at 30%+, warning at 20%+."""
    if percent >= TRANSITIONAL_GOOD_PCT:
        return "good"
    if percent >= TRANSITIONAL_MIN_PCT:
        return "warning"
    return "poor"


def adjust_score(
    flesch_score: int,
    passive_percentage: float,
    long_sentence_percentage: float,
    difficult_percentage: float,
    transitional_percentage: float,
    consecutive_same_start: int,
) -> int:
    """
    Overall score: Flesch Reading Ease adjusted for style signals.

    Penalties for passive voice, long sentences, difficult words and repeated
    sentence starts; a bonus for transitional words. Clamped to [0, 100].
    """
    score = flesch_score

    for limit, adjustment in PASSIVE_PENALTIES:
        if passive_percentage > limit:
            score += adjustment
            break

    for limit, adjustment in LONG_SENTENCE_PENALTIES:
        if long_sentence_percentage > limit:
            score += adjustment
            break

    limit, adjustment = DIFFICULT_WORD_PENALTY
    if difficult_percentage > limit:
        score += adjustment

    for minimum, adjustment in TRANSITION_BONUSES:
        if transitional_percentage >= minimum:
            score += adjustment
            break

    limit, adjustment = CONSECUTIVE_START_PENALTY
    if consecutive_same_start > limit:
        score += adjustment

    return int(clamp(score, 0, 100))


class ReadabilityAnalyzer:
    """
    Content-quality report builder.

    This class:
    1. Loads configuration from settings
    2. Guards against insufficient content
    3. Segments the text once and computes the readability indices
    4. Runs pattern, tone, inclusivity, keyword and positional analyzers
    5. Applies score adjustments and generates recommendations

    Any exception raised while analyzing is logged and returned as an error
    report; calculate_readability never raises for bad input.

    Usage:
        analyzer = ReadabilityAnalyzer()
        report = analyzer.calculate_readability(text)
    """

    def __init__(
        self,
        config: Optional[object] = None,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
        inclusivity_checker: Optional[InclusivityChecker] = None,
        keyword_mapper: Optional[KeywordDensityMapper] = None,
        segmenter: Optional[TextSegmenter] = None,
    ):
        """
        Initialize readability analyzer.

        Args:
            config: Optional ReadabilityConfig object. If None, loads from settings.
            sentiment_analyzer: Optional SentimentAnalyzer (default-configured if None)
            inclusivity_checker: Optional InclusivityChecker (shared dictionary if None)
            keyword_mapper: Optional KeywordDensityMapper (uses config.heatmap if None)
            segmenter: Optional TextSegmenter (English defaults if None)
        """
        self.config = config or settings.readability
        self.segmenter = segmenter or TextSegmenter()
        self.sentiment_analyzer = sentiment_analyzer or SentimentAnalyzer()
        self.inclusivity_checker = inclusivity_checker or InclusivityChecker()
        self.keyword_mapper = keyword_mapper or KeywordDensityMapper(self.config.heatmap)

        logger.info(
            f"Initialized ReadabilityAnalyzer (default audience: {self.config.default_audience}, "
            f"flow window: {self.config.flow.window_size})"
        )

    def calculate_readability(
        self,
        text: Optional[str],
        audience: Optional[str] = None,
        keywords: Optional[Sequence[str]] = (),
    ) -> ReadabilityReport:
        """
        Analyze the readability of a text.

        Args:
            text: Plain text of the page's main content
            audience: Audience profile name. Defaults to the configured default;
                unknown names fall back to "general".
            keywords: Target keywords for the keyword density map. When empty,
                the top keywords of the text are used.

        Returns:
            ReadabilityReport (an error report for insufficient content or an
            internal fault)
        """
        audience_name = resolve_audience(audience or self.config.default_audience)

        min_length = self.config.text_processing.min_text_length
        if not text or len(text.strip()) < min_length:
            logger.debug(f"Text shorter than {min_length} characters, skipping analysis")
            return ReadabilityReport.fallback(INSUFFICIENT_CONTENT_MESSAGE, audience=audience_name)

        try:
            return self._analyze(text, audience_name, keywords or ())
        except Exception as exc:
            logger.exception(f"Readability analysis failed: {exc}")
            return ReadabilityReport.from_exception(exc, audience=audience_name)

    def analyze_batch(
        self,
        texts: List[str],
        audience: Optional[str] = None,
        keywords: Optional[Sequence[str]] = (),
    ) -> List[ReadabilityReport]:
        """
        Analyze multiple texts.

        Args:
            texts: List of text strings
            audience: Audience profile applied to every text
            keywords: Target keywords applied to every text

        Returns:
            List of ReadabilityReport objects
        """
        return [self.calculate_readability(text, audience, keywords) for text in texts]

    # ===========================
    # Private Helper Methods
    # ===========================

    def _analyze(self, text: str, audience: str, keywords: Sequence[str]) -> ReadabilityReport:
        segmentation = self.segmenter.segment(text)
        if segmentation.is_empty:
            return ReadabilityReport.fallback(NO_READABLE_CONTENT_MESSAGE, audience=audience)

        sentences = segmentation.sentences
        sentence_count = segmentation.sentence_count
        word_count = segmentation.word_count
        cfg = self.config

        # ===========================
        # Standard Readability Indices
        # ===========================
        stats = TextStatistics.from_segmentation(segmentation)
        flesch = flesch_reading_ease(stats)
        fk_grade = flesch_kincaid_grade(stats)
        cli = coleman_liau_index(stats)
        lix = lix_score(stats)

        # ===========================
        # Word Analysis
        # ===========================
        difficult_percentage = round_half_up(
            percentage(stats.difficult_word_count, word_count), cfg.precision
        )
        simplifications = find_simplifications(segmentation.words)

        # ===========================
        # Positional Analysis
        # ===========================
        heatmap = generate_heatmap(
            text,
            audience,
            snippet_length=cfg.heatmap.snippet_length,
            min_paragraph_length=cfg.heatmap.min_paragraph_length,
        )
        flow = generate_flow(
            text,
            window_size=cfg.flow.window_size,
            complex_word_limit=cfg.flow.complex_word_limit,
            snippet_length=cfg.flow.snippet_length,
            words_per_minute=cfg.text_processing.words_per_minute,
        )

        # ===========================
        # Tone, Language and Keywords
        # ===========================
        sentiment = self.sentiment_analyzer.analyze(text)
        inclusivity = self.inclusivity_checker.check(text)
        keyword_density = self.keyword_mapper.generate(text, keywords)

        # ===========================
        # Patterns
        # ===========================
        passive_sentences = [s for s in sentences if is_passive_voice(s)]
        passive_percentage = round_int(percentage(len(passive_sentences), sentence_count))

        transitional_count, transitional_found = count_transitional_words(text)
        transitional_percentage = round_int(percentage(transitional_count, sentence_count))
        without_transitions = sentences_without_transitions(sentences)

        sentence_analysis = analyze_sentences(sentences)
        paragraph_analysis = analyze_paragraphs(text)
        paragraph_count = max(1, paragraph_analysis.total)

        # ===========================
        # Overall Score
        # ===========================
        score = adjust_score(
            flesch_score=flesch,
            passive_percentage=passive_percentage,
            long_sentence_percentage=percentage(sentence_analysis.long_sentences, sentence_count),
            difficult_percentage=difficult_percentage,
            transitional_percentage=transitional_percentage,
            consecutive_same_start=sentence_analysis.consecutive_same_start,
        )

        recommendations = generate_recommendations(
            RecommendationMetrics(
                flesch_score=flesch,
                flesch_kincaid_grade=fk_grade,
                coleman_liau_index=cli,
                lix_score=lix,
                simplification_count=len(simplifications),
                passive_percentage=passive_percentage,
                average_sentence_length=sentence_analysis.average_length,
                consecutive_same_start=sentence_analysis.consecutive_same_start,
                transitional_percentage=transitional_percentage,
                very_long_sentences=sentence_analysis.very_long_sentences,
                average_paragraph_length=paragraph_analysis.average_length,
            ),
            get_thresholds(audience),
        )

        sentence_chars = cfg.output.sentence_snippet_length
        paragraph_chars = cfg.output.paragraph_snippet_length
        list_limit = cfg.output.list_limit

        logger.debug(
            f"Analyzed {word_count} words / {sentence_count} sentences: "
            f"flesch={flesch}, score={score}, {len(recommendations)} recommendations"
        )

        return ReadabilityReport(
            score=score,
            level=flesch_level(flesch),
            audience=audience,
            flesch_score=flesch,
            flesch_kincaid_grade=fk_grade,
            coleman_liau_index=cli,
            lix_score=lix,
            word_count=word_count,
            sentence_count=sentence_count,
            paragraph_count=paragraph_count,
            average_words_per_sentence=round_int(word_count / sentence_count),
            average_sentences_per_paragraph=round_int(sentence_count / paragraph_count),
            reading_time=math.ceil(word_count / cfg.text_processing.words_per_minute),
            difficult_words=DifficultWords(
                count=stats.difficult_word_count,
                percentage=difficult_percentage,
            ),
            simplification_suggestions=[
                SimplificationSuggestion(**item) for item in simplifications
            ],
            heatmap=heatmap,
            flow=flow,
            sentiment=sentiment,
            inclusivity=inclusivity,
            keyword_density=keyword_density,
            passive_voice=PassiveVoiceReport(
                count=len(passive_sentences),
                percentage=passive_percentage,
                status=get_status(passive_percentage, "passive", audience),
                sentences=[s[:sentence_chars] for s in passive_sentences],
            ),
            transitional_words=TransitionalWordsReport(
                count=transitional_count,
                percentage=transitional_percentage,
                status=transitional_status(transitional_percentage),
                found=transitional_found[:list_limit],
                sentences_without_transitions=[
                    s[:sentence_chars] for s in without_transitions[:list_limit]
                ],
            ),
            sentences=SentenceReport(
                average_length=sentence_analysis.average_length,
                long_sentences=sentence_analysis.long_sentences,
                long_sentences_list=[
                    s[:sentence_chars] for s in sentence_analysis.long_sentences_list
                ],
                very_long_sentences=sentence_analysis.very_long_sentences,
                very_long_sentences_list=[
                    s[:sentence_chars] for s in sentence_analysis.very_long_sentences_list
                ],
                short_sentences=sentence_analysis.short_sentences,
                consecutive_same_start=sentence_analysis.consecutive_same_start,
                sentence_starts=sentence_analysis.sentence_starts,
                status=get_status(sentence_analysis.average_length, "sentence_length", audience),
            ),
            paragraphs=ParagraphReport(
                average_length=paragraph_analysis.average_length,
                long_paragraphs=paragraph_analysis.long_paragraphs,
                long_paragraphs_list=[
                    p[:paragraph_chars] for p in paragraph_analysis.long_paragraphs_list
                ],
                short_paragraphs=paragraph_analysis.short_paragraphs,
                status=get_status(paragraph_analysis.average_length, "paragraph_length", audience),
            ),
            recommendations=recommendations,
        )


@lru_cache(maxsize=1)
def _default_analyzer() -> ReadabilityAnalyzer:
    return ReadabilityAnalyzer()


def analyze(
    text: Optional[str],
    audience: Optional[str] = None,
    keywords: Optional[Sequence[str]] = None,
) -> ReadabilityReport:
    """
    Analyze ``text`` with the default-configured analyzer.

    Args:
        text: Plain text of the page's main content
        audience: "general", "professional" or "academic" (configured default if None)
        keywords: Optional target keywords for the keyword density map

    Returns:
        ReadabilityReport
    """
    return _default_analyzer().calculate_readability(text, audience, keywords or ())
