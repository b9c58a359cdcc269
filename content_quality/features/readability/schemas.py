"""
Data structures for readability and content-quality analysis.

This module defines Pydantic v2 models for the readability report.
These schemas enforce type safety and validation throughout the pipeline.

Following the project's Pydantic v2 enforcement standards:
- Use BaseModel (via ReportModel, frozen with camelCase aliases)
- Use @field_validator (not @validator)
- Use model_config = (not class Config:)
- Use .model_dump(by_alias=True) for the rendering layer
- Use .model_dump_json() (not .json())
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import Field

from content_quality.features.base import ReportModel
from content_quality.features.inclusivity import InclusivityResult
from content_quality.features.keyword_density import KeywordDensityReport
from content_quality.features.sentiment import SentimentResult

from .constants import DEFAULT_AUDIENCE, LEVEL_ERROR, LEVEL_NOT_AVAILABLE

logger = logging.getLogger(__name__)

Status = Literal["good", "warning", "poor", "neutral"]


# ===========================
# Leaf Entries
# ===========================

class SimplificationSuggestion(ReportModel):
    """A complex word and its plain-English alternative."""
    word: str
    suggestion: str


class HeatmapEntry(ReportModel):
    """Readability of one paragraph."""
    id: int = Field(..., ge=0, description="Paragraph index (0-based)")
    score: int = Field(..., ge=0, le=100, description="Flesch Reading Ease of the paragraph")
    status: Status
    snippet: str
    length: int = Field(..., ge=0, description="Paragraph length in characters")


class FlowPoint(ReportModel):
    """Readability of one sliding window of consecutive sentences."""
    x: int = Field(..., ge=0, le=100, description="Position through the text, in percent")
    y: int = Field(..., ge=0, le=100, description="Flesch Reading Ease of the window")
    snippet: str
    errors: int = Field(0, ge=0, description="Passive sentences + 1 if complex words > limit")
    time: int = Field(0, ge=0, description="Estimated reading time of the window, in seconds")
    complex: int = Field(0, ge=0, description="Words with 3+ syllables in the window")


class Recommendation(ReportModel):
    type: Literal["error", "warning"]
    message: str


# ===========================
# Sub-reports
# ===========================

class DifficultWords(ReportModel):
    count: int = Field(0, ge=0)
    percentage: float = Field(0.0, ge=0.0, le=100.0)


class PassiveVoiceReport(ReportModel):
    count: int = Field(0, ge=0)
    percentage: int = Field(0, ge=0, le=100)
    status: Status = "good"
    sentences: List[str] = Field(default_factory=list)


class TransitionalWordsReport(ReportModel):
    """Transitional coverage. ``percentage`` may exceed 100 (several per sentence)."""
    count: int = Field(0, ge=0)
    percentage: int = Field(0, ge=0)
    status: Status = "poor"
    found: List[str] = Field(default_factory=list)
    sentences_without_transitions: List[str] = Field(default_factory=list)


class SentenceReport(ReportModel):
    average_length: int = Field(0, ge=0)
    long_sentences: int = Field(0, ge=0)
    long_sentences_list: List[str] = Field(default_factory=list)
    very_long_sentences: int = Field(0, ge=0)
    very_long_sentences_list: List[str] = Field(default_factory=list)
    short_sentences: int = Field(0, ge=0)
    consecutive_same_start: int = Field(0, ge=0)
    sentence_starts: Dict[str, int] = Field(default_factory=dict)
    status: Status = "good"


class ParagraphReport(ReportModel):
    average_length: int = Field(0, ge=0)
    long_paragraphs: int = Field(0, ge=0)
    long_paragraphs_list: List[str] = Field(default_factory=list)
    short_paragraphs: int = Field(0, ge=0)
    status: Status = "good"


# ===========================
# Report
# ===========================

class ReadabilityReport(ReportModel):
    """
    Complete content-quality analysis of one text.

    This is the main data structure returned by the ReadabilityAnalyzer.
    It contains:
    - Overall heuristic score and qualitative level
    - Standard readability indices (Flesch, Flesch-Kincaid, Coleman-Liau, LIX)
    - Basic text statistics and reading time
    - Positional analyses (paragraph heatmap, sentence-window flow)
    - Pattern sub-reports (passive voice, transitions, sentence/paragraph length)
    - Sentiment, inclusivity and keyword density
    - Ordered recommendations

    Fallback reports (insufficient content, internal fault) carry ``error``
    and zeroed sub-reports.
    """

    # ===========================
    # Overall
    # ===========================
    score: int = Field(0, ge=0, le=100, description="Adjusted Flesch score (0-100)")
    level: str = Field(LEVEL_NOT_AVAILABLE, description="Qualitative Flesch level")
    error: Optional[str] = Field(None, description="Set only on fallback reports")
    audience: str = Field(DEFAULT_AUDIENCE, description="Audience profile used")

    # ===========================
    # Standard Readability Indices
    # ===========================
    flesch_score: int = Field(
        0, ge=0, le=100,
        description="Flesch Reading Ease. "
                    "Formula: 206.835 - 1.015 × (words/sentences) - 84.6 × (syllables/words)."
    )
    flesch_kincaid_grade: float = Field(
        0.0, ge=0.0,
        description="Flesch-Kincaid Grade Level. "
                    "Formula: 0.39 × (words/sentences) + 11.8 × (syllables/words) - 15.59."
    )
    coleman_liau_index: float = Field(
        0.0,
        description="Coleman-Liau Index. Based on letters rather than syllables."
    )
    lix_score: int = Field(
        0,
        description="LIX. Formula: words/sentences + 100 × (words longer than 6 letters)/words."
    )

    # ===========================
    # Basic Text Statistics
    # ===========================
    word_count: int = Field(0, ge=0)
    sentence_count: int = Field(0, ge=0)
    paragraph_count: int = Field(0, ge=0)
    average_words_per_sentence: int = Field(0, ge=0)
    average_sentences_per_paragraph: int = Field(0, ge=0)
    reading_time: int = Field(0, ge=0, description="Estimated reading time in minutes")

    # ===========================
    # Word Analysis
    # ===========================
    difficult_words: DifficultWords = Field(default_factory=DifficultWords)
    simplification_suggestions: List[SimplificationSuggestion] = Field(default_factory=list)

    # ===========================
    # Positional Analysis
    # ===========================
    heatmap: List[HeatmapEntry] = Field(default_factory=list)
    flow: List[FlowPoint] = Field(default_factory=list)

    # ===========================
    # Tone, Language and Keywords
    # ===========================
    sentiment: SentimentResult = Field(default_factory=SentimentResult)
    inclusivity: InclusivityResult = Field(default_factory=InclusivityResult)
    keyword_density: KeywordDensityReport = Field(default_factory=KeywordDensityReport)

    # ===========================
    # Pattern Sub-reports
    # ===========================
    passive_voice: PassiveVoiceReport = Field(default_factory=PassiveVoiceReport)
    transitional_words: TransitionalWordsReport = Field(default_factory=TransitionalWordsReport)
    sentences: SentenceReport = Field(default_factory=SentenceReport)
    paragraphs: ParagraphReport = Field(default_factory=ParagraphReport)

    recommendations: List[Recommendation] = Field(default_factory=list)

    # ===========================
    # Methods
    # ===========================

    @property
    def is_error(self) -> bool:
        """True for fallback reports (insufficient content or internal fault)."""
        return self.error is not None

    @classmethod
    def fallback(
        cls,
        error: str,
        level: str = LEVEL_NOT_AVAILABLE,
        audience: str = DEFAULT_AUDIENCE,
    ) -> "ReadabilityReport":
        """Zeroed report carrying ``error``."""
        return cls(score=0, level=level, error=error, audience=audience)

    @classmethod
    def from_exception(cls, exc: BaseException, audience: str = DEFAULT_AUDIENCE) -> "ReadabilityReport":
        return cls.fallback(str(exc) or type(exc).__name__, level=LEVEL_ERROR, audience=audience)

    def model_dump_to_json_file(self, output_path: Path) -> None:
        """
        Save report to JSON file (camelCase keys).

        Args:
            output_path: Path to output JSON file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(by_alias=True), f, indent=2)
        logger.info(f"Saved readability report to {output_path}")

    @classmethod
    def model_load_from_json_file(cls, input_path: Path) -> 'ReadabilityReport':
        """
        Load report from JSON file.

        Args:
            input_path: Path to input JSON file

        Returns:
            ReadabilityReport object
        """
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.model_validate(data)

    def get_summary(self) -> str:
        """Return human-readable summary of the report."""
        if self.is_error:
            return (
                f"Readability Analysis Summary\n"
                f"{'='*50}\n"
                f"Score: {self.score}/100 ({self.level})\n"
                f"Error: {self.error}"
            )
        return (
            f"Readability Analysis Summary ({self.audience})\n"
            f"{'='*50}\n"
            f"Score: {self.score}/100 | Level: {self.level}\n"
            f"Words: {self.word_count:,} | Sentences: {self.sentence_count} | "
            f"Paragraphs: {self.paragraph_count} | Reading time: {self.reading_time} min\n"
            f"\nStandard Indices:\n"
            f"  Flesch Reading Ease: {self.flesch_score}/100\n"
            f"  Flesch-Kincaid Grade: {self.flesch_kincaid_grade:.1f}\n"
            f"  Coleman-Liau Index: {self.coleman_liau_index:.1f}\n"
            f"  LIX: {self.lix_score}\n"
            f"\nPatterns:\n"
            f"  Passive voice: {self.passive_voice.percentage}% ({self.passive_voice.status})\n"
            f"  Transitions: {self.transitional_words.percentage}% ({self.transitional_words.status})\n"
            f"  Avg sentence length: {self.sentences.average_length} words ({self.sentences.status})\n"
            f"  Difficult words: {self.difficult_words.percentage:.1f}%\n"
            f"\nTone: {self.sentiment.label} | Inclusivity: {self.inclusivity.score}/100\n"
            f"Recommendations: {len(self.recommendations)}"
        )
