"""
Inclusive-language checker.

Flags non-inclusive, biased or outdated terms and suggests modern
alternatives. Each distinct term found costs 5 points from a score of 100;
repeating the same term does not cost more.

Usage:
    from content_quality.features import check_inclusivity

    result = check_inclusivity("Mankind has always ...")
    for issue in result.issues:
        print(f"{issue.term} -> {issue.suggestion} ({issue.count}x)")
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from pydantic import Field

from content_quality.features.base import ReportModel
from content_quality.features.dictionaries import (
    INCLUSIVITY_PENALTY_PER_TERM,
    InclusiveTerm,
    get_inclusive_terms,
)

logger = logging.getLogger(__name__)


class InclusivityIssue(ReportModel):
    term: str
    suggestion: str
    category: str
    count: int = Field(..., ge=1, description="Occurrences of the term in the text")


class InclusivityResult(ReportModel):
    score: int = Field(100, ge=0, le=100)
    issues: List[InclusivityIssue] = Field(default_factory=list)


class InclusivityChecker:
    """Whole-word, case-insensitive matcher over the inclusive-language dictionary."""

    def __init__(self, terms: Optional[Iterable[InclusiveTerm]] = None):
        """
        Args:
            terms: Dictionary entries to check. Defaults to the shared dictionary.
        """
        entries = tuple(terms) if terms is not None else get_inclusive_terms()
        self._patterns: Tuple[Tuple[InclusiveTerm, re.Pattern], ...] = tuple(
            (entry, entry.compile_pattern()) for entry in entries
        )

    def check(self, text: Optional[str]) -> InclusivityResult:
        """
        Check text for inclusive-language issues.

        Args:
            text: Content to analyze

        Returns:
            InclusivityResult with one issue per matched term, in dictionary order
        """
        if not text:
            return InclusivityResult()

        issues = []
        seen = set()
        for entry, pattern in self._patterns:
            if entry.term in seen:
                continue
            matches = pattern.findall(text)
            if matches:
                seen.add(entry.term)
                issues.append(InclusivityIssue(
                    term=entry.term,
                    suggestion=entry.suggestion,
                    category=entry.category,
                    count=len(matches),
                ))

        score = max(0, 100 - len(issues) * INCLUSIVITY_PENALTY_PER_TERM)
        if issues:
            logger.debug(f"Found {len(issues)} inclusive-language issues")
        return InclusivityResult(score=score, issues=issues)


def check_inclusivity(text: Optional[str]) -> InclusivityResult:
    """Check ``text`` against the shared inclusive-language dictionary."""
    return InclusivityChecker().check(text)
