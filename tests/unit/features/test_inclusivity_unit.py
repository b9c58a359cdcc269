"""
Unit tests for content_quality/features/inclusivity.py

Tests non-inclusive term detection and the inclusivity score.
No real data dependencies - runs in <1 second.
"""

import pytest

from content_quality.features.dictionaries import INCLUSIVE_TERMS, InclusiveTerm
from content_quality.features.inclusivity import InclusivityChecker, check_inclusivity


@pytest.fixture(scope="module")
def checker() -> InclusivityChecker:
    return InclusivityChecker()


class TestInclusivityChecker:
    """Tests for InclusivityChecker.check."""

    @pytest.mark.parametrize("text", [None, "", "A perfectly neutral sentence."])
    def test_clean_text(self, checker, text):
        result = checker.check(text)
        assert result.score == 100
        assert result.issues == []

    def test_repeated_term_is_one_issue(self, checker):
        """Occurrences are counted, the penalty is per distinct term."""
        result = checker.check("Mankind has always explored. The history of mankind is long.")
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.term == "mankind"
        assert issue.suggestion == "humankind"
        assert issue.category == "Gender"
        assert issue.count == 2
        assert result.score == 95

    def test_issues_in_dictionary_order(self, checker, inclusive_issue_text):
        result = checker.check(inclusive_issue_text)
        assert [i.term for i in result.issues] == ["mankind", "guys"]
        assert result.score == 90

    def test_whole_words_only(self, checker):
        result = checker.check("Humankind mastered the craft.")
        assert result.issues == []

    def test_multi_word_term(self, checker):
        result = checker.check("Run a Sanity Check first.")
        assert [(i.term, i.category) for i in result.issues] == [("sanity check", "Disability")]

    def test_score_floor(self, checker):
        text = ". ".join(term for term, _, _ in INCLUSIVE_TERMS)
        result = checker.check(text)
        assert len(result.issues) == len(INCLUSIVE_TERMS)
        assert result.score == 0

    def test_custom_terms(self):
        checker = InclusivityChecker([InclusiveTerm(term="Widget", suggestion="gadget", category="Gender")])
        result = checker.check("One widget, two widgets, three WIDGET.")
        assert result.issues[0].term == "widget"
        assert result.issues[0].count == 2

    def test_module_function(self, inclusive_issue_text):
        assert check_inclusivity(inclusive_issue_text).score == 90
