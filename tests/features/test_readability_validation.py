"""
Readability Report Validation Tests.

Property checks on full reports: value ranges, determinism, serialization,
audience handling and the error fallbacks.

No file dependencies - these tests can run in any environment.
"""

import pytest

from content_quality import ReadabilityAnalyzer, ReadabilityReport, analyze


@pytest.fixture(scope="module")
def analyzer() -> ReadabilityAnalyzer:
    return ReadabilityAnalyzer()


@pytest.fixture(params=["simple_text", "sample_article", "dense_text"])
def any_text(request) -> str:
    return request.getfixturevalue(request.param)


class TestInsufficientContent:
    """Inputs too short to analyze produce a zeroed error report."""

    @pytest.mark.parametrize("text", [None, "", "hi", "   short text   "])
    def test_fallback(self, analyzer, text):
        report = analyzer.calculate_readability(text)
        assert report.score == 0
        assert report.level == "N/A"
        assert report.error == "Insufficient content to analyze"
        assert report.recommendations == []
        assert report.heatmap == []

    def test_punctuation_only(self, analyzer):
        """Long enough to pass the length guard but without any words."""
        report = analyzer.calculate_readability("... --- !!! ??? ... --- !!! ???")
        assert report.is_error
        assert report.score == 0


class TestReportInvariants:
    """Ranges and relations that hold for every report."""

    def test_ranges(self, analyzer, any_text):
        report = analyzer.calculate_readability(any_text)
        assert 0 <= report.score <= 100
        assert 0 <= report.flesch_score <= 100
        assert report.flesch_kincaid_grade >= 0
        assert 0 <= report.passive_voice.percentage <= 100
        assert 0.0 <= report.difficult_words.percentage <= 100.0
        assert 0 <= report.inclusivity.score <= 100

    def test_counts_agree(self, analyzer, any_text):
        report = analyzer.calculate_readability(any_text)
        assert report.passive_voice.count <= report.sentence_count
        assert len(report.flow) == max(1, report.sentence_count - 2)
        assert len(report.transitional_words.found) <= 10
        assert len(report.transitional_words.sentences_without_transitions) <= 10
        for entry in report.keyword_density.heatmap:
            assert entry.matches <= entry.word_count

    def test_deterministic(self, analyzer, sample_article):
        first = analyzer.calculate_readability(sample_article)
        second = analyzer.calculate_readability(sample_article)
        assert first.model_dump() == second.model_dump()

    def test_batch(self, analyzer, simple_text, sample_article):
        reports = analyzer.analyze_batch([simple_text, "hi", sample_article])
        assert [r.is_error for r in reports] == [False, True, False]


class TestAudience:
    """Audience selection and fallback."""

    def test_default_audience(self, sample_article):
        assert analyze(sample_article).audience == "general"

    def test_unknown_audience_falls_back(self, sample_article):
        report = analyze(sample_article, audience="children")
        assert report.audience == "general"
        assert report.error is None

    def test_academic_is_more_lenient(self, dense_text):
        general = analyze(dense_text, audience="general")
        academic = analyze(dense_text, audience="academic")
        assert "Aim for 60+" in general.recommendations[0].message
        assert "Aim for 30+" in academic.recommendations[0].message


class TestSerialization:
    """camelCase output and JSON persistence."""

    def test_camel_case_keys(self, sample_article):
        data = analyze(sample_article).model_dump(by_alias=True)
        for key in ("fleschScore", "fleschKincaidGrade", "colemanLiauIndex", "lixScore",
                    "wordCount", "readingTime", "passiveVoice", "transitionalWords",
                    "keywordDensity", "simplificationSuggestions"):
            assert key in data
        assert "sentencesWithoutTransitions" in data["transitionalWords"]
        assert "consecutiveSameStart" in data["sentences"]

    def test_validate_from_camel_case(self, sample_article):
        report = analyze(sample_article)
        assert ReadabilityReport.model_validate(report.model_dump(by_alias=True)) == report

    def test_json_file_round_trip(self, sample_article, temp_output_dir):
        report = analyze(sample_article)
        path = temp_output_dir / "reports" / "article.json"

        report.model_dump_to_json_file(path)

        assert path.exists()
        assert ReadabilityReport.model_load_from_json_file(path) == report

    def test_summary(self, sample_article):
        summary = analyze(sample_article).get_summary()
        assert "Score:" in summary
        assert "Flesch Reading Ease" in summary


class TestInternalFault:
    """Exceptions raised while analyzing become error reports."""

    def test_exception_becomes_error_report(self, monkeypatch, sample_article):
        analyzer = ReadabilityAnalyzer()

        def explode(text):
            raise RuntimeError("lexicon unavailable")

        monkeypatch.setattr(analyzer.sentiment_analyzer, "analyze", explode)
        report = analyzer.calculate_readability(sample_article, audience="professional")

        assert report.level == "Error"
        assert report.error == "lexicon unavailable"
        assert report.score == 0
        assert report.audience == "professional"
        assert "Error: lexicon unavailable" in report.get_summary()


class TestTransitionalCoverage:
    """Sentences without transitions are listed, up to the display limit."""

    def test_every_sentence_listed(self, analyzer):
        text = "Bob naps. Sue reads. Max runs."
        report = analyzer.calculate_readability(text)
        assert report.transitional_words.count == 0
        assert report.transitional_words.sentences_without_transitions == [
            "Bob naps.", "Sue reads.", "Max runs.",
        ]

    def test_list_capped_at_ten(self, analyzer):
        report = analyzer.calculate_readability(" ".join(["Bob naps."] * 15))
        assert report.sentence_count == 15
        assert len(report.transitional_words.sentences_without_transitions) == 10
