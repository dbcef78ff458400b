"""Tests for the full analysis pipeline."""

import json

import pytest

from writing_style_analyzer.style import LEXICON_VERSION, StyleAnalyzer, StyleReport, analyze
from writing_style_analyzer.style.analyzer import AnalysisProgress

ESSAY = (
    "I have always loved writing. When I was young, I wrote stories "
    "because they made me happy.\n\n"
    "However, my essays were probably too long. Clearly, I needed to "
    "learn structure, and I did."
)


class TestAnalyze:
    """Test the pipeline entry points."""

    def test_idempotent(self):
        assert analyze(ESSAY) == analyze(ESSAY)
        assert analyze(ESSAY).to_dict() == analyze(ESSAY).to_dict()

    def test_stages_are_linked(self):
        report = analyze(ESSAY)

        assert report.metrics.total_word_count > 0
        assert report.metrics.personal_pronouns > 0
        assert 0 <= report.authenticity.overall_authenticity <= 100
        assert report.level.level in {
            "Highly Authentic", "Authentic", "Moderately Authentic", "Needs Improvement",
        }

    @pytest.mark.parametrize("text", ["", "   ", "!!!", "no punctuation"])
    def test_degenerate_text(self, text):
        report = analyze(text)
        a = report.authenticity

        assert 0 <= a.overall_authenticity <= 100
        assert 0 <= a.confidence_level <= 100
        assert isinstance(a.improvement_areas, tuple)


class TestStyleAnalyzer:
    """Test StyleAnalyzer methods."""

    def test_analyze_samples_joins_with_blank_lines(self):
        analyzer = StyleAnalyzer()
        combined = analyzer.analyze_samples(["First one.", "  ", "Second one."])
        joined = analyzer.analyze_text("First one.\n\nSecond one.")

        assert combined.metrics == joined.metrics
        assert combined.metrics.paragraph_length == pytest.approx(1.0)
        assert combined.source_texts == ("sample 1", "sample 3")

    def test_analyze_samples_named(self):
        report = StyleAnalyzer().analyze_samples(
            ["", "Mine.", "Yours."], source_names=["empty.txt", "a.txt", "b.txt"]
        )
        assert report.source_texts == ("a.txt", "b.txt")

    def test_analyze_samples_name_count_mismatch(self):
        with pytest.raises(ValueError, match="2 source names for 3 samples"):
            StyleAnalyzer().analyze_samples(["A.", "B.", "C."], source_names=["a", "b"])

    def test_analyze_files(self, tmp_path):
        (tmp_path / "a.txt").write_text("I wrote this. It is mine.", encoding="utf-8")
        (tmp_path / "b.md").write_text("We wrote that. Perhaps.", encoding="utf-8")

        report = StyleAnalyzer().analyze_files([tmp_path / "a.txt", tmp_path / "b.md"])

        assert report.source_texts == ("a.txt", "b.md")
        assert report.metrics.total_word_count == 10
        assert report.metrics.paragraph_length == pytest.approx(2.0)

    def test_analyze_file_unsupported(self, tmp_path):
        path = tmp_path / "sample.pdf"
        path.write_bytes(b"%PDF-1.4")

        with pytest.raises(ValueError, match="Unsupported file format"):
            StyleAnalyzer().analyze_file(path)

    def test_progress_callback(self):
        updates: list[AnalysisProgress] = []
        StyleAnalyzer(progress_callback=updates.append).analyze_text(ESSAY)

        assert [u.phase for u in updates] == [
            "metrics", "characteristics", "authenticity", "complete",
        ]

    def test_compare(self):
        analyzer = StyleAnalyzer()
        r1 = analyzer.analyze_text(ESSAY, "essay")
        r2 = analyzer.analyze_text("The results were recorded. The data was processed.", "report")

        comparison = analyzer.compare(r1, r2)

        assert comparison["report1"] == "essay"
        assert comparison["report2"] == "report"
        sincerity = comparison["authenticity"]["sincerity"]
        assert sincerity["difference"] == pytest.approx(sincerity["report2"] - sincerity["report1"])
        assert set(comparison["characteristics"]) == set(r1.characteristics.to_dict())

    def test_compare_with_itself(self):
        analyzer = StyleAnalyzer()
        report = analyzer.analyze_text(ESSAY)
        comparison = analyzer.compare(report, report)

        assert comparison["overall_difference"] == 0
        assert all(diff == 0 for diff in comparison["characteristics"].values())


class TestStyleReport:
    """Test report serialization."""

    def test_json_keys(self):
        d = json.loads(analyze(ESSAY, "essay.txt").to_json())

        assert d["sourceTexts"] == ["essay.txt"]
        assert d["lexiconVersion"] == LEXICON_VERSION
        assert "typeTokenRatio" in d["metrics"]
        assert "formalityLevel" in d["characteristics"]
        assert "overallAuthenticity" in d["authenticity"]
        assert set(d["level"]) == {"level", "description", "color"}

    def test_json_round_trip(self):
        report = analyze(ESSAY)
        assert StyleReport.from_json(report.to_json()) == report

    def test_save_and_load(self, tmp_path):
        analyzer = StyleAnalyzer()
        report = analyzer.analyze_text(ESSAY)
        path = tmp_path / "nested" / "report.json"

        analyzer.save_report(report, path)

        assert analyzer.load_report(path) == report

    def test_load_malformed(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"metrics": {}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Malformed style report"):
            StyleAnalyzer().load_report(path)

    @pytest.mark.parametrize(
        "section, key, value",
        [
            ("metrics", "fleschReadingEase", "high"),
            ("characteristics", "formalityLevel", [1, 2]),
            ("authenticity", "improvementAreas", "be yourself"),
        ],
    )
    def test_load_wrong_field_type(self, tmp_path, section, key, value):
        d = analyze(ESSAY).to_dict()
        d[section][key] = value
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(d), encoding="utf-8")

        with pytest.raises(ValueError, match="Malformed style report"):
            StyleAnalyzer().load_report(path)

    @pytest.mark.parametrize(
        "key, value",
        [("sourceTexts", "essay.txt"), ("sourceTexts", [1]), ("lexiconVersion", 2)],
    )
    def test_load_wrong_header_type(self, key, value):
        d = analyze(ESSAY).to_dict()
        d[key] = value

        with pytest.raises(ValueError, match="Malformed style report"):
            StyleReport.from_dict(d)

    def test_report_is_hashable(self):
        assert hash(analyze(ESSAY)) == hash(analyze(ESSAY))

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError):
            StyleAnalyzer().load_report(path)

    def test_summary(self):
        summary = analyze(ESSAY, "essay.txt").summary()

        assert "Writing Style Report" in summary
        assert "essay.txt" in summary
        assert "Overall:" in summary
