"""
Style Analyzer

Main entry point for style analysis. Runs the metrics, characteristics
and authenticity stages over a text and bundles the results in a
StyleReport.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional
import json
import logging

from ..ingest.loader import combine_samples, load_sample
from .authenticity import (
    DIMENSIONS,
    AuthenticityInput,
    AuthenticityLevel,
    AuthenticityMetrics,
    authenticity_level,
    score_authenticity,
)
from .characteristics import StyleCharacteristics, characterize
from .lexicons import LEXICON_VERSION
from .metrics import LinguisticMetrics, extract_metrics

logger = logging.getLogger(__name__)


@dataclass
class AnalysisProgress:
    """Progress tracking for style analysis."""
    phase: str
    current: int
    total: int
    message: str = ""


@dataclass(frozen=True)
class StyleReport:
    """Complete result of one analysis run."""

    metrics: LinguisticMetrics
    characteristics: StyleCharacteristics
    authenticity: AuthenticityMetrics
    source_texts: tuple[str, ...] = ()
    lexicon_version: str = LEXICON_VERSION

    @property
    def level(self) -> AuthenticityLevel:
        return authenticity_level(self.authenticity.overall_authenticity)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (camelCase keys)."""
        return {
            "sourceTexts": list(self.source_texts),
            "lexiconVersion": self.lexicon_version,
            "metrics": self.metrics.to_dict(),
            "characteristics": self.characteristics.to_dict(),
            "authenticity": self.authenticity.to_dict(),
            "level": self.level.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict) -> "StyleReport":
        """Create from dictionary. Raises ValueError on a malformed report."""
        try:
            source_texts = d.get("sourceTexts", [])
            lexicon_version = d.get("lexiconVersion", LEXICON_VERSION)
            if not isinstance(source_texts, list) or not all(
                isinstance(s, str) for s in source_texts
            ):
                raise TypeError("sourceTexts must be a list of strings")
            if not isinstance(lexicon_version, str):
                raise TypeError("lexiconVersion must be a string")

            return cls(
                metrics=LinguisticMetrics.from_dict(d["metrics"]),
                characteristics=StyleCharacteristics.from_dict(d["characteristics"]),
                authenticity=AuthenticityMetrics.from_dict(d["authenticity"]),
                source_texts=tuple(source_texts),
                lexicon_version=lexicon_version,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed style report: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "StyleReport":
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def summary(self) -> str:
        """Generate a human-readable summary of the report."""
        m = self.metrics
        c = self.characteristics
        a = self.authenticity
        lines = [
            f"=== Writing Style Report ===",
            f"",
            f"[Sample]",
            f"   Sources: {', '.join(self.source_texts) or '-'}",
            f"   Total words: {m.total_word_count:,}",
            f"   Unique words: {m.unique_word_count:,}",
            f"   Type-token ratio: {m.type_token_ratio:.3f}",
            f"",
            f"[Readability]",
            f"   Flesch Reading Ease: {m.flesch_reading_ease:.1f}",
            f"   Flesch-Kincaid Grade: {m.flesch_kincaid_grade:.1f}",
            f"   Gunning Fog Index: {m.gunning_fog_index:.1f}",
            f"",
            f"[Style]",
            f"   Formality: {c.formality_level:.1f}",
            f"   Academic tone: {c.academic_tone:.1f}",
            f"   Emotional tone: {c.emotional_tone:+.1f}",
            f"   Engagement: {c.engagement_level:.1f}",
            f"   Personal voice: {c.personal_voice:.1f}",
            f"",
            f"[Authenticity]",
            f"   Overall: {a.overall_authenticity:.1f} ({self.level.level})",
            f"   Confidence: {a.confidence_level:.1f}",
        ]
        for area in a.improvement_areas:
            lines.append(f"   - {area}")
        return "\n".join(lines)


class StyleAnalyzer:
    """
    Analyzes writing samples and scores their authenticity.

    Usage:
        analyzer = StyleAnalyzer()
        report = analyzer.analyze_text(text)
        # or
        report = analyzer.analyze_files(["essay1.txt", "essay2.txt"])
    """

    def __init__(
        self,
        progress_callback: Optional[Callable[[AnalysisProgress], None]] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize the style analyzer.

        Args:
            progress_callback: Optional callback for progress updates
            encoding: Preferred encoding for sample files
        """
        self.progress_callback = progress_callback
        self.encoding = encoding

    def _report_progress(self, phase: str, current: int, total: int, message: str = ""):
        """Report progress via callback if set."""
        if self.progress_callback:
            self.progress_callback(AnalysisProgress(phase, current, total, message))

    def analyze_text(self, text: str, source_name: str = "text") -> StyleReport:
        """
        Analyze a text and return its style report.

        Args:
            text: The full text to analyze
            source_name: Name of the source text

        Returns:
            StyleReport for the text
        """
        return self._analyze(text, [source_name])

    def analyze_samples(
        self,
        samples: Iterable[str],
        source_names: Optional[list[str]] = None,
    ) -> StyleReport:
        """
        Analyze several samples as one body of writing.

        Samples are joined with blank lines so each starts a new paragraph.
        Blank samples are skipped and left out of the source names.
        """
        samples = list(samples)
        if source_names is None:
            source_names = [f"sample {i + 1}" for i in range(len(samples))]
        elif len(source_names) != len(samples):
            raise ValueError(
                f"Got {len(source_names)} source names for {len(samples)} samples"
            )

        kept = [name for name, s in zip(source_names, samples) if s and s.strip()]
        return self._analyze(combine_samples(samples), kept)

    def analyze_file(self, file_path: str | Path) -> StyleReport:
        """Analyze a single sample file."""
        return self.analyze_files([file_path])

    def analyze_files(self, file_paths: list[str | Path]) -> StyleReport:
        """
        Analyze multiple sample files as one combined text.

        Args:
            file_paths: List of paths to sample files

        Returns:
            StyleReport over all files
        """
        samples = []
        source_texts = []

        for i, fp in enumerate(file_paths):
            path = Path(fp)
            self._report_progress(
                "loading", i + 1, len(file_paths), f"Loading {path.name}..."
            )
            samples.append(load_sample(path, self.encoding))
            source_texts.append(path.name)

        return self._analyze(combine_samples(samples), source_texts)

    def _analyze(self, text: str, source_texts: list[str]) -> StyleReport:
        self._report_progress("metrics", 0, 3, "Extracting linguistic metrics...")
        metrics = extract_metrics(text)

        self._report_progress("characteristics", 1, 3, "Characterizing style...")
        characteristics = characterize(metrics)

        self._report_progress("authenticity", 2, 3, "Scoring authenticity...")
        authenticity = score_authenticity(
            AuthenticityInput.from_analysis(metrics, characteristics)
        )

        self._report_progress("complete", 3, 3, "Analysis complete!")
        logger.debug(
            "Analyzed %d words from %d source(s): authenticity %.1f",
            metrics.total_word_count, len(source_texts),
            authenticity.overall_authenticity,
        )
        return StyleReport(
            metrics=metrics,
            characteristics=characteristics,
            authenticity=authenticity,
            source_texts=tuple(source_texts),
        )

    def compare(self, report1: StyleReport, report2: StyleReport) -> dict:
        """
        Compare two reports.

        Returns:
            Dict with per-dimension differences (second minus first)
        """
        a1 = report1.authenticity
        a2 = report2.authenticity
        c1 = report1.characteristics.to_dict()
        c2 = report2.characteristics.to_dict()

        return {
            "report1": ", ".join(report1.source_texts),
            "report2": ", ".join(report2.source_texts),
            "overall_difference": a2.overall_authenticity - a1.overall_authenticity,
            "authenticity": {
                name: {
                    "report1": getattr(a1, name),
                    "report2": getattr(a2, name),
                    "difference": getattr(a2, name) - getattr(a1, name),
                }
                for name in DIMENSIONS
            },
            "characteristics": {
                key: c2[key] - c1[key] for key in c1
            },
        }

    def save_report(self, report: StyleReport, output_path: str | Path, indent: int = 2):
        """Save report to JSON file."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(report.to_json(indent=indent))

    def load_report(self, input_path: str | Path) -> StyleReport:
        """Load report from JSON file."""
        with open(input_path, 'r', encoding='utf-8') as f:
            try:
                return StyleReport.from_json(f.read())
            except json.JSONDecodeError as e:
                raise ValueError(f"{input_path} is not valid JSON: {e}") from e


def analyze(text: str, source_name: str = "text") -> StyleReport:
    """Run the full pipeline over one text."""
    return StyleAnalyzer().analyze_text(text, source_name)
