"""
Authenticity Scoring

Combine style characteristics into five authenticity dimensions
(sincerity, consistency, credibility, originality, naturalness), a
weighted overall score, a confidence level and improvement advice.

Adapted from the Perceived Brand Authenticity scale (Morhart et al.,
2015) for writing samples.
"""

from dataclasses import dataclass
import logging
import math

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .characteristics import StyleCharacteristics, clamp
from .metrics import LinguisticMetrics
from .serialization import record_from_dict, record_to_dict

logger = logging.getLogger(__name__)

# Dimension order is also the order of improvement advice
DIMENSIONS = ("sincerity", "consistency", "credibility", "originality", "naturalness")

AUTHENTICITY_WEIGHTS = {
    "sincerity": 0.25,
    "consistency": 0.20,
    "credibility": 0.25,
    "originality": 0.15,
    "naturalness": 0.15,
}

IMPROVEMENT_THRESHOLD = 70.0

IMPROVEMENT_ADVICE = {
    "sincerity": "Increase personal pronoun usage and reduce hedging language",
    "consistency": "Maintain more consistent vocabulary and sentence patterns",
    "credibility": "Improve readability and use more confident language markers",
    "originality": "Develop more unique vocabulary and distinctive sentence patterns",
    "naturalness": "Increase engagement and personal connection in writing",
}

# Reference points for the credibility and naturalness terms
TARGET_READING_GRADE = 12.0
TARGET_FORMALITY = 60.0
TARGET_SENTENCE_COMPLEXITY = 2.5
OVER_FORMALITY_THRESHOLD = 80.0

BASE_CONFIDENCE = 70.0


class AuthenticityInput(BaseModel):
    """
    Scorer input assembled from the metrics and characteristics stages.

    Accepts camelCase or snake_case keys. Non-finite numbers are
    replaced with 0 so scoring never produces NaN.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    vocabulary_diversity: float = 0.0  # type-token ratio (0-1)
    sentence_complexity: float = 0.0  # clauses per sentence
    readability_score: float = 0.0  # Flesch-Kincaid grade level
    formality_level: float = 0.0  # 0-100
    emotional_tone: float = 0.0  # -100 to +100
    engagement_level: float = 0.0  # 0-100
    personal_pronouns: float = 0.0  # percent of words
    hedging_language: float = 0.0  # percent of words
    confidence_markers: float = 0.0  # percent of words

    @field_validator("*")
    @classmethod
    def _finite(cls, value: float) -> float:
        return value if math.isfinite(value) else 0.0

    @classmethod
    def from_analysis(
        cls,
        metrics: LinguisticMetrics,
        characteristics: StyleCharacteristics,
    ) -> "AuthenticityInput":
        """Build scorer input from the two earlier pipeline stages."""
        return cls(
            vocabulary_diversity=metrics.type_token_ratio,
            sentence_complexity=metrics.sentence_complexity,
            readability_score=metrics.flesch_kincaid_grade,
            formality_level=characteristics.formality_level,
            emotional_tone=characteristics.emotional_tone,
            engagement_level=characteristics.engagement_level,
            personal_pronouns=metrics.personal_pronouns,
            hedging_language=metrics.hedging_language,
            confidence_markers=metrics.confidence_markers,
        )


@dataclass(frozen=True)
class AuthenticityMetrics:
    """Authenticity assessment of a writing sample (all scores 0-100)."""

    sincerity: float = 0.0  # honesty and transparency
    consistency: float = 0.0  # reliability of style
    credibility: float = 0.0  # trustworthiness and expertise
    originality: float = 0.0  # distinctive voice
    naturalness: float = 0.0  # unforced expression

    overall_authenticity: float = 0.0
    confidence_level: float = 0.0
    improvement_areas: tuple[str, ...] = ()

    def dimension_scores(self) -> dict[str, float]:
        """The five sub-scores keyed by dimension name."""
        return {name: getattr(self, name) for name in DIMENSIONS}

    def to_dict(self) -> dict:
        """Convert to dictionary with camelCase keys."""
        d = record_to_dict(self)
        d["improvementAreas"] = list(self.improvement_areas)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "AuthenticityMetrics":
        """Create from dictionary."""
        return record_from_dict(cls, d)


@dataclass(frozen=True)
class AuthenticityLevel:
    """Display label for an overall authenticity score."""

    level: str
    description: str
    color: str

    def to_dict(self) -> dict:
        return record_to_dict(self)


def score_authenticity(data: AuthenticityInput) -> AuthenticityMetrics:
    """
    Score the authenticity of a writing style.

    Args:
        data: Scorer input; out-of-range values are absorbed by clamping

    Returns:
        AuthenticityMetrics with every score in 0-100
    """
    scores = {
        "sincerity": sincerity_score(data),
        "consistency": consistency_score(data),
        "credibility": credibility_score(data),
        "originality": originality_score(data),
        "naturalness": naturalness_score(data),
    }

    overall = (
        scores["sincerity"] * AUTHENTICITY_WEIGHTS["sincerity"]
        + scores["consistency"] * AUTHENTICITY_WEIGHTS["consistency"]
        + scores["credibility"] * AUTHENTICITY_WEIGHTS["credibility"]
        + scores["originality"] * AUTHENTICITY_WEIGHTS["originality"]
        + scores["naturalness"] * AUTHENTICITY_WEIGHTS["naturalness"]
    )

    result = AuthenticityMetrics(
        **scores,
        overall_authenticity=overall,
        confidence_level=confidence_level(data),
        improvement_areas=tuple(identify_improvement_areas(scores)),
    )
    logger.debug("Authenticity %.2f (confidence %.2f)", overall, result.confidence_level)
    return result


def sincerity_score(data: AuthenticityInput) -> float:
    """Personal pronouns and direct statements, minus a hedging penalty."""
    score = (
        data.personal_pronouns * 0.4
        + (100 - data.hedging_language) * 0.4
        - data.hedging_language * 0.2
    )
    return clamp(score)


def consistency_score(data: AuthenticityInput) -> float:
    """Vocabulary, sentence pattern and tone stability."""
    vocab = clamp(data.vocabulary_diversity * 100)
    sentences = clamp(
        100 - abs(data.sentence_complexity - TARGET_SENTENCE_COMPLEXITY) * 20
    )
    tone = clamp(100 - abs(data.emotional_tone) * 0.5)
    return (vocab + sentences + tone) / 3


def credibility_score(data: AuthenticityInput) -> float:
    """Appropriate readability and formality, plus confidence markers."""
    readability = clamp(100 - abs(data.readability_score - TARGET_READING_GRADE) * 5)
    formality = clamp(100 - abs(data.formality_level - TARGET_FORMALITY) * 0.8)
    confidence = clamp(data.confidence_markers)
    return (readability + formality + confidence) / 3


def originality_score(data: AuthenticityInput) -> float:
    """Vocabulary diversity, sentence pattern variation and personal markers."""
    vocab = clamp(data.vocabulary_diversity * 100)
    patterns = clamp(data.sentence_complexity * 25)
    personal = clamp(data.personal_pronouns)
    return (vocab + patterns + personal) / 3


def naturalness_score(data: AuthenticityInput) -> float:
    """Engagement and personal connection, penalized for over-formality."""
    formality_penalty = max(0.0, data.formality_level - OVER_FORMALITY_THRESHOLD) * 0.5
    return clamp(
        (data.engagement_level + data.personal_pronouns - formality_penalty) / 3
    )


def confidence_level(data: AuthenticityInput) -> float:
    """Confidence in the assessment, from data-quality indicators."""
    confidence = BASE_CONFIDENCE
    confidence += data.vocabulary_diversity * 20
    confidence += data.engagement_level * 0.1

    # Extreme values suggest a degenerate sample
    if data.formality_level > 95 or data.formality_level < 5:
        confidence -= 10
    if abs(data.emotional_tone) > 80:
        confidence -= 10

    return clamp(confidence)


def identify_improvement_areas(scores: dict[str, float]) -> list[str]:
    """Advice for every dimension scoring below the threshold, in dimension order."""
    return [
        IMPROVEMENT_ADVICE[name]
        for name in DIMENSIONS
        if scores[name] < IMPROVEMENT_THRESHOLD
    ]


def authenticity_level(score: float) -> AuthenticityLevel:
    """Map an overall authenticity score onto a display label."""
    if score >= 85:
        return AuthenticityLevel(
            level="Highly Authentic",
            description="Writing demonstrates genuine personal voice with strong authenticity markers",
            color="text-green-600",
        )
    elif score >= 70:
        return AuthenticityLevel(
            level="Authentic",
            description="Writing shows good authenticity with room for minor improvements",
            color="text-blue-600",
        )
    elif score >= 50:
        return AuthenticityLevel(
            level="Moderately Authentic",
            description="Writing has some authentic elements but needs enhancement",
            color="text-yellow-600",
        )
    else:
        return AuthenticityLevel(
            level="Needs Improvement",
            description="Writing lacks authentic voice and requires significant development",
            color="text-red-600",
        )


# Typical score profiles for common writing registers
REFERENCE_PROFILES = {
    "academic": {
        "description": "Scholarly writing with high credibility and consistency",
        "scores": {
            "sincerity": 75, "consistency": 85, "credibility": 90,
            "originality": 60, "naturalness": 50, "overall_authenticity": 72,
        },
    },
    "personal": {
        "description": "Authentic personal voice with high sincerity and naturalness",
        "scores": {
            "sincerity": 90, "consistency": 70, "credibility": 65,
            "originality": 85, "naturalness": 95, "overall_authenticity": 81,
        },
    },
    "professional": {
        "description": "Business writing with balanced authenticity dimensions",
        "scores": {
            "sincerity": 80, "consistency": 80, "credibility": 85,
            "originality": 70, "naturalness": 75, "overall_authenticity": 78,
        },
    },
}


def closest_reference_profile(metrics: AuthenticityMetrics) -> str:
    """Name of the reference profile nearest to the five dimension scores."""
    actual = metrics.dimension_scores()

    def distance(name: str) -> float:
        expected = REFERENCE_PROFILES[name]["scores"]
        return sum(abs(actual[d] - expected[d]) for d in DIMENSIONS) / len(DIMENSIONS)

    return min(REFERENCE_PROFILES, key=distance)
