"""
Style Characteristics

Map raw linguistic metrics onto semantic 0-100 scales (formality,
tone, complexity, voice). Each characteristic is the mean of three
sub-terms, and every sub-term is clamped to 0-100 before averaging.
"""

from dataclasses import dataclass

from .metrics import LinguisticMetrics
from .serialization import record_from_dict, record_to_dict

# Baselines for the consistency score
BASELINE_SENTENCE_LENGTH = 15.0  # words per sentence
BASELINE_PARAGRAPH_LENGTH = 3.0  # sentences per paragraph


@dataclass(frozen=True)
class StyleCharacteristics:
    """Normalized style profile derived from LinguisticMetrics."""

    # Tone
    formality_level: float = 0.0  # informal -> formal
    academic_tone: float = 0.0  # conversational -> academic
    emotional_tone: float = 0.0  # -100 (negative) -> +100 (positive)
    engagement_level: float = 0.0  # passive -> engaging

    # Complexity
    syntactic_complexity: float = 0.0
    lexical_sophistication: float = 0.0
    conceptual_density: float = 0.0  # concrete -> abstract

    # Authenticity indicators
    personal_voice: float = 0.0
    originality_score: float = 0.0
    consistency_score: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary with camelCase keys."""
        return record_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "StyleCharacteristics":
        """Create from dictionary."""
        return record_from_dict(cls, d)


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


def _mean_of_clamped(*terms: float) -> float:
    return sum(clamp(t) for t in terms) / len(terms)


def characterize(metrics: LinguisticMetrics) -> StyleCharacteristics:
    """
    Derive style characteristics from linguistic metrics.

    Args:
        metrics: Output of extract_metrics

    Returns:
        StyleCharacteristics with every field inside its range
    """
    return StyleCharacteristics(
        formality_level=formality_level(metrics),
        academic_tone=academic_tone(metrics),
        emotional_tone=emotional_tone(metrics),
        engagement_level=engagement_level(metrics),
        syntactic_complexity=syntactic_complexity(metrics),
        lexical_sophistication=lexical_sophistication(metrics),
        conceptual_density=conceptual_density(metrics),
        personal_voice=personal_voice(metrics),
        originality_score=originality_score(metrics),
        consistency_score=consistency_score(metrics),
    )


def formality_level(m: LinguisticMetrics) -> float:
    """Vocabulary diversity, formal structures and grade level."""
    return _mean_of_clamped(
        m.type_token_ratio * 100,
        (m.passive_voice + m.sentence_complexity * 20) / 2,
        m.flesch_kincaid_grade * 5,
    )


def academic_tone(m: LinguisticMetrics) -> float:
    """Hedging, impersonal constructions and clause density."""
    return _mean_of_clamped(
        m.hedging_language * 2,
        100 - m.personal_pronouns,
        m.sentence_complexity * 30,
    )


def emotional_tone(m: LinguisticMetrics) -> float:
    """
    Signed tone in [-100, 100].

    Pronoun usage stands in for emotional engagement; confidence
    markers shift the tone towards positive.
    """
    engagement = (m.personal_pronouns - 50) * 2
    confidence_adjustment = (m.confidence_markers - 50) * 0.5
    return clamp(engagement + confidence_adjustment, -100.0, 100.0)


def engagement_level(m: LinguisticMetrics) -> float:
    """Active voice, personal connection and flow."""
    return _mean_of_clamped(
        100 - m.passive_voice,
        m.personal_pronouns,
        m.transition_words * 2,
    )


def syntactic_complexity(m: LinguisticMetrics) -> float:
    return _mean_of_clamped(
        m.sentence_complexity * 25,
        m.average_word_length * 10,
        m.average_sentence_length * 2,
    )


def lexical_sophistication(m: LinguisticMetrics) -> float:
    unique_ratio = (
        m.unique_word_count / m.total_word_count if m.total_word_count > 0 else 0.0
    )
    return _mean_of_clamped(
        m.type_token_ratio * 100,
        m.average_word_length * 15,
        unique_ratio * 1000,
    )


def conceptual_density(m: LinguisticMetrics) -> float:
    # transition_words is a percentage subtracted from the raw word count
    content_density = (
        (m.total_word_count - m.transition_words) / m.total_word_count * 100
        if m.total_word_count > 0
        else 0.0
    )
    return _mean_of_clamped(
        content_density,
        m.average_word_length * 12,
        m.type_token_ratio * 100,
    )


def personal_voice(m: LinguisticMetrics) -> float:
    return _mean_of_clamped(
        m.personal_pronouns,
        100 - m.passive_voice,
        m.confidence_markers * 1.5,
    )


def originality_score(m: LinguisticMetrics) -> float:
    return _mean_of_clamped(
        m.type_token_ratio * 100,
        m.sentence_complexity * 30,
        m.personal_pronouns,
    )


def consistency_score(m: LinguisticMetrics) -> float:
    """Penalizes drift from a 15-word sentence and a 3-sentence paragraph."""
    return _mean_of_clamped(
        m.type_token_ratio * 100,
        100 - abs(m.average_sentence_length - BASELINE_SENTENCE_LENGTH) * 3,
        100 - abs(m.paragraph_length - BASELINE_PARAGRAPH_LENGTH) * 10,
    )
