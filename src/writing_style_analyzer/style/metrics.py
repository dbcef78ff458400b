"""
Linguistic Metrics

Raw measurements extracted from sample text: vocabulary diversity,
sentence and paragraph statistics, readability indices and stylistic
marker percentages.

Every function here is total over str input. Divisions by a zero
count return 0 instead of raising or producing NaN.
"""

from dataclasses import dataclass
import logging
import re

from ..ingest.splitter import (
    split_into_paragraphs,
    split_into_sentences,
    split_into_words,
)
from .lexicons import (
    CLAUSE_MARKER_PATTERN,
    CONFIDENCE_PATTERN,
    HEDGING_PATTERN,
    PASSIVE_PATTERN,
    PERSONAL_PRONOUN_PATTERN,
    TRANSITION_PATTERN,
)
from .serialization import record_from_dict, record_to_dict

logger = logging.getLogger(__name__)

# Syllable heuristic. Historical scores depend on these exact rules.
_SILENT_SUFFIX = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y = re.compile(r"^y")
_VOWEL_GROUP = re.compile(r"[aeiouy]{1,2}")

COMPLEX_WORD_SYLLABLES = 3


@dataclass(frozen=True)
class LinguisticMetrics:
    """Raw linguistic measurements for a text."""

    # Vocabulary
    type_token_ratio: float = 0.0  # unique / total (0-1)
    average_word_length: float = 0.0  # characters per word
    unique_word_count: int = 0
    total_word_count: int = 0

    # Structure
    average_sentence_length: float = 0.0  # words per sentence
    sentence_complexity: float = 1.0  # estimated clauses per sentence
    paragraph_length: float = 0.0  # sentences per paragraph

    # Readability (not clamped)
    flesch_kincaid_grade: float = 0.0
    flesch_reading_ease: float = 0.0
    gunning_fog_index: float = 0.0

    # Stylistic markers, percent of total words
    personal_pronouns: float = 0.0
    passive_voice: float = 0.0
    hedging_language: float = 0.0
    confidence_markers: float = 0.0
    transition_words: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary with camelCase keys."""
        return record_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "LinguisticMetrics":
        """Create from dictionary."""
        return record_from_dict(cls, d)


def extract_metrics(text: str) -> LinguisticMetrics:
    """
    Extract linguistic metrics from a text.

    Args:
        text: Raw sample text, possibly several samples joined by blank lines

    Returns:
        LinguisticMetrics; all zeros (and a sentence complexity of 1)
        for text without words
    """
    words = split_into_words(text)
    sentences = split_into_sentences(text)
    paragraphs = split_into_paragraphs(text)

    total_words = len(words)
    sentence_count = len(sentences)
    unique_words = len(set(words))

    type_token_ratio = unique_words / total_words if total_words > 0 else 0.0
    average_word_length = (
        sum(len(w) for w in words) / total_words if total_words > 0 else 0.0
    )
    average_sentence_length = (
        total_words / sentence_count if sentence_count > 0 else 0.0
    )
    paragraph_length = (
        sentence_count / len(paragraphs) if paragraphs else 0.0
    )

    syllables = [count_syllables(w) for w in words]
    total_syllables = sum(syllables)
    complex_words = sum(1 for s in syllables if s >= COMPLEX_WORD_SYLLABLES)

    metrics = LinguisticMetrics(
        type_token_ratio=type_token_ratio,
        average_word_length=average_word_length,
        unique_word_count=unique_words,
        total_word_count=total_words,
        average_sentence_length=average_sentence_length,
        sentence_complexity=calculate_sentence_complexity(text, sentence_count),
        paragraph_length=paragraph_length,
        flesch_kincaid_grade=flesch_kincaid_grade(total_words, sentence_count, total_syllables),
        flesch_reading_ease=flesch_reading_ease(total_words, sentence_count, total_syllables),
        gunning_fog_index=gunning_fog_index(total_words, sentence_count, complex_words),
        personal_pronouns=marker_percentage(PERSONAL_PRONOUN_PATTERN, text, total_words),
        passive_voice=marker_percentage(PASSIVE_PATTERN, text, total_words),
        hedging_language=marker_percentage(HEDGING_PATTERN, text, total_words),
        confidence_markers=marker_percentage(CONFIDENCE_PATTERN, text, total_words),
        transition_words=marker_percentage(TRANSITION_PATTERN, text, total_words),
    )

    logger.debug(
        "Extracted metrics: %d words, %d sentences, %d paragraphs",
        total_words, sentence_count, len(paragraphs),
    )
    return metrics


def calculate_sentence_complexity(text: str, sentence_count: int) -> float:
    """
    Estimate clauses per sentence.

    Counts clause-marker conjunctions, spreads them over the sentences
    and adds the one clause every sentence has.
    """
    if sentence_count == 0:
        return 1.0

    clause_count = len(CLAUSE_MARKER_PATTERN.findall(text))
    return clause_count / sentence_count + 1


def count_syllables(word: str) -> int:
    """
    Estimate syllable count for a word.

    Strips one silent ending (-es, -ed, or -e after a consonant other
    than l), drops a leading y, then counts groups of up to two vowels.
    A word with no vowel group counts as one syllable.
    """
    stripped = _SILENT_SUFFIX.sub("", word.lower(), count=1)
    stripped = _LEADING_Y.sub("", stripped, count=1)

    groups = _VOWEL_GROUP.findall(stripped)
    return len(groups) if groups else 1


def flesch_reading_ease(words: int, sentences: int, syllables: int) -> float:
    """206.835 - 1.015 * ASL - 84.6 * ASW; higher is easier."""
    if words == 0 or sentences == 0:
        return 0.0
    return 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)


def flesch_kincaid_grade(words: int, sentences: int, syllables: int) -> float:
    """0.39 * ASL + 11.8 * ASW - 15.59; US grade level."""
    if words == 0 or sentences == 0:
        return 0.0
    return 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59


def gunning_fog_index(words: int, sentences: int, complex_words: int) -> float:
    """0.4 * (ASL + percent complex words); years of education."""
    if words == 0 or sentences == 0:
        return 0.0
    return 0.4 * (words / sentences + 100 * (complex_words / words))


def marker_percentage(pattern: re.Pattern, text: str, total_words: int) -> float:
    """Matches of a lexicon pattern as a percentage of total words."""
    if total_words == 0:
        return 0.0
    return len(pattern.findall(text)) / total_words * 100
