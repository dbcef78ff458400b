"""
Style Lexicons

Fixed word lists used for stylistic marker percentages.

Changing any list changes every score computed from it, so bump
LEXICON_VERSION whenever a list is edited.
"""

import re

LEXICON_VERSION = "1.0"

# Subordinating/coordinating conjunctions counted as clause boundaries
CLAUSE_MARKERS = [
    "and", "or", "but", "because", "although", "while",
    "since", "when", "where", "if", "unless",
]

# First-person pronouns
PERSONAL_PRONOUNS = [
    "i", "me", "my", "mine", "myself",
    "we", "us", "our", "ours", "ourselves",
]

# Forms of "to be" that open a passive construction
PASSIVE_AUXILIARIES = ["am", "is", "are", "was", "were", "be", "been", "being"]

HEDGING_WORDS = [
    "maybe", "perhaps", "possibly", "probably", "might", "could",
    "would", "should", "seem", "appear", "suggest", "indicate",
]

CONFIDENCE_WORDS = [
    "certainly", "definitely", "clearly", "obviously",
    "undoubtedly", "absolutely", "surely", "indeed",
]

TRANSITION_WORDS = [
    "however", "therefore", "furthermore", "moreover", "additionally",
    "consequently", "nevertheless", "nonetheless", "meanwhile", "subsequently",
]

_FLAGS = re.IGNORECASE | re.ASCII


def word_pattern(words: list[str]) -> re.Pattern:
    """Compile a case-insensitive, word-boundary pattern for a lexicon."""
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", _FLAGS)


CLAUSE_MARKER_PATTERN = word_pattern(CLAUSE_MARKERS)
PERSONAL_PRONOUN_PATTERN = word_pattern(PERSONAL_PRONOUNS)
HEDGING_PATTERN = word_pattern(HEDGING_WORDS)
CONFIDENCE_PATTERN = word_pattern(CONFIDENCE_WORDS)
TRANSITION_PATTERN = word_pattern(TRANSITION_WORDS)

# "was finished", "is required": auxiliary followed by an -ed word
PASSIVE_PATTERN = re.compile(
    r"\b(?:" + "|".join(PASSIVE_AUXILIARIES) + r")\s+\w+ed\b", _FLAGS
)
