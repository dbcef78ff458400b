"""
Style Analysis Module

Extract linguistic metrics from writing samples, characterize the
style, and score its authenticity.
"""

from .metrics import (
    LinguisticMetrics,
    count_syllables,
    extract_metrics,
)
from .characteristics import StyleCharacteristics, characterize
from .authenticity import (
    AUTHENTICITY_WEIGHTS,
    AuthenticityInput,
    AuthenticityLevel,
    AuthenticityMetrics,
    authenticity_level,
    closest_reference_profile,
    score_authenticity,
)
from .lexicons import LEXICON_VERSION
from .analyzer import StyleAnalyzer, StyleReport, analyze

__all__ = [
    # Metrics
    "LinguisticMetrics",
    "count_syllables",
    "extract_metrics",
    "LEXICON_VERSION",
    # Characteristics
    "StyleCharacteristics",
    "characterize",
    # Authenticity
    "AUTHENTICITY_WEIGHTS",
    "AuthenticityInput",
    "AuthenticityLevel",
    "AuthenticityMetrics",
    "authenticity_level",
    "closest_reference_profile",
    "score_authenticity",
    # Analyzer
    "StyleAnalyzer",
    "StyleReport",
    "analyze",
]
