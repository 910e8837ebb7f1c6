"""
Article Simplifier - rewrite articles toward CEFR A1/A2 reading level

This package scores the readability of a passage and rewrites it for language
learners by swapping difficult words, dropping parenthetical asides, and
splitting long sentences.
"""

from .levels import ProficiencyLevel, LevelError, parse_level, cefr_label
from .reading_level import (
    ReadabilityMetrics,
    ReferenceReadingLevel,
    analyze,
    count_syllables,
    estimate_cefr,
    reference_reading_level,
)
from .vocabulary import Vocabulary
from .rewriter import SentenceRewriter, SplitLimits
from .simplifier import Simplifier, SimplifiedArticle
from .schemas import MetricsReport, SimplificationReport, build_report

__all__ = [
    "ProficiencyLevel",
    "LevelError",
    "parse_level",
    "cefr_label",
    "ReadabilityMetrics",
    "ReferenceReadingLevel",
    "analyze",
    "count_syllables",
    "estimate_cefr",
    "reference_reading_level",
    "Vocabulary",
    "SentenceRewriter",
    "SplitLimits",
    "Simplifier",
    "SimplifiedArticle",
    "MetricsReport",
    "SimplificationReport",
    "build_report",
]
