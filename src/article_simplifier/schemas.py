"""
Pydantic schemas for the JSON simplification report.

The report pairs the simplified text with before/after readability so the
effect of a run can be inspected or stored.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .reading_level import ReadabilityMetrics, analyze
from .simplifier import SimplifiedArticle
from .vocabulary import Vocabulary


class MetricsReport(BaseModel):
    """Readability metrics for one text."""

    avg_words_per_sentence: float = Field(ge=0)
    avg_syllables_per_word: float = Field(ge=0)
    flesch_score: float = Field(
        description="Flesch reading ease. Higher is easier; may fall outside 0-100.",
    )
    cefr_estimate: int = Field(
        ge=0,
        le=6,
        description="1-6 for A1-C2, 0 when the text has no sentences",
    )
    cefr_label: str

    @classmethod
    def from_metrics(cls, metrics: ReadabilityMetrics) -> "MetricsReport":
        return cls(
            avg_words_per_sentence=round(metrics.avg_words_per_sentence, 2),
            avg_syllables_per_word=round(metrics.avg_syllables_per_word, 2),
            flesch_score=round(metrics.flesch_score, 1),
            cefr_estimate=metrics.cefr_estimate,
            cefr_label=metrics.cefr_label,
        )


class SimplificationReport(BaseModel):
    """Result of simplifying one article."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "level": "A1",
                "original": "We will commence at noon.",
                "simplified": "We will start at noon.",
                "before": {
                    "avg_words_per_sentence": 5.0,
                    "avg_syllables_per_word": 1.2,
                    "flesch_score": 100.2,
                    "cefr_estimate": 1,
                    "cefr_label": "A1",
                },
                "after": {
                    "avg_words_per_sentence": 5.0,
                    "avg_syllables_per_word": 1.0,
                    "flesch_score": 117.2,
                    "cefr_estimate": 1,
                    "cefr_label": "A1",
                },
                "flagged_words": ["commence"],
            }
        }
    )

    level: str = Field(description="Target level, A1 or A2")
    original: str
    simplified: str
    before: MetricsReport
    after: MetricsReport
    flagged_words: List[str] = Field(
        default_factory=list,
        description="Words in the original that the level's vocabulary flags as difficult",
    )


def build_report(article: SimplifiedArticle) -> SimplificationReport:
    vocabulary = Vocabulary(article.level)
    return SimplificationReport(
        level=article.level.label,
        original=article.original,
        simplified=article.simplified,
        before=MetricsReport.from_metrics(analyze(article.original)),
        after=MetricsReport.from_metrics(analyze(article.simplified)),
        flagged_words=vocabulary.flagged_words(article.original),
    )
