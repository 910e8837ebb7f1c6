"""
Reading level analysis for article text.

The primary metrics use a vowel-group syllable heuristic and the Flesch
reading ease formula, then map the score onto a rough CEFR band. The bands
are uncalibrated and kept as literal constants.

A second estimate re-counts words and syllables with textstat and reports a
Flesch-Kincaid grade, for cross-checking the heuristic.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import textstat

from .levels import cefr_label

VOWELS = "aeiouy"
SENTENCE_DELIMITERS = ".!?"

# (minimum Flesch score, CEFR estimate), checked top to bottom
CEFR_BANDS = (
    (80.0, 1),
    (65.0, 2),
    (50.0, 3),
    (40.0, 4),
    (25.0, 5),
)


@dataclass(frozen=True)
class ReadabilityMetrics:
    """Readability of a passage. cefr_estimate 0 means undetermined."""
    avg_words_per_sentence: float = 0.0
    avg_syllables_per_word: float = 0.0
    flesch_score: float = 0.0
    cefr_estimate: int = 0

    @property
    def cefr_label(self) -> str:
        return cefr_label(self.cefr_estimate)


@dataclass
class ReferenceReadingLevel:
    """Results from the textstat cross-check."""
    text_source: str
    flesch_kincaid_grade: float
    flesch_reading_ease: float
    word_count: int
    sentence_count: int
    meets_target: bool
    target_grade: float = 6.0


def count_syllables(word: str) -> int:
    """
    Approximate syllables by counting vowel groups.

    A trailing 'e' on words longer than two characters is treated as silent.
    Every word counts as at least one syllable.
    """
    n = 0
    last_was_vowel = False
    lowered = word.lower()
    for c in lowered:
        is_vowel = c in VOWELS
        if is_vowel and not last_was_vowel:
            n += 1
        last_was_vowel = is_vowel

    if len(lowered) > 2 and lowered.endswith("e"):
        n -= 1

    return max(1, n)


def flesch_reading_ease(words_per_sentence: float, syllables_per_word: float) -> float:
    return 206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word)


def estimate_cefr(flesch: float) -> int:
    for minimum, level in CEFR_BANDS:
        if flesch >= minimum:
            return level
    return 6


def split_on_delimiters(text: str, keep_tail: bool = False) -> List[str]:
    """
    Split text after each '.', '!' or '?', keeping the delimiter.

    Text after the last delimiter is returned as a final sentence only when
    keep_tail is set. The analyzer drops it; the simplifier keeps it so no
    input is lost.
    """
    sentences = []
    current = []
    for c in text:
        current.append(c)
        if c in SENTENCE_DELIMITERS:
            sentences.append("".join(current))
            current = []
    if keep_tail and current:
        sentences.append("".join(current))
    return sentences


def _alpha_only(token: str) -> str:
    return "".join(c for c in token if c.isascii() and c.isalpha())


def analyze(text: str) -> ReadabilityMetrics:
    """
    Compute readability metrics for a passage.

    Text with no '.', '!' or '?' has no sentences and yields the all-zero
    record instead of an error.
    """
    sentences = split_on_delimiters(text)
    if not sentences:
        return ReadabilityMetrics()

    total_words = 0
    total_syllables = 0
    for sentence in sentences:
        for token in sentence.split():
            word = _alpha_only(token)
            if not word:
                continue
            total_words += 1
            total_syllables += count_syllables(word)

    wps = total_words / len(sentences)
    spw = total_syllables / total_words if total_words > 0 else 0.0
    flesch = flesch_reading_ease(wps, spw)

    return ReadabilityMetrics(
        avg_words_per_sentence=wps,
        avg_syllables_per_word=spw,
        flesch_score=flesch,
        cefr_estimate=estimate_cefr(flesch),
    )


def flesch_kincaid_grade(words_per_sentence: float, syllables_per_word: float) -> float:
    return (0.39 * words_per_sentence) + (11.8 * syllables_per_word) - 15.59


def reference_reading_level(
    text: str,
    source_label: str = "unknown",
    target_grade: float = 6.0,
) -> ReferenceReadingLevel:
    """
    Re-score text with textstat's dictionary-based syllable and word counts.

    Sentences come from the same delimiter split the simplifier uses (tail
    included), so the only difference from analyze() is how words and
    syllables are counted. A large gap between the two Flesch scores means
    the vowel-group heuristic is off for this text.

    Text with no words scores 0.0 on both scales.
    """
    sentences = [s for s in split_on_delimiters(text, keep_tail=True) if s.strip()]
    words = sum(textstat.lexicon_count(s) for s in sentences)
    syllables = sum(textstat.syllable_count(s) for s in sentences)

    if words:
        wps = words / len(sentences)
        spw = syllables / words
        grade = flesch_kincaid_grade(wps, spw)
        ease = flesch_reading_ease(wps, spw)
    else:
        grade = 0.0
        ease = 0.0

    return ReferenceReadingLevel(
        text_source=source_label,
        flesch_kincaid_grade=round(grade, 1),
        flesch_reading_ease=round(ease, 1),
        word_count=words,
        sentence_count=len(sentences),
        meets_target=grade <= target_grade,
        target_grade=target_grade,
    )
