"""
Tests for article_simplifier.reading_level module.
"""
from __future__ import annotations

import dataclasses

import pytest

from article_simplifier.reading_level import (
    ReadabilityMetrics,
    ReferenceReadingLevel,
    analyze,
    count_syllables,
    estimate_cefr,
    flesch_kincaid_grade,
    flesch_reading_ease,
    reference_reading_level,
    split_on_delimiters,
)


class TestCountSyllables:
    """Tests for the vowel-group syllable heuristic."""

    @pytest.mark.parametrize("word,expected", [
        ("cat", 1),
        ("hello", 2),
        ("beautiful", 3),
        ("utilize", 3),
        ("rhythm", 1),
        ("be", 1),
    ])
    def test_counts_vowel_groups(self, word, expected):
        assert count_syllables(word) == expected

    def test_silent_e_is_subtracted(self):
        # c-a-k-e has two vowel groups, trailing e is silent
        assert count_syllables("cake") == 1

    def test_silent_e_ignored_for_short_words(self):
        assert count_syllables("be") == 1

    def test_case_insensitive(self):
        assert count_syllables("UTILIZE") == count_syllables("utilize")

    @pytest.mark.parametrize("word", ["", "the", "queue", "xyz", "123", "--", "e"])
    def test_never_below_one(self, word):
        assert count_syllables(word) >= 1


class TestEstimateCefr:
    """Tests for the Flesch-to-CEFR step function."""

    @pytest.mark.parametrize("score,expected", [
        (120.0, 1),
        (80.0, 1),
        (79.9, 2),
        (65.0, 2),
        (64.9, 3),
        (50.0, 3),
        (40.0, 4),
        (39.9, 5),
        (25.0, 5),
        (24.9, 6),
        (-30.0, 6),
    ])
    def test_band_boundaries(self, score, expected):
        assert estimate_cefr(score) == expected

    def test_monotonic_as_score_decreases(self):
        scores = [100, 80, 79, 65, 64, 50, 49, 40, 39, 25, 24, 0, -50]
        levels = [estimate_cefr(s) for s in scores]
        assert levels == sorted(levels)


class TestSplitOnDelimiters:
    """Tests for the shared delimiter split."""

    def test_keeps_delimiters(self):
        assert split_on_delimiters("One. Two! Three?") == ["One.", " Two!", " Three?"]

    def test_drops_tail_by_default(self):
        assert split_on_delimiters("One. Two") == ["One."]

    def test_keep_tail(self):
        assert split_on_delimiters("One. Two", keep_tail=True) == ["One.", " Two"]

    def test_no_delimiter(self):
        assert split_on_delimiters("no end") == []
        assert split_on_delimiters("no end", keep_tail=True) == ["no end"]

    def test_empty(self):
        assert split_on_delimiters("", keep_tail=True) == []


class TestAnalyze:
    """Tests for analyze()."""

    def test_simple_sentence(self):
        m = analyze("The cat sat on the mat.")
        assert m.avg_words_per_sentence == 6
        assert m.avg_syllables_per_word == pytest.approx(1.0)
        assert m.flesch_score == pytest.approx(flesch_reading_ease(6, 1.0))
        assert m.cefr_estimate in (1, 2)

    def test_exclamation_counts_as_delimiter(self):
        m = analyze("Hello world!")
        assert m.avg_words_per_sentence == 2
        assert m.avg_syllables_per_word == pytest.approx(1.5)
        assert m.cefr_estimate == 2

    def test_multiple_sentences_average(self):
        m = analyze("One two. Three four five six?")
        assert m.avg_words_per_sentence == pytest.approx(3.0)

    def test_no_delimiter_returns_zero_metrics(self):
        m = analyze("no punctuation here at all")
        assert m == ReadabilityMetrics()
        assert m.flesch_score == 0
        assert m.cefr_estimate == 0
        assert m.cefr_label == "?"

    def test_empty_text(self):
        assert analyze("") == ReadabilityMetrics()

    def test_trailing_text_without_delimiter_is_ignored(self):
        # Words after the last delimiter do not form a sentence
        assert analyze("The cat sat. and then") == analyze("The cat sat.")

    def test_punctuation_only_sentences_do_not_divide_by_zero(self):
        m = analyze("...")
        assert m.avg_words_per_sentence == 0
        assert m.avg_syllables_per_word == 0
        assert m.flesch_score == pytest.approx(206.835)

    def test_non_alphabetic_tokens_are_dropped(self):
        m = analyze("I have 42 cats.")
        assert m.avg_words_per_sentence == 3
        assert m == analyze("I have cats.")

    def test_metrics_are_immutable(self):
        m = analyze("The cat sat.")
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.flesch_score = 0.0

    def test_long_words_score_harder(self):
        easy = analyze("The dog ran to the park.")
        hard = analyze("Approximately numerous administrators demonstrated extraordinary sophistication.")
        assert hard.flesch_score < easy.flesch_score
        assert hard.cefr_estimate > easy.cefr_estimate


class TestReferenceReadingLevel:
    """Tests for the textstat cross-check."""

    def test_returns_result(self):
        result = reference_reading_level("The cat sat on the mat.", source_label="demo")
        assert isinstance(result, ReferenceReadingLevel)
        assert result.text_source == "demo"
        assert result.word_count == 6
        assert result.sentence_count == 1
        assert result.target_grade == 6.0

    def test_simple_text_meets_target(self):
        result = reference_reading_level("The cat sat on the mat. The dog ran.")
        assert result.meets_target is True

    def test_custom_target(self):
        result = reference_reading_level("The cat sat on the mat.", target_grade=-100.0)
        assert result.meets_target is False

    def test_counts_undelimited_tail_as_sentence(self):
        result = reference_reading_level("The cat sat on the mat. The dog ran")
        assert result.sentence_count == 2
        assert result.word_count == 9

    def test_grade_uses_shared_sentence_split(self):
        result = reference_reading_level("The cat sat on the mat.")
        wps = result.word_count / result.sentence_count
        # textstat counts one syllable for each of these words
        assert result.flesch_kincaid_grade == round(flesch_kincaid_grade(wps, 1.0), 1)

    def test_empty_text_scores_zero(self):
        result = reference_reading_level("")
        assert result.word_count == 0
        assert result.sentence_count == 0
        assert result.flesch_kincaid_grade == 0.0
        assert result.flesch_reading_ease == 0.0
