"""
Sentence-level rewriting.

Each sentence goes through a fixed sequence of stages:

  1. strip_parens  - drop "(...)" asides (A1 only)
  2. swap_words    - replace difficult words using the Vocabulary
  3. fix_passive   - passive-to-active conversion, not implemented (identity)
  4. try_split     - break long sentences at conjunctions

The last stage may turn one sentence into several fragments.
"""
from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .levels import ProficiencyLevel
from .vocabulary import Vocabulary

PAREN_RE = re.compile(r"\([^)]*\)")
SPLIT_CONJUNCTIONS = frozenset({"and", "but", "because"})


@dataclass
class SplitLimits:
    """
    Word-count limits above which a sentence is split.

    A split point is only taken once a chunk holds at least half the limit.
    """
    a1: int = 10
    a2: int = 15

    def for_level(self, level: ProficiencyLevel) -> int:
        return self.a1 if level is ProficiencyLevel.A1 else self.a2


def _peel_trailing_punctuation(token: str) -> Tuple[str, str]:
    end = len(token)
    while end > 0 and token[end - 1] in string.punctuation:
        end -= 1
    return token[:end], token[end:]


class SentenceRewriter:
    """
    Rewrites single sentences for one proficiency level.

    The Vocabulary is shared, not copied; the rewriter only reads from it.
    """

    def __init__(
        self,
        level: ProficiencyLevel,
        vocabulary: Vocabulary,
        limits: Optional[SplitLimits] = None,
    ):
        self.level = level
        self.vocabulary = vocabulary
        self.limits = limits or SplitLimits()

    @property
    def stages(self) -> Tuple[Tuple[str, Callable[[str], str]], ...]:
        """Text-to-text stages in order. try_split always runs last."""
        return (
            ("strip_parens", self.strip_parens),
            ("swap_words", self.swap_words),
            ("fix_passive", self.fix_passive),
        )

    def strip_parens(self, sentence: str) -> str:
        if self.level is not ProficiencyLevel.A1:
            return sentence
        return PAREN_RE.sub("", sentence)

    def swap_words(self, sentence: str) -> str:
        out = []
        for token in sentence.split():
            stem, punct = _peel_trailing_punctuation(token)
            out.append(self.vocabulary.get_simpler_word(stem) + punct)
        return " ".join(out)

    def fix_passive(self, sentence: str) -> str:
        # TODO: detect "X was <verb>ed by Y" and reorder to "Y <verb>ed X"
        return sentence

    def try_split(self, sentence: str) -> List[str]:
        limit = self.limits.for_level(self.level)
        words = sentence.split()
        if len(words) <= limit:
            return [sentence]

        chunks: List[str] = []
        chunk: List[str] = []
        count = 0
        for word in words:
            chunk.append(word)
            count += 1
            if word.lower() in SPLIT_CONJUNCTIONS and count >= limit // 2:
                chunks.append(" ".join(chunk))
                chunk = []
                count = 0
        if chunk:
            chunks.append(" ".join(chunk))
        return chunks

    def rewrite(self, sentence: str) -> List[str]:
        text = sentence
        for _name, stage in self.stages:
            text = stage(text)
        return self.try_split(text)
