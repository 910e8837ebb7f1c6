"""
Document-level simplification.

Splits an article into sentences, rewrites each one in order, and joins the
resulting fragments back into a single text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .levels import ProficiencyLevel
from .reading_level import SENTENCE_DELIMITERS, split_on_delimiters
from .rewriter import SentenceRewriter, SplitLimits
from .vocabulary import Vocabulary

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class SimplifiedArticle:
    original: str
    simplified: str
    level: ProficiencyLevel


class Simplifier:
    """
    Runs the rewrite pipeline over a whole article for one level.

    The progress callback, if set, is called synchronously as
    callback(done, total) after each sentence, so slow callbacks slow the run.
    """

    def __init__(self, level: ProficiencyLevel, limits: Optional[SplitLimits] = None):
        self.level = level
        self.vocabulary = Vocabulary(level)
        self.rewriter = SentenceRewriter(level, self.vocabulary, limits)
        self._progress: Optional[ProgressCallback] = None

    def set_progress(self, callback: Optional[ProgressCallback] = None) -> None:
        self._progress = callback

    def split_sentences(self, text: str) -> List[str]:
        """Split after each '.', '!' or '?', keeping any undelimited tail."""
        return split_on_delimiters(text, keep_tail=True)

    def rejoin(self, fragments: Sequence[str]) -> str:
        parts = []
        for fragment in fragments:
            s = fragment.lstrip()
            if not s:
                continue
            s = s[0].upper() + s[1:]
            if s[-1] not in SENTENCE_DELIMITERS:
                s += "."
            parts.append(s)
        return " ".join(parts)

    def run(self, text: str) -> SimplifiedArticle:
        sentences = self.split_sentences(text)
        total = len(sentences)

        fragments: List[str] = []
        for i, sentence in enumerate(sentences, start=1):
            fragments.extend(self.rewriter.rewrite(sentence))
            if self._progress is not None:
                self._progress(i, total)

        return SimplifiedArticle(
            original=text,
            simplified=self.rejoin(fragments),
            level=self.level,
        )
