"""
Level-specific replacement tables for difficult words.

Tables are compiled-in constants wrapped in read-only mappings. A2 readers get
the A1 table plus a few extra entries.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping

from .levels import ProficiencyLevel

BASE_WORDS: Mapping[str, str] = MappingProxyType({
    "utilize": "use",
    "commence": "start",
    "terminate": "end",
    "residence": "home",
    "purchase": "buy",
    "inquire": "ask",
    "observe": "see",
    "obtain": "get",
    "assistance": "help",
    "demonstrate": "show",
    "approximately": "about",
    "sufficient": "enough",
    "however": "but",
    "therefore": "so",
    "additionally": "also",
    "attempt": "try",
    "require": "need",
})

A2_EXTRA_WORDS: Mapping[str, str] = MappingProxyType({
    "facilitate": "help",
    "construct": "build",
    "complete": "finish",
    "numerous": "many",
    "previously": "before",
})

_WORD_RE = re.compile(r"[A-Za-z]+")


def load_table(level: ProficiencyLevel) -> Mapping[str, str]:
    table = dict(BASE_WORDS)
    if level is not ProficiencyLevel.A1:
        table.update(A2_EXTRA_WORDS)
    return MappingProxyType(table)


class Vocabulary:
    """Read-only lookup of simpler synonyms for one proficiency level."""

    def __init__(self, level: ProficiencyLevel):
        self.level = level
        self._table = load_table(level)

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._table

    def is_simple(self, word: str) -> bool:
        """
        True when the word is not in the difficulty table.

        This only means "not flagged as difficult"; words missing from the
        table are not known to be simple.
        """
        return word.lower() not in self._table

    def get_simpler_word(self, word: str) -> str:
        """Return the replacement for word, or word unchanged if it has none."""
        return self._table.get(word.lower(), word)

    def flagged_words(self, text: str) -> List[str]:
        """Distinct lowercased words in text that the table flags, in first-seen order."""
        seen: List[str] = []
        for match in _WORD_RE.finditer(text):
            word = match.group().lower()
            if not self.is_simple(word) and word not in seen:
                seen.append(word)
        return seen
