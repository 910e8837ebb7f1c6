"""
Proficiency levels for simplified output.

Only A1 and A2 carry vocabulary data; the label table covers the full CEFR
scale so estimated levels of the *input* text can be displayed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProficiencyLevel(Enum):
    A1 = "A1"
    A2 = "A2"

    @property
    def label(self) -> str:
        return self.value


# Index 0 means "undetermined"
CEFR_LABELS = ("?", "A1", "A2", "B1", "B2", "C1", "C2")

# Menu choices shown by the terminal front end
LEVEL_MENU = {
    "1": ProficiencyLevel.A1,
    "2": ProficiencyLevel.A2,
}


@dataclass
class LevelError(ValueError):
    message: str

    def __str__(self) -> str:
        return self.message


def cefr_label(estimate: int) -> str:
    """Map a 1-6 CEFR estimate to its label; anything else is "?"."""
    if 1 <= estimate <= 6:
        return CEFR_LABELS[estimate]
    return CEFR_LABELS[0]


def parse_level(choice: str) -> ProficiencyLevel:
    """
    Parse a level from a menu number ("1"/"2") or a level name ("a1", "A2").

    Raises LevelError on anything else.
    """
    key = (choice or "").strip()
    if key in LEVEL_MENU:
        return LEVEL_MENU[key]
    try:
        return ProficiencyLevel(key.upper())
    except ValueError:
        raise LevelError(f"Unknown level: {choice!r}. Expected 1, 2, A1 or A2.") from None
