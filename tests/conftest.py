"""
Shared pytest fixtures for article simplifier tests.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src to path so article_simplifier can be imported without installing
_SRC_DIR = Path(__file__).parent.parent / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from article_simplifier.levels import ProficiencyLevel  # noqa: E402
from article_simplifier.rewriter import SentenceRewriter  # noqa: E402
from article_simplifier.vocabulary import Vocabulary  # noqa: E402


@pytest.fixture
def a1_vocabulary():
    return Vocabulary(ProficiencyLevel.A1)


@pytest.fixture
def a2_vocabulary():
    return Vocabulary(ProficiencyLevel.A2)


@pytest.fixture
def a1_rewriter(a1_vocabulary):
    return SentenceRewriter(ProficiencyLevel.A1, a1_vocabulary)


@pytest.fixture
def a2_rewriter(a2_vocabulary):
    return SentenceRewriter(ProficiencyLevel.A2, a2_vocabulary)


@pytest.fixture
def long_sentence():
    """Over the A1 limit, with conjunctions past the halfway point."""
    return (
        "The teacher will utilize new methods and the students will commence "
        "their projects and they will terminate early."
    )
