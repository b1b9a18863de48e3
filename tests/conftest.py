"""Shared test fixtures for shopvoice tests.

This module provides common fixtures used across all test modules:
- Database isolation with temporary files
- A stub intent classifier with a fixed answer
- A small fixture lexicon set

Usage:
    def test_something(temp_db):
        # temp_db is automatically cleaned up after the test
        ...
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from shopvoice.voice.lexicon import ENGLISH, Lexicon, LexiconSet
from shopvoice.voice.models import IntentClassification


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_db() -> Generator[Path, None, None]:
    """Create a temporary database file for testing.

    The database file (and its WAL side files) are deleted after the test.

    Yields:
        Path to the temporary database file
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    # Cleanup
    for suffix in ("", "-wal", "-shm"):
        path = Path(str(db_path) + suffix)
        if path.exists():
            os.unlink(path)


# ─────────────────────────────────────────────────────────────────────────────
# User Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_user_id() -> str:
    """Standard test user ID."""
    return "test_user_123"


# ─────────────────────────────────────────────────────────────────────────────
# Classifier Fixtures
# ─────────────────────────────────────────────────────────────────────────────


class StubClassifier:
    """Returns the same classification for every utterance and remembers calls."""

    def __init__(self, label=None, score=0.0):
        self.result = IntentClassification(label=label, score=score)
        self.calls = []

    def classify(self, language, utterance):
        self.calls.append((language, utterance))
        return self.result


class AsyncStubClassifier(StubClassifier):
    """Same as StubClassifier, but ``classify`` is a coroutine."""

    async def classify(self, language, utterance):
        return super().classify(language, utterance)


class FailingClassifier:
    def classify(self, language, utterance):
        raise RuntimeError("classifier offline")


@pytest.fixture
def stub_classifier():
    """Factory: ``stub_classifier("shopping.add_item", 0.9)``."""
    return StubClassifier


@pytest.fixture
def async_stub_classifier():
    return AsyncStubClassifier


@pytest.fixture
def failing_classifier() -> FailingClassifier:
    return FailingClassifier()


# ─────────────────────────────────────────────────────────────────────────────
# Lexicon Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def pirate_lexicon() -> Lexicon:
    """A tiny made-up language: "fetch me grog wit biscuits"."""
    return Lexicon(
        code="xp",
        filler_phrases=("fetch me",),
        action_words=("stow",),
        stop_words=("ye", "wit"),
        conjunctions=("wit",),
        price_phrases=("fer less than",),
    )


@pytest.fixture
def fixture_lexicons(pirate_lexicon: Lexicon) -> LexiconSet:
    """English plus the pirate lexicon."""
    return LexiconSet.of(ENGLISH, pirate_lexicon)
