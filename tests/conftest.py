"""Shared pytest fixtures for testing."""

import os
from datetime import datetime, timedelta
from typing import List

import pytest

from meeting_sentiment import TranscriptEntry, get_settings, setup_sentiment_analyzer


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings and a fresh global analyzer."""
    for name in list(os.environ):
        if name.upper().startswith("SENTIMENT_"):
            monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    setup_sentiment_analyzer(None)
    yield
    get_settings.cache_clear()
    setup_sentiment_analyzer(None)


# =============================================================================
# Transcript Fixtures
# =============================================================================


@pytest.fixture
def meeting_start() -> datetime:
    """Fixed meeting start time."""
    return datetime(2024, 3, 4, 10, 0, 0)


@pytest.fixture
def make_transcript(meeting_start):
    """Build transcript entries spaced ten seconds apart."""

    def _make(*lines) -> List[TranscriptEntry]:
        return [
            TranscriptEntry(
                speaker=speaker,
                text=text,
                timestamp=meeting_start + timedelta(seconds=10 * i),
            )
            for i, (speaker, text) in enumerate(lines)
        ]

    return _make


@pytest.fixture
def alice_bob_transcript(make_transcript) -> List[TranscriptEntry]:
    """Two-speaker transcript with one highlight and one concern."""
    return make_transcript(
        ("Alice", "Great progress everyone!"),
        ("Bob", "I'm concerned about the timeline"),
    )
