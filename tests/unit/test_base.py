"""Unit tests for core types."""

from datetime import datetime, timedelta, timezone

import pytest

from meeting_sentiment import (
    NEUTRAL_RESULT,
    ConfigurationError,
    Emotion,
    InvalidTranscriptEntryError,
    MeetingSentimentAnalysis,
    SentimentAnalysisError,
    SentimentIntensity,
    SentimentLabel,
    SentimentResult,
    SentimentStats,
    StreamClosedError,
    TranscriptEntry,
)


class TestSentimentResult:
    """Tests for SentimentResult."""

    def test_neutral_result(self):
        """Test the neutral baseline values."""
        assert NEUTRAL_RESULT.label == SentimentLabel.NEUTRAL
        assert NEUTRAL_RESULT.score == 0.0
        assert NEUTRAL_RESULT.confidence == 0.0
        assert NEUTRAL_RESULT.intensity == SentimentIntensity.MILD
        assert NEUTRAL_RESULT.gauge == 0.5

    def test_gauge(self):
        """Test gauge maps score onto 0..1."""
        result = SentimentResult(
            label=SentimentLabel.NEGATIVE,
            score=-1.0,
            confidence=0.5,
            intensity=SentimentIntensity.STRONG,
        )

        assert result.gauge == 0.0

    def test_to_dict(self):
        """Test serialization of enums and tuples."""
        result = SentimentResult(
            label=SentimentLabel.POSITIVE,
            score=0.6,
            confidence=0.33,
            intensity=SentimentIntensity.STRONG,
            emotions=(Emotion.EXCITED,),
            keywords=("good",),
        )

        assert result.to_dict() == {
            "label": "positive",
            "score": 0.6,
            "confidence": 0.33,
            "intensity": "strong",
            "emotions": ["excited"],
            "keywords": ["good"],
            "gauge": pytest.approx(0.8),
        }

    def test_immutable(self):
        """Test results cannot be mutated."""
        with pytest.raises(AttributeError):
            NEUTRAL_RESULT.score = 1.0


class TestTranscriptEntry:
    """Tests for TranscriptEntry."""

    def test_from_dict_iso_timestamp(self):
        """Test ISO-8601 timestamps with a Z suffix."""
        entry = TranscriptEntry.from_dict(
            {"speaker": "Alice", "text": "Hello", "timestamp": "2024-03-04T10:00:00Z"}
        )

        assert entry.speaker == "Alice"
        assert entry.timestamp == datetime(2024, 3, 4, 10, 0, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value,microsecond",
        [
            ("2024-03-04T10:00:00.5Z", 500000),
            ("2024-03-04T10:00:00.1234+00:00", 123400),
            ("2024-03-04T10:00:00.123456Z", 123456),
        ],
    )
    def test_from_dict_fractional_seconds(self, value, microsecond):
        """Test any fractional-second precision is accepted."""
        entry = TranscriptEntry.from_dict(
            {"speaker": "Alice", "text": "Hello", "timestamp": value}
        )

        assert entry.timestamp.microsecond == microsecond
        assert entry.timestamp.utcoffset() == timedelta(0)

    def test_from_dict_datetime(self):
        """Test datetime timestamps pass through."""
        ts = datetime(2024, 3, 4, 10, 0, 0)
        entry = TranscriptEntry.from_dict({"speaker": "Bob", "text": "Hi", "timestamp": ts})

        assert entry.timestamp == ts

    def test_from_dict_default_timestamp(self):
        """Test a missing timestamp defaults to now."""
        entry = TranscriptEntry.from_dict({"speaker": "Bob", "text": "Hi"})

        assert isinstance(entry.timestamp, datetime)

    def test_from_dict_missing_field(self):
        """Test a missing text field is rejected."""
        with pytest.raises(InvalidTranscriptEntryError, match="text"):
            TranscriptEntry.from_dict({"speaker": "Bob"})

    @pytest.mark.parametrize(
        "data",
        [
            {"speaker": 5, "text": "Hi"},
            {"speaker": "Bob", "text": None},
            {"speaker": "Bob", "text": "Hi", "timestamp": "yesterday"},
            {"speaker": "Bob", "text": "Hi", "timestamp": 1709546400},
        ],
    )
    def test_from_dict_invalid(self, data):
        """Test malformed payloads are rejected."""
        with pytest.raises(InvalidTranscriptEntryError):
            TranscriptEntry.from_dict(data)

    def test_to_dict(self):
        """Test serialization."""
        entry = TranscriptEntry("Alice", "Hello", datetime(2024, 3, 4, 10, 0, 0))

        assert entry.to_dict() == {
            "speaker": "Alice",
            "text": "Hello",
            "timestamp": "2024-03-04T10:00:00",
        }


class TestAnalysisTypes:
    """Tests for analysis containers."""

    def test_empty_analysis_to_dict(self):
        """Test default analysis serialization."""
        data = MeetingSentimentAnalysis().to_dict()

        assert data["overall"]["label"] == "neutral"
        assert data["by_speaker"] == {}
        assert data["timeline"] == []

    def test_stats_to_dict(self):
        """Test stats serialization without a dominant emotion."""
        data = SentimentStats().to_dict()

        assert data["dominant_emotion"] is None
        assert data["trend"] == "stable"


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc",
        [ConfigurationError, InvalidTranscriptEntryError, StreamClosedError],
    )
    def test_hierarchy(self, exc):
        """Test all errors share one base."""
        assert issubclass(exc, SentimentAnalysisError)
