"""
Meeting Sentiment Base Types

This module defines the core types and data structures for the
meeting sentiment engine, which turns transcript utterances into
structured sentiment signals and meeting-level summaries.

Key Types:
- SentimentResult: scored sentiment for a single text span
- TranscriptEntry: one utterance supplied by the transcription pipeline
- MeetingSentimentAnalysis: overall, per-speaker and per-topic breakdown
- SentimentShift / SentimentStats / SpeakerComparison: post-hoc analytics
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
)

from pydantic import TypeAdapter, ValidationError


# =============================================================================
# Sentiment Types
# =============================================================================


class SentimentLabel(str, Enum):
    """Sentiment classification labels."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SentimentIntensity(str, Enum):
    """Magnitude bucket of a sentiment score."""

    MILD = "mild"
    MODERATE = "moderate"
    STRONG = "strong"


class SentimentTrend(str, Enum):
    """Sentiment trend direction across a meeting."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class MeetingTone(str, Enum):
    """Coarse live tone of a meeting."""

    POSITIVE = "positive"
    CONCERNED = "concerned"
    NEUTRAL = "neutral"


class Emotion(str, Enum):
    """Emotions detected through phrase matching."""

    EXCITED = "excited"
    CONFUSED = "confused"
    CONCERNED = "concerned"
    SATISFIED = "satisfied"
    FRUSTRATED = "frustrated"
    INTERESTED = "interested"
    HESITANT = "hesitant"


@dataclass(frozen=True)
class SentimentResult:
    """Sentiment analysis result for a text span."""

    # Core scores
    label: SentimentLabel
    score: float  # -1.0 to 1.0
    confidence: float  # 0.0 to 1.0
    intensity: SentimentIntensity

    # Evidence
    emotions: Tuple[Emotion, ...] = ()
    keywords: Tuple[str, ...] = ()

    @property
    def gauge(self) -> float:
        """Score mapped onto 0.0 to 1.0 for bar rendering."""
        return (self.score + 1) / 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "label": self.label.value,
            "score": self.score,
            "confidence": self.confidence,
            "intensity": self.intensity.value,
            "emotions": [e.value for e in self.emotions],
            "keywords": list(self.keywords),
            "gauge": self.gauge,
        }


NEUTRAL_RESULT = SentimentResult(
    label=SentimentLabel.NEUTRAL,
    score=0.0,
    confidence=0.0,
    intensity=SentimentIntensity.MILD,
)


# =============================================================================
# Transcript Types
# =============================================================================


_TIMESTAMP_ADAPTER = TypeAdapter(datetime)


@dataclass(frozen=True)
class TranscriptEntry:
    """A single utterance produced by the transcription pipeline."""

    speaker: str
    text: str
    timestamp: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TranscriptEntry":
        """
        Create from a collaborator payload.

        ``timestamp`` may be a datetime or an ISO-8601 string (any
        fractional-second precision, ``Z`` or offset suffix); it defaults
        to now when absent.
        """
        try:
            speaker = data["speaker"]
            text = data["text"]
        except KeyError as e:
            raise InvalidTranscriptEntryError(
                f"Transcript entry missing field: {e.args[0]}"
            ) from e

        if not isinstance(speaker, str) or not isinstance(text, str):
            raise InvalidTranscriptEntryError(
                "Transcript entry speaker and text must be strings"
            )

        timestamp = data.get("timestamp")
        if timestamp is None:
            timestamp = datetime.utcnow()
        elif isinstance(timestamp, str):
            try:
                timestamp = _TIMESTAMP_ADAPTER.validate_python(timestamp)
            except ValidationError as e:
                raise InvalidTranscriptEntryError(
                    f"Invalid transcript timestamp: {timestamp!r}"
                ) from e
        elif not isinstance(timestamp, datetime):
            raise InvalidTranscriptEntryError(
                f"Invalid transcript timestamp type: {type(timestamp).__name__}"
            )

        return cls(speaker=speaker, text=text, timestamp=timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "speaker": self.speaker,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class TimelineEntry:
    """Per-utterance sentiment in meeting order."""

    timestamp: datetime
    sentiment: SentimentResult
    speaker: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "sentiment": self.sentiment.to_dict(),
            "speaker": self.speaker,
        }


# =============================================================================
# Meeting Analysis Types
# =============================================================================


@dataclass(frozen=True)
class MeetingSentimentAnalysis:
    """Aggregate sentiment for a meeting transcript."""

    overall: SentimentResult = NEUTRAL_RESULT

    # Breakdowns
    by_speaker: Dict[str, SentimentResult] = field(default_factory=dict)
    by_topic: Dict[str, SentimentResult] = field(default_factory=dict)

    # Timeline
    timeline: List[TimelineEntry] = field(default_factory=list)

    # Key moments, formatted as "speaker: text"
    concerns: List[str] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "overall": self.overall.to_dict(),
            "by_speaker": {s: r.to_dict() for s, r in self.by_speaker.items()},
            "by_topic": {t: r.to_dict() for t, r in self.by_topic.items()},
            "timeline": [t.to_dict() for t in self.timeline],
            "concerns": list(self.concerns),
            "highlights": list(self.highlights),
        }


# =============================================================================
# Analytics Types
# =============================================================================


@dataclass(frozen=True)
class SentimentShift:
    """A significant change of sentiment between consecutive utterances."""

    timestamp: datetime
    speaker: str
    from_label: SentimentLabel
    to_label: SentimentLabel
    change: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "speaker": self.speaker,
            "from": self.from_label.value,
            "to": self.to_label.value,
            "change": self.change,
        }


@dataclass(frozen=True)
class SentimentStats:
    """Summary statistics over a meeting timeline."""

    positive_ratio: float = 0.0
    neutral_ratio: float = 0.0
    negative_ratio: float = 0.0
    avg_confidence: float = 0.0
    dominant_emotion: Optional[Emotion] = None
    concern_count: int = 0
    highlight_count: int = 0

    # Trend analysis
    trend: SentimentTrend = SentimentTrend.STABLE
    trend_delta: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "positive_ratio": self.positive_ratio,
            "neutral_ratio": self.neutral_ratio,
            "negative_ratio": self.negative_ratio,
            "avg_confidence": self.avg_confidence,
            "dominant_emotion": (
                self.dominant_emotion.value if self.dominant_emotion else None
            ),
            "concern_count": self.concern_count,
            "highlight_count": self.highlight_count,
            "trend": self.trend.value,
            "trend_delta": self.trend_delta,
        }


@dataclass(frozen=True)
class SpeakerComparison:
    """Side-by-side sentiment of two speakers."""

    speaker_a: str
    speaker_b: str
    sentiment_a: SentimentResult
    sentiment_b: SentimentResult
    difference: float
    more_positive: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "speaker_a": self.speaker_a,
            "speaker_b": self.speaker_b,
            "sentiment_a": self.sentiment_a.to_dict(),
            "sentiment_b": self.sentiment_b.to_dict(),
            "difference": self.difference,
            "more_positive": self.more_positive,
        }


# =============================================================================
# Exceptions
# =============================================================================


class SentimentAnalysisError(Exception):
    """Base exception for meeting sentiment errors."""
    pass


class ConfigurationError(SentimentAnalysisError):
    """Invalid analyzer or stream configuration."""
    pass


class InvalidTranscriptEntryError(SentimentAnalysisError):
    """Transcript payload could not be adapted."""
    pass


class StreamClosedError(SentimentAnalysisError):
    """Sentiment stream used after close."""
    pass


# =============================================================================
# Exports
# =============================================================================


__all__ = [
    # Sentiment
    "SentimentLabel",
    "SentimentIntensity",
    "SentimentTrend",
    "MeetingTone",
    "Emotion",
    "SentimentResult",
    "NEUTRAL_RESULT",
    # Transcript
    "TranscriptEntry",
    "TimelineEntry",
    # Meeting analysis
    "MeetingSentimentAnalysis",
    # Analytics
    "SentimentShift",
    "SentimentStats",
    "SpeakerComparison",
    # Exceptions
    "SentimentAnalysisError",
    "ConfigurationError",
    "InvalidTranscriptEntryError",
    "StreamClosedError",
]
