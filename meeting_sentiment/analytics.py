"""
Post-hoc meeting analytics.

Shift detection, summary statistics, speaker comparison and live
tone, computed from an existing :class:`MeetingSentimentAnalysis`.
"""

from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .base import (
    Emotion,
    MeetingSentimentAnalysis,
    MeetingTone,
    SentimentLabel,
    SentimentShift,
    SentimentStats,
    SentimentTrend,
    SpeakerComparison,
    TimelineEntry,
)
from .config import get_settings
from .logging import get_logger

logger = get_logger(__name__)

TONE_CONCERN_EMOTIONS = frozenset({Emotion.CONCERNED, Emotion.CONFUSED})


def detect_sentiment_shifts(
    timeline: Sequence[TimelineEntry],
    threshold: Optional[float] = None,
) -> List[SentimentShift]:
    """
    Detect significant sentiment changes between consecutive entries.

    A shift needs both a score change of at least ``threshold`` and a
    different label.

    Args:
        timeline: Meeting timeline in chronological order.
        threshold: Minimum absolute score change; defaults to the
            configured shift threshold (0.5).

    Returns:
        Shifts in timeline order.
    """
    if threshold is None:
        threshold = get_settings().analytics.shift_threshold

    shifts: List[SentimentShift] = []
    for prev, curr in zip(timeline, timeline[1:]):
        change = abs(curr.sentiment.score - prev.sentiment.score)
        if change >= threshold and prev.sentiment.label != curr.sentiment.label:
            shifts.append(
                SentimentShift(
                    timestamp=curr.timestamp,
                    speaker=curr.speaker,
                    from_label=prev.sentiment.label,
                    to_label=curr.sentiment.label,
                    change=change,
                )
            )

    logger.debug("Sentiment shifts detected", shifts=len(shifts), threshold=threshold)
    return shifts


def get_sentiment_stats(analysis: MeetingSentimentAnalysis) -> SentimentStats:
    """Summary statistics over the meeting timeline."""
    timeline = analysis.timeline
    total = len(timeline)
    if total == 0:
        return SentimentStats(
            concern_count=len(analysis.concerns),
            highlight_count=len(analysis.highlights),
        )

    labels = Counter(t.sentiment.label for t in timeline)
    emotions = Counter(e for t in timeline for e in t.sentiment.emotions)
    dominant = emotions.most_common(1)

    trend, trend_delta = _trend([t.sentiment.score for t in timeline])

    return SentimentStats(
        positive_ratio=labels[SentimentLabel.POSITIVE] / total,
        neutral_ratio=labels[SentimentLabel.NEUTRAL] / total,
        negative_ratio=labels[SentimentLabel.NEGATIVE] / total,
        avg_confidence=sum(t.sentiment.confidence for t in timeline) / total,
        dominant_emotion=dominant[0][0] if dominant else None,
        concern_count=len(analysis.concerns),
        highlight_count=len(analysis.highlights),
        trend=trend,
        trend_delta=trend_delta,
    )


def _trend(scores: List[float]) -> Tuple[SentimentTrend, float]:
    """Compare second-half mean score against the first half."""
    if len(scores) < 2:
        return SentimentTrend.STABLE, 0.0

    half = len(scores) // 2
    first = sum(scores[:half]) / half
    second = sum(scores[half:]) / (len(scores) - half)
    delta = second - first

    threshold = get_settings().analytics.trend_threshold
    if delta > threshold:
        return SentimentTrend.IMPROVING, delta
    if delta < -threshold:
        return SentimentTrend.DECLINING, delta
    return SentimentTrend.STABLE, delta


def compare_speakers(
    analysis: MeetingSentimentAnalysis,
    speaker_a: str,
    speaker_b: str,
) -> Optional[SpeakerComparison]:
    """Compare two speakers; ``None`` if either did not speak."""
    sentiment_a = analysis.by_speaker.get(speaker_a)
    sentiment_b = analysis.by_speaker.get(speaker_b)
    if sentiment_a is None or sentiment_b is None:
        return None

    return SpeakerComparison(
        speaker_a=speaker_a,
        speaker_b=speaker_b,
        sentiment_a=sentiment_a,
        sentiment_b=sentiment_b,
        difference=abs(sentiment_a.score - sentiment_b.score),
        more_positive=speaker_a if sentiment_a.score > sentiment_b.score else speaker_b,
    )


def classify_meeting_tone(analysis: MeetingSentimentAnalysis) -> MeetingTone:
    """Coarse live tone: positive, concerned or neutral."""
    positive = concerned = neutral = 0
    for entry in analysis.timeline:
        sentiment = entry.sentiment
        # Concern and confusion take precedence over the label
        if not TONE_CONCERN_EMOTIONS.isdisjoint(sentiment.emotions):
            concerned += 1
        elif sentiment.label == SentimentLabel.POSITIVE:
            positive += 1
        elif sentiment.label == SentimentLabel.NEUTRAL:
            neutral += 1

    if concerned > positive and concerned > neutral:
        return MeetingTone.CONCERNED
    if positive > concerned:
        return MeetingTone.POSITIVE
    return MeetingTone.NEUTRAL
