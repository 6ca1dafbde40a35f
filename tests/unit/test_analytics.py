"""Unit tests for meeting analytics."""

from datetime import datetime, timedelta

import pytest

from meeting_sentiment import (
    Emotion,
    MeetingSentimentAnalysis,
    MeetingTone,
    SentimentAnalyzer,
    SentimentLabel,
    SentimentTrend,
    TimelineEntry,
    analyze_meeting_sentiment,
    classify_meeting_tone,
    compare_speakers,
    detect_sentiment_shifts,
    get_settings,
    get_sentiment_stats,
)


def make_timeline(*items):
    """Build a timeline from (score, emotions) pairs."""
    analyzer = SentimentAnalyzer()
    start = datetime(2024, 3, 4, 10, 0, 0)
    return [
        TimelineEntry(
            timestamp=start + timedelta(seconds=i),
            sentiment=analyzer.build_result(score, 0.5, emotions=emotions),
            speaker=f"speaker-{i}",
        )
        for i, (score, emotions) in enumerate(items)
    ]


def scores(*values):
    """Timeline from plain scores."""
    return make_timeline(*[(v, ()) for v in values])


class TestDetectSentimentShifts:
    """Tests for shift detection."""

    def test_shift_detected(self):
        """Test a large change with a label change is a shift."""
        shifts = detect_sentiment_shifts(scores(0.8, 0.1))

        assert len(shifts) == 1
        shift = shifts[0]
        assert shift.from_label == SentimentLabel.POSITIVE
        assert shift.to_label == SentimentLabel.NEUTRAL
        assert shift.change == pytest.approx(0.7)
        assert shift.speaker == "speaker-1"

    def test_same_label_is_not_a_shift(self):
        """Test a change without a label change is ignored."""
        assert detect_sentiment_shifts(scores(0.8, 0.9), threshold=0.05) == []

    def test_small_change_is_not_a_shift(self):
        """Test a label change below threshold is ignored."""
        assert detect_sentiment_shifts(scores(0.15, 0.05)) == []

    def test_threshold_is_inclusive(self):
        """Test a change equal to the threshold counts."""
        shifts = detect_sentiment_shifts(scores(0.25, -0.25))

        assert len(shifts) == 1
        assert shifts[0].to_label == SentimentLabel.NEGATIVE

    def test_short_timelines(self):
        """Test empty and single-entry timelines have no shifts."""
        assert detect_sentiment_shifts([]) == []
        assert detect_sentiment_shifts(scores(0.9)) == []

    def test_threshold_from_settings(self, monkeypatch):
        """Test the default threshold is configurable."""
        monkeypatch.setenv("SENTIMENT_ANALYTICS_SHIFT_THRESHOLD", "0.9")
        get_settings.cache_clear()

        assert detect_sentiment_shifts(scores(0.8, 0.1)) == []

    def test_to_dict(self):
        """Test shift serialization uses from/to keys."""
        data = detect_sentiment_shifts(scores(0.8, -0.5))[0].to_dict()

        assert data["from"] == "positive"
        assert data["to"] == "negative"


class TestGetSentimentStats:
    """Tests for summary statistics."""

    def test_empty_analysis(self):
        """Test empty meeting has zero ratios and no emotion."""
        stats = get_sentiment_stats(MeetingSentimentAnalysis())

        assert stats.positive_ratio == 0
        assert stats.neutral_ratio == 0
        assert stats.negative_ratio == 0
        assert stats.avg_confidence == 0
        assert stats.dominant_emotion is None
        assert stats.trend == SentimentTrend.STABLE

    def test_meeting_stats(self, alice_bob_transcript):
        """Test ratios, counts and dominant emotion."""
        analysis = analyze_meeting_sentiment(alice_bob_transcript)
        stats = get_sentiment_stats(analysis)

        assert stats.positive_ratio == pytest.approx(0.5)
        assert stats.neutral_ratio == 0
        assert stats.negative_ratio == pytest.approx(0.5)
        assert stats.avg_confidence == pytest.approx(
            sum(t.sentiment.confidence for t in analysis.timeline) / 2
        )
        assert stats.dominant_emotion == Emotion.CONCERNED
        assert stats.concern_count == 1
        assert stats.highlight_count == 1
        assert stats.trend == SentimentTrend.DECLINING

    def test_ratios_sum_to_one(self, make_transcript):
        """Test label ratios cover every entry."""
        analysis = analyze_meeting_sentiment(
            make_transcript(
                ("A", "good"),
                ("B", "We met on Tuesday"),
                ("C", "bad"),
            )
        )
        stats = get_sentiment_stats(analysis)

        total = stats.positive_ratio + stats.neutral_ratio + stats.negative_ratio
        assert total == pytest.approx(1.0)
        assert stats.neutral_ratio == pytest.approx(1 / 3)

    def test_dominant_emotion_tie(self):
        """Test ties go to the first emotion encountered."""
        timeline = make_timeline(
            (0.5, (Emotion.INTERESTED,)),
            (0.5, (Emotion.EXCITED,)),
        )
        stats = get_sentiment_stats(MeetingSentimentAnalysis(timeline=timeline))

        assert stats.dominant_emotion == Emotion.INTERESTED

    @pytest.mark.parametrize(
        "values,trend",
        [
            ((-0.5, -0.5, 0.5, 0.5), SentimentTrend.IMPROVING),
            ((0.5, 0.5, -0.5, -0.5), SentimentTrend.DECLINING),
            ((0.2, 0.25), SentimentTrend.STABLE),
            ((0.9,), SentimentTrend.STABLE),
        ],
    )
    def test_trend(self, values, trend):
        """Test second-half versus first-half trend."""
        stats = get_sentiment_stats(MeetingSentimentAnalysis(timeline=scores(*values)))

        assert stats.trend == trend

    def test_trend_delta(self):
        """Test trend delta is the difference of half means."""
        stats = get_sentiment_stats(
            MeetingSentimentAnalysis(timeline=scores(-0.5, -0.5, 0.5, 0.5))
        )

        assert stats.trend_delta == pytest.approx(1.0)


class TestCompareSpeakers:
    """Tests for speaker comparison."""

    def test_missing_speaker(self, alice_bob_transcript):
        """Test unknown speakers yield None."""
        analysis = analyze_meeting_sentiment(alice_bob_transcript)

        assert compare_speakers(analysis, "Alice", "Zoe") is None
        assert compare_speakers(analysis, "Zoe", "Bob") is None

    def test_comparison(self, alice_bob_transcript):
        """Test difference and more positive speaker."""
        analysis = analyze_meeting_sentiment(alice_bob_transcript)
        comparison = compare_speakers(analysis, "Bob", "Alice")

        assert comparison.difference == pytest.approx(1.7)
        assert comparison.more_positive == "Alice"
        assert comparison.sentiment_a == analysis.by_speaker["Bob"]
        assert comparison.to_dict()["speaker_a"] == "Bob"

    def test_tie_goes_to_second_speaker(self, make_transcript):
        """Test equal scores report speaker b."""
        analysis = analyze_meeting_sentiment(
            make_transcript(("Alice", "good"), ("Bob", "good"))
        )

        assert compare_speakers(analysis, "Alice", "Bob").more_positive == "Bob"


class TestClassifyMeetingTone:
    """Tests for live meeting tone."""

    def test_empty(self):
        """Test an empty meeting is neutral."""
        assert classify_meeting_tone(MeetingSentimentAnalysis()) == MeetingTone.NEUTRAL

    def test_positive(self, make_transcript):
        """Test mostly positive meeting."""
        analysis = analyze_meeting_sentiment(
            make_transcript(("A", "Great progress everyone!"), ("B", "good"))
        )

        assert classify_meeting_tone(analysis) == MeetingTone.POSITIVE

    def test_concerned(self, make_transcript):
        """Test concern and confusion outweigh positive entries."""
        analysis = analyze_meeting_sentiment(
            make_transcript(
                ("A", "I'm worried about this"),
                ("B", "I'm confused here"),
                ("C", "good"),
            )
        )

        assert classify_meeting_tone(analysis) == MeetingTone.CONCERNED

    def test_balanced(self, alice_bob_transcript):
        """Test an even split is neutral."""
        analysis = analyze_meeting_sentiment(alice_bob_transcript)

        assert classify_meeting_tone(analysis) == MeetingTone.NEUTRAL
