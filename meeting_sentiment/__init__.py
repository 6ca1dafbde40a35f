"""
Meeting Sentiment Module

This module provides sentiment and emotional-tone analysis for
spoken-meeting transcripts: per-utterance scoring, meeting-level
aggregation, live streaming analysis, and post-hoc analytics.

Key Features:
- Lexicon scoring with negation, intensifiers and diminishers
- Phrase-based emotion detection
- Overall, per-speaker and per-topic sentiment
- Concern and highlight extraction
- Smoothed live sentiment for streaming transcripts
- Shift detection, summary statistics and speaker comparison

Example usage:

    from datetime import datetime
    from meeting_sentiment import (
        TranscriptEntry,
        analyze_meeting_sentiment,
        create_sentiment_stream,
        get_sentiment_stats,
    )

    analysis = analyze_meeting_sentiment([
        TranscriptEntry("Alice", "Great progress everyone!", datetime.now()),
        TranscriptEntry("Bob", "I'm concerned about the timeline", datetime.now()),
    ])

    print(f"Overall: {analysis.overall.label.value}")
    print(f"Concerns: {analysis.concerns}")
    print(f"Stats: {get_sentiment_stats(analysis).to_dict()}")

    # Live analysis
    stream = create_sentiment_stream(lambda s: print(s.label.value, s.score))
    stream.process_text("This is great!")
    stream.process_text("But I'm concerned about...")
"""

from .base import (
    # Sentiment
    SentimentLabel,
    SentimentIntensity,
    SentimentTrend,
    MeetingTone,
    Emotion,
    SentimentResult,
    NEUTRAL_RESULT,
    # Transcript
    TranscriptEntry,
    TimelineEntry,
    # Meeting analysis
    MeetingSentimentAnalysis,
    # Analytics
    SentimentShift,
    SentimentStats,
    SpeakerComparison,
    # Exceptions
    SentimentAnalysisError,
    ConfigurationError,
    InvalidTranscriptEntryError,
    StreamClosedError,
)
from .config import Settings, get_settings
from .logging import configure_logging, get_logger
from .tokenizer import tokenize
from .emotions import EmotionDetector, detect_emotions
from .scoring import (
    SentimentAnalyzer,
    analyze_sentiment,
    get_sentiment_analyzer,
    setup_sentiment_analyzer,
)
from .aggregation import MeetingSentimentAggregator, analyze_meeting_sentiment
from .streaming import SentimentStream, create_sentiment_stream
from .analytics import (
    classify_meeting_tone,
    compare_speakers,
    detect_sentiment_shifts,
    get_sentiment_stats,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    "SentimentLabel",
    "SentimentIntensity",
    "SentimentTrend",
    "MeetingTone",
    "Emotion",
    "SentimentResult",
    "NEUTRAL_RESULT",
    "TranscriptEntry",
    "TimelineEntry",
    "MeetingSentimentAnalysis",
    "SentimentShift",
    "SentimentStats",
    "SpeakerComparison",
    # Exceptions
    "SentimentAnalysisError",
    "ConfigurationError",
    "InvalidTranscriptEntryError",
    "StreamClosedError",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Analysis
    "tokenize",
    "EmotionDetector",
    "detect_emotions",
    "SentimentAnalyzer",
    "analyze_sentiment",
    "get_sentiment_analyzer",
    "setup_sentiment_analyzer",
    "MeetingSentimentAggregator",
    "analyze_meeting_sentiment",
    "SentimentStream",
    "create_sentiment_stream",
    # Analytics
    "detect_sentiment_shifts",
    "get_sentiment_stats",
    "compare_speakers",
    "classify_meeting_tone",
]
