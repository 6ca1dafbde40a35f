"""
Live Sentiment Stream.

Scores incoming transcript chunks one at a time and emits a score
smoothed over the most recent chunks.
"""

import threading
from collections import deque
from typing import Callable, Deque, List, Optional

from .base import (
    NEUTRAL_RESULT,
    ConfigurationError,
    SentimentResult,
    StreamClosedError,
)
from .config import get_settings
from .logging import get_logger
from .scoring import SentimentAnalyzer, get_sentiment_analyzer

logger = get_logger(__name__)

SentimentCallback = Callable[[SentimentResult], None]


class SentimentStream:
    """
    Stateful sentiment controller for one live session.

    ``process_text`` emits ``history_weight * mean(recent) +
    (1 - history_weight) * raw``. ``get_current_sentiment`` re-scores the
    whole accumulated text instead, so the two views may disagree.

    A session is meant to have a single owner; the lock only keeps
    the buffers consistent if it is handed between threads.
    """

    def __init__(
        self,
        on_update: SentimentCallback,
        analyzer: Optional[SentimentAnalyzer] = None,
        history_size: Optional[int] = None,
        history_weight: Optional[float] = None,
    ):
        config = get_settings().stream
        history_size = config.history_size if history_size is None else history_size
        history_weight = (
            config.history_weight if history_weight is None else history_weight
        )

        if history_size < 1:
            raise ConfigurationError(f"history_size must be >= 1, got {history_size}")
        if not 0.0 <= history_weight <= 1.0:
            raise ConfigurationError(
                f"history_weight must be within [0, 1], got {history_weight}"
            )

        self._on_update = on_update
        self._analyzer = analyzer or get_sentiment_analyzer()
        self._history_weight = history_weight

        # State
        self._chunks: List[str] = []
        self._recent_scores: Deque[float] = deque(maxlen=history_size)
        self._lock = threading.RLock()
        self._closed = False

    @property
    def accumulated_text(self) -> str:
        """All text processed since the last reset."""
        with self._lock:
            return " ".join(self._chunks)

    @property
    def recent_scores(self) -> List[float]:
        """Raw chunk scores currently in the smoothing window."""
        with self._lock:
            return list(self._recent_scores)

    @property
    def closed(self) -> bool:
        return self._closed

    def process_text(self, text: str) -> SentimentResult:
        """Score a new chunk, emit the smoothed result and return it."""
        with self._lock:
            self._ensure_open()

            result = self._analyzer.analyze(text)

            self._chunks.append(text)
            self._recent_scores.append(result.score)

            avg_recent = sum(self._recent_scores) / len(self._recent_scores)
            score = (
                avg_recent * self._history_weight
                + result.score * (1 - self._history_weight)
            )

            smoothed = self._analyzer.build_result(
                score=score,
                confidence=result.confidence,
                emotions=result.emotions,
                keywords=result.keywords,
            )

            logger.debug(
                "Sentiment stream updated",
                raw_score=result.score,
                smoothed_score=score,
                window=len(self._recent_scores),
            )

            self._on_update(smoothed)
            return smoothed

    def get_current_sentiment(self) -> SentimentResult:
        """Score the entire accumulated text from scratch."""
        text = self.accumulated_text
        if not text.strip():
            return NEUTRAL_RESULT
        return self._analyzer.analyze(text)

    def reset(self) -> None:
        """Clear all state and emit the neutral baseline."""
        with self._lock:
            self._ensure_open()
            self._clear()
            logger.debug("Sentiment stream reset")
            self._on_update(NEUTRAL_RESULT)

    def close(self) -> None:
        """Discard state; the stream cannot be used afterwards."""
        with self._lock:
            if self._closed:
                return
            self._clear()
            self._closed = True
            logger.debug("Sentiment stream closed")

    def _clear(self) -> None:
        self._chunks.clear()
        self._recent_scores.clear()

    def _ensure_open(self) -> None:
        if self._closed:
            raise StreamClosedError("Sentiment stream is closed")

    def __enter__(self) -> "SentimentStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_sentiment_stream(
    on_update: SentimentCallback,
    analyzer: Optional[SentimentAnalyzer] = None,
) -> SentimentStream:
    """Create a live sentiment stream that reports through ``on_update``."""
    return SentimentStream(on_update, analyzer=analyzer)
