"""
Sentence Scorer.

Lexicon-based sentiment scoring with context modifiers. Negators
within three tokens flip a keyword's sign; intensifiers and
diminishers within two tokens scale its weight and compound with
each other.
"""

from typing import Iterable, List, Optional, Sequence

from .base import (
    NEUTRAL_RESULT,
    Emotion,
    SentimentIntensity,
    SentimentLabel,
    SentimentResult,
)
from .config import ScoringConfig, get_settings
from .emotions import EmotionDetector
from .lexicon import (
    INTENSITY_LOOKBACK,
    MODIFIERS,
    NEGATION_LOOKBACK,
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
)
from .logging import get_logger
from .tokenizer import tokenize

logger = get_logger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def unique(items: Iterable) -> list:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))


def calculate_confidence(score: float, match_count: int, token_count: int) -> float:
    """
    Heuristic confidence from lexical evidence.

    Args:
        score: Normalized sentiment score.
        match_count: Number of matched keywords.
        token_count: Token count, or a proxy for it on aggregates.

    Returns:
        Confidence in [0, 1].
    """
    base = min(match_count * 0.2, 0.8)
    magnitude = abs(score) * 0.2
    length = min(token_count / 10, 1) * 0.1
    return clamp(base + magnitude + length, 0.0, 1.0)


def is_negated(tokens: Sequence[str], index: int) -> bool:
    """Check for a negator in scope within the negation lookback."""
    start = max(0, index - NEGATION_LOOKBACK)
    for i in range(index - 1, start - 1, -1):
        modifier = MODIFIERS.get(tokens[i])
        if modifier and modifier.multiplier < 0 and index - i <= modifier.scope:
            return True
    return False


def intensity_multiplier(tokens: Sequence[str], index: int) -> float:
    """Product of all intensifiers/diminishers in scope."""
    start = max(0, index - INTENSITY_LOOKBACK)
    multiplier = 1.0
    for i in range(index - 1, start - 1, -1):
        modifier = MODIFIERS.get(tokens[i])
        if modifier and modifier.multiplier > 0 and index - i <= modifier.scope:
            multiplier *= modifier.multiplier
    return multiplier


class SentimentAnalyzer:
    """
    Deterministic lexicon sentiment analyzer.

    Label and intensity are always derived from the score through
    :meth:`label_for` and :meth:`intensity_for`.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        emotion_detector: Optional[EmotionDetector] = None,
    ):
        self.config = config or get_settings().scoring
        self.emotion_detector = emotion_detector or EmotionDetector()

    def label_for(self, score: float) -> SentimentLabel:
        """Map a score to its label."""
        if score > self.config.positive_threshold:
            return SentimentLabel.POSITIVE
        if score < self.config.negative_threshold:
            return SentimentLabel.NEGATIVE
        return SentimentLabel.NEUTRAL

    def intensity_for(self, score: float) -> SentimentIntensity:
        """Map a score to its intensity bucket."""
        magnitude = abs(score)
        if magnitude < self.config.moderate_threshold:
            return SentimentIntensity.MILD
        if magnitude < self.config.strong_threshold:
            return SentimentIntensity.MODERATE
        return SentimentIntensity.STRONG

    def build_result(
        self,
        score: float,
        confidence: float,
        emotions: Iterable[Emotion] = (),
        keywords: Iterable[str] = (),
    ) -> SentimentResult:
        """Assemble a result with label and intensity derived from score."""
        return SentimentResult(
            label=self.label_for(score),
            score=score,
            confidence=confidence,
            intensity=self.intensity_for(score),
            emotions=tuple(unique(emotions)),
            keywords=tuple(unique(keywords)),
        )

    def analyze(self, text: Optional[str]) -> SentimentResult:
        """Analyze sentiment of a single text span."""
        tokens = tokenize(text)
        if not tokens:
            return NEUTRAL_RESULT

        total_score = 0.0
        matched: List[str] = []

        for index, token in enumerate(tokens):
            if token in POSITIVE_KEYWORDS:
                weight = POSITIVE_KEYWORDS[token]
            elif token in NEGATIVE_KEYWORDS:
                weight = -NEGATIVE_KEYWORDS[token]
            else:
                continue

            matched.append(token)

            weight *= intensity_multiplier(tokens, index)
            if is_negated(tokens, index):
                weight = -weight

            total_score += weight

        normalization = max(len(tokens) * 0.1, 1.0)
        score = clamp(total_score / normalization, -1.0, 1.0)

        logger.debug(
            "Sentiment scored",
            tokens=len(tokens),
            matches=len(matched),
            score=score,
        )

        return self.build_result(
            score=score,
            confidence=calculate_confidence(score, len(matched), len(tokens)),
            emotions=self.emotion_detector.detect(text),
            keywords=matched,
        )


# Global sentiment analyzer
_sentiment_analyzer: Optional[SentimentAnalyzer] = None


def get_sentiment_analyzer() -> SentimentAnalyzer:
    """Get or create the global sentiment analyzer."""
    global _sentiment_analyzer
    if _sentiment_analyzer is None:
        _sentiment_analyzer = SentimentAnalyzer()
    return _sentiment_analyzer


def setup_sentiment_analyzer(analyzer: Optional[SentimentAnalyzer]) -> None:
    """Set up the global sentiment analyzer; ``None`` rebuilds it lazily."""
    global _sentiment_analyzer
    _sentiment_analyzer = analyzer


def analyze_sentiment(text: Optional[str]) -> SentimentResult:
    """Analyze sentiment of a text span with the global analyzer."""
    return get_sentiment_analyzer().analyze(text)
