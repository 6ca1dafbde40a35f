"""
Emotion Detector.

Detects named emotions by case-insensitive phrase containment
against the full, untokenized text.
"""

from typing import List, Mapping, Optional, Tuple

from .base import Emotion
from .lexicon import EMOTION_PATTERNS


class EmotionDetector:
    """
    Phrase-based emotion detection.

    Each emotion is reported at most once; the first matching phrase
    is enough.
    """

    def __init__(
        self,
        patterns: Optional[Mapping[Emotion, Tuple[str, ...]]] = None,
    ):
        source = EMOTION_PATTERNS if patterns is None else patterns
        # Lowercase once so detection is a plain containment test
        self._patterns: List[Tuple[Emotion, Tuple[str, ...]]] = [
            (emotion, tuple(p.lower() for p in phrases))
            for emotion, phrases in source.items()
        ]

    def detect(self, text: Optional[str]) -> List[Emotion]:
        """Detect emotions in text, in table order."""
        if not text:
            return []

        lower_text = text.lower()
        detected: List[Emotion] = []

        for emotion, phrases in self._patterns:
            if emotion in detected:
                continue
            if any(phrase in lower_text for phrase in phrases):
                detected.append(emotion)

        return detected


_default_detector = EmotionDetector()


def detect_emotions(text: Optional[str]) -> List[Emotion]:
    """Detect emotions in text using the built-in phrase table."""
    return _default_detector.detect(text)
