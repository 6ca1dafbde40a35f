"""
Meeting Aggregator.

Combines per-utterance sentiment into overall, per-speaker and
per-topic results, a timeline, and concern/highlight lists.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .base import (
    Emotion,
    MeetingSentimentAnalysis,
    SentimentIntensity,
    SentimentLabel,
    SentimentResult,
    TimelineEntry,
    TranscriptEntry,
)
from .lexicon import TOPIC_KEYWORDS
from .logging import get_logger
from .scoring import (
    SentimentAnalyzer,
    calculate_confidence,
    get_sentiment_analyzer,
    unique,
)

logger = get_logger(__name__)

# Token-count proxies used when recomputing aggregate confidence
OVERALL_TOKENS_PER_ENTRY = 10
GROUP_TOKENS_PER_ENTRY = 5

CONCERN_EMOTIONS = frozenset({Emotion.CONCERNED, Emotion.FRUSTRATED})


@dataclass
class _Group:
    """Running totals for one speaker or topic."""

    scores: List[float] = field(default_factory=list)
    emotions: List[Emotion] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)

    def add(self, result: SentimentResult, with_emotions: bool = True) -> None:
        self.scores.append(result.score)
        if with_emotions:
            self.emotions.extend(result.emotions)
        self.keywords.extend(result.keywords)

    @property
    def mean(self) -> float:
        return sum(self.scores) / len(self.scores)


class MeetingSentimentAggregator:
    """
    Batch analysis of a full meeting transcript.

    Every entry is scored exactly once; all breakdowns reuse those
    per-entry results.
    """

    def __init__(
        self,
        analyzer: Optional[SentimentAnalyzer] = None,
        topic_keywords: Optional[Mapping[str, Tuple[str, ...]]] = None,
    ):
        self.analyzer = analyzer or get_sentiment_analyzer()
        source = TOPIC_KEYWORDS if topic_keywords is None else topic_keywords
        self._topics: List[Tuple[str, Tuple[str, ...]]] = [
            (topic, tuple(k.lower() for k in keywords))
            for topic, keywords in source.items()
        ]

    def analyze(self, entries: Sequence[TranscriptEntry]) -> MeetingSentimentAnalysis:
        """Analyze sentiment for an entire meeting transcript."""
        if not entries:
            return MeetingSentimentAnalysis()

        scored = [(entry, self.analyzer.analyze(entry.text)) for entry in entries]

        overall = self._overall([result for _, result in scored])
        by_speaker = self._by_speaker(scored)
        by_topic = self._by_topic(scored)

        timeline = [
            TimelineEntry(
                timestamp=entry.timestamp,
                sentiment=result,
                speaker=entry.speaker,
            )
            for entry, result in scored
        ]

        concerns = unique(
            _format(entry)
            for entry, result in scored
            if self._is_concern(result)
        )
        highlights = unique(
            _format(entry)
            for entry, result in scored
            if self._is_highlight(result)
        )

        logger.debug(
            "Meeting sentiment analyzed",
            entries=len(entries),
            speakers=len(by_speaker),
            topics=len(by_topic),
            overall_score=overall.score,
            concerns=len(concerns),
            highlights=len(highlights),
        )

        return MeetingSentimentAnalysis(
            overall=overall,
            by_speaker=by_speaker,
            by_topic=by_topic,
            timeline=timeline,
            concerns=concerns,
            highlights=highlights,
        )

    # -------------------------------------------------------------------------
    # Breakdowns
    # -------------------------------------------------------------------------

    def _overall(self, results: List[SentimentResult]) -> SentimentResult:
        score = sum(r.score for r in results) / len(results)
        keywords = unique(k for r in results for k in r.keywords)
        return self.analyzer.build_result(
            score=score,
            confidence=calculate_confidence(
                score, len(keywords), len(results) * OVERALL_TOKENS_PER_ENTRY
            ),
            emotions=(e for r in results for e in r.emotions),
            keywords=keywords,
        )

    def _by_speaker(
        self, scored: List[Tuple[TranscriptEntry, SentimentResult]]
    ) -> Dict[str, SentimentResult]:
        groups: Dict[str, _Group] = {}
        for entry, result in scored:
            groups.setdefault(entry.speaker, _Group()).add(result)
        return {speaker: self._summarize(group) for speaker, group in groups.items()}

    def _by_topic(
        self, scored: List[Tuple[TranscriptEntry, SentimentResult]]
    ) -> Dict[str, SentimentResult]:
        groups: Dict[str, _Group] = {}
        for entry, result in scored:
            lower_text = entry.text.lower()
            for topic, keywords in self._topics:
                if any(k in lower_text for k in keywords):
                    groups.setdefault(topic, _Group()).add(result, with_emotions=False)
        return {topic: self._summarize(group) for topic, group in groups.items()}

    def _summarize(self, group: _Group) -> SentimentResult:
        score = group.mean
        keywords = unique(group.keywords)
        return self.analyzer.build_result(
            score=score,
            confidence=calculate_confidence(
                score, len(keywords), len(group.scores) * GROUP_TOKENS_PER_ENTRY
            ),
            emotions=group.emotions,
            keywords=keywords,
        )

    # -------------------------------------------------------------------------
    # Key moments
    # -------------------------------------------------------------------------

    @staticmethod
    def _is_concern(result: SentimentResult) -> bool:
        return result.label == SentimentLabel.NEGATIVE and (
            not CONCERN_EMOTIONS.isdisjoint(result.emotions)
            or result.intensity == SentimentIntensity.STRONG
        )

    @staticmethod
    def _is_highlight(result: SentimentResult) -> bool:
        return result.label == SentimentLabel.POSITIVE and result.intensity in (
            SentimentIntensity.MODERATE,
            SentimentIntensity.STRONG,
        )


def _format(entry: TranscriptEntry) -> str:
    return f"{entry.speaker}: {entry.text}"


def analyze_meeting_sentiment(
    entries: Sequence[TranscriptEntry],
) -> MeetingSentimentAnalysis:
    """Analyze sentiment for an entire meeting transcript."""
    return MeetingSentimentAggregator().analyze(entries)
