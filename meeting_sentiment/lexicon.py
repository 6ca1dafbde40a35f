"""
Static lexicon tables.

Keyword weights, context modifiers, emotion phrases and topic triggers.
All tables are read-only mappings built once at import time.

Negated contractions are listed both with and without the apostrophe
(``isnt`` and ``isn't``), since the tokenizer keeps apostrophes. So
"this isn't good" scores as negated, the same as "this isnt good".
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from .base import Emotion


class Modifier(NamedTuple):
    """Context modifier applied to nearby sentiment keywords."""

    multiplier: float  # < 0 negates, > 1 intensifies, < 1 diminishes
    scope: int  # max token distance to the keyword


# =============================================================================
# Sentiment Keywords
# =============================================================================


POSITIVE_KEYWORDS: Mapping[str, float] = MappingProxyType({
    # General positive
    "great": 0.8, "excellent": 0.9, "good": 0.6, "amazing": 0.9,
    "awesome": 0.9, "fantastic": 0.9, "wonderful": 0.9, "perfect": 1.0,
    "outstanding": 0.9, "superb": 0.9, "brilliant": 0.8, "exceptional": 0.9,
    "marvelous": 0.8, "splendid": 0.8,
    # Emotional positive
    "excited": 0.85, "happy": 0.8, "pleased": 0.7, "delighted": 0.85,
    "thrilled": 0.9, "glad": 0.6, "joyful": 0.85, "love": 0.9,
    "loving": 0.85, "appreciate": 0.7, "grateful": 0.75,
    # Agreement / approval
    "agree": 0.5, "yes": 0.4, "absolutely": 0.6, "definitely": 0.5,
    "sure": 0.4, "right": 0.3, "correct": 0.4,
    # Success / progress
    "success": 0.8, "successful": 0.8, "achieve": 0.7, "accomplished": 0.8,
    "progress": 0.6, "improved": 0.7, "better": 0.6, "best": 0.8,
    "win": 0.7, "winning": 0.8,
    # Quality
    "quality": 0.5, "efficient": 0.6, "effective": 0.6, "smooth": 0.5,
    "easy": 0.5, "clear": 0.4,
    # Interest / engagement
    "interested": 0.6, "fascinating": 0.7, "impressive": 0.75,
    "promising": 0.7, "opportunity": 0.5, "potential": 0.5,
})

NEGATIVE_KEYWORDS: Mapping[str, float] = MappingProxyType({
    # Concern / worry
    "concerned": 0.7, "worried": 0.75, "worry": 0.7, "anxious": 0.7,
    "nervous": 0.6, "uneasy": 0.65, "afraid": 0.75, "scared": 0.8,
    # Problems / issues
    "problem": 0.7, "problems": 0.7, "issue": 0.6, "issues": 0.6,
    "trouble": 0.7, "difficult": 0.6, "difficulty": 0.6, "hard": 0.5,
    "challenge": 0.5, "challenging": 0.55, "obstacle": 0.6, "barrier": 0.6,
    # Disappointment
    "disappointed": 0.75, "disappointing": 0.7, "frustrated": 0.8,
    "frustration": 0.8, "upset": 0.7, "annoyed": 0.65, "irritated": 0.65,
    "angry": 0.85, "mad": 0.8,
    # Negative states
    "bad": 0.6, "terrible": 0.9, "awful": 0.85, "horrible": 0.9,
    "worst": 1.0, "poor": 0.7, "inadequate": 0.75, "insufficient": 0.7,
    "lacking": 0.6, "missing": 0.5,
    # Failure / setback
    "fail": 0.8, "failed": 0.8, "failure": 0.85, "mistake": 0.7,
    "error": 0.6, "wrong": 0.6, "delay": 0.5, "delayed": 0.55,
    "blocked": 0.6, "stuck": 0.6,
    # Uncertainty / doubt
    "doubt": 0.6, "uncertain": 0.5, "unsure": 0.5, "confused": 0.6,
    "confusing": 0.55, "unclear": 0.5, "complicated": 0.5, "complex": 0.4,
    # Rejection / disagreement
    "disagree": 0.5, "no": 0.3, "never": 0.5, "cannot": 0.4, "cant": 0.4,
    "impossible": 0.7, "reject": 0.7, "deny": 0.6, "refuse": 0.6,
})


# =============================================================================
# Context Modifiers
# =============================================================================


_INTENSIFIERS = {
    "very": Modifier(1.5, 2),
    "extremely": Modifier(2.0, 2),
    "incredibly": Modifier(1.8, 2),
    "really": Modifier(1.4, 2),
    "quite": Modifier(1.3, 2),
    "pretty": Modifier(1.2, 2),
    "so": Modifier(1.5, 2),
    "totally": Modifier(1.6, 2),
    "completely": Modifier(1.6, 2),
    "absolutely": Modifier(1.7, 2),
    "highly": Modifier(1.5, 2),
    "deeply": Modifier(1.5, 2),
    "strongly": Modifier(1.6, 2),
}

_DIMINISHERS = {
    "slightly": Modifier(0.5, 2),
    "somewhat": Modifier(0.6, 2),
    "a": Modifier(0.7, 1),  # "a bit"
    "bit": Modifier(0.6, 1),
    "little": Modifier(0.5, 2),
    "kind": Modifier(0.7, 2),  # "kind of"
    "of": Modifier(0.7, 1),
    "sort": Modifier(0.7, 2),  # "sort of"
    "fairly": Modifier(0.7, 2),
    "relatively": Modifier(0.7, 2),
}

_NEGATORS = {
    "not": Modifier(-1.0, 3),
    "no": Modifier(-1.0, 2),
    "never": Modifier(-1.0, 3),
    "neither": Modifier(-1.0, 2),
    "nor": Modifier(-1.0, 2),
    "without": Modifier(-0.8, 3),
    "cannot": Modifier(-1.0, 2),
}

_CONTRACTION_STEMS = (
    "isn", "aren", "don", "doesn", "didn", "wasn", "weren", "can",
    "couldn", "wouldn", "shouldn", "won",
)

_NEGATORS.update({
    contraction: Modifier(-1.0, 2)
    for stem in _CONTRACTION_STEMS
    for contraction in (f"{stem}t", f"{stem}'t")
})

MODIFIERS: Mapping[str, Modifier] = MappingProxyType(
    {**_INTENSIFIERS, **_DIMINISHERS, **_NEGATORS}
)

# Widest lookback windows used by the scorer.
NEGATION_LOOKBACK = 3
INTENSITY_LOOKBACK = 2


# =============================================================================
# Emotion Patterns
# =============================================================================


EMOTION_PATTERNS: Mapping[Emotion, Tuple[str, ...]] = MappingProxyType({
    Emotion.EXCITED: (
        "excited", "thrilled", "enthusiastic", "eager", "can't wait",
        "looking forward", "pumped", "psyched", "stoked", "hyped",
        "great opportunity", "amazing chance", "fantastic news",
    ),
    Emotion.CONFUSED: (
        "confused", "confusing", "don't understand", "not sure",
        "unclear", "puzzled", "lost", "what do you mean",
        "could you clarify", "i don't get", "doesn't make sense",
    ),
    Emotion.CONCERNED: (
        "concerned", "worried", "worry", "anxious", "nervous",
        "uneasy", "apprehensive", "hesitant about", "risk",
        "potential problem", "not confident", "doubts about",
    ),
    Emotion.SATISFIED: (
        "satisfied", "happy with", "pleased", "content", "good with",
        "works for me", "acceptable", "meets expectations",
        "exactly what", "perfect for", "love it", "great job",
    ),
    Emotion.FRUSTRATED: (
        "frustrated", "frustrating", "annoyed", "irritated", "fed up",
        "sick of", "tired of", "again and again", "keeps happening",
        "never works", "always a problem", "waste of time",
    ),
    Emotion.INTERESTED: (
        "interested", "curious", "intrigued", "fascinated", "tell me more",
        "would like to know", "how does that work", "interesting",
        "worth exploring", "worth considering", "sounds good",
    ),
    Emotion.HESITANT: (
        "hesitant", "reluctant", "not sure", "maybe", "perhaps",
        "need to think", "let me consider", "on the fence",
        "have reservations", "not convinced", "skeptical",
    ),
})


# =============================================================================
# Topic Keywords
# =============================================================================


TOPIC_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "budget": (
        "budget", "cost", "costs", "expensive", "cheap", "price", "pricing",
        "money", "funding", "financial",
    ),
    "timeline": (
        "timeline", "deadline", "schedule", "date", "dates", "delay",
        "urgent", "priority", "time",
    ),
    "quality": (
        "quality", "standard", "standards", "bug", "bugs", "issue", "error",
        "test", "testing",
    ),
    "team": (
        "team", "resources", "staff", "people", "personnel", "hiring",
        "capacity", "workload",
    ),
    "technology": (
        "technology", "tech", "system", "software", "hardware", "tool",
        "platform", "integration",
    ),
    "security": (
        "security", "secure", "privacy", "data protection", "compliance",
        "risk", "vulnerability",
    ),
    "design": (
        "design", "ui", "ux", "interface", "user experience", "visual",
        "look", "feel",
    ),
    "performance": (
        "performance", "speed", "fast", "slow", "optimization", "efficiency",
        "scale",
    ),
})


__all__ = [
    "Modifier",
    "POSITIVE_KEYWORDS",
    "NEGATIVE_KEYWORDS",
    "MODIFIERS",
    "NEGATION_LOOKBACK",
    "INTENSITY_LOOKBACK",
    "EMOTION_PATTERNS",
    "TOPIC_KEYWORDS",
]
