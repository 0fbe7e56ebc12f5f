"""Lexicon-based sentiment classification for journal text.

Scoring uses the VADER lexicon: the compound polarity in [-1, 1] is scaled
to a signed score in [-100, 100] and bucketed into five ordinal labels.
Emotion tags come from a fixed keyword taxonomy.
"""

import math
import re
from datetime import datetime
from functools import lru_cache
from typing import Optional

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from glowhabit.analytics.periods import round_half_up
from glowhabit.models.journal import Confidence, EmotionTag, Mood, SentimentData, SentimentLabel

# Label thresholds on the [-100, 100] score.
VERY_NEGATIVE_BELOW = -40
NEGATIVE_BELOW = -10
POSITIVE_ABOVE = 10
VERY_POSITIVE_ABOVE = 40

# Confidence thresholds on the share of lexicon words among all words.
MIN_WORDS_FOR_CONFIDENCE = 10
LOW_SIGNAL_RATIO = 0.05
MEDIUM_SIGNAL_RATIO = 0.15

MAX_EMOTIONS = 3

EMOTION_KEYWORDS: dict[EmotionTag, tuple[str, ...]] = {
    "calm": ("calm", "peaceful", "relaxed", "serene", "tranquil", "quiet", "still", "centered", "balanced", "composed"),
    "stressed": ("stressed", "pressure", "overwhelmed", "tense", "anxious", "worried", "frantic", "hectic", "deadline", "rush"),
    "happy": ("happy", "joy", "excited", "wonderful", "amazing", "great", "fantastic", "delighted", "thrilled", "elated", "cheerful"),
    "anxious": ("anxious", "nervous", "worried", "uneasy", "restless", "uncertain", "apprehensive", "afraid", "fear", "panic"),
    "motivated": ("motivated", "inspired", "driven", "determined", "focused", "energized", "ambitious", "productive", "goal", "achieve"),
    "overwhelmed": ("overwhelmed", "exhausted", "tired", "drained", "burned", "too much", "can't", "difficult", "hard", "struggling"),
    "grateful": ("grateful", "thankful", "appreciate", "blessed", "fortunate", "lucky", "gratitude", "thanks"),
    "sad": ("sad", "unhappy", "down", "depressed", "lonely", "empty", "hurt", "disappointed", "upset", "crying", "tears"),
    "excited": ("excited", "thrilled", "eager", "enthusiastic", "pumped", "can't wait", "looking forward", "anticipating"),
    "peaceful": ("peace", "content", "satisfied", "harmony", "gentle", "soft", "rest", "meditate", "mindful", "present"),
}

# Explicit strong-emotion phrases. One match is enough to lift confidence
# out of "low".
STRONG_PHRASES: tuple[str, ...] = (
    "best day",
    "worst day",
    "so happy",
    "so sad",
    "love my",
    "hate my",
    "can't stand",
    "heartbroken",
    "devastated",
    "ecstatic",
    "miserable",
    "furious",
    "overjoyed",
)

_WORD_RE = re.compile(r"[a-z']+")


@lru_cache(maxsize=1)
def _analyzer() -> SentimentIntensityAnalyzer:
    return SentimentIntensityAnalyzer()


@lru_cache(maxsize=None)
def _phrase_pattern(phrase: str) -> re.Pattern:
    return re.compile(r"(?<![a-z'])" + re.escape(phrase) + r"(?![a-z'])")


def _normalize(text: str) -> str:
    return text.lower().replace("’", "'")


def score_label(score: int) -> SentimentLabel:
    """Bucket a [-100, 100] score into its ordinal label."""
    if score < VERY_NEGATIVE_BELOW:
        return "very-negative"
    if score < NEGATIVE_BELOW:
        return "negative"
    if score <= POSITIVE_ABOVE:
        return "neutral"
    if score <= VERY_POSITIVE_ABOVE:
        return "positive"
    return "very-positive"


def detect_emotions(text: str) -> list[EmotionTag]:
    """Emotion tags whose keywords appear in ``text``, in taxonomy order."""
    lowered = _normalize(text)
    found: list[EmotionTag] = []
    for emotion, keywords in EMOTION_KEYWORDS.items():
        if any(_phrase_pattern(keyword).search(lowered) for keyword in keywords):
            found.append(emotion)
    return found[:MAX_EMOTIONS]


def _confidence(lowered: str, total_words: int) -> Confidence:
    lexicon = _analyzer().lexicon
    tokens = _WORD_RE.findall(lowered)
    signal_words = sum(1 for token in tokens if token in lexicon)
    ratio = signal_words / max(total_words, 1)
    strong = any(_phrase_pattern(phrase).search(lowered) for phrase in STRONG_PHRASES)

    if ratio < LOW_SIGNAL_RATIO or total_words < MIN_WORDS_FOR_CONFIDENCE:
        return "medium" if strong else "low"
    if ratio < MEDIUM_SIGNAL_RATIO:
        return "high" if strong else "medium"
    return "high"


def analyze(text: Optional[str], now: Optional[datetime] = None) -> SentimentData:
    """Classify free text into score, label, confidence and emotions.

    Never raises: empty, whitespace-only or non-linguistic input yields a
    neutral, low-confidence result.

    Args:
        text: Journal content.
        now: Timestamp recorded as ``analyzed_at``. Defaults to the clock.

    Returns:
        SentimentData for the text.
    """
    analyzed_at = now or datetime.now()
    text = text if isinstance(text, str) else ""
    if not text.strip():
        return SentimentData(
            score=0,
            label="neutral",
            confidence="low",
            emotions=[],
            analyzed_at=analyzed_at,
        )

    compound = _analyzer().polarity_scores(text)["compound"]
    score = max(-100, min(100, round_half_up(compound * 100)))
    lowered = _normalize(text)

    return SentimentData(
        score=score,
        label=score_label(score),
        confidence=_confidence(lowered, len(text.split())),
        emotions=detect_emotions(text),
        analyzed_at=analyzed_at,
    )


MOOD_BY_LABEL: dict[str, Mood] = {
    "very-positive": "great",
    "positive": "good",
    "neutral": "okay",
    "negative": "low",
    "very-negative": "rough",
}


def sentiment_mood(label: SentimentLabel) -> Mood:
    """Map a sentiment label onto the five-step mood scale."""
    return MOOD_BY_LABEL[label]


def emotional_stability(scores: list[int]) -> int:
    """100 minus twice the standard deviation of scores, floored at 0."""
    if len(scores) < 2:
        return 100
    mean = sum(scores) / len(scores)
    variance = sum((score - mean) ** 2 for score in scores) / len(scores)
    return max(0, round_half_up(100 - math.sqrt(variance) * 2))


def is_positive(label: SentimentLabel) -> bool:
    return label in ("positive", "very-positive")
