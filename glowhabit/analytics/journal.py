"""Journal statistics and mood analytics."""

from collections import Counter
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Optional

from glowhabit.analytics.periods import month_key, percent, round_half_up
from glowhabit.analytics.sentiment import EMOTION_KEYWORDS, emotional_stability, is_positive
from glowhabit.analytics.streaks import compute_streaks
from glowhabit.models.journal import (
    EmotionCount,
    HabitMoodCorrelation,
    JournalEntry,
    JournalStats,
    MoodAnalytics,
    MoodPoint,
)

MOOD_WINDOW_DAYS = 30
MAX_DOMINANT_EMOTIONS = 5

# Habit completion share separating high and low completion days.
HIGH_COMPLETION_MIN = 0.7
LOW_COMPLETION_BELOW = 0.3
MIN_CORRELATION_ENTRIES = 3
MAX_CORRELATION_INSIGHTS = 3

_EMOTION_ORDER = {emotion: index for index, emotion in enumerate(EMOTION_KEYWORDS)}


def journal_stats(entries: Iterable[JournalEntry], today: date) -> JournalStats:
    entries = [e for e in entries if e.date <= today]
    streaks = compute_streaks(entries, None, today)
    this_month = month_key(today)
    total_words = sum(entry.word_count for entry in entries)

    return JournalStats(
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        total_entries=len(entries),
        this_month_entries=sum(1 for e in entries if month_key(e.date) == this_month),
        avg_words_per_entry=round_half_up(total_words / len(entries)) if entries else 0,
    )


def _recent(entries: Iterable[JournalEntry], today: date, days: int) -> list[JournalEntry]:
    start = today - timedelta(days=days - 1)
    return sorted((e for e in entries if start <= e.date <= today), key=lambda e: e.date)


def mood_trend(
    entries: Iterable[JournalEntry],
    today: date,
    days: int = MOOD_WINDOW_DAYS,
) -> list[JournalEntry]:
    """Entries of the last ``days`` days that carry a mood or sentiment, oldest first."""
    return [e for e in _recent(entries, today, days) if e.mood or e.sentiment]


def mood_analytics(
    entries: Iterable[JournalEntry],
    today: date,
    days: int = MOOD_WINDOW_DAYS,
) -> MoodAnalytics:
    """Aggregate sentiment of analyzed entries in the last ``days`` days."""
    recent = [e for e in _recent(entries, today, days) if e.sentiment]
    if not recent:
        return MoodAnalytics()

    scores = [e.sentiment.score for e in recent]
    positives = sum(1 for e in recent if is_positive(e.sentiment.label))

    counts = Counter(emotion for e in recent for emotion in e.sentiment.emotions)
    dominant = sorted(counts.items(), key=lambda item: (-item[1], _EMOTION_ORDER[item[0]]))

    return MoodAnalytics(
        average_score=round_half_up(sum(scores) / len(scores)),
        positive_ratio=percent(positives, len(recent)),
        emotional_stability=emotional_stability(scores),
        dominant_emotions=[
            EmotionCount(emotion=emotion, count=count)
            for emotion, count in dominant[:MAX_DOMINANT_EMOTIONS]
        ],
        mood_by_day=[
            MoodPoint(date=e.date, score=e.sentiment.score, label=e.sentiment.label)
            for e in recent
        ],
    )


def _completion_share(entry: JournalEntry) -> float:
    summary = entry.habits_summary
    return summary.completed / max(summary.total, 1)


def _mean(values: list[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def habit_mood_correlation(entries: Iterable[JournalEntry]) -> Optional[HabitMoodCorrelation]:
    """Compare sentiment on high and low habit-completion days.

    Returns None until at least three entries carry both a habit summary
    and a sentiment.
    """
    paired = sorted(
        (e for e in entries if e.habits_summary and e.sentiment),
        key=lambda e: e.date,
    )
    if len(paired) < MIN_CORRELATION_ENTRIES:
        return None

    high = [e.sentiment.score for e in paired if _completion_share(e) >= HIGH_COMPLETION_MIN]
    low = [e.sentiment.score for e in paired if _completion_share(e) < LOW_COMPLETION_BELOW]
    high_avg = _mean(high)
    low_avg = _mean(low)

    insights: list[str] = []
    if len(high) >= 2 and high_avg > low_avg + 15:
        insights.append("Your mood improves on days you complete more habits")
    if len(low) >= 2 and low_avg < -10:
        insights.append("Lower mood detected on low-habit completion days")

    scores_by_habit: dict[str, list[int]] = {}
    for entry in paired:
        for habit in entry.habits_summary.habits:
            scores_by_habit.setdefault(habit, []).append(entry.sentiment.score)
    for habit, scores in scores_by_habit.items():
        if len(scores) >= 3 and _mean(scores) > 30:
            insights.append(f'Completing "{habit}" correlates with better mood')

    return HabitMoodCorrelation(
        high_completion_avg_mood=round_half_up(high_avg),
        low_completion_avg_mood=round_half_up(low_avg),
        insights=insights[:MAX_CORRELATION_INSIGHTS],
        data_points=len(paired),
    )
