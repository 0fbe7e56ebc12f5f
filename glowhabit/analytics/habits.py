"""Per-habit statistics and daily progress."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from typing import Optional

from glowhabit.analytics.periods import month_bounds, parse_day, percent
from glowhabit.analytics.streaks import compute_streaks, window_rate
from glowhabit.models.habit import DailyProgress, Habit, HabitCompletion, HabitStats

COMPLETION_WINDOW_DAYS = 30


def _identity(value):
    return value


def dates_by_habit(completions: Iterable[HabitCompletion]) -> dict[str, set[date]]:
    """Group completion days by habit ID."""
    grouped: dict[str, set[date]] = defaultdict(set)
    for completion in completions:
        grouped[completion.habit_id].add(completion.date)
    return grouped


def habit_stats(
    completion_dates: Iterable,
    today: date,
    window_days: int = COMPLETION_WINDOW_DAYS,
) -> HabitStats:
    """Streaks, window completion rate and total check-ins for one habit.

    Args:
        completion_dates: Days the habit was checked (dates or ISO strings).
            Days after ``today`` are ignored.
        today: Reference day.
        window_days: Length of the completion-rate window ending today.

    Returns:
        HabitStats for the habit.
    """
    parsed = (parse_day(value) for value in completion_dates)
    days = {day for day in parsed if day is not None and day <= today}
    streaks = compute_streaks(days, None, today, date_of=_identity)
    return HabitStats(
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        completion_rate=window_rate(days, today, window_days),
        total_completions=len(days),
    )


def daily_progress(
    habits: list[Habit],
    completions: Iterable[HabitCompletion],
    day: date,
) -> DailyProgress:
    habit_ids = {habit.id for habit in habits}
    completed = {c.habit_id for c in completions if c.date == day and c.habit_id in habit_ids}
    return DailyProgress(
        date=day,
        completed_count=len(completed),
        total_count=len(habits),
        percentage=percent(len(completed), len(habits)),
    )


def monthly_progress(
    habits: list[Habit],
    completions: Iterable[HabitCompletion],
    month: date,
) -> list[DailyProgress]:
    """Daily progress for every day of the month containing ``month``."""
    start, end = month_bounds(month)
    in_month = [c for c in completions if start <= c.date <= end]
    return [
        daily_progress(habits, in_month, start.replace(day=day))
        for day in range(1, end.day + 1)
    ]


def _ranked(
    habits: list[Habit],
    completions: Iterable[HabitCompletion],
    today: date,
) -> list[tuple[Habit, int]]:
    grouped = dates_by_habit(completions)
    return [
        (habit, habit_stats(grouped.get(habit.id, ()), today).completion_rate)
        for habit in habits
    ]


def best_habit(
    habits: list[Habit],
    completions: Iterable[HabitCompletion],
    today: date,
) -> Optional[Habit]:
    """Habit with the highest completion rate; the earliest wins ties."""
    ranked = _ranked(habits, completions, today)
    if not ranked:
        return None
    return max(ranked, key=lambda pair: pair[1])[0]


def weakest_habit(
    habits: list[Habit],
    completions: Iterable[HabitCompletion],
    today: date,
) -> Optional[Habit]:
    """Habit with the lowest completion rate; the earliest wins ties."""
    ranked = _ranked(habits, completions, today)
    if not ranked:
        return None
    return min(ranked, key=lambda pair: pair[1])[0]
