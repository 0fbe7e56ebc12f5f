"""Routine and skincare statistics."""

from collections import Counter
from collections.abc import Iterable
from datetime import date, timedelta

from glowhabit.analytics.periods import percent, round_half_up
from glowhabit.analytics.streaks import compute_streaks, window_rate
from glowhabit.models.routine import (
    ProductUsage,
    RoutineCompletion,
    RoutineStats,
    SkinCareCompletion,
    SkinCareRoutine,
    SkinCareStats,
)

CONSISTENCY_WINDOW_DAYS = 30
MAX_PRODUCTS = 5

# Alternate-day treatments run on Monday, Wednesday, Friday and Sunday.
ALTERNATE_WEEKDAYS = frozenset({0, 2, 4, 6})


def routine_stats(
    completions: Iterable[RoutineCompletion],
    routine_id: str,
    today: date,
    window_days: int = CONSISTENCY_WINDOW_DAYS,
) -> RoutineStats:
    """Consistency, streaks and average duration for one routine."""
    own = [c for c in completions if c.routine_id == routine_id and c.date <= today]
    if not own:
        return RoutineStats()

    streaks = compute_streaks(own, None, today)
    durations = [c.duration for c in own if c.duration]

    return RoutineStats(
        consistency_rate=window_rate({c.date for c in own}, today, window_days),
        average_completion_time=round_half_up(sum(durations) / len(durations)) if durations else 0,
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        total_completions=len(own),
    )


def is_alternate_day(day: date) -> bool:
    return day.weekday() in ALTERNATE_WEEKDAYS


def _product_usage(
    completions: list[SkinCareCompletion],
    routines: Iterable[SkinCareRoutine],
) -> list[ProductUsage]:
    by_id = {routine.id: routine for routine in routines}
    counts: Counter[str] = Counter()
    for completion in completions:
        routine = by_id.get(completion.routine_id)
        if routine is None:
            continue
        done = set(completion.completed_steps)
        for step in routine.steps:
            if step.product_name and step.id in done:
                counts[step.product_name] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [ProductUsage(name=name, count=count) for name, count in ranked[:MAX_PRODUCTS]]


def skincare_stats(
    completions: Iterable[SkinCareCompletion],
    routines: Iterable[SkinCareRoutine],
    today: date,
    window_days: int = CONSISTENCY_WINDOW_DAYS,
) -> SkinCareStats:
    """Morning/night consistency, streaks across both and top products."""
    completions = [c for c in completions if c.date <= today]
    start = today - timedelta(days=window_days - 1)

    def consistency(kind: str) -> int:
        days = {c.date for c in completions if c.type == kind and start <= c.date <= today}
        return percent(len(days), window_days)

    streaks = compute_streaks(completions, None, today)
    return SkinCareStats(
        morning_consistency=consistency("morning"),
        night_consistency=consistency("night"),
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        total_completions=len(completions),
        most_used_products=_product_usage(completions, routines),
    )
