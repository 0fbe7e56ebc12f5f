"""Budget discipline statistics."""

from collections.abc import Iterable
from datetime import date

from glowhabit.analytics.periods import compute_monthly_score
from glowhabit.analytics.streaks import completion_rate, compute_streaks
from glowhabit.models.budget import BudgetEntry, BudgetStats


def is_good_budget_day(entry: BudgetEntry) -> bool:
    return entry.stayed_within_budget and entry.tracked_expenses


def budget_stats(entries: Iterable[BudgetEntry], today: date) -> BudgetStats:
    """Streak, monthly score and day counts for budget entries.

    A good day is one that stayed within budget and had expenses tracked.
    An over-budget day is a tracked day that did not stay within budget.
    Entries dated after ``today`` are left out of every figure.
    """
    entries = [e for e in entries if e.date <= today]
    streaks = compute_streaks(entries, is_good_budget_day, today)

    return BudgetStats(
        consistency_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        days_under_budget=sum(1 for e in entries if e.stayed_within_budget),
        days_over_budget=sum(1 for e in entries if not e.stayed_within_budget and e.tracked_expenses),
        monthly_score=compute_monthly_score(entries, is_good_budget_day, today),
        consistency_rate=completion_rate(entries, is_good_budget_day, until=today),
        total_tracked_days=len(entries),
    )
