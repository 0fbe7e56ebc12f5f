"""Derivation engine: pure functions from record snapshots to statistics."""

from glowhabit.analytics.balance import build_area_inputs, compose_life_balance
from glowhabit.analytics.budget import budget_stats
from glowhabit.analytics.habits import habit_stats
from glowhabit.analytics.journal import habit_mood_correlation, journal_stats, mood_analytics
from glowhabit.analytics.moments import evaluate_glow_moments, unlockable_rewards
from glowhabit.analytics.periods import compute_monthly_score
from glowhabit.analytics.projects import deep_work_stats, project_stats
from glowhabit.analytics.routines import routine_stats, skincare_stats
from glowhabit.analytics.sentiment import analyze
from glowhabit.analytics.streaks import StreakResult, completion_rate, compute_streaks

__all__ = [
    "build_area_inputs",
    "compose_life_balance",
    "budget_stats",
    "habit_stats",
    "habit_mood_correlation",
    "journal_stats",
    "mood_analytics",
    "evaluate_glow_moments",
    "unlockable_rewards",
    "compute_monthly_score",
    "deep_work_stats",
    "project_stats",
    "routine_stats",
    "skincare_stats",
    "analyze",
    "StreakResult",
    "completion_rate",
    "compute_streaks",
]
