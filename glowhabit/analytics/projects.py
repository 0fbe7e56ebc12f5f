"""Project execution and deep-work statistics.

Weeks start on Monday. Session minutes are summed into hours and measured
against a project's weekly target.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta

from glowhabit.analytics.periods import percent
from glowhabit.analytics.streaks import compute_streaks
from glowhabit.models.balance import Trend
from glowhabit.models.project import (
    DEFAULT_WEEKLY_TARGET,
    DeepWorkSession,
    DeepWorkStats,
    Project,
    ProjectStats,
    TimeOfDay,
)

# Used when no session has been logged yet.
DEFAULT_BEST_HOUR = 9
AFTERNOON_FROM_HOUR = 12
EVENING_FROM_HOUR = 17

# This week must beat last week by more than 10% to trend up.
TREND_RATIO = 0.1

FOCUS_STREAK_WINDOW_DAYS = 30


def week_bounds(day: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def _minutes(sessions: Iterable[DeepWorkSession]) -> int:
    return sum(s.duration for s in sessions)


def _between(sessions: Iterable[DeepWorkSession], start: date, end: date) -> list[DeepWorkSession]:
    return [s for s in sessions if start <= s.date <= end]


def project_stats(project: Project, sessions: Iterable[DeepWorkSession], today: date) -> ProjectStats:
    """Hours, weekly execution score and streak for one project.

    The weekly execution score is this week's hours as a share of the
    weekly target, capped at 100. A target of 0 falls back to the default.
    The streak counts consecutive days with a session, ending today.
    Sessions dated after ``today`` are ignored.
    """
    own = [s for s in sessions if s.project_id == project.id and s.date <= today]
    week_start, _ = week_bounds(today)
    weekly_hours = _minutes(_between(own, week_start, today)) / 60
    target = project.weekly_target or DEFAULT_WEEKLY_TARGET
    score = min(100, percent(weekly_hours, target))

    return ProjectStats(
        total_hours=_minutes(own) / 60,
        weekly_hours=weekly_hours,
        consistency_streak=compute_streaks(own, None, today).current_streak,
        weekly_execution_score=score,
        progress=score,
    )


def time_of_day(hour: int) -> TimeOfDay:
    if hour < AFTERNOON_FROM_HOUR:
        return "Morning"
    if hour < EVENING_FROM_HOUR:
        return "Afternoon"
    return "Evening"


def best_hour(sessions: Iterable[DeepWorkSession]) -> int:
    """Hour of day with the most focused minutes; the earliest hour wins ties."""
    minutes_by_hour: dict[int, int] = defaultdict(int)
    for session in sessions:
        minutes_by_hour[session.completed_at.hour] += session.duration
    if not minutes_by_hour:
        return DEFAULT_BEST_HOUR
    return min(minutes_by_hour, key=lambda hour: (-minutes_by_hour[hour], hour))


def weekly_trend(this_week_minutes: int, last_week_minutes: int) -> Trend:
    if this_week_minutes > last_week_minutes * (1 + TREND_RATIO):
        return "up"
    if this_week_minutes < last_week_minutes * (1 - TREND_RATIO):
        return "down"
    return "stable"


def focus_streak(days: set[date], today: date, window_days: int = FOCUS_STREAK_WINDOW_DAYS) -> int:
    """Consecutive session days ending today, or yesterday when today is still open."""
    streak = 0
    for offset in range(window_days):
        if today - timedelta(days=offset) in days:
            streak += 1
        elif offset > 0:
            break
    return streak


def deep_work_stats(sessions: Iterable[DeepWorkSession], today: date) -> DeepWorkStats:
    """Totals, focus streak, best time of day and weekly trend across projects.

    Args:
        sessions: Deep-work sessions of every project.
        today: Reference day. Later sessions are ignored.

    Returns:
        DeepWorkStats for the sessions.
    """
    sessions = [s for s in sessions if s.date <= today]
    week_start, _ = week_bounds(today)
    this_week = _between(sessions, week_start, today)
    last_week = _between(sessions, week_start - timedelta(days=7), week_start - timedelta(days=1))

    return DeepWorkStats(
        total_hours=_minutes(sessions) / 60,
        focus_streak=focus_streak({s.date for s in sessions}, today),
        best_time_of_day=time_of_day(best_hour(sessions)),
        weekly_trend=weekly_trend(_minutes(this_week), _minutes(last_week)),
        sessions_this_week=len(this_week),
    )
