"""Life-balance scoring across the four life areas.

An area score blends habit completion with goal progress. The overall
score averages areas that have habits, and the stability score falls as
the spread between those areas grows.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from typing import Optional

from glowhabit.analytics.periods import round_half_up
from glowhabit.models.balance import (
    LIFE_AREA_LABELS,
    LIFE_AREAS,
    AreaHistory,
    AreaInput,
    LifeArea,
    LifeAreaScore,
    LifeBalanceData,
    Trend,
)
from glowhabit.models.habit import Goal, Habit, HabitCompletion

HABIT_WEIGHT = 0.6
GOAL_WEIGHT = 0.4

# Percentage points the recent window must move to count as a trend.
TREND_TOLERANCE = 3.0

# Maps the largest possible deviation of 0-100 scores (50) onto the full range.
STABILITY_SCALE = 2.0

STRONG_AREA_MIN = 50
WEAK_AREA_BELOW = 30
BALANCED_MIN = 80
UNBALANCED_BELOW = 50

DEFAULT_LIFE_AREA: LifeArea = "career"

GOAL_KEYWORDS: dict[LifeArea, tuple[str, ...]] = {
    "health": ("health", "fitness", "exercise", "weight"),
    "career": ("work", "career", "project", "learn"),
    "mind": ("mental", "meditat", "read", "mindful"),
    "relationships": ("friend", "family", "social", "relationship"),
}


def habit_life_area(habit: Habit) -> LifeArea:
    """Life area of a habit: explicit area, else its category, else career."""
    if habit.life_area:
        return habit.life_area
    if habit.category in LIFE_AREAS:
        return habit.category
    return DEFAULT_LIFE_AREA


def goal_life_area(goal: Goal) -> Optional[LifeArea]:
    """Life area of a goal: explicit area, else the first keyword match in its title."""
    if goal.life_area:
        return goal.life_area
    title = goal.title.lower()
    for area in LIFE_AREAS:
        if any(keyword in title for keyword in GOAL_KEYWORDS[area]):
            return area
    return None


def area_score(completion_rate: float, goal_progress: float) -> int:
    """Weighted blend of completion rate and goal progress, clamped to 0-100."""
    raw = completion_rate * HABIT_WEIGHT + goal_progress * GOAL_WEIGHT
    return max(0, min(100, round_half_up(raw)))


def trend_direction(history: AreaHistory, tolerance: float = TREND_TOLERANCE) -> Trend:
    delta = history.recent_rate - history.previous_rate
    if delta > tolerance:
        return "up"
    if delta < -tolerance:
        return "down"
    return "stable"


def stability_score(scores: list[int]) -> int:
    """100 minus the scaled population standard deviation of the scores."""
    if len(scores) < 2:
        return 100
    mean = sum(scores) / len(scores)
    variance = sum((score - mean) ** 2 for score in scores) / len(scores)
    return max(0, min(100, round_half_up(100 - math.sqrt(variance) * STABILITY_SCALE)))


def _insights(counted: list[LifeAreaScore], stability: int) -> list[str]:
    if not counted:
        return ["Add habits to a life area to start tracking your balance"]

    insights: list[str] = []
    strongest = max(counted, key=lambda s: s.score)
    weakest = min(counted, key=lambda s: s.score)

    if strongest.score >= STRONG_AREA_MIN:
        insights.append(f"{LIFE_AREA_LABELS[strongest.area]} is your strongest area at {strongest.score}%")
    if weakest.area != strongest.area and weakest.score < WEAK_AREA_BELOW:
        insights.append(f"{LIFE_AREA_LABELS[weakest.area]} needs attention at {weakest.score}%")

    improving = [LIFE_AREA_LABELS[s.area] for s in counted if s.trend == "up"]
    declining = [LIFE_AREA_LABELS[s.area] for s in counted if s.trend == "down"]
    if improving:
        insights.append(f"Improving: {', '.join(improving)}")
    if declining:
        insights.append(f"Declining: {', '.join(declining)}")

    if len(counted) >= 2:
        if stability >= BALANCED_MIN:
            insights.append("Great balance! Your life areas are well-distributed")
        elif stability < UNBALANCED_BELOW:
            insights.append("Consider redistributing focus for better balance")

    return insights


def compose_life_balance(inputs: Mapping[str, AreaInput]) -> LifeBalanceData:
    """Combine per-area inputs into the life-balance view.

    Areas are processed in canonical order (health, career, mind,
    relationships); keys outside that set are ignored. Areas without habits
    still get a score but are left out of the overall and stability scores.
    With no such areas the overall score is 0 and ``areas_counted`` is 0.

    Args:
        inputs: Mapping of life area to its AreaInput.

    Returns:
        LifeBalanceData with scores and ordered insights.
    """
    area_scores: list[LifeAreaScore] = []
    for area in LIFE_AREAS:
        data = inputs.get(area)
        if data is None:
            continue
        area_scores.append(
            LifeAreaScore(
                area=area,
                score=area_score(data.completion_rate, data.goal_progress),
                habit_count=data.habit_count,
                completion_rate=round_half_up(data.completion_rate),
                goal_progress=round_half_up(data.goal_progress),
                trend=trend_direction(data.history),
            )
        )

    counted = [s for s in area_scores if s.habit_count > 0]
    overall = round_half_up(sum(s.score for s in counted) / len(counted)) if counted else 0
    stability = stability_score([s.score for s in counted])

    return LifeBalanceData(
        overall_score=overall,
        area_scores=area_scores,
        stability_score=stability,
        areas_counted=len(counted),
        insights=_insights(counted, stability),
    )


def _completion_ratio(
    habits: list[Habit],
    done: set[tuple[str, date]],
    end: date,
    days: int,
) -> float:
    completed = 0
    possible = 0
    for offset in range(days):
        day = end - timedelta(days=offset)
        for habit in habits:
            if habit.created_at.date() <= day:
                possible += 1
                if (habit.id, day) in done:
                    completed += 1
    return completed / possible * 100 if possible else 0.0


def build_area_inputs(
    habits: Iterable[Habit],
    completions: Iterable[HabitCompletion],
    goals: Iterable[Goal],
    today: date,
    window_days: int = 30,
    trend_days: int = 7,
) -> dict[LifeArea, AreaInput]:
    """Derive composer inputs for every life area from habit and goal records.

    A habit counts toward a day's possible completions from the day it was
    created. The trend compares the last ``trend_days`` days with the
    ``trend_days`` before them.
    """
    habits = list(habits)
    goals = list(goals)
    done = {(c.habit_id, c.date) for c in completions}

    inputs: dict[LifeArea, AreaInput] = {}
    for area in LIFE_AREAS:
        area_habits = [h for h in habits if habit_life_area(h) == area]
        area_goals = [g for g in goals if goal_life_area(g) == area]
        goal_progress = sum(g.progress for g in area_goals) / len(area_goals) if area_goals else 0.0

        inputs[area] = AreaInput(
            completion_rate=_completion_ratio(area_habits, done, today, window_days),
            goal_progress=goal_progress,
            habit_count=len(area_habits),
            history=AreaHistory(
                recent_rate=_completion_ratio(area_habits, done, today, trend_days),
                previous_rate=_completion_ratio(
                    area_habits, done, today - timedelta(days=trend_days), trend_days
                ),
            ),
        )
    return inputs
