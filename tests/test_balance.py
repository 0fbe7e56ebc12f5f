"""Property-based tests for the life-balance composer.

**Feature: glowhabit-analytics**
"""

from datetime import date, datetime, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from glowhabit.analytics.balance import (
    area_score,
    build_area_inputs,
    compose_life_balance,
    goal_life_area,
    habit_life_area,
    stability_score,
    trend_direction,
)
from glowhabit.models.balance import LIFE_AREAS, AreaHistory, AreaInput
from glowhabit.models.habit import Goal, Habit, HabitCompletion

TODAY = date(2024, 3, 15)

area_inputs = st.builds(
    AreaInput,
    completion_rate=st.floats(min_value=0, max_value=100),
    goal_progress=st.floats(min_value=0, max_value=100),
    habit_count=st.integers(min_value=0, max_value=10),
    history=st.builds(
        AreaHistory,
        recent_rate=st.floats(min_value=0, max_value=100),
        previous_rate=st.floats(min_value=0, max_value=100),
    ),
)


class TestLifeBalanceBounds:
    """
    **Feature: glowhabit-analytics, Property 11: Balance Scores Are Bounded**

    *For any* per-area inputs, every score lies in [0, 100] and only areas
    with habits are counted.
    """

    @given(st.dictionaries(st.sampled_from(LIFE_AREAS), area_inputs))
    @settings(max_examples=200)
    def test_scores_bounded(self, inputs):
        data = compose_life_balance(inputs)

        assert 0 <= data.overall_score <= 100
        assert 0 <= data.stability_score <= 100
        assert data.areas_counted == sum(1 for i in inputs.values() if i.habit_count > 0)
        for score in data.area_scores:
            assert 0 <= score.score <= 100

    @given(st.dictionaries(st.sampled_from(LIFE_AREAS), area_inputs))
    @settings(max_examples=100)
    def test_reproducible(self, inputs):
        assert compose_life_balance(inputs) == compose_life_balance(dict(inputs))

    @given(st.dictionaries(st.sampled_from(LIFE_AREAS), area_inputs, min_size=1))
    @settings(max_examples=100)
    def test_areas_in_canonical_order(self, inputs):
        data = compose_life_balance(inputs)
        order = [score.area for score in data.area_scores]
        assert order == [area for area in LIFE_AREAS if area in inputs]


class TestLifeBalanceScenarios:
    """
    **Feature: glowhabit-analytics, Property 12: Stability Under Equal Areas**
    """

    def test_equal_areas_are_perfectly_stable(self):
        inputs = {
            "health": AreaInput(completion_rate=80, goal_progress=80, habit_count=2),
            "mind": AreaInput(completion_rate=80, goal_progress=80, habit_count=3),
        }

        data = compose_life_balance(inputs)

        assert data.overall_score == 80
        assert data.stability_score == 100
        assert data.areas_counted == 2
        assert data.insights == [
            "Health is your strongest area at 80%",
            "Great balance! Your life areas are well-distributed",
        ]

    def test_empty_inputs(self):
        data = compose_life_balance({})

        assert data.overall_score == 0
        assert data.areas_counted == 0
        assert data.area_scores == []
        assert data.insights == ["Add habits to a life area to start tracking your balance"]

    def test_areas_without_habits_are_not_counted(self):
        inputs = {
            "health": AreaInput(completion_rate=100, goal_progress=100, habit_count=1),
            "career": AreaInput(completion_rate=0, goal_progress=0, habit_count=0),
        }

        data = compose_life_balance(inputs)

        assert data.overall_score == 100
        assert data.areas_counted == 1
        assert len(data.area_scores) == 2

    def test_insight_order(self):
        inputs = {
            "health": AreaInput(
                completion_rate=90,
                goal_progress=90,
                habit_count=2,
                history=AreaHistory(recent_rate=90, previous_rate=60),
            ),
            "career": AreaInput(
                completion_rate=10,
                goal_progress=0,
                habit_count=1,
                history=AreaHistory(recent_rate=5, previous_rate=40),
            ),
        }

        data = compose_life_balance(inputs)

        assert data.insights == [
            "Health is your strongest area at 90%",
            "Career needs attention at 6%",
            "Improving: Health",
            "Declining: Career",
            "Consider redistributing focus for better balance",
        ]

    def test_unknown_area_keys_ignored(self):
        data = compose_life_balance({"finance": AreaInput(completion_rate=50, habit_count=1)})
        assert data.areas_counted == 0


class TestStabilityMonotonic:
    """
    **Feature: glowhabit-analytics, Property 33: Stability Falls As Spread Grows**

    *For any* two area scores, widening the gap between them never raises
    the stability score.
    """

    @given(
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=100),
    )
    @settings(max_examples=300)
    def test_wider_gap_never_more_stable(self, a, b, lower, upper):
        low, high = min(a, b), max(a, b)
        wider_low = min(low, lower)
        wider_high = max(high, upper)

        assert stability_score([wider_low, wider_high]) <= stability_score([low, high])

    @given(st.lists(st.integers(min_value=0, max_value=100), min_size=2, max_size=4))
    @settings(max_examples=200)
    def test_equal_scores_are_fully_stable(self, scores):
        assert stability_score([scores[0]] * len(scores)) == 100
        assert 0 <= stability_score(scores) <= 100

    def test_strictly_decreasing_steps(self):
        gaps = [stability_score([50 - step, 50 + step]) for step in range(0, 51, 10)]

        assert gaps == sorted(gaps, reverse=True)
        assert len(set(gaps)) == len(gaps)
        assert gaps[0] == 100
        assert gaps[-1] == 0

    def test_unbalanced_areas_get_redistribution_remark(self):
        inputs = {
            "health": AreaInput(completion_rate=100, goal_progress=100, habit_count=1),
            "career": AreaInput(completion_rate=0, goal_progress=0, habit_count=1),
        }

        data = compose_life_balance(inputs)

        assert data.stability_score == 0
        assert data.insights[-1] == "Consider redistributing focus for better balance"

    def test_moderate_spread_gets_no_balance_remark(self):
        inputs = {
            "health": AreaInput(completion_rate=70, goal_progress=70, habit_count=1),
            "mind": AreaInput(completion_rate=40, goal_progress=40, habit_count=1),
        }

        data = compose_life_balance(inputs)

        assert data.stability_score == 70
        assert data.insights == ["Health is your strongest area at 70%"]


class TestAreaHelpers:
    def test_area_score_weights(self):
        assert area_score(100, 0) == 60
        assert area_score(0, 100) == 40
        assert area_score(50, 50) == 50

    def test_trend_tolerance(self):
        assert trend_direction(AreaHistory(recent_rate=53, previous_rate=50)) == "stable"
        assert trend_direction(AreaHistory(recent_rate=54, previous_rate=50)) == "up"
        assert trend_direction(AreaHistory(recent_rate=46, previous_rate=50)) == "down"

    def test_stability_score(self):
        assert stability_score([]) == 100
        assert stability_score([70]) == 100
        assert stability_score([40, 60]) == 80
        assert stability_score([0, 100]) == 0

    def test_habit_life_area_fallbacks(self):
        assert habit_life_area(Habit(name="Run", category="custom", life_area="health")) == "health"
        assert habit_life_area(Habit(name="Read", category="mind")) == "mind"
        assert habit_life_area(Habit(name="Misc", category="custom")) == "career"

    def test_goal_life_area_from_title(self):
        assert goal_life_area(Goal(title="Improve fitness")) == "health"
        assert goal_life_area(Goal(title="Call family weekly")) == "relationships"
        assert goal_life_area(Goal(title="Something else")) is None
        assert goal_life_area(Goal(title="Improve fitness", life_area="mind")) == "mind"


class TestBuildAreaInputs:
    """
    **Feature: glowhabit-analytics, Property 13: Area Inputs From Records**
    """

    def test_completion_and_goals_per_area(self):
        created = datetime(2024, 1, 1)
        walk = Habit(id="walk", name="Walk", category="health", created_at=created)
        read = Habit(id="read", name="Read", category="mind", created_at=created)
        completions = [
            HabitCompletion(habit_id="walk", date=TODAY - timedelta(days=i)) for i in range(15)
        ]
        goals = [Goal(title="Lose weight", progress=50), Goal(title="Learn piano", progress=20, life_area="mind")]

        inputs = build_area_inputs([walk, read], completions, goals, TODAY)

        assert set(inputs) == set(LIFE_AREAS)
        assert inputs["health"].completion_rate == 50
        assert inputs["health"].goal_progress == 50
        assert inputs["health"].habit_count == 1
        assert inputs["mind"].completion_rate == 0
        assert inputs["mind"].goal_progress == 20
        assert inputs["career"].habit_count == 0
        assert inputs["health"].history.recent_rate == 100

    def test_habit_counts_from_creation_day(self):
        walk = Habit(id="walk", name="Walk", category="health", created_at=datetime(2024, 3, 14, 9))
        completions = [HabitCompletion(habit_id="walk", date=TODAY)]

        inputs = build_area_inputs([walk], completions, [], TODAY)

        assert inputs["health"].completion_rate == 50
