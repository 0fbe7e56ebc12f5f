"""Tests for project execution, deep-work statistics and the project store.

**Feature: glowhabit-analytics**
"""

from datetime import date, datetime, timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from glowhabit.analytics.projects import (
    best_hour,
    deep_work_stats,
    focus_streak,
    project_stats,
    time_of_day,
    week_bounds,
)
from glowhabit.models.project import PROJECT_COLORS, DeepWorkSession, Project
from glowhabit.stores import ProjectStore

# A Wednesday.
TODAY = date(2024, 1, 10)


def _session(day: date, minutes: int, project_id: str = "p", hour: int = 9) -> DeepWorkSession:
    return DeepWorkSession(
        project_id=project_id,
        duration=minutes,
        completed_at=datetime.combine(day, datetime.min.time()).replace(hour=hour),
        date=day,
    )


class TestWeekBounds:
    """
    **Feature: glowhabit-analytics, Property 34: Weeks Run Monday To Sunday**
    """

    @given(st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 1, 1)))
    @settings(max_examples=100)
    def test_week_contains_day(self, day):
        start, end = week_bounds(day)

        assert start.weekday() == 0
        assert end - start == timedelta(days=6)
        assert start <= day <= end

    def test_example(self):
        assert week_bounds(TODAY) == (date(2024, 1, 8), date(2024, 1, 14))


class TestProjectStats:
    """
    **Feature: glowhabit-analytics, Property 35: Weekly Execution Is Capped**

    *For any* set of sessions, the weekly execution score stays within
    0-100 and equals the project's progress.
    """

    @given(st.lists(st.integers(min_value=1, max_value=600), max_size=10))
    @settings(max_examples=100)
    def test_score_bounded(self, durations):
        project = Project(id="p", name="Thesis", weekly_target=2)
        sessions = [_session(TODAY, minutes) for minutes in durations]

        stats = project_stats(project, sessions, TODAY)

        assert 0 <= stats.weekly_execution_score <= 100
        assert stats.progress == stats.weekly_execution_score

    def test_hours_and_score(self):
        project = Project(id="p", name="Thesis", weekly_target=4)
        sessions = [
            _session(date(2024, 1, 8), 60),
            _session(TODAY, 30),
            # Previous week counts toward the total only.
            _session(date(2024, 1, 5), 120),
            _session(TODAY, 45, project_id="other"),
        ]

        stats = project_stats(project, sessions, TODAY)

        assert stats.weekly_hours == 1.5
        assert stats.total_hours == 3.5
        assert stats.weekly_execution_score == 38

    def test_zero_target_uses_default(self):
        project = Project(id="p", name="Side", weekly_target=0)

        stats = project_stats(project, [_session(TODAY, 300)], TODAY)

        assert stats.weekly_execution_score == 50

    def test_streak_ends_today(self):
        project = Project(id="p", name="Thesis")
        sessions = [_session(TODAY - timedelta(days=i), 25) for i in range(3)]
        sessions.append(_session(TODAY - timedelta(days=5), 25))

        assert project_stats(project, sessions, TODAY).consistency_streak == 3
        assert project_stats(project, sessions[1:], TODAY).consistency_streak == 0

    def test_sessions_after_today_ignored(self):
        project = Project(id="p", name="Thesis")
        sessions = [_session(TODAY + timedelta(days=1), 600)]

        stats = project_stats(project, sessions, TODAY)

        assert stats.total_hours == 0
        assert stats.weekly_execution_score == 0


class TestDeepWorkStats:
    """
    **Feature: glowhabit-analytics, Property 36: Deep Work Summary**
    """

    def test_empty(self):
        stats = deep_work_stats([], TODAY)

        assert stats.total_hours == 0
        assert stats.focus_streak == 0
        assert stats.best_time_of_day == "Morning"
        assert stats.weekly_trend == "stable"
        assert stats.sessions_this_week == 0

    @pytest.mark.parametrize(
        "hour,label",
        [(0, "Morning"), (11, "Morning"), (12, "Afternoon"), (16, "Afternoon"), (17, "Evening"), (23, "Evening")],
    )
    def test_time_of_day(self, hour, label):
        assert time_of_day(hour) == label

    def test_best_time_by_minutes(self):
        sessions = [_session(TODAY, 25, hour=8), _session(TODAY, 25, hour=8), _session(TODAY, 90, hour=20)]

        assert deep_work_stats(sessions, TODAY).best_time_of_day == "Evening"

    def test_best_hour_tie_goes_to_earliest(self):
        assert best_hour([_session(TODAY, 50, hour=15), _session(TODAY, 50, hour=10)]) == 10

    @pytest.mark.parametrize(
        "this_week,last_week,trend",
        [(120, 100, "up"), (80, 100, "down"), (105, 100, "stable"), (25, 0, "up"), (0, 0, "stable")],
    )
    def test_weekly_trend(self, this_week, last_week, trend):
        sessions = [_session(date(2024, 1, 3), last_week)] if last_week else []
        if this_week:
            sessions.append(_session(date(2024, 1, 9), this_week))

        assert deep_work_stats(sessions, TODAY).weekly_trend == trend

    def test_sessions_this_week(self):
        sessions = [_session(date(2024, 1, 7), 25), _session(date(2024, 1, 8), 25), _session(TODAY, 50)]

        assert deep_work_stats(sessions, TODAY).sessions_this_week == 2

    def test_focus_streak_allows_open_today(self):
        days = {TODAY - timedelta(days=1), TODAY - timedelta(days=2), TODAY - timedelta(days=4)}

        assert focus_streak(days, TODAY) == 2
        assert focus_streak(days | {TODAY}, TODAY) == 3
        assert focus_streak(set(), TODAY) == 0

    def test_focus_streak_window(self):
        days = {TODAY - timedelta(days=i) for i in range(40)}

        assert focus_streak(days, TODAY) == 30


class TestProjectStore:
    """
    **Feature: glowhabit-storage, Property 37: Sessions Belong To Projects**
    """

    def test_add_cycles_colors(self):
        store = ProjectStore()
        first = store.add_project("One", created_at=datetime(2024, 1, 1, 8, 0))
        second = store.add_project("Two", created_at=datetime(2024, 1, 1, 9, 0))

        assert first.color == PROJECT_COLORS[0]
        assert second.color == PROJECT_COLORS[1]
        assert [p.name for p in store.projects()] == ["One", "Two"]

    def test_session_for_unknown_project_raises(self):
        with pytest.raises(KeyError):
            ProjectStore().add_session("missing", 25)

    def test_session_day_from_completion_time(self):
        store = ProjectStore()
        project = store.add_project("Thesis")

        session = store.add_session(project.id, 50, now=datetime(2024, 1, 10, 21, 30))

        assert session.date == TODAY
        assert store.sessions(project.id) == [session]

    def test_remove_drops_sessions(self):
        store = ProjectStore()
        keep = store.add_project("Keep")
        drop = store.add_project("Drop")
        store.add_session(keep.id, 25)
        store.add_session(drop.id, 25)

        store.remove_project(drop.id)

        assert store.get(drop.id) is None
        assert [s.project_id for s in store.sessions()] == [keep.id]

    def test_update_and_active_filter(self):
        store = ProjectStore()
        project = store.add_project("Paused")
        store.add_project("Live")

        store.update_project(project.id, is_active=False)

        assert [p.name for p in store.projects(active_only=True)] == ["Live"]

    def test_round_trip(self):
        store = ProjectStore()
        project = store.add_project("Thesis", weekly_target=6, deadline=date(2024, 6, 1))
        store.add_session(project.id, 90, notes="chapter 2", now=datetime(2024, 1, 10, 9, 0))

        loaded = ProjectStore.load(store.dump().get)

        assert loaded.projects() == store.projects()
        assert loaded.sessions() == store.sessions()

    def test_orphan_sessions_dropped_on_load(self):
        orphan = _session(TODAY, 25, project_id="gone")

        assert ProjectStore(sessions=[orphan]).sessions() == []

    def test_missing_keys_load_empty(self):
        store = ProjectStore.load(lambda key: None)

        assert store.projects() == []
        assert store.sessions() == []
