"""Tests for record store persistence and corruption recovery.

**Feature: glowhabit-storage**
"""

import json
import logging
from datetime import date, datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from glowhabit.models.journal import JournalSettings
from glowhabit.models.profile import UserProfile
from glowhabit.stores import (
    BudgetStore,
    GoalStore,
    HabitStore,
    IntentionStore,
    JournalStore,
    ProfileStore,
)
from glowhabit.stores.base import load_object

NOW = datetime(2024, 1, 4, 8, 0)


class TestCorruptDataRecovery:
    """
    **Feature: glowhabit-storage, Property 16: Loading Never Raises**

    *For any* stored string, loading yields a usable store; absent or
    corrupt data yields the empty default state.
    """

    @given(st.one_of(st.none(), st.text(max_size=200)))
    @settings(max_examples=100)
    def test_any_string_loads(self, raw):
        for store_cls in (HabitStore, GoalStore, BudgetStore, IntentionStore):
            store_cls.from_json(raw)
        load_object(raw, UserProfile, "glowhabit-profile")

    def test_corrupt_json_is_empty_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            store = BudgetStore.from_json("{not json")

        assert len(store) == 0
        assert "corrupt" in caplog.text

    def test_wrong_shape_is_empty(self):
        assert len(GoalStore.from_json('{"id": "x"}')) == 0

    def test_invalid_records_skipped(self, caplog):
        raw = json.dumps([
            {"id": "a", "date": "2024-01-01", "stayedWithinBudget": True, "trackedExpenses": True},
            {"id": "b", "date": "not-a-date"},
            "garbage",
            {"id": "c", "date": "2024-01-03"},
        ])

        with caplog.at_level(logging.WARNING):
            store = BudgetStore.from_json(raw)

        assert [e.id for e in store.all()] == ["a", "c"]
        assert store.get(date(2024, 1, 3)).stayed_within_budget is False

    def test_profile_merged_over_defaults(self):
        profile = load_object('{"name": "Sam", "preferences": {"appearance": "calm"}}', UserProfile, "p")

        assert profile.name == "Sam"
        assert profile.timezone == "UTC"
        assert profile.preferences.appearance == "calm"
        assert profile.preferences.reminder_enabled is True

    def test_profile_invalid_field_reset(self):
        profile = load_object('{"name": "Sam", "preferences": {"appearance": "neon"}}', UserProfile, "p")

        assert profile.name == "Sam"
        assert profile.preferences.appearance == "light"

    def test_journal_settings_default(self):
        store = JournalStore.load(lambda key: None)
        assert store.settings == JournalSettings(sentiment_analysis_enabled=True)


class TestStoreRoundTrip:
    """
    **Feature: glowhabit-storage, Property 17: Persisted Snapshot Round Trip**

    Dumping a store and loading the result reproduces its records.
    """

    def test_habit_store_round_trip(self):
        store = HabitStore()
        walk = store.add_habit("Walk", category="health", created_at=NOW)
        store.check(walk.id, date(2024, 1, 2))
        store.check(walk.id, date(2024, 1, 3))

        raw = store.dump()[HabitStore.STORAGE_KEY]
        data = json.loads(raw)
        loaded = HabitStore.from_json(raw)

        assert data[0]["completedDates"] == ["2024-01-02", "2024-01-03"]
        assert "createdAt" in data[0]
        assert loaded.habits() == store.habits()
        assert loaded.completion_dates(walk.id) == [date(2024, 1, 2), date(2024, 1, 3)]

    def test_habit_store_skips_bad_completion_dates(self):
        raw = json.dumps([{"id": "h1", "name": "Walk", "completedDates": ["2024-01-01", "oops", 7]}])

        store = HabitStore.from_json(raw)

        assert store.completion_dates("h1") == [date(2024, 1, 1)]

    def test_goal_and_intention_round_trip(self):
        goals = GoalStore()
        goals.add("Run 5k", created_at=NOW)
        intentions = IntentionStore()
        intentions.set_intention("2024-01", "Slow down", now=NOW)

        assert GoalStore.from_json(goals.to_json()).all() == goals.all()
        assert IntentionStore.from_json(intentions.to_json()).all() == intentions.all()

    def test_journal_round_trip_uses_two_buckets(self):
        store = JournalStore(settings=JournalSettings(sentiment_analysis_enabled=False))
        store.save_entry(date(2024, 1, 4), "A quiet and calm evening at home", now=NOW)

        buckets = store.dump()
        loaded = JournalStore.load(buckets.get)

        assert set(buckets) == {"glowhabit-journal", "glowhabit-journal-settings"}
        assert loaded.entries() == store.entries()
        assert loaded.settings.sentiment_analysis_enabled is False

    def test_profile_round_trip(self):
        store = ProfileStore()
        store.update_profile(name="Sam")
        store.update_preferences(appearance="dark")

        loaded = ProfileStore.load(store.dump().get)

        assert loaded.profile == store.profile


class TestHabitStore:
    """
    **Feature: glowhabit-storage, Property 18: One Completion Per Habit And Day**
    """

    @given(st.lists(st.dates(min_value=date(2024, 1, 1), max_value=date(2024, 3, 1)), max_size=30))
    @settings(max_examples=50)
    def test_checks_are_unique_per_day(self, days):
        store = HabitStore()
        habit = store.add_habit("Walk")
        for day in days:
            store.check(habit.id, day)

        assert store.completion_dates(habit.id) == sorted(set(days))

    def test_toggle(self):
        store = HabitStore()
        habit = store.add_habit("Walk")

        assert store.toggle(habit.id, date(2024, 1, 1)) is True
        assert store.toggle(habit.id, date(2024, 1, 1)) is False
        assert store.completions() == []

    def test_category_sets_life_area(self):
        store = HabitStore()
        habit = store.add_habit("Read")
        updated = store.update_habit(habit.id, category="mind")

        assert updated.life_area == "mind"
        assert store.add_habit("Walk", category="health").life_area == "health"

    def test_remove_drops_completions(self):
        store = HabitStore()
        habit = store.add_habit("Walk")
        store.check(habit.id, date(2024, 1, 1))
        store.remove_habit(habit.id)

        assert store.completions() == []
        with pytest.raises(KeyError):
            store.check(habit.id, date(2024, 1, 2))

    def test_reorder(self):
        store = HabitStore()
        names = ["A", "B", "C"]
        for name in names:
            store.add_habit(name)

        reordered = store.reorder(0, 2)

        assert [h.name for h in reordered] == ["B", "C", "A"]
        assert [h.order for h in reordered] == [0, 1, 2]

    def test_seed_defaults(self):
        store = HabitStore()
        seeded = store.seed_defaults(now=NOW)

        assert len(seeded) == 8
        assert all(h.life_area == h.category for h in seeded if h.category != "custom")


class TestGoalAndBudgetStores:
    def test_goal_progress_clamped_and_completes(self):
        store = GoalStore()
        goal = store.add("Run 5k")

        assert store.update_progress(goal.id, 140).progress == 100
        assert store.get(goal.id).is_completed is True
        assert store.update_progress(goal.id, -5).progress == 0
        assert store.get(goal.id).is_completed is False

    def test_goal_toggle(self):
        store = GoalStore()
        goal = store.add("Run 5k", progress=30)

        done = store.toggle_complete(goal.id)
        reopened = store.toggle_complete(goal.id)

        assert done.is_completed and done.progress == 100
        assert not reopened.is_completed

    def test_unknown_goal(self):
        with pytest.raises(KeyError):
            GoalStore().update_progress("missing", 10)

    def test_budget_upsert_keeps_id(self):
        store = BudgetStore()
        first = store.upsert(date(2024, 1, 1), stayed_within_budget=True)
        second = store.upsert(date(2024, 1, 1), tracked_expenses=True)

        assert first.id == second.id
        assert second.is_good_day
        assert len(store) == 1

    def test_budget_toggle_creates_entry(self):
        store = BudgetStore()

        entry = store.toggle(date(2024, 1, 1), "tracked_expenses")

        assert entry.tracked_expenses is True
        assert store.toggle(date(2024, 1, 1), "tracked_expenses").tracked_expenses is False


class TestIntentionStore:
    def test_one_intention_per_month(self):
        store = IntentionStore()
        first = store.set_intention("2024-01", "Rest", now=NOW)
        second = store.set_intention("2024-01", "Rest more", now=datetime(2024, 1, 20))

        assert len(store) == 1
        assert second.id == first.id
        assert second.created_at == NOW
        assert store.get("2024-01").intention == "Rest more"

    def test_current_and_past(self):
        store = IntentionStore()
        for month in ("2023-10", "2023-11", "2023-12", "2024-01"):
            store.set_intention(month, f"Intention {month}", now=NOW)

        today = date(2024, 1, 15)

        assert store.current(today).month == "2024-01"
        assert [i.month for i in store.past(today, limit=2)] == ["2023-12", "2023-11"]

    def test_invalid_month_rejected(self):
        with pytest.raises(ValueError):
            IntentionStore().set_intention("2024-13", "Nope")
