"""Habit, habit completion and goal stores."""

import json
from datetime import date, datetime
from typing import Any, Optional

from glowhabit.analytics.periods import parse_day
from glowhabit.models.habit import DEFAULT_HABITS, Goal, Habit, HabitCompletion
from glowhabit.stores.base import GetItem, RecordStore, logger, parse_json, validate_records

DEFAULT_HABIT_COUNT = 8


class HabitStore:
    """Habit definitions plus their check-ins, one per (habit, day).

    Persists as a list of habits, each carrying its ``completedDates``.
    """

    STORAGE_KEY = "glowhabit-habits"

    def __init__(self, habits: list[Habit] = (), completions: list[HabitCompletion] = ()):
        self._habits: dict[str, Habit] = {habit.id: habit for habit in habits}
        self._completions: dict[tuple[str, date], HabitCompletion] = {}
        for completion in completions:
            if completion.habit_id in self._habits:
                self._completions[(completion.habit_id, completion.date)] = completion

    # ==================== Habits ====================

    def habits(self) -> list[Habit]:
        """Habits in display order."""
        return sorted(self._habits.values(), key=lambda h: (h.order, h.created_at, h.id))

    def get(self, habit_id: str) -> Optional[Habit]:
        return self._habits.get(habit_id)

    def _require(self, habit_id: str) -> Habit:
        habit = self._habits.get(habit_id)
        if habit is None:
            raise KeyError(f"Unknown habit: {habit_id}")
        return habit

    def add_habit(self, name: str, **fields: Any) -> Habit:
        """Create a habit at the end of the display order."""
        fields.setdefault("order", len(self._habits))
        if fields.get("life_area") is None and fields.get("category", "custom") != "custom":
            fields["life_area"] = fields["category"]
        habit = Habit(name=name, **fields)
        self._habits[habit.id] = habit
        return habit

    def update_habit(self, habit_id: str, **updates: Any) -> Habit:
        """Update habit fields. A non-custom category also sets the life area."""
        habit = self._require(habit_id)
        category = updates.get("category")
        if category and category != "custom":
            updates["life_area"] = category
        updated = Habit.model_validate({**habit.model_dump(), **updates})
        self._habits[habit_id] = updated
        return updated

    def remove_habit(self, habit_id: str) -> None:
        self._require(habit_id)
        del self._habits[habit_id]
        self._completions = {k: c for k, c in self._completions.items() if k[0] != habit_id}

    def reorder(self, start_index: int, end_index: int) -> list[Habit]:
        """Move a habit within the display order and renumber all habits."""
        ordered = self.habits()
        moved = ordered.pop(start_index)
        ordered.insert(end_index, moved)
        for index, habit in enumerate(ordered):
            self._habits[habit.id] = habit.model_copy(update={"order": index})
        return self.habits()

    def seed_defaults(self, count: int = DEFAULT_HABIT_COUNT, now: Optional[datetime] = None) -> list[Habit]:
        """Add the first ``count`` default habits."""
        now = now or datetime.now()
        return [self.add_habit(created_at=now, **template) for template in DEFAULT_HABITS[:count]]

    # ==================== Completions ====================

    def check(self, habit_id: str, day: date) -> HabitCompletion:
        """Record a check-in. Checking an already checked day is a no-op."""
        habit = self._require(habit_id)
        key = (habit_id, day)
        if key not in self._completions:
            self._completions[key] = HabitCompletion(
                habit_id=habit_id,
                date=day,
                category=habit.category,
                life_area=habit.life_area,
            )
        return self._completions[key]

    def uncheck(self, habit_id: str, day: date) -> bool:
        """Remove a check-in. Returns False if the day was not checked."""
        self._require(habit_id)
        return self._completions.pop((habit_id, day), None) is not None

    def toggle(self, habit_id: str, day: date) -> bool:
        """Flip a day's check-in. Returns True if the day is now checked."""
        if self.is_checked(habit_id, day):
            self.uncheck(habit_id, day)
            return False
        self.check(habit_id, day)
        return True

    def is_checked(self, habit_id: str, day: date) -> bool:
        return (habit_id, day) in self._completions

    def completions(self, habit_id: Optional[str] = None) -> list[HabitCompletion]:
        """Check-ins ordered by day, optionally for a single habit."""
        records = [
            c for c in self._completions.values()
            if habit_id is None or c.habit_id == habit_id
        ]
        return sorted(records, key=lambda c: (c.date, c.habit_id))

    def completion_dates(self, habit_id: str) -> list[date]:
        return [c.date for c in self.completions(habit_id)]

    # ==================== Persistence ====================

    def to_json(self) -> str:
        payload = []
        for habit in self.habits():
            data = habit.model_dump(mode="json", by_alias=True, exclude_none=True)
            data["completedDates"] = [d.isoformat() for d in self.completion_dates(habit.id)]
            payload.append(data)
        return json.dumps(payload, ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: Optional[str]) -> "HabitStore":
        items = parse_json(raw, cls.STORAGE_KEY)
        habits = validate_records(items, Habit, cls.STORAGE_KEY)
        completions: list[HabitCompletion] = []
        dates_by_id = {
            item.get("id"): item.get("completedDates", [])
            for item in (items if isinstance(items, list) else [])
            if isinstance(item, dict) and isinstance(item.get("id"), str)
        }
        for habit in habits:
            raw_dates = dates_by_id.get(habit.id)
            if not isinstance(raw_dates, list):
                continue
            for value in raw_dates:
                day = parse_day(value)
                if day is None:
                    logger.warning("Skipping invalid completion date %r for habit %s", value, habit.id)
                    continue
                completions.append(
                    HabitCompletion(habit_id=habit.id, date=day, category=habit.category, life_area=habit.life_area)
                )
        return cls(habits, completions)

    @classmethod
    def load(cls, get_item: GetItem) -> "HabitStore":
        return cls.from_json(get_item(cls.STORAGE_KEY))

    def dump(self) -> dict[str, str]:
        return {self.STORAGE_KEY: self.to_json()}


class GoalStore(RecordStore[str, Goal]):
    """Goals keyed by ID."""

    STORAGE_KEY = "glowhabit-goals"
    model = Goal

    def key_of(self, record: Goal) -> str:
        return record.id

    def all(self) -> list[Goal]:
        return sorted(self._records.values(), key=lambda g: (g.created_at, g.id))

    def get(self, goal_id: str) -> Optional[Goal]:
        return self._records.get(goal_id)

    def _require(self, goal_id: str) -> Goal:
        goal = self._records.get(goal_id)
        if goal is None:
            raise KeyError(f"Unknown goal: {goal_id}")
        return goal

    def add(self, title: str, **fields: Any) -> Goal:
        return self._put(Goal(title=title, **fields))

    def update_progress(self, goal_id: str, progress: int) -> Goal:
        """Set progress clamped to 0-100; reaching 100 completes the goal."""
        goal = self._require(goal_id)
        progress = max(0, min(100, progress))
        return self._put(goal.model_copy(update={"progress": progress, "is_completed": progress >= 100}))

    def toggle_complete(self, goal_id: str) -> Goal:
        goal = self._require(goal_id)
        completing = not goal.is_completed
        return self._put(
            goal.model_copy(
                update={
                    "is_completed": completing,
                    "progress": 100 if completing else goal.progress,
                }
            )
        )

    def remove(self, goal_id: str) -> None:
        self._require(goal_id)
        del self._records[goal_id]
