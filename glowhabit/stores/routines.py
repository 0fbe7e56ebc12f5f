"""Morning/night routine and skincare stores."""

from datetime import date, datetime
from typing import Any, Iterable, Optional

from glowhabit.analytics.routines import is_alternate_day
from glowhabit.models.routine import (
    MORNING_ROUTINE_TEMPLATE,
    MORNING_SKINCARE_TEMPLATE,
    NIGHT_ROUTINE_TEMPLATE,
    NIGHT_SKINCARE_TEMPLATE,
    Routine,
    RoutineCompletion,
    RoutineHabit,
    RoutineType,
    SkinCareCompletion,
    SkinCareRoutine,
    SkinCareStep,
)
from glowhabit.stores.base import GetItem, dump_records, load_records

ROUTINE_TEMPLATES = {"morning": MORNING_ROUTINE_TEMPLATE, "night": NIGHT_ROUTINE_TEMPLATE}
SKINCARE_TEMPLATES = {"morning": MORNING_SKINCARE_TEMPLATE, "night": NIGHT_SKINCARE_TEMPLATE}

ROUTINE_NAMES = {"morning": "Morning Routine", "night": "Night Routine"}


class RoutineStore:
    """Routines plus their completions, one per (date, routine)."""

    STORAGE_KEY = "glowhabit-routines"
    COMPLETIONS_KEY = "glowhabit-routine-completions"

    def __init__(self, routines: Iterable[Routine] = (), completions: Iterable[RoutineCompletion] = ()):
        self._routines: dict[str, Routine] = {r.id: r for r in routines}
        self._completions: dict[tuple[date, str], RoutineCompletion] = {
            (c.date, c.routine_id): c for c in completions
        }

    def routines(self) -> list[Routine]:
        return sorted(self._routines.values(), key=lambda r: (r.type, r.created_at, r.id))

    def get(self, routine_id: str) -> Optional[Routine]:
        return self._routines.get(routine_id)

    def _require(self, routine_id: str) -> Routine:
        routine = self._routines.get(routine_id)
        if routine is None:
            raise KeyError(f"Unknown routine: {routine_id}")
        return routine

    def _active(self, kind: RoutineType) -> Optional[Routine]:
        for routine in self.routines():
            if routine.type == kind and routine.is_active:
                return routine
        return None

    def morning_routine(self) -> Optional[Routine]:
        return self._active("morning")

    def night_routine(self) -> Optional[Routine]:
        return self._active("night")

    def create_from_template(self, kind: RoutineType, now: Optional[datetime] = None) -> Routine:
        """Create a routine of ``kind`` prefilled with the template steps."""
        steps = [RoutineHabit(order=i, **step) for i, step in enumerate(ROUTINE_TEMPLATES[kind])]
        routine = Routine(name=ROUTINE_NAMES[kind], type=kind, habits=steps, created_at=now or datetime.now())
        self._routines[routine.id] = routine
        return routine

    def add_habit(self, routine_id: str, name: str, **fields: Any) -> RoutineHabit:
        routine = self._require(routine_id)
        step = RoutineHabit(name=name, order=len(routine.habits), **fields)
        self._routines[routine_id] = routine.model_copy(update={"habits": [*routine.habits, step]})
        return step

    def remove_habit(self, routine_id: str, step_id: str) -> None:
        routine = self._require(routine_id)
        remaining = [h for h in routine.habits if h.id != step_id]
        if len(remaining) == len(routine.habits):
            raise KeyError(f"Unknown routine step: {step_id}")
        renumbered = [h.model_copy(update={"order": i}) for i, h in enumerate(remaining)]
        self._routines[routine_id] = routine.model_copy(update={"habits": renumbered})

    def remove(self, routine_id: str) -> None:
        self._require(routine_id)
        del self._routines[routine_id]
        self._completions = {k: c for k, c in self._completions.items() if k[1] != routine_id}

    def complete(
        self,
        routine_id: str,
        day: date,
        completed_habits: Optional[list[str]] = None,
        duration: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> RoutineCompletion:
        """Record the routine as done on ``day``, replacing an earlier record.

        Without ``completed_habits`` every step of the routine counts as done.
        """
        routine = self._require(routine_id)
        if completed_habits is None:
            completed_habits = [h.id for h in routine.habits]
        completion = RoutineCompletion(
            date=day,
            routine_id=routine_id,
            completed_at=now or datetime.now(),
            duration=duration,
            completed_habits=completed_habits,
        )
        self._completions[(day, routine_id)] = completion
        return completion

    def uncomplete(self, routine_id: str, day: date) -> bool:
        return self._completions.pop((day, routine_id), None) is not None

    def is_completed(self, routine_id: str, day: date) -> bool:
        return (day, routine_id) in self._completions

    def completions(self, routine_id: Optional[str] = None) -> list[RoutineCompletion]:
        return [
            self._completions[key]
            for key in sorted(self._completions)
            if routine_id is None or key[1] == routine_id
        ]

    @classmethod
    def load(cls, get_item: GetItem) -> "RoutineStore":
        return cls(
            load_records(get_item(cls.STORAGE_KEY), Routine, cls.STORAGE_KEY),
            load_records(get_item(cls.COMPLETIONS_KEY), RoutineCompletion, cls.COMPLETIONS_KEY),
        )

    def dump(self) -> dict[str, str]:
        return {
            self.STORAGE_KEY: dump_records(self.routines()),
            self.COMPLETIONS_KEY: dump_records(self.completions()),
        }


class SkinCareStore:
    """Skincare routines plus their completions, one per (date, routine)."""

    STORAGE_KEY = "glowhabit-skincare"
    COMPLETIONS_KEY = "glowhabit-skincare-completions"

    def __init__(
        self,
        routines: Iterable[SkinCareRoutine] = (),
        completions: Iterable[SkinCareCompletion] = (),
    ):
        self._routines: dict[str, SkinCareRoutine] = {r.id: r for r in routines}
        self._completions: dict[tuple[date, str], SkinCareCompletion] = {
            (c.date, c.routine_id): c for c in completions
        }

    def routines(self) -> list[SkinCareRoutine]:
        return sorted(self._routines.values(), key=lambda r: (r.type, r.created_at, r.id))

    def routine_for(self, kind: RoutineType) -> Optional[SkinCareRoutine]:
        for routine in self.routines():
            if routine.type == kind and routine.is_active:
                return routine
        return None

    def _require(self, routine_id: str) -> SkinCareRoutine:
        routine = self._routines.get(routine_id)
        if routine is None:
            raise KeyError(f"Unknown skincare routine: {routine_id}")
        return routine

    def create_from_template(self, kind: RoutineType, now: Optional[datetime] = None) -> SkinCareRoutine:
        steps = [SkinCareStep(order=i, **step) for i, step in enumerate(SKINCARE_TEMPLATES[kind])]
        routine = SkinCareRoutine(type=kind, steps=steps, created_at=now or datetime.now())
        self._routines[routine.id] = routine
        return routine

    def update_step(self, routine_id: str, step_id: str, **updates: Any) -> SkinCareStep:
        """Update fields of one step, e.g. its product name."""
        routine = self._require(routine_id)
        steps = list(routine.steps)
        for index, step in enumerate(steps):
            if step.id == step_id:
                steps[index] = SkinCareStep.model_validate({**step.model_dump(), **updates, "id": step_id})
                self._routines[routine_id] = routine.model_copy(update={"steps": steps})
                return steps[index]
        raise KeyError(f"Unknown skincare step: {step_id}")

    def steps_for_day(self, routine_id: str, day: date) -> list[SkinCareStep]:
        """Steps that apply on ``day``; alternate-day steps only on alternate days."""
        routine = self._require(routine_id)
        alternate = is_alternate_day(day)
        return [s for s in routine.steps if alternate or not s.is_alternate_day]

    def complete(
        self,
        routine_id: str,
        day: date,
        completed_steps: Optional[list[str]] = None,
        now: Optional[datetime] = None,
    ) -> SkinCareCompletion:
        """Record the routine as done on ``day``.

        Without ``completed_steps`` every step that applies on ``day`` counts
        as done. Applicable steps left out are recorded as skipped.
        """
        routine = self._require(routine_id)
        applicable = [s.id for s in self.steps_for_day(routine_id, day)]
        if completed_steps is None:
            completed_steps = applicable
        done = set(completed_steps)
        completion = SkinCareCompletion(
            date=day,
            routine_id=routine_id,
            type=routine.type,
            completed_at=now or datetime.now(),
            completed_steps=list(dict.fromkeys(completed_steps)),
            skipped_steps=[step_id for step_id in applicable if step_id not in done],
        )
        self._completions[(day, routine_id)] = completion
        return completion

    def is_completed(self, routine_id: str, day: date) -> bool:
        return (day, routine_id) in self._completions

    def completions(self) -> list[SkinCareCompletion]:
        return [self._completions[key] for key in sorted(self._completions)]

    @classmethod
    def load(cls, get_item: GetItem) -> "SkinCareStore":
        return cls(
            load_records(get_item(cls.STORAGE_KEY), SkinCareRoutine, cls.STORAGE_KEY),
            load_records(get_item(cls.COMPLETIONS_KEY), SkinCareCompletion, cls.COMPLETIONS_KEY),
        )

    def dump(self) -> dict[str, str]:
        return {
            self.STORAGE_KEY: dump_records(self.routines()),
            self.COMPLETIONS_KEY: dump_records(self.completions()),
        }
