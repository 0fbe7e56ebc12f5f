"""Application state: every record store loaded from one key-value store."""

import logging
from pathlib import Path
from typing import Optional

from glowhabit.db.store import DataStore
from glowhabit.models.journal import JournalSettings
from glowhabit.stores import (
    BudgetStore,
    GlowMomentStore,
    GoalStore,
    HabitStore,
    IntentionStore,
    JournalStore,
    ProfileStore,
    ProjectStore,
    RoutineStore,
    SkinCareStore,
)

logger = logging.getLogger(__name__)


class AppState:
    """Snapshot of all record stores backed by a DataStore.

    Load with ``AppState.open``, mutate the stores, then ``save()``. Usable
    as a context manager, which saves on a clean exit.
    """

    def __init__(
        self,
        data_store: DataStore,
        habits: HabitStore,
        goals: GoalStore,
        budget: BudgetStore,
        journal: JournalStore,
        routines: RoutineStore,
        skincare: SkinCareStore,
        intentions: IntentionStore,
        profile: ProfileStore,
        projects: Optional[ProjectStore] = None,
        moments: Optional[GlowMomentStore] = None,
    ):
        self.data_store = data_store
        self.habits = habits
        self.goals = goals
        self.budget = budget
        self.journal = journal
        self.routines = routines
        self.skincare = skincare
        self.intentions = intentions
        self.profile = profile
        self.projects = projects if projects is not None else ProjectStore()
        self.moments = moments if moments is not None else GlowMomentStore()
        self._closed = False

    @classmethod
    def open(cls, db_path: Path, config: Optional[dict] = None) -> "AppState":
        """Load every store from the database at ``db_path``.

        A first run (no habits bucket) seeds the default habits. Journal
        settings that were never saved take their default from ``config``.
        """
        data_store = DataStore(db_path)
        get_item = data_store.get_item

        habits = HabitStore.load(get_item)
        if get_item(HabitStore.STORAGE_KEY) is None:
            habits.seed_defaults()
            logger.info("Seeded %d default habits", len(habits.habits()))

        journal = JournalStore.load(get_item)
        if config and get_item(JournalStore.SETTINGS_KEY) is None:
            enabled = config.get("journal", {}).get("sentiment_analysis_enabled", True)
            journal.settings = JournalSettings(sentiment_analysis_enabled=enabled)

        return cls(
            data_store=data_store,
            habits=habits,
            goals=GoalStore.load(get_item),
            budget=BudgetStore.load(get_item),
            journal=journal,
            routines=RoutineStore.load(get_item),
            skincare=SkinCareStore.load(get_item),
            intentions=IntentionStore.load(get_item),
            profile=ProfileStore.load(get_item),
            projects=ProjectStore.load(get_item),
            moments=GlowMomentStore.load(get_item),
        )

    def stores(self) -> list:
        return [
            self.habits,
            self.goals,
            self.budget,
            self.journal,
            self.routines,
            self.skincare,
            self.intentions,
            self.profile,
            self.projects,
            self.moments,
        ]

    def save(self) -> None:
        """Persist every store in a single transaction."""
        if self._closed:
            raise RuntimeError("AppState is closed")
        buckets: dict[str, str] = {}
        for store in self.stores():
            buckets.update(store.dump())
        self.data_store.set_items(buckets)
        logger.debug("Saved %d buckets to %s", len(buckets), self.data_store.db_path)

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "AppState":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None and not self._closed:
                self.save()
        finally:
            self.close()
