"""Persisted record stores."""

from glowhabit.stores.budget import BudgetStore
from glowhabit.stores.habits import GoalStore, HabitStore
from glowhabit.stores.intentions import IntentionStore
from glowhabit.stores.journal import JournalStore
from glowhabit.stores.moments import GlowMomentStore
from glowhabit.stores.profile import ProfileStore
from glowhabit.stores.projects import ProjectStore
from glowhabit.stores.routines import RoutineStore, SkinCareStore

__all__ = [
    "BudgetStore",
    "GlowMomentStore",
    "GoalStore",
    "HabitStore",
    "IntentionStore",
    "JournalStore",
    "ProfileStore",
    "ProjectStore",
    "RoutineStore",
    "SkinCareStore",
]
