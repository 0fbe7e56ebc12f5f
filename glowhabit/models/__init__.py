"""Data models for GlowHabit."""

from glowhabit.models.balance import (
    LIFE_AREAS,
    AreaHistory,
    AreaInput,
    LifeArea,
    LifeAreaScore,
    LifeBalanceData,
)
from glowhabit.models.budget import BudgetEntry, BudgetStats
from glowhabit.models.habit import DailyProgress, Goal, Habit, HabitCompletion, HabitStats
from glowhabit.models.intention import MonthlyIntention
from glowhabit.models.journal import (
    HabitMoodCorrelation,
    HabitsSummary,
    JournalEntry,
    JournalSettings,
    JournalStats,
    MoodAnalytics,
    SentimentData,
)
from glowhabit.models.moment import CalmQuote, GlowMoment, GlowMomentState, UnlockableReward
from glowhabit.models.profile import Preferences, UserProfile
from glowhabit.models.project import DeepWorkSession, DeepWorkStats, Project, ProjectStats
from glowhabit.models.routine import (
    Routine,
    RoutineCompletion,
    RoutineHabit,
    RoutineStats,
    SkinCareCompletion,
    SkinCareRoutine,
    SkinCareStats,
    SkinCareStep,
)

__all__ = [
    "LIFE_AREAS",
    "AreaHistory",
    "AreaInput",
    "LifeArea",
    "LifeAreaScore",
    "LifeBalanceData",
    "BudgetEntry",
    "BudgetStats",
    "DailyProgress",
    "Goal",
    "Habit",
    "HabitCompletion",
    "HabitStats",
    "MonthlyIntention",
    "HabitMoodCorrelation",
    "HabitsSummary",
    "JournalEntry",
    "JournalSettings",
    "JournalStats",
    "MoodAnalytics",
    "SentimentData",
    "CalmQuote",
    "GlowMoment",
    "GlowMomentState",
    "UnlockableReward",
    "Preferences",
    "UserProfile",
    "DeepWorkSession",
    "DeepWorkStats",
    "Project",
    "ProjectStats",
    "Routine",
    "RoutineCompletion",
    "RoutineHabit",
    "RoutineStats",
    "SkinCareCompletion",
    "SkinCareRoutine",
    "SkinCareStats",
    "SkinCareStep",
]
