"""Achievement evaluation across habits, journal, goals and routines."""

from collections.abc import Iterable
from datetime import date

from glowhabit.analytics.balance import habit_life_area
from glowhabit.analytics.habits import dates_by_habit, habit_stats
from glowhabit.analytics.journal import journal_stats
from glowhabit.analytics.periods import percent
from glowhabit.analytics.streaks import compute_streaks
from glowhabit.models.achievement import TIER_POINTS, Achievement
from glowhabit.models.habit import Goal, Habit, HabitCompletion
from glowhabit.models.journal import JournalEntry
from glowhabit.models.routine import Routine, RoutineCompletion

# (id, name, description, icon, category, tier, requirement)
ACHIEVEMENT_DEFINITIONS: tuple[tuple[str, str, str, str, str, str, int], ...] = (
    ("first_habit", "First Step", "Complete your first habit", "Footprints", "habits", "bronze", 1),
    ("habit_streak_7", "Week Warrior", "7-day streak on any habit", "Flame", "habits", "silver", 7),
    ("habit_streak_30", "Monthly Master", "30-day streak on any habit", "Trophy", "habits", "gold", 30),
    ("habit_completions_50", "Consistency Champion", "Complete 50 total habits", "Target", "habits", "silver", 50),
    ("habit_completions_100", "Centurion", "Complete 100 total habits", "Medal", "habits", "gold", 100),
    ("first_journal", "Dear Diary", "Write your first journal entry", "BookOpen", "journal", "bronze", 1),
    ("journal_streak_7", "Reflective Week", "Journal for 7 days straight", "Sparkles", "journal", "silver", 7),
    ("journal_entries_30", "Thoughtful Writer", "Write 30 journal entries", "PenTool", "journal", "gold", 30),
    ("first_goal", "Aim High", "Create your first goal", "Mountain", "goals", "bronze", 1),
    ("goal_completed", "Goal Crusher", "Complete a goal", "CheckCircle2", "goals", "silver", 1),
    ("goals_completed_5", "Dream Achiever", "Complete 5 goals", "Crown", "goals", "gold", 5),
    ("morning_routine", "Early Bird", "Complete morning routine", "Sunrise", "routines", "bronze", 1),
    ("night_routine", "Night Owl", "Complete night routine", "Moon", "routines", "bronze", 1),
    ("routine_streak_7", "Routine Master", "7-day routine streak", "Repeat", "routines", "silver", 7),
    ("perfect_day", "Perfect Day", "Complete all habits in one day", "Star", "special", "gold", 1),
    ("balanced_life", "Life Balance", "Habits in all 4 life areas", "Heart", "special", "platinum", 4),
)


def evaluate_achievements(
    today: date,
    habits: Iterable[Habit] = (),
    completions: Iterable[HabitCompletion] = (),
    journal_entries: Iterable[JournalEntry] = (),
    goals: Iterable[Goal] = (),
    routines: Iterable[Routine] = (),
    routine_completions: Iterable[RoutineCompletion] = (),
) -> list[Achievement]:
    """Evaluate every achievement definition against the current records."""
    habits = list(habits)
    completions = list(completions)
    journal_entries = list(journal_entries)
    goals = list(goals)
    routine_completions = list(routine_completions)
    routine_types = {routine.id: routine.type for routine in routines}

    grouped = dates_by_habit(completions)
    stats = [habit_stats(grouped.get(habit.id, ()), today) for habit in habits]
    total_completions = sum(s.total_completions for s in stats)
    longest_streak = max((s.longest_streak for s in stats), default=0)
    completed_goals = sum(1 for g in goals if g.is_completed)
    done_today = {habit_id for habit_id, days in grouped.items() if today in days}
    journal = journal_stats(journal_entries, today)

    current = {
        "first_habit": min(total_completions, 1),
        "habit_streak_7": longest_streak,
        "habit_streak_30": longest_streak,
        "habit_completions_50": total_completions,
        "habit_completions_100": total_completions,
        "first_journal": min(journal.total_entries, 1),
        "journal_streak_7": journal.current_streak,
        "journal_entries_30": journal.total_entries,
        "first_goal": min(len(goals), 1),
        "goal_completed": min(completed_goals, 1),
        "goals_completed_5": completed_goals,
        "morning_routine": min(
            sum(1 for c in routine_completions if routine_types.get(c.routine_id) == "morning"), 1
        ),
        "night_routine": min(
            sum(1 for c in routine_completions if routine_types.get(c.routine_id) == "night"), 1
        ),
        "routine_streak_7": compute_streaks(routine_completions, None, today).current_streak,
        "perfect_day": int(bool(habits) and all(h.id in done_today for h in habits)),
        "balanced_life": len({habit_life_area(h) for h in habits}),
    }

    achievements = []
    for achievement_id, name, description, icon, category, tier, requirement in ACHIEVEMENT_DEFINITIONS:
        value = current[achievement_id]
        achievements.append(
            Achievement(
                id=achievement_id,
                name=name,
                description=description,
                icon=icon,
                category=category,
                tier=tier,
                requirement=requirement,
                current=value,
                progress=min(100, percent(value, requirement)),
            )
        )
    return achievements


def total_points(achievements: Iterable[Achievement]) -> int:
    return sum(TIER_POINTS[a.tier] for a in achievements if a.unlocked)
