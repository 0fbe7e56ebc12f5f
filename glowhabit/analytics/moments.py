"""Glow moments: tiered milestones with affirmations and quote rewards."""

from collections.abc import Iterable
from datetime import date

from glowhabit.analytics.habits import dates_by_habit, habit_stats
from glowhabit.analytics.journal import journal_stats
from glowhabit.models.habit import Habit, HabitCompletion
from glowhabit.models.journal import JournalEntry
from glowhabit.models.moment import CalmQuote, GlowMoment, UnlockableReward

AFFIRMATIONS = [
    "You're making progress, one step at a time.",
    "Small steps lead to big changes.",
    "Your consistency is inspiring.",
    "You showed up today. That matters.",
    "Every effort counts, no matter how small.",
    "You're building something meaningful.",
    "Trust the process. Growth takes time.",
    "You're stronger than you think.",
    "This journey is yours, and you're doing great.",
    "Be proud of how far you've come.",
]

CALM_QUOTES = [
    CalmQuote(
        id="q1",
        quote="Almost everything will work again if you unplug it for a few minutes, including you.",
        author="Anne Lamott",
    ),
    CalmQuote(id="q2", quote="Nature does not hurry, yet everything is accomplished.", author="Lao Tzu"),
    CalmQuote(
        id="q3",
        quote="The present moment is filled with joy and happiness. If you are attentive, you will see it.",
        author="Thich Nhat Hanh",
    ),
    CalmQuote(
        id="q4",
        quote=(
            "Breathe. Let go. And remind yourself that this very moment "
            "is the only one you know you have for sure."
        ),
        author="Oprah Winfrey",
    ),
    CalmQuote(
        id="q5",
        quote="In the midst of movement and chaos, keep stillness inside of you.",
        author="Deepak Chopra",
    ),
    CalmQuote(
        id="q6",
        quote="The soul always knows what to do to heal itself. The challenge is to silence the mind.",
        author="Caroline Myss",
    ),
    CalmQuote(
        id="q7",
        quote=(
            "Peace is the result of retraining your mind to process life as it is, "
            "rather than as you think it should be."
        ),
        author="Wayne Dyer",
    ),
    CalmQuote(
        id="q8",
        quote="You don't have to be great to start, but you have to start to be great.",
        author="Zig Ziglar",
    ),
]

# (id, type, title, description, tier, requirement type, requirement)
GLOW_MOMENT_DEFINITIONS: tuple[tuple[str, str, str, str, str, str, int], ...] = (
    ("first_spark", "milestone", "First Spark", "You completed your first habit", "spark", "completions", 1),
    ("week_glow", "streak", "Week of Glow", "7-day streak achieved", "glow", "streak", 7),
    ("month_radiance", "streak", "Month of Radiance", "30-day streak achieved", "radiance", "streak", 30),
    ("reflection_start", "reflection", "Inner Light", "You started journaling", "spark", "journal", 1),
    ("reflection_week", "reflection", "Mindful Week", "Journaled for 7 days", "glow", "journal_streak", 7),
    ("consistency_50", "consistency", "Steady Glow", "50 habits completed", "glow", "completions", 50),
    ("consistency_100", "consistency", "Radiant Path", "100 habits completed", "radiance", "completions", 100),
    ("balance_all", "balance", "Life in Balance", "Habits in all 4 life areas", "brilliance", "balance", 4),
)

# (id, name, description, quote index, moments required)
REWARD_DEFINITIONS: tuple[tuple[str, str, str, int, int], ...] = (
    ("quote_1", "Calm Quote", "Unlock a peaceful quote", 0, 1),
    ("quote_2", "Wisdom Quote", "Unlock words of wisdom", 1, 2),
    ("quote_3", "Mindful Quote", "Unlock mindful reflection", 2, 3),
)


def moment_affirmation(moment_id: str) -> str:
    """Affirmation tied to a moment, chosen by the first character of its ID."""
    return AFFIRMATIONS[ord(moment_id[0]) % len(AFFIRMATIONS)]


def moment_progress(
    today: date,
    habits: Iterable[Habit] = (),
    completions: Iterable[HabitCompletion] = (),
    journal_entries: Iterable[JournalEntry] = (),
) -> dict[str, int]:
    """Current value of every requirement type.

    Only habits with an explicit life area count toward balance.
    """
    habits = list(habits)
    grouped = dates_by_habit(completions)
    stats = [habit_stats(grouped.get(habit.id, ()), today) for habit in habits]
    journal = journal_stats(journal_entries, today)

    return {
        "completions": sum(s.total_completions for s in stats),
        "streak": max((s.longest_streak for s in stats), default=0),
        "journal": journal.total_entries,
        "journal_streak": journal.current_streak,
        "balance": len({habit.life_area for habit in habits if habit.life_area}),
    }


def evaluate_glow_moments(
    today: date,
    habits: Iterable[Habit] = (),
    completions: Iterable[HabitCompletion] = (),
    journal_entries: Iterable[JournalEntry] = (),
) -> list[GlowMoment]:
    """Evaluate every glow moment definition against the current records."""
    progress = moment_progress(today, habits, completions, journal_entries)
    return [
        GlowMoment(
            id=moment_id,
            type=moment_type,
            title=title,
            description=description,
            affirmation=moment_affirmation(moment_id),
            tier=tier,
            requirement=requirement,
            current=progress[requirement_type],
        )
        for moment_id, moment_type, title, description, tier, requirement_type, requirement
        in GLOW_MOMENT_DEFINITIONS
    ]


def unlockable_rewards(moments: Iterable[GlowMoment]) -> list[UnlockableReward]:
    """Quote rewards, unlocked by the number of glow moments reached."""
    count = sum(1 for moment in moments if moment.unlocked)
    return [
        UnlockableReward(
            id=reward_id,
            name=name,
            description=description,
            type="quote",
            content=CALM_QUOTES[quote_index],
            required_moments=required,
            is_unlocked=count >= required,
        )
        for reward_id, name, description, quote_index, required in REWARD_DEFINITIONS
    ]


def unlocked_quotes(rewards: Iterable[UnlockableReward]) -> list[CalmQuote]:
    return [reward.content for reward in rewards if reward.type == "quote" and reward.is_unlocked]
