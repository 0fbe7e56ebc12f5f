"""Date-seeded daily picks: quote, journal prompt, profile subtitle and affirmation.

The choice is the day of the year modulo the list length, so the same
calendar day always yields the same pick.
"""

from datetime import date

from glowhabit.analytics.moments import AFFIRMATIONS
from glowhabit.models.journal import JOURNAL_PROMPTS

QUOTES = [
    "Progress, not pressure.",
    "Small steps create big change.",
    "Every moment is a fresh start.",
    "Be gentle with yourself.",
    "Growth happens in quiet moments.",
    "You are exactly where you need to be.",
    "Trust the process, embrace the journey.",
    "Consistency is kindness to your future self.",
]

CALM_SUBTITLES = [
    "growing steadily",
    "taking mindful steps",
    "embracing the journey",
    "finding balance",
    "one day at a time",
    "nurturing growth",
]


def _pick(items: list[str], day: date) -> str:
    return items[day.timetuple().tm_yday % len(items)]


def daily_quote(day: date) -> str:
    return _pick(QUOTES, day)


def daily_prompt(day: date) -> str:
    return _pick(JOURNAL_PROMPTS, day)


def daily_subtitle(day: date) -> str:
    return _pick(CALM_SUBTITLES, day)


def daily_affirmation(day: date) -> str:
    return _pick(AFFIRMATIONS, day)
