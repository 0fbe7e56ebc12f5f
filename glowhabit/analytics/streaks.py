"""Streak and consistency calculations over dated records."""

import logging
from collections.abc import Callable, Iterable
from datetime import date, timedelta
from typing import Any, NamedTuple, Optional

from glowhabit.analytics.periods import days_in_window, parse_day, percent, record_date

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


class StreakResult(NamedTuple):
    current_streak: int
    longest_streak: int


def _always(record: Any) -> bool:
    return True


def group_days(
    records: Iterable[Any],
    is_success: Optional[Callable[[Any], bool]] = None,
    date_of: Callable[[Any], Any] = record_date,
    until: Optional[date] = None,
) -> dict[date, bool]:
    """Collapse records to one outcome per calendar day.

    A day is successful when any record on it satisfies ``is_success``.
    Records with unparseable dates, or dated after ``until``, are skipped.
    """
    is_success = is_success or _always
    days: dict[date, bool] = {}
    for record in records:
        day = parse_day(date_of(record))
        if day is None:
            logger.debug("Skipping record with invalid date: %r", record)
            continue
        if until is not None and day > until:
            continue
        days[day] = days.get(day, False) or bool(is_success(record))
    return days


def streaks_from_days(days: dict[date, bool], today: date) -> StreakResult:
    """Current and longest streak from per-day outcomes."""
    current = 0
    check = today
    while days.get(check):
        current += 1
        check -= ONE_DAY

    longest = 0
    run = 0
    previous: Optional[date] = None
    for day in sorted(days):
        if not days[day]:
            run = 0
        elif run > 0 and previous is not None and day - previous == ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day

    return StreakResult(current, longest)


def compute_streaks(
    records: Iterable[Any],
    is_success: Optional[Callable[[Any], bool]],
    today: date,
    date_of: Callable[[Any], Any] = record_date,
) -> StreakResult:
    """Compute the current and longest streak of successful days.

    The current streak is anchored at ``today``: it counts back from today
    over consecutive successful days and is 0 when today has no successful
    record. A missing day (gap) or a failing day ends a streak. Records
    dated after ``today`` are ignored.

    Args:
        records: Records in any order.
        is_success: Predicate marking a successful record. None treats
            every record as a success.
        today: Reference day.
        date_of: Accessor returning a record's date.

    Returns:
        StreakResult(current_streak, longest_streak).
    """
    days = group_days(records, is_success, date_of, until=today)
    return streaks_from_days(days, today)


def completion_rate(
    records: Iterable[Any],
    is_success: Optional[Callable[[Any], bool]] = None,
    date_of: Callable[[Any], Any] = record_date,
    until: Optional[date] = None,
) -> int:
    """Successful tracked days as a percentage of tracked days.

    Records dated after ``until`` are not tracked days.
    """
    days = group_days(records, is_success, date_of, until=until)
    if not days:
        return 0
    return percent(sum(1 for ok in days.values() if ok), len(days))


def window_rate(days: Iterable[date], today: date, window_days: int = 30) -> int:
    """Share of the last ``window_days`` days (ending today) present in ``days``."""
    if window_days <= 0:
        return 0
    start = today - timedelta(days=window_days - 1)
    return percent(len(days_in_window(days, start, today)), window_days)
