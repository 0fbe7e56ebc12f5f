"""Calendar arithmetic and bounded-window aggregation.

All functions are pure: the reference day is always passed in by the
caller, never read from the clock.
"""

import calendar
import math
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any, Optional


def parse_day(value: Any) -> Optional[date]:
    """Coerce a record date to a calendar day.

    Accepts ``date``, ``datetime`` and ISO strings (a time part after the
    day is ignored). Returns None for anything unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def record_date(record: Any) -> Any:
    """Default date accessor for records and plain mappings."""
    if isinstance(record, Mapping):
        return record.get("date")
    return getattr(record, "date", None)


def percent(numerator: float, denominator: float) -> int:
    """Integer percentage rounded half-up; 0 for an empty denominator."""
    if denominator <= 0:
        return 0
    return int(math.floor(numerator / denominator * 100 + 0.5))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def month_key(day: date) -> str:
    """Month identifier in YYYY-MM form."""
    return f"{day.year:04d}-{day.month:02d}"


def parse_month(value: str) -> Optional[date]:
    """Parse a YYYY-MM key to the first day of that month."""
    try:
        year, month = value.split("-")
        return date(int(year), int(month), 1)
    except (ValueError, AttributeError):
        return None


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    start = day.replace(day=1)
    return start, day.replace(day=days_in_month(day))


def days_elapsed(month: date, today: date) -> int:
    """Days of ``month`` that have started by ``today``, today included.

    A completed month counts its full length, a future month counts zero.
    """
    start, end = month_bounds(month)
    if today < start:
        return 0
    if today > end:
        return days_in_month(month)
    return today.day


def last_n_days(today: date, n: int) -> list[date]:
    """The ``n`` calendar days ending at ``today``, oldest first."""
    return [today - timedelta(days=offset) for offset in range(n - 1, -1, -1)]


def days_in_window(days: Iterable[date], start: date, end: date) -> set[date]:
    return {day for day in days if start <= day <= end}


def compute_monthly_score(
    records: Iterable[Any],
    is_good: Callable[[Any], bool],
    today: date,
    month: Optional[date] = None,
    date_of: Callable[[Any], Any] = record_date,
) -> int:
    """Share of the month's elapsed days that were good days.

    Args:
        records: Records with a calendar date.
        is_good: Domain predicate for a good day.
        today: Reference day.
        month: Any day in the month to score. Defaults to today's month.
        date_of: Accessor returning a record's date.

    Returns:
        Integer percentage. The denominator is the elapsed days for the
        current month, the full length for a past month and zero (score 0)
        for a future month.
    """
    month = month or today
    start, end = month_bounds(month)
    denominator = days_elapsed(month, today)
    if denominator == 0:
        return 0

    good_days: set[date] = set()
    for record in records:
        day = parse_day(date_of(record))
        if day is None or day < start or day > end or day > today:
            continue
        if is_good(record):
            good_days.add(day)

    return min(100, percent(len(good_days), denominator))
