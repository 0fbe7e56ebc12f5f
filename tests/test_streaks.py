"""Property-based tests for streak and consistency calculations.

**Feature: glowhabit-analytics**
"""

from datetime import date, timedelta

from hypothesis import given, settings
from hypothesis import strategies as st

from glowhabit.analytics.streaks import completion_rate, compute_streaks, group_days, window_rate

TODAY = date(2024, 1, 4)


def _record(day, ok=True):
    return {"date": day, "ok": ok}


def _ok(record) -> bool:
    return record["ok"]


day_records = st.lists(
    st.tuples(
        st.dates(min_value=date(2023, 11, 1), max_value=date(2024, 2, 1)),
        st.booleans(),
    ),
    max_size=60,
)


class TestStreakBounds:
    """
    **Feature: glowhabit-analytics, Property 1: Longest Streak Bounds Current**

    *For any* set of dated records, the longest streak is at least the
    current streak and neither is negative.
    """

    @given(day_records)
    @settings(max_examples=200)
    def test_longest_at_least_current(self, pairs):
        records = [_record(day, ok) for day, ok in pairs]
        result = compute_streaks(records, _ok, TODAY)

        assert result.current_streak >= 0
        assert result.longest_streak >= result.current_streak

    @given(day_records)
    @settings(max_examples=100)
    def test_order_independent(self, pairs):
        """Shuffling records never changes the result."""
        records = [_record(day, ok) for day, ok in pairs]
        forward = compute_streaks(records, _ok, TODAY)
        backward = compute_streaks(list(reversed(records)), _ok, TODAY)

        assert forward == backward

    @given(day_records)
    @settings(max_examples=100)
    def test_reproducible(self, pairs):
        records = [_record(day, ok) for day, ok in pairs]
        assert compute_streaks(records, _ok, TODAY) == compute_streaks(records, _ok, TODAY)

    def test_empty_records(self):
        result = compute_streaks([], _ok, TODAY)

        assert result.current_streak == 0
        assert result.longest_streak == 0
        assert completion_rate([], _ok) == 0


class TestStreakScenarios:
    """
    **Feature: glowhabit-analytics, Property 2: Calendar Streak Scenarios**

    Concrete day sequences with known streaks and rates.
    """

    def test_gap_after_failure(self):
        records = [
            _record("2024-01-01"),
            _record("2024-01-02"),
            _record("2024-01-03", ok=False),
            _record("2024-01-04"),
        ]

        result = compute_streaks(records, _ok, TODAY)

        assert result.current_streak == 1
        assert result.longest_streak == 2
        assert completion_rate(records, _ok) == 75

    def test_success_only_yesterday(self):
        records = [_record(TODAY - timedelta(days=1))]

        result = compute_streaks(records, _ok, TODAY)

        assert result.current_streak == 0
        assert result.longest_streak == 1

    def test_success_only_today(self):
        result = compute_streaks([_record(TODAY)], _ok, TODAY)

        assert result.current_streak == 1
        assert result.longest_streak == 1

    def test_missing_day_breaks_streak(self):
        records = [_record("2024-01-01"), _record("2024-01-03"), _record("2024-01-04")]

        result = compute_streaks(records, _ok, TODAY)

        assert result.current_streak == 2
        assert result.longest_streak == 2

    def test_streak_across_month_boundary(self):
        records = [_record(date(2024, 1, 31) + timedelta(days=i)) for i in range(4)]

        result = compute_streaks(records, _ok, date(2024, 2, 3))

        assert result.current_streak == 4

    def test_leap_day_is_part_of_streak(self):
        records = [_record("2024-02-28"), _record("2024-02-29"), _record("2024-03-01")]

        result = compute_streaks(records, _ok, date(2024, 3, 1))

        assert result.current_streak == 3

    def test_future_records_ignored(self):
        records = [_record(TODAY), _record(TODAY + timedelta(days=1))]

        result = compute_streaks(records, _ok, TODAY)

        assert result.current_streak == 1
        assert result.longest_streak == 1

    def test_completion_rate_ignores_records_after_until(self):
        records = [_record(TODAY), _record(TODAY + timedelta(days=10), ok=False)]

        assert completion_rate(records, _ok, until=TODAY) == 100
        assert completion_rate(records, _ok) == 50

    def test_invalid_dates_skipped(self):
        records = [_record("not-a-date"), _record(None), _record("2024-01-04")]

        result = compute_streaks(records, _ok, TODAY)

        assert result.current_streak == 1

    def test_same_day_counts_once(self):
        records = [_record(TODAY, ok=False), _record(TODAY, ok=True), _record(TODAY, ok=True)]

        days = group_days(records, _ok)

        assert days == {TODAY: True}
        assert completion_rate(records, _ok) == 100

    def test_default_predicate_counts_every_record(self):
        records = [_record(TODAY, ok=False)]

        assert compute_streaks(records, None, TODAY).current_streak == 1


class TestWindowRate:
    """
    **Feature: glowhabit-analytics, Property 3: Window Rate Bounds**

    *For any* set of days, the window rate is a percentage in [0, 100].
    """

    @given(st.sets(st.dates(min_value=date(2023, 1, 1), max_value=date(2024, 12, 31))))
    @settings(max_examples=100)
    def test_rate_is_percentage(self, days):
        rate = window_rate(days, TODAY, 30)
        assert 0 <= rate <= 100

    def test_full_window(self):
        days = {TODAY - timedelta(days=i) for i in range(30)}
        assert window_rate(days, TODAY, 30) == 100

    def test_days_outside_window_ignored(self):
        days = {TODAY - timedelta(days=30), TODAY + timedelta(days=1)}
        assert window_rate(days, TODAY, 30) == 0

    def test_half_up_rounding(self):
        # 1 of 8 days is 12.5%
        assert window_rate({TODAY}, TODAY, 8) == 13
