"""Tests for the journal store and journal analytics.

**Feature: glowhabit-journal**
"""

from datetime import date, datetime, timedelta

import pytest

from glowhabit.analytics.journal import habit_mood_correlation, journal_stats, mood_analytics, mood_trend
from glowhabit.analytics.sentiment import score_label
from glowhabit.models.journal import HabitsSummary, JournalEntry, JournalSettings, SentimentData
from glowhabit.stores.journal import JournalStore

TODAY = date(2024, 1, 10)
NOW = datetime(2024, 1, 10, 21, 0)

POSITIVE_TEXT = "What a wonderful day. I love my friends and I feel so happy and grateful!"
NEGATIVE_TEXT = "This was a terrible, awful day. I feel sad, hurt and miserable."


def _sentiment(score, emotions=()):
    return SentimentData(
        score=score,
        label=score_label(score),
        confidence="high",
        emotions=list(emotions),
        analyzed_at=NOW,
    )


def _entry(day, content="entry", score=None, emotions=(), summary=None):
    return JournalEntry(
        date=day,
        content=content,
        sentiment=_sentiment(score, emotions) if score is not None else None,
        habits_summary=summary,
        created_at=NOW,
        updated_at=NOW,
    )


class TestJournalStoreSave:
    """
    **Feature: glowhabit-journal, Property 19: One Entry Per Day**

    Saving twice on the same day updates the entry in place and keeps its
    identity.
    """

    def test_save_twice_keeps_one_entry(self):
        store = JournalStore()
        first = store.save_entry(TODAY, "First draft of today", now=NOW)
        second = store.save_entry(TODAY, "Second draft of today", now=NOW + timedelta(hours=1))

        assert len(store) == 1
        assert second.id == first.id
        assert second.created_at == NOW
        assert second.updated_at == NOW + timedelta(hours=1)

    def test_sentiment_derives_mood(self):
        store = JournalStore()

        entry = store.save_entry(TODAY, POSITIVE_TEXT, now=NOW)

        assert entry.sentiment is not None
        assert entry.sentiment.analyzed_at == NOW
        assert entry.mood == "great"
        assert entry.manual_mood is False

    def test_short_content_not_analyzed(self):
        entry = JournalStore().save_entry(TODAY, "ok day", now=NOW)

        assert entry.sentiment is None
        assert entry.mood is None

    def test_analysis_disabled(self):
        store = JournalStore(settings=JournalSettings(sentiment_analysis_enabled=False))

        entry = store.save_entry(TODAY, POSITIVE_TEXT, now=NOW)

        assert entry.sentiment is None

    def test_edit_to_short_content_clears_sentiment(self):
        store = JournalStore()
        store.save_entry(TODAY, POSITIVE_TEXT, now=NOW)

        entry = store.save_entry(TODAY, "Awful.", now=NOW)

        assert entry.content == "Awful."
        assert entry.sentiment is None
        assert entry.mood is None

    def test_edit_with_analysis_disabled_clears_sentiment(self):
        store = JournalStore()
        store.save_entry(TODAY, POSITIVE_TEXT, now=NOW)
        store.update_settings(sentiment_analysis_enabled=False)

        entry = store.save_entry(TODAY, NEGATIVE_TEXT, now=NOW)

        assert entry.sentiment is None
        assert entry.mood is None

    def test_unchanged_content_keeps_sentiment(self):
        store = JournalStore()
        first = store.save_entry(TODAY, POSITIVE_TEXT, now=NOW)
        store.update_settings(sentiment_analysis_enabled=False)

        entry = store.save_entry(TODAY, POSITIVE_TEXT, now=NOW + timedelta(hours=1))

        assert entry.sentiment == first.sentiment
        assert entry.mood == first.mood

    def test_manual_mood_kept_when_sentiment_cleared(self):
        store = JournalStore()
        store.save_entry(TODAY, POSITIVE_TEXT, mood="good", now=NOW)

        entry = store.save_entry(TODAY, "Awful.", now=NOW)

        assert entry.sentiment is None
        assert entry.mood == "good"
        assert entry.manual_mood is True

    def test_manual_mood_survives_reanalysis(self):
        store = JournalStore()
        store.save_entry(TODAY, POSITIVE_TEXT, mood="low", now=NOW)

        resaved = store.save_entry(TODAY, NEGATIVE_TEXT, now=NOW)
        reanalyzed = store.reanalyze(TODAY, now=NOW)

        assert resaved.mood == "low"
        assert resaved.manual_mood is True
        assert resaved.sentiment.label == "very-negative"
        assert reanalyzed.mood == "low"

    def test_update_mood_marks_manual(self):
        store = JournalStore()
        store.save_entry(TODAY, POSITIVE_TEXT, now=NOW)

        entry = store.update_mood(TODAY, "okay", now=NOW)

        assert entry.mood == "okay"
        assert entry.manual_mood is True

    def test_update_mood_requires_entry(self):
        with pytest.raises(KeyError):
            JournalStore().update_mood(TODAY, "good")

    def test_habits_summary_kept_when_omitted(self):
        store = JournalStore()
        summary = HabitsSummary(completed=2, total=4, habits=["Walk", "Read"])
        store.save_entry(TODAY, "First draft of today", habits_summary=summary, now=NOW)

        entry = store.save_entry(TODAY, "Second draft of today", now=NOW)

        assert entry.habits_summary == summary

    def test_entries_most_recent_first(self):
        store = JournalStore()
        store.save_entry(TODAY - timedelta(days=2), "older", now=NOW)
        store.save_entry(TODAY, "newer", now=NOW)

        assert [e.date for e in store.entries()] == [TODAY, TODAY - timedelta(days=2)]
        assert store.delete(TODAY) is True
        assert store.delete(TODAY) is False


class TestJournalStats:
    """
    **Feature: glowhabit-journal, Property 20: Journal Streaks And Totals**
    """

    def test_stats(self):
        entries = [
            _entry(TODAY, "one two three"),
            _entry(TODAY - timedelta(days=1), "one two"),
            _entry(TODAY - timedelta(days=2), "one"),
            _entry(date(2023, 12, 30), "one two three four five six"),
        ]

        stats = journal_stats(entries, TODAY)

        assert stats.current_streak == 3
        assert stats.longest_streak == 3
        assert stats.total_entries == 4
        assert stats.this_month_entries == 3
        assert stats.avg_words_per_entry == 3

    def test_entries_after_today_ignored(self):
        entries = [_entry(TODAY, "one two"), _entry(TODAY + timedelta(days=2), "one two three four")]

        stats = journal_stats(entries, TODAY)

        assert stats.total_entries == 1
        assert stats.this_month_entries == 1
        assert stats.avg_words_per_entry == 2

    def test_empty(self):
        stats = journal_stats([], TODAY)

        assert stats.total_entries == 0
        assert stats.avg_words_per_entry == 0


class TestMoodAnalytics:
    """
    **Feature: glowhabit-journal, Property 21: Mood Aggregates**
    """

    def test_empty_window(self):
        analytics = mood_analytics([_entry(TODAY)], TODAY)

        assert analytics.average_score == 0
        assert analytics.emotional_stability == 100
        assert analytics.mood_by_day == []

    def test_aggregates(self):
        entries = [
            _entry(TODAY, score=60, emotions=["happy", "grateful"]),
            _entry(TODAY - timedelta(days=1), score=20, emotions=["happy"]),
            _entry(TODAY - timedelta(days=2), score=-20, emotions=["sad"]),
            _entry(TODAY - timedelta(days=40), score=-90),
        ]

        analytics = mood_analytics(entries, TODAY, days=30)

        assert analytics.average_score == 20
        assert analytics.positive_ratio == 67
        assert [(e.emotion, e.count) for e in analytics.dominant_emotions] == [
            ("happy", 2),
            ("grateful", 1),
            ("sad", 1),
        ]
        assert [p.date for p in analytics.mood_by_day] == [
            TODAY - timedelta(days=2),
            TODAY - timedelta(days=1),
            TODAY,
        ]

    def test_mood_trend_skips_unscored_entries(self):
        entries = [_entry(TODAY, score=10), _entry(TODAY - timedelta(days=1))]

        assert [e.date for e in mood_trend(entries, TODAY)] == [TODAY]


class TestHabitMoodCorrelation:
    """
    **Feature: glowhabit-journal, Property 22: Habit And Mood Correlation**
    """

    def test_needs_three_entries(self):
        summary = HabitsSummary(completed=1, total=1, habits=["Walk"])
        entries = [_entry(TODAY, score=50, summary=summary), _entry(TODAY - timedelta(days=1), score=40, summary=summary)]

        assert habit_mood_correlation(entries) is None

    def test_high_and_low_days(self):
        entries = [
            _entry(TODAY, score=50, summary=HabitsSummary(completed=4, total=5, habits=["Walk"])),
            _entry(TODAY - timedelta(days=1), score=40, summary=HabitsSummary(completed=5, total=5, habits=["Walk"])),
            _entry(TODAY - timedelta(days=2), score=-30, summary=HabitsSummary(completed=0, total=5)),
            _entry(TODAY - timedelta(days=3), score=-20, summary=HabitsSummary(completed=1, total=5, habits=["Walk"])),
        ]

        correlation = habit_mood_correlation(entries)

        assert correlation.data_points == 4
        assert correlation.high_completion_avg_mood == 45
        assert correlation.low_completion_avg_mood == -25
        assert correlation.insights == [
            "Your mood improves on days you complete more habits",
            "Lower mood detected on low-habit completion days",
        ]
