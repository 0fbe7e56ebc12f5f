"""Journal entry store with sentiment analysis on save."""

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from glowhabit.analytics.sentiment import analyze, sentiment_mood
from glowhabit.models.base import new_id
from glowhabit.models.journal import HabitsSummary, JournalEntry, JournalSettings, Mood
from glowhabit.stores.base import GetItem, RecordStore, dump_records, load_object, load_records

logger = logging.getLogger(__name__)

# Shorter content is stored without sentiment.
MIN_ANALYSIS_LENGTH = 10


class JournalStore(RecordStore[date, JournalEntry]):
    """Journal entries keyed by day, plus journal settings.

    Persists to two buckets: the entries and the settings object.
    """

    STORAGE_KEY = "glowhabit-journal"
    SETTINGS_KEY = "glowhabit-journal-settings"
    model = JournalEntry

    def __init__(self, records: Iterable[JournalEntry] = (), settings: Optional[JournalSettings] = None):
        super().__init__(records)
        self.settings = settings or JournalSettings()

    def key_of(self, record: JournalEntry) -> date:
        return record.date

    def get(self, day: date) -> Optional[JournalEntry]:
        return self._records.get(day)

    def entries(self) -> list[JournalEntry]:
        """Entries, most recent first."""
        return sorted(self._records.values(), key=lambda e: e.date, reverse=True)

    def _should_analyze(self, content: str) -> bool:
        return self.settings.sentiment_analysis_enabled and len(content.strip()) >= MIN_ANALYSIS_LENGTH

    def save_entry(
        self,
        day: date,
        content: str,
        mood: Optional[Mood] = None,
        habits_summary: Optional[HabitsSummary] = None,
        now: Optional[datetime] = None,
    ) -> JournalEntry:
        """Create or update the entry for ``day``.

        Sentiment is recomputed from the content when analysis is enabled
        and the content is long enough. Changed content that is not
        analyzed clears the sentiment. Passing ``mood`` sets it manually;
        otherwise a previously manual mood is kept and any other mood is
        derived from the sentiment label.

        Args:
            day: Entry day.
            content: Entry text.
            mood: Mood chosen by the user, if any.
            habits_summary: Habit snapshot to attach.
            now: Timestamp for creation, update and analysis.

        Returns:
            The saved entry.
        """
        now = now or datetime.now()
        existing = self._records.get(day)

        unchanged = existing is not None and existing.content == content

        if self._should_analyze(content):
            sentiment = analyze(content, now=now)
        elif unchanged:
            sentiment = existing.sentiment
        else:
            # Edited content that is not analyzed drops the old sentiment.
            sentiment = None

        if mood is not None:
            manual_mood = True
        elif existing and existing.manual_mood:
            mood, manual_mood = existing.mood, True
        else:
            manual_mood = False
            if sentiment:
                mood = sentiment_mood(sentiment.label)
            else:
                mood = existing.mood if unchanged else None

        if habits_summary is None and existing:
            habits_summary = existing.habits_summary

        entry = JournalEntry(
            id=existing.id if existing else new_id(),
            date=day,
            content=content,
            mood=mood,
            manual_mood=manual_mood,
            sentiment=sentiment,
            habits_summary=habits_summary,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        logger.debug("Saved journal entry for %s (sentiment=%s)", day, sentiment.label if sentiment else None)
        return self._put(entry)

    def update_mood(self, day: date, mood: Mood, now: Optional[datetime] = None) -> JournalEntry:
        """Set the mood of an existing entry manually."""
        entry = self._records.get(day)
        if entry is None:
            raise KeyError(f"No journal entry for {day.isoformat()}")
        return self._put(
            entry.model_copy(update={"mood": mood, "manual_mood": True, "updated_at": now or datetime.now()})
        )

    def reanalyze(self, day: date, now: Optional[datetime] = None) -> JournalEntry:
        """Recompute sentiment for an existing entry regardless of settings."""
        entry = self._records.get(day)
        if entry is None:
            raise KeyError(f"No journal entry for {day.isoformat()}")
        sentiment = analyze(entry.content, now=now)
        update = {"sentiment": sentiment}
        if not entry.manual_mood:
            update["mood"] = sentiment_mood(sentiment.label)
        return self._put(entry.model_copy(update=update))

    def delete(self, day: date) -> bool:
        return self._records.pop(day, None) is not None

    def update_settings(self, **updates) -> JournalSettings:
        self.settings = JournalSettings.model_validate({**self.settings.model_dump(), **updates})
        return self.settings

    # ==================== Persistence ====================

    @classmethod
    def load(cls, get_item: GetItem) -> "JournalStore":
        return cls(
            load_records(get_item(cls.STORAGE_KEY), JournalEntry, cls.STORAGE_KEY),
            load_object(get_item(cls.SETTINGS_KEY), JournalSettings, cls.SETTINGS_KEY),
        )

    def dump(self) -> dict[str, str]:
        return {
            self.STORAGE_KEY: dump_records(self.entries()),
            self.SETTINGS_KEY: self.settings.model_dump_json(by_alias=True),
        }
