"""Daily budget check-in store."""

from datetime import date
from typing import Any, Literal, Optional

from glowhabit.models.budget import BudgetEntry
from glowhabit.stores.base import RecordStore

BudgetFlag = Literal["stayed_within_budget", "tracked_expenses"]


class BudgetStore(RecordStore[date, BudgetEntry]):
    """Budget entries keyed by day. At most one entry per day."""

    STORAGE_KEY = "glowhabit-budget"
    model = BudgetEntry

    def key_of(self, record: BudgetEntry) -> date:
        return record.date

    def get(self, day: date) -> Optional[BudgetEntry]:
        return self._records.get(day)

    def upsert(self, day: date, **fields: Any) -> BudgetEntry:
        """Create or update the entry for ``day``, keeping an existing ID."""
        existing = self._records.get(day)
        if existing is None:
            return self._put(BudgetEntry(date=day, **fields))
        data = {**existing.model_dump(), **fields, "id": existing.id, "date": day}
        return self._put(BudgetEntry.model_validate(data))

    def toggle(self, day: date, field: BudgetFlag) -> BudgetEntry:
        """Flip one of the day's flags, creating the entry if needed."""
        existing = self._records.get(day)
        current = getattr(existing, field) if existing else False
        return self.upsert(day, **{field: not current})

    def remove(self, day: date) -> bool:
        return self._records.pop(day, None) is not None
