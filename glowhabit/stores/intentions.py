"""Monthly intention store."""

from datetime import date, datetime
from typing import Optional

from glowhabit.analytics.periods import month_key
from glowhabit.models.base import new_id
from glowhabit.models.intention import MonthlyIntention
from glowhabit.stores.base import RecordStore


class IntentionStore(RecordStore[str, MonthlyIntention]):
    """Intentions keyed by ``YYYY-MM``. At most one per month."""

    STORAGE_KEY = "glowhabit-intentions"
    model = MonthlyIntention

    def key_of(self, record: MonthlyIntention) -> str:
        return record.month

    def get(self, month: str) -> Optional[MonthlyIntention]:
        return self._records.get(month)

    def set_intention(
        self,
        month: str,
        intention: str,
        personal_note: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> MonthlyIntention:
        """Create or replace a month's intention, keeping its ID and creation time."""
        now = now or datetime.now()
        existing = self._records.get(month)
        return self._put(
            MonthlyIntention(
                id=existing.id if existing else new_id(),
                month=month,
                intention=intention,
                personal_note=personal_note,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
        )

    def current(self, today: date) -> Optional[MonthlyIntention]:
        return self._records.get(month_key(today))

    def past(self, today: date, limit: int = 6) -> list[MonthlyIntention]:
        """Intentions before the current month, most recent first."""
        current = month_key(today)
        earlier = [i for i in self._records.values() if i.month < current]
        return sorted(earlier, key=lambda i: i.month, reverse=True)[:limit]

    def remove(self, month: str) -> bool:
        return self._records.pop(month, None) is not None
