"""Store of glow moments that have already been celebrated."""

import logging
from collections.abc import Iterable
from typing import Optional

from glowhabit.models.moment import GlowMoment, GlowMomentState
from glowhabit.stores.base import GetItem, load_object

logger = logging.getLogger(__name__)


class GlowMomentStore:
    """Remembers which moments were unlocked so each is announced once."""

    STORAGE_KEY = "glowhabit-glow-moments"

    def __init__(self, state: Optional[GlowMomentState] = None):
        self.state = state or GlowMomentState()

    @property
    def unlocked_ids(self) -> list[str]:
        return list(self.state.unlocked_ids)

    def record_unlocks(self, moments: Iterable[GlowMoment]) -> list[GlowMoment]:
        """Return moments unlocked since the last call, in definition order.

        When something new is unlocked the stored set becomes the currently
        unlocked moments.
        """
        unlocked = [moment for moment in moments if moment.unlocked]
        seen = set(self.state.unlocked_ids)
        fresh = [moment for moment in unlocked if moment.id not in seen]
        if fresh:
            self.state = GlowMomentState(unlocked_ids=[moment.id for moment in unlocked])
            logger.debug("Unlocked glow moments: %s", ", ".join(m.id for m in fresh))
        return fresh

    @classmethod
    def load(cls, get_item: GetItem) -> "GlowMomentStore":
        return cls(load_object(get_item(cls.STORAGE_KEY), GlowMomentState, cls.STORAGE_KEY))

    def dump(self) -> dict[str, str]:
        return {self.STORAGE_KEY: self.state.model_dump_json(by_alias=True)}
