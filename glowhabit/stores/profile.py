"""User profile store."""

from datetime import date
from typing import Any, Optional

from glowhabit.analytics.daily import daily_subtitle
from glowhabit.models.profile import Preferences, UserProfile
from glowhabit.stores.base import GetItem, load_object


class ProfileStore:
    """Single profile object merged over defaults on load."""

    STORAGE_KEY = "glowhabit-profile"

    def __init__(self, profile: Optional[UserProfile] = None):
        self.profile = profile or UserProfile()

    def update_profile(self, **updates: Any) -> UserProfile:
        self.profile = UserProfile.model_validate({**self.profile.model_dump(), **updates})
        return self.profile

    def update_preferences(self, **updates: Any) -> Preferences:
        preferences = Preferences.model_validate({**self.profile.preferences.model_dump(), **updates})
        self.profile = self.profile.model_copy(update={"preferences": preferences})
        return preferences

    def refresh_subtitle(self, day: date) -> str:
        """Set the profile subtitle to the calm subtitle of ``day``."""
        subtitle = daily_subtitle(day)
        self.profile = self.profile.model_copy(update={"subtitle": subtitle})
        return subtitle

    @classmethod
    def load(cls, get_item: GetItem) -> "ProfileStore":
        return cls(load_object(get_item(cls.STORAGE_KEY), UserProfile, cls.STORAGE_KEY))

    def dump(self) -> dict[str, str]:
        return {self.STORAGE_KEY: self.profile.model_dump_json(by_alias=True, exclude_none=True)}
