"""User profile data models."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from glowhabit.models.base import RECORD_CONFIG, new_id


class Preferences(BaseModel):
    appearance: Literal["light", "dark", "calm"] = Field(default="light")
    reminder_enabled: bool = Field(default=True)
    stats_private: bool = Field(default=False)

    model_config = RECORD_CONFIG


class UserProfile(BaseModel):
    """Local user profile. Stored fields are merged over these defaults."""

    id: str = Field(default_factory=new_id)
    name: str = Field(default="")
    email: str = Field(default="")
    username: str = Field(default="")
    timezone: str = Field(default="UTC")
    joined_date: datetime = Field(default_factory=datetime.now)
    avatar_url: Optional[str] = Field(default=None)
    subtitle: str = Field(default="")
    preferences: Preferences = Field(default_factory=Preferences)

    model_config = RECORD_CONFIG
