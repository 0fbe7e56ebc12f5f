"""Achievement data model."""

from typing import Literal

from pydantic import BaseModel, Field

AchievementCategory = Literal["habits", "journal", "goals", "routines", "special"]

Tier = Literal["bronze", "silver", "gold", "platinum"]

TIER_POINTS: dict[str, int] = {"bronze": 10, "silver": 25, "gold": 50, "platinum": 100}


class Achievement(BaseModel):
    """Progress toward a single achievement."""

    id: str
    name: str
    description: str
    icon: str
    category: AchievementCategory
    tier: Tier
    requirement: int = Field(..., ge=1)
    current: int = Field(default=0, ge=0)
    progress: int = Field(default=0, ge=0, le=100, description="Percent of the requirement reached")

    model_config = {"frozen": True}

    @property
    def unlocked(self) -> bool:
        return self.current >= self.requirement
