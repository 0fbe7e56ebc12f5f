"""Glow moment and reward data models."""

from typing import Literal

from pydantic import BaseModel, Field

from glowhabit.models.base import RECORD_CONFIG

MomentType = Literal["milestone", "streak", "consistency", "reflection", "balance"]

MomentTier = Literal["spark", "glow", "radiance", "brilliance"]

RequirementType = Literal["completions", "streak", "journal", "journal_streak", "balance"]

RewardType = Literal["quote", "theme", "animation"]


class GlowMoment(BaseModel):
    """A milestone celebrated with an affirmation once reached."""

    id: str
    type: MomentType
    title: str
    description: str
    affirmation: str
    tier: MomentTier
    requirement: int = Field(..., ge=1)
    current: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @property
    def unlocked(self) -> bool:
        return self.current >= self.requirement


class CalmQuote(BaseModel):
    id: str
    quote: str
    author: str

    model_config = {"frozen": True}


class UnlockableReward(BaseModel):
    """A reward that opens up after enough glow moments."""

    id: str
    name: str
    description: str
    type: RewardType
    content: CalmQuote
    required_moments: int = Field(..., ge=1)
    is_unlocked: bool = Field(default=False)

    model_config = {"frozen": True}


class GlowMomentState(BaseModel):
    """Moments already celebrated, so each unlock is announced once."""

    unlocked_ids: list[str] = Field(default_factory=list)

    model_config = RECORD_CONFIG
