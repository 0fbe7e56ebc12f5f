"""Life area and life-balance data models."""

from typing import Literal

from pydantic import BaseModel, Field

LifeArea = Literal["health", "career", "mind", "relationships"]

Trend = Literal["up", "down", "stable"]

# Canonical processing order for life areas.
LIFE_AREAS: tuple[LifeArea, ...] = ("health", "career", "mind", "relationships")

LIFE_AREA_LABELS: dict[str, str] = {
    "health": "Health",
    "career": "Career",
    "mind": "Mind",
    "relationships": "Relationships",
}

LIFE_AREA_DESCRIPTIONS: dict[str, str] = {
    "health": "Physical wellness and fitness",
    "career": "Work and professional growth",
    "mind": "Mental health and learning",
    "relationships": "Social connections and family",
}


class AreaHistory(BaseModel):
    """Completion rates for the two most recent equal-length windows."""

    recent_rate: float = Field(default=0.0, ge=0, le=100, description="Current window completion %")
    previous_rate: float = Field(default=0.0, ge=0, le=100, description="Preceding window completion %")

    model_config = {"frozen": True}


class AreaInput(BaseModel):
    """Per-area input to the life-balance composer."""

    completion_rate: float = Field(default=0.0, ge=0, le=100, description="Habit completion %")
    goal_progress: float = Field(default=0.0, ge=0, le=100, description="Average goal progress %")
    habit_count: int = Field(default=0, ge=0, description="Habits assigned to the area")
    history: AreaHistory = Field(default_factory=AreaHistory, description="Trend windows")

    model_config = {"frozen": True}


class LifeAreaScore(BaseModel):
    """Derived score for one life area."""

    area: LifeArea = Field(..., description="Life area")
    score: int = Field(..., ge=0, le=100, description="Weighted area score")
    habit_count: int = Field(..., ge=0, description="Habits assigned to the area")
    completion_rate: int = Field(..., ge=0, le=100, description="Habit completion %")
    goal_progress: int = Field(..., ge=0, le=100, description="Average goal progress %")
    trend: Trend = Field(default="stable", description="Direction against the previous window")

    model_config = {"frozen": True}


class LifeBalanceData(BaseModel):
    """Composite life-balance view."""

    overall_score: int = Field(..., ge=0, le=100, description="Mean of counted area scores")
    area_scores: list[LifeAreaScore] = Field(default_factory=list, description="Scores per area")
    stability_score: int = Field(..., ge=0, le=100, description="100 minus spread of area scores")
    areas_counted: int = Field(default=0, ge=0, description="Areas with at least one habit")
    insights: list[str] = Field(default_factory=list, description="Ordered observations")

    model_config = {"frozen": True}
