"""Project and deep-work session data models."""

from datetime import date as date_type
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from glowhabit.models.balance import Trend
from glowhabit.models.base import RECORD_CONFIG, new_id

TimeOfDay = Literal["Morning", "Afternoon", "Evening"]

DEFAULT_WEEKLY_TARGET = 10.0

PROJECT_COLORS = [
    "hsl(220 80% 55%)",
    "hsl(160 84% 39%)",
    "hsl(270 60% 60%)",
    "hsl(38 92% 50%)",
    "hsl(340 75% 55%)",
    "hsl(180 70% 45%)",
]

PROJECT_ICONS = ["Rocket", "Code", "Briefcase", "PenTool", "Lightbulb", "Target", "Layers", "Cpu"]

# Session lengths offered when logging deep work, in minutes.
DEEP_WORK_DURATIONS = {25: "Pomodoro", 50: "Focus Block", 90: "Deep Session"}


class Project(BaseModel):
    """A project that deep-work sessions are logged against."""

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    color: str = Field(default=PROJECT_COLORS[0])
    icon: str = Field(default=PROJECT_ICONS[0])
    habit_ids: list[str] = Field(default_factory=list, description="Linked habits")
    weekly_target: float = Field(default=DEFAULT_WEEKLY_TARGET, ge=0, description="Hours per week")
    deadline: Optional[date_type] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.now)
    is_active: bool = Field(default=True)

    model_config = RECORD_CONFIG


class DeepWorkSession(BaseModel):
    """A block of focused work on a project."""

    id: str = Field(default_factory=new_id)
    project_id: str = Field(..., min_length=1)
    duration: int = Field(..., ge=1, description="Minutes")
    completed_at: datetime = Field(default_factory=datetime.now)
    notes: Optional[str] = Field(default=None)
    date: date_type = Field(..., description="Session day")

    model_config = RECORD_CONFIG


class ProjectStats(BaseModel):
    """Derived statistics for one project."""

    total_hours: float = Field(default=0.0, ge=0)
    weekly_hours: float = Field(default=0.0, ge=0)
    consistency_streak: int = Field(default=0, ge=0, description="Consecutive days with a session")
    weekly_execution_score: int = Field(default=0, ge=0, le=100, description="Share of the weekly target")
    progress: int = Field(default=0, ge=0, le=100)

    model_config = {"frozen": True}


class DeepWorkStats(BaseModel):
    """Derived statistics across all deep-work sessions."""

    total_hours: float = Field(default=0.0, ge=0)
    focus_streak: int = Field(default=0, ge=0)
    best_time_of_day: TimeOfDay = Field(default="Morning")
    weekly_trend: Trend = Field(default="stable", description="This week against last week")
    sessions_this_week: int = Field(default=0, ge=0)

    model_config = {"frozen": True}
