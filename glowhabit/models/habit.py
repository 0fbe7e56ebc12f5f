"""Habit, completion and goal data models."""

from datetime import date as date_type
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from glowhabit.models.balance import LifeArea
from glowhabit.models.base import RECORD_CONFIG, new_id

HabitCategory = Literal["health", "career", "mind", "relationships", "custom"]


class Habit(BaseModel):
    """A tracked habit definition."""

    id: str = Field(default_factory=new_id, description="Habit ID")
    name: str = Field(..., min_length=1, description="Display name")
    icon: str = Field(default="Sparkles", description="Icon name")
    category: HabitCategory = Field(default="custom", description="Habit category")
    color: str = Field(default="primary", description="Color token")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    order: int = Field(default=0, ge=0, description="Display order")
    life_area: Optional[LifeArea] = Field(default=None, description="Assigned life area")

    model_config = RECORD_CONFIG


class HabitCompletion(BaseModel):
    """A single habit check-in for a calendar day."""

    habit_id: str = Field(..., min_length=1, description="Completed habit")
    date: date_type = Field(..., description="Completion day")
    category: HabitCategory = Field(default="custom", description="Habit category at check-in")
    life_area: Optional[LifeArea] = Field(default=None, description="Life area at check-in")

    model_config = RECORD_CONFIG


class Goal(BaseModel):
    """A user goal with percentage progress."""

    id: str = Field(default_factory=new_id, description="Goal ID")
    title: str = Field(..., min_length=1, description="Goal title")
    description: str = Field(default="", description="Goal description")
    target_date: Optional[date_type] = Field(default=None, description="Target day")
    progress: int = Field(default=0, ge=0, le=100, description="Progress percentage")
    is_completed: bool = Field(default=False, description="Completion flag")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    life_area: Optional[LifeArea] = Field(default=None, description="Assigned life area")

    model_config = RECORD_CONFIG


class HabitStats(BaseModel):
    """Derived statistics for one habit."""

    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    completion_rate: int = Field(default=0, ge=0, le=100, description="Completed share of the window")
    total_completions: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class DailyProgress(BaseModel):
    """Completed vs. total habits for one day."""

    date: date_type
    completed_count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)

    model_config = {"frozen": True}


DEFAULT_HABITS: list[dict] = [
    {"name": "Drink water daily", "icon": "Droplets", "category": "health"},
    {"name": "Daily movement / walk", "icon": "Footprints", "category": "health"},
    {"name": "Sleep routine", "icon": "Moon", "category": "health"},
    {"name": "Eat mindfully", "icon": "UtensilsCrossed", "category": "health"},
    {"name": "Stretch / light exercise", "icon": "Activity", "category": "health"},
    {"name": "Learn a new skill daily", "icon": "Brain", "category": "career"},
    {"name": "Work focus session", "icon": "Target", "category": "career"},
    {"name": "Daily planning", "icon": "ClipboardList", "category": "career"},
    {"name": "Portfolio / resume progress", "icon": "Briefcase", "category": "career"},
    {"name": "Networking / career growth", "icon": "Users", "category": "career"},
    {"name": "Meditation / mindfulness", "icon": "Sparkles", "category": "mind"},
    {"name": "Journal reflection", "icon": "PenTool", "category": "mind"},
    {"name": "Screen detox time", "icon": "Smartphone", "category": "mind"},
    {"name": "Gratitude practice", "icon": "Heart", "category": "mind"},
    {"name": "Reading / learning time", "icon": "BookOpen", "category": "mind"},
    {"name": "Check-in with a loved one", "icon": "Phone", "category": "relationships"},
    {"name": "Quality time", "icon": "Clock", "category": "relationships"},
    {"name": "Express gratitude to someone", "icon": "MessageCircle", "category": "relationships"},
    {"name": "Listen deeply", "icon": "Ear", "category": "relationships"},
    {"name": "Strengthen connections", "icon": "Users", "category": "relationships"},
]
