"""Routine and skincare data models."""

from datetime import date as date_type
from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field

from glowhabit.models.base import RECORD_CONFIG, new_id

RoutineType = Literal["morning", "night"]


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


class RoutineHabit(BaseModel):
    """A step of a morning or night routine."""

    id: str = Field(default_factory=new_id)
    habit_id: Optional[str] = Field(default=None, description="Linked habit, if any")
    name: str = Field(..., min_length=1)
    icon: str = Field(default="Sparkles")
    order: int = Field(default=0, ge=0)

    model_config = RECORD_CONFIG


class Routine(BaseModel):
    """A morning or night routine definition."""

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1)
    type: RoutineType = Field(..., description="Time of day")
    habits: list[RoutineHabit] = Field(default_factory=list)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.now)

    model_config = RECORD_CONFIG


class RoutineCompletion(BaseModel):
    """A routine completed on a calendar day. One per (date, routine)."""

    date: date_type = Field(..., description="Completion day")
    routine_id: str = Field(..., min_length=1)
    completed_at: datetime = Field(default_factory=datetime.now)
    duration: Optional[int] = Field(default=None, ge=0, description="Minutes taken")
    completed_habits: Annotated[list[str], AfterValidator(_unique)] = Field(
        default_factory=list, description="Completed step IDs in order"
    )

    model_config = RECORD_CONFIG


class RoutineStats(BaseModel):
    """Derived statistics for one routine."""

    consistency_rate: int = Field(default=0, ge=0, le=100)
    average_completion_time: int = Field(default=0, ge=0, description="Minutes")
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    total_completions: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class SkinCareStep(BaseModel):
    """One step of a skincare routine."""

    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1)
    icon: str = Field(default="Droplets")
    product_name: Optional[str] = Field(default=None)
    time_estimate: Optional[int] = Field(default=None, ge=0, description="Minutes")
    is_optional: bool = Field(default=False)
    is_alternate_day: bool = Field(default=False, description="Only on alternate days")
    order: int = Field(default=0, ge=0)

    model_config = RECORD_CONFIG


class SkinCareRoutine(BaseModel):
    """A morning or night skincare routine."""

    id: str = Field(default_factory=new_id)
    type: RoutineType
    steps: list[SkinCareStep] = Field(default_factory=list)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.now)

    model_config = RECORD_CONFIG


class SkinCareCompletion(BaseModel):
    """A skincare routine completed on a calendar day."""

    date: date_type
    routine_id: str = Field(..., min_length=1)
    type: RoutineType
    completed_at: datetime = Field(default_factory=datetime.now)
    completed_steps: list[str] = Field(default_factory=list)
    skipped_steps: list[str] = Field(default_factory=list)

    model_config = RECORD_CONFIG


class ProductUsage(BaseModel):
    name: str
    count: int = Field(..., ge=1)

    model_config = {"frozen": True}


class SkinCareStats(BaseModel):
    """Derived skincare statistics."""

    morning_consistency: int = Field(default=0, ge=0, le=100)
    night_consistency: int = Field(default=0, ge=0, le=100)
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    total_completions: int = Field(default=0, ge=0)
    most_used_products: list[ProductUsage] = Field(default_factory=list)

    model_config = {"frozen": True}


MORNING_ROUTINE_TEMPLATE: list[dict] = [
    {"name": "Wake up early", "icon": "Sunrise"},
    {"name": "Drink water", "icon": "Droplets"},
    {"name": "Stretch for 5 minutes", "icon": "Activity"},
    {"name": "Exercise", "icon": "Dumbbell"},
    {"name": "Journal", "icon": "PenTool"},
    {"name": "Plan the day", "icon": "ClipboardList"},
]

NIGHT_ROUTINE_TEMPLATE: list[dict] = [
    {"name": "Reflect on the day", "icon": "Sparkles"},
    {"name": "Gratitude journaling", "icon": "Heart"},
    {"name": "Stretch", "icon": "Activity"},
    {"name": "No phone after 9 PM", "icon": "Smartphone"},
    {"name": "Read for 20 minutes", "icon": "BookOpen"},
    {"name": "Sleep prep", "icon": "Moon"},
]

MORNING_SKINCARE_TEMPLATE: list[dict] = [
    {"name": "Cleanser", "icon": "Droplets", "time_estimate": 2},
    {"name": "Toner", "icon": "Sparkles", "is_optional": True, "time_estimate": 1},
    {"name": "Serum (Vitamin C / Hydrating)", "icon": "FlaskConical", "time_estimate": 1},
    {"name": "Moisturizer", "icon": "Cloud", "time_estimate": 1},
    {"name": "Sunscreen (SPF)", "icon": "Sun", "time_estimate": 1},
]

NIGHT_SKINCARE_TEMPLATE: list[dict] = [
    {"name": "Makeup Removal / Oil Cleanse", "icon": "Eraser", "time_estimate": 3},
    {"name": "Cleanser", "icon": "Droplets", "time_estimate": 2},
    {"name": "Toner", "icon": "Sparkles", "time_estimate": 1},
    {"name": "Treatment (Retinol / Actives)", "icon": "Zap", "is_alternate_day": True, "time_estimate": 1},
    {"name": "Moisturizer / Night Cream", "icon": "Moon", "time_estimate": 1},
    {"name": "Lip Care / Eye Cream", "icon": "Heart", "is_optional": True, "time_estimate": 1},
]
