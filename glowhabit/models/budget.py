"""Budget entry data models."""

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, Field

from glowhabit.models.base import RECORD_CONFIG, new_id


class BudgetEntry(BaseModel):
    """Daily budget discipline check-in. One entry per calendar day."""

    id: str = Field(default_factory=new_id, description="Entry ID")
    date: date_type = Field(..., description="Entry day")
    stayed_within_budget: bool = Field(default=False, description="Spending stayed within budget")
    tracked_expenses: bool = Field(default=False, description="Expenses were recorded")
    amount: Optional[float] = Field(default=None, ge=0, description="Amount spent")
    notes: Optional[str] = Field(default=None, description="User notes")

    model_config = RECORD_CONFIG

    @property
    def is_good_day(self) -> bool:
        """Within budget and tracked."""
        return self.stayed_within_budget and self.tracked_expenses


class BudgetStats(BaseModel):
    """Derived budget discipline statistics."""

    consistency_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    days_under_budget: int = Field(default=0, ge=0)
    days_over_budget: int = Field(default=0, ge=0)
    monthly_score: int = Field(default=0, ge=0, le=100)
    consistency_rate: int = Field(default=0, ge=0, le=100)
    total_tracked_days: int = Field(default=0, ge=0)

    model_config = {"frozen": True}
