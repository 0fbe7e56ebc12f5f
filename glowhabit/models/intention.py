"""Monthly intention data model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from glowhabit.models.base import RECORD_CONFIG, new_id


class MonthlyIntention(BaseModel):
    """A guiding intention for a calendar month. One per month."""

    id: str = Field(default_factory=new_id)
    month: str = Field(..., pattern=r"^\d{4}-(0[1-9]|1[0-2])$", description="Month as YYYY-MM")
    intention: str = Field(..., min_length=1)
    personal_note: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    model_config = RECORD_CONFIG
