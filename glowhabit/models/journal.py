"""Journal entry and sentiment data models."""

from datetime import date as date_type
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from glowhabit.models.base import RECORD_CONFIG, new_id

Mood = Literal["great", "good", "okay", "low", "rough"]

SentimentLabel = Literal["very-negative", "negative", "neutral", "positive", "very-positive"]

Confidence = Literal["low", "medium", "high"]

EmotionTag = Literal[
    "calm",
    "stressed",
    "happy",
    "anxious",
    "motivated",
    "overwhelmed",
    "grateful",
    "sad",
    "excited",
    "peaceful",
]

MOOD_EMOJI: dict[str, str] = {
    "great": "😊",
    "good": "🙂",
    "okay": "😐",
    "low": "😔",
    "rough": "😢",
}


class SentimentData(BaseModel):
    """Result of analyzing journal text."""

    score: int = Field(..., ge=-100, le=100, description="Signed sentiment magnitude")
    label: SentimentLabel = Field(..., description="Ordinal sentiment bucket")
    confidence: Confidence = Field(..., description="Strength of the lexical signal")
    emotions: list[EmotionTag] = Field(default_factory=list, description="Detected emotions")
    analyzed_at: datetime = Field(default_factory=datetime.now, description="Analysis timestamp")

    model_config = RECORD_CONFIG

    def same_result(self, other: "SentimentData") -> bool:
        """Compare everything except the analysis timestamp."""
        return self.model_dump(exclude={"analyzed_at"}) == other.model_dump(exclude={"analyzed_at"})


class HabitsSummary(BaseModel):
    """Snapshot of the day's habit completion attached to a journal entry."""

    completed: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    habits: list[str] = Field(default_factory=list, description="Names of completed habits")

    model_config = RECORD_CONFIG


class JournalEntry(BaseModel):
    """A daily journal entry. One entry per calendar day."""

    id: str = Field(default_factory=new_id, description="Entry ID")
    date: date_type = Field(..., description="Entry day")
    content: str = Field(default="", description="Free text")
    mood: Optional[Mood] = Field(default=None, description="Mood, manual or derived")
    manual_mood: bool = Field(default=False, description="Mood was set by the user")
    sentiment: Optional[SentimentData] = Field(default=None, description="Derived sentiment")
    habits_summary: Optional[HabitsSummary] = Field(default=None, description="Habit snapshot")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    model_config = RECORD_CONFIG

    @property
    def word_count(self) -> int:
        return len(self.content.split())


class JournalSettings(BaseModel):
    """Journal preferences."""

    sentiment_analysis_enabled: bool = Field(default=True)

    model_config = RECORD_CONFIG


class JournalStats(BaseModel):
    """Derived journaling statistics."""

    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    total_entries: int = Field(default=0, ge=0)
    this_month_entries: int = Field(default=0, ge=0)
    avg_words_per_entry: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class EmotionCount(BaseModel):
    emotion: EmotionTag
    count: int = Field(..., ge=1)

    model_config = {"frozen": True}


class MoodPoint(BaseModel):
    date: date_type
    score: int = Field(..., ge=-100, le=100)
    label: SentimentLabel

    model_config = {"frozen": True}


class MoodAnalytics(BaseModel):
    """Aggregated sentiment over a recent window of entries."""

    average_score: int = Field(default=0, ge=-100, le=100)
    positive_ratio: int = Field(default=0, ge=0, le=100)
    emotional_stability: int = Field(default=100, ge=0, le=100)
    dominant_emotions: list[EmotionCount] = Field(default_factory=list)
    mood_by_day: list[MoodPoint] = Field(default_factory=list)

    model_config = {"frozen": True}


class HabitMoodCorrelation(BaseModel):
    """Relationship between habit completion and journal sentiment."""

    high_completion_avg_mood: int = Field(default=0)
    low_completion_avg_mood: int = Field(default=0)
    insights: list[str] = Field(default_factory=list)
    data_points: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


JOURNAL_PROMPTS: list[str] = [
    "How do you feel today?",
    "What went well today?",
    "What challenged you today?",
    "What are you grateful for?",
    "What can you improve tomorrow?",
    "What's one thing you learned today?",
    "What made you smile today?",
    "What's on your mind right now?",
    "What are you looking forward to?",
    "How did you take care of yourself today?",
    "What would make tomorrow great?",
    "What's something you're proud of?",
    "Who made a positive impact on your day?",
    "What's a challenge you overcame recently?",
    "What's something you want to remember about today?",
]
