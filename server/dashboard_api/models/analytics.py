"""Analytics view models returned by the dashboard API."""
from datetime import date, datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class TrendPointResponse(BaseModel):
    """Mean mood for one day; null mean means no entries that day."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    day: date
    label: str
    mean_score: Optional[float] = Field(serialization_alias="meanScore")
    count: int


class DistributionSliceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    percent: int
    count: int


class EmotionCountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    count: int


class StatSummaryResponse(BaseModel):
    """Headline journal statistics."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    streak: int
    total_check_ins: int = Field(serialization_alias="totalCheckIns")
    average_mood: Optional[float] = Field(serialization_alias="averageMood")
    most_common_mood: Optional[str] = Field(serialization_alias="mostCommonMood")


class LifeBalanceAreaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    area: str
    value: Optional[float]
    samples: int
    full_mark: int = Field(serialization_alias="fullMark")


class SleepMoodPointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: date
    label: str
    sleep: Optional[float]
    mood: Optional[int]


class WellnessTipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    mood: str
    title: str
    tip: str


class TimelinePointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    entry_id: str = Field(serialization_alias="entryId")
    timestamp: datetime
    label: str
    mood_label: str = Field(serialization_alias="moodLabel")
    mood_score: int = Field(serialization_alias="moodScore")
    confidence: Optional[float] = None
    content: str = ""


class MoodTimelineResponse(BaseModel):
    """Per-entry mood chart with the wellness tip for the latest mood."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    days: int
    points: list[TimelinePointResponse]
    average_score: Optional[float] = Field(serialization_alias="averageScore")
    tip: Optional[WellnessTipResponse] = None


class SuggestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    desc: str
    icon: str


class DashboardResponse(BaseModel):
    """Every analytics view computed from one entry snapshot."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    generated_for: date = Field(serialization_alias="generatedFor")
    stats: StatSummaryResponse
    trend: list[TrendPointResponse]
    distribution: list[DistributionSliceResponse]
    top_emotions: list[EmotionCountResponse] = Field(serialization_alias="topEmotions")
    heatmap: dict[str, int]
    life_balance: list[LifeBalanceAreaResponse] = Field(serialization_alias="lifeBalance")
    sleep_mood: list[SleepMoodPointResponse] = Field(serialization_alias="sleepMood")
    suggestions: list[SuggestionResponse]
