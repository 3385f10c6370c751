"""Pydantic models for journal API requests and responses."""
from .entry import DiaryEntry, DiaryEntryCreate
from .mood import MoodAnalysisRequest, MoodAnalysisResponse
from .analytics import (
    TrendPointResponse,
    DistributionSliceResponse,
    EmotionCountResponse,
    StatSummaryResponse,
    LifeBalanceAreaResponse,
    SleepMoodPointResponse,
    WellnessTipResponse,
    TimelinePointResponse,
    MoodTimelineResponse,
    SuggestionResponse,
    DashboardResponse,
)

__all__ = [
    "DiaryEntry",
    "DiaryEntryCreate",
    "MoodAnalysisRequest",
    "MoodAnalysisResponse",
    "TrendPointResponse",
    "DistributionSliceResponse",
    "EmotionCountResponse",
    "StatSummaryResponse",
    "LifeBalanceAreaResponse",
    "SleepMoodPointResponse",
    "WellnessTipResponse",
    "TimelinePointResponse",
    "MoodTimelineResponse",
    "SuggestionResponse",
    "DashboardResponse",
]
