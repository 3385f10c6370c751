"""
Mood Aggregation Engine.

Turns a snapshot of journal entries into analytics views: mood trend,
distribution, streak, calendar heatmap, top emotions, and summary stats.
All functions are pure and take the snapshot as an argument.
"""

from .models import (
    Dashboard,
    DayBucket,
    DistributionSlice,
    EmotionCount,
    Entry,
    LifeBalanceArea,
    MoodTimeline,
    SleepMoodPoint,
    StatSummary,
    Suggestion,
    TimelinePoint,
    TrendPoint,
    WellnessTip,
)
from .scoring import EMOTION_VOCABULARY, MOOD_SCORES, normalize_label, score, wellness_tip
from .buckets import bucket, local_day, trend
from .distribution import distribute, top_emotions
from .streak import streak
from .heatmap import heatmap, year_heatmap
from .summary import (
    LIFE_AREAS,
    average_mood,
    build_dashboard,
    life_balance,
    mood_timeline,
    sleep_mood,
    suggestions,
    summary_stats,
)

__all__ = [
    "Dashboard",
    "DayBucket",
    "DistributionSlice",
    "EmotionCount",
    "Entry",
    "LifeBalanceArea",
    "MoodTimeline",
    "SleepMoodPoint",
    "StatSummary",
    "Suggestion",
    "TimelinePoint",
    "TrendPoint",
    "WellnessTip",
    "EMOTION_VOCABULARY",
    "MOOD_SCORES",
    "LIFE_AREAS",
    "normalize_label",
    "score",
    "wellness_tip",
    "bucket",
    "local_day",
    "trend",
    "distribute",
    "top_emotions",
    "streak",
    "heatmap",
    "year_heatmap",
    "average_mood",
    "summary_stats",
    "life_balance",
    "sleep_mood",
    "mood_timeline",
    "suggestions",
    "build_dashboard",
]
