"""
Entry and view-model types for the mood aggregation engine.

Entries are read-only snapshots handed over by the store. Every view is a
frozen dataclass rebuilt from scratch on each call, so a consumer can keep
one around without it changing underneath.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Entry:
    """A single journal entry as delivered by the store."""

    id: str
    timestamp: Any  # datetime, ISO-8601 string, or None when unknown
    content: str = ""
    mood_label: Optional[str] = None
    mood_confidence: Optional[float] = None
    sleep_hours: Optional[float] = None
    life_balance: Optional[Mapping[str, float]] = None
    user_id: Optional[str] = None


@dataclass(frozen=True)
class DayBucket:
    """Entries that fall on one local calendar day."""

    day: date
    entries: Tuple[Entry, ...] = ()

    @property
    def label(self) -> str:
        return self.day.strftime("%b %d")


@dataclass(frozen=True)
class TrendPoint:
    """Mean mood score for one day; ``mean_score`` is None when the day has no entries."""

    day: date
    label: str
    mean_score: Optional[float]
    count: int = 0


@dataclass(frozen=True)
class DistributionSlice:
    label: str
    percent: int
    count: int


@dataclass(frozen=True)
class EmotionCount:
    label: str
    count: int


@dataclass(frozen=True)
class StatSummary:
    """Headline numbers shown above the charts."""

    streak: int
    total_check_ins: int
    average_mood: Optional[float]
    most_common_mood: Optional[str]


@dataclass(frozen=True)
class LifeBalanceArea:
    area: str
    value: Optional[float]
    samples: int = 0
    full_mark: int = 10


@dataclass(frozen=True)
class SleepMoodPoint:
    day: date
    label: str
    sleep: Optional[float]
    mood: Optional[int]


@dataclass(frozen=True)
class WellnessTip:
    mood: str
    title: str
    tip: str


@dataclass(frozen=True)
class TimelinePoint:
    entry_id: str
    timestamp: datetime
    label: str
    mood_label: str
    mood_score: int
    confidence: Optional[float] = None
    content: str = ""


@dataclass(frozen=True)
class MoodTimeline:
    days: int
    points: Tuple[TimelinePoint, ...]
    average_score: Optional[float]
    tip: Optional[WellnessTip] = None


@dataclass(frozen=True)
class Suggestion:
    title: str
    desc: str
    icon: str


@dataclass(frozen=True)
class Dashboard:
    """Every analytics view computed from the same snapshot."""

    generated_for: date
    stats: StatSummary
    trend: Tuple[TrendPoint, ...]
    distribution: Tuple[DistributionSlice, ...]
    top_emotions: Tuple[EmotionCount, ...]
    heatmap: Mapping[str, int]
    life_balance: Tuple[LifeBalanceArea, ...]
    sleep_mood: Tuple[SleepMoodPoint, ...]
    suggestions: Tuple[Suggestion, ...] = field(default_factory=tuple)
