"""
Summary views built on top of the core aggregations.

Covers the headline stats, life-balance radar, sleep vs. mood series, the
per-entry mood timeline, rule-based suggestions, and the combined dashboard.
Optional fields (sleep hours, life balance, labels) are left out of averages
when missing; they are never counted as zero.
"""

import logging
from datetime import datetime, timedelta
from numbers import Real
from typing import Iterable, List, Mapping, Optional, Sequence

from .buckets import as_day, bucket, local_datetime, trend
from .distribution import DEFAULT_TOP_EMOTIONS, distribute, top_emotions
from .heatmap import year_heatmap
from .models import (
    Dashboard,
    Entry,
    LifeBalanceArea,
    MoodTimeline,
    SleepMoodPoint,
    StatSummary,
    Suggestion,
    TimelinePoint,
)
from .scoring import normalize_label, score, wellness_tip
from .streak import streak

logger = logging.getLogger(__name__)

LIFE_AREAS = ("Work", "Social", "Health", "Hobbies", "Growth")

LOW_MOOD_THRESHOLD = 2.5
LOW_SLEEP_HOURS = 6
RECOMMENDED_SLEEP_HOURS = 7
RECENT_ENTRY_COUNT = 7
MAX_SUGGESTIONS = 3


def _has_label(entry: Entry) -> bool:
    return isinstance(entry.mood_label, str) and bool(entry.mood_label.strip())


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _newest_first(entries: Iterable[Entry]) -> List[Entry]:
    """Sort entries newest first; entries without a timestamp go last."""
    stamped = []
    unstamped = []
    for entry in entries:
        moment = local_datetime(entry.timestamp)
        if moment is None:
            unstamped.append(entry)
        else:
            stamped.append((moment, entry))
    stamped.sort(key=lambda pair: pair[0], reverse=True)
    return [entry for _, entry in stamped] + unstamped


def average_mood(entries: Iterable[Entry]) -> Optional[float]:
    """Mean score over entries that carry a label, to one decimal place."""
    scores = [score(e.mood_label) for e in entries if _has_label(e)]
    if not scores:
        return None
    return round(sum(scores) / len(scores), 1)


def summary_stats(entries: Sequence[Entry], today=None) -> StatSummary:
    """Streak, check-in count, average mood and most common mood."""
    ranked = top_emotions(entries, limit=1)
    return StatSummary(
        streak=streak(entries, today),
        total_check_ins=len(entries),
        average_mood=average_mood(entries),
        most_common_mood=ranked[0].label if ranked else None,
    )


def life_balance(entries: Iterable[Entry]) -> List[LifeBalanceArea]:
    """Average self-rating per life area; areas nobody rated have value None."""
    totals = {area: 0.0 for area in LIFE_AREAS}
    samples = {area: 0 for area in LIFE_AREAS}

    for entry in entries:
        ratings = entry.life_balance
        if not isinstance(ratings, Mapping):
            continue
        for area in LIFE_AREAS:
            value = ratings.get(area)
            if _is_number(value):
                totals[area] += value
                samples[area] += 1

    return [
        LifeBalanceArea(
            area=area,
            value=totals[area] / samples[area] if samples[area] else None,
            samples=samples[area],
        )
        for area in LIFE_AREAS
    ]


def sleep_mood(entries: Iterable[Entry], window_days: int = 14, anchor=None) -> List[SleepMoodPoint]:
    """
    Sleep hours and mood score per day over the window.

    Each day reports the values of its most recent entry that records them.
    """
    points = []
    for day_bucket in bucket(entries, window_days, anchor):
        ordered = _newest_first(day_bucket.entries)
        sleep = next((e.sleep_hours for e in ordered if _is_number(e.sleep_hours)), None)
        labeled = next((e for e in ordered if _has_label(e)), None)
        points.append(
            SleepMoodPoint(
                day=day_bucket.day,
                label=day_bucket.label,
                sleep=sleep,
                mood=score(labeled.mood_label) if labeled else None,
            )
        )
    return points


def mood_timeline(entries: Iterable[Entry], days: int = 7, now: Optional[datetime] = None) -> MoodTimeline:
    """
    Per-entry mood points for the last ``days`` days, oldest first.

    The wellness tip follows the mood of the latest entry in the window.
    """
    now = local_datetime(now) or datetime.now()
    threshold = now - timedelta(days=days)

    selected = []
    for entry in entries:
        moment = local_datetime(entry.timestamp)
        if moment is not None and threshold <= moment <= now:
            selected.append((moment, entry))
    selected.sort(key=lambda pair: pair[0])

    points = tuple(
        TimelinePoint(
            entry_id=entry.id,
            timestamp=moment,
            label=moment.strftime("%b %d"),
            mood_label=normalize_label(entry.mood_label) or "neutral",
            mood_score=score(entry.mood_label),
            confidence=entry.mood_confidence,
            content=entry.content or "",
        )
        for moment, entry in selected
    )

    if not points:
        return MoodTimeline(days=days, points=(), average_score=None, tip=None)

    average = round(sum(p.mood_score for p in points) / len(points), 1)
    return MoodTimeline(
        days=days,
        points=points,
        average_score=average,
        tip=wellness_tip(points[-1].mood_label),
    )


def suggestions(entries: Iterable[Entry], average: Optional[float]) -> List[Suggestion]:
    """
    Rule-based wellness suggestions.

    Args:
        entries: Entry snapshot
        average: Average mood as reported by summary_stats (None if unknown)

    Returns:
        Up to three suggestions; "Maintain Your Routine" when no rule fires.
    """
    result = []

    if average is not None and average < LOW_MOOD_THRESHOLD:
        result.append(Suggestion(
            title="Self-care Focus",
            desc="Your mood has been lower recently. Consider practicing self-care activities "
                 "like meditation or talking to a friend.",
            icon="🧘",
        ))

    recent = _newest_first(entries)[:RECENT_ENTRY_COUNT]
    sleep_values = [e.sleep_hours for e in recent if _is_number(e.sleep_hours)]
    if sleep_values:
        avg_sleep = sum(sleep_values) / len(sleep_values)
        if avg_sleep < LOW_SLEEP_HOURS:
            result.append(Suggestion(
                title="Sleep Hygiene",
                desc="Your sleep hours are below recommended levels. Try establishing a "
                     "consistent bedtime routine.",
                icon="🌙",
            ))
        elif avg_sleep < RECOMMENDED_SLEEP_HOURS:
            result.append(Suggestion(
                title="Sleep Optimization",
                desc="Consider aiming for 7-9 hours of sleep for optimal mental health and "
                     "energy levels.",
                icon="💤",
            ))

    if not result:
        result.append(Suggestion(
            title="Maintain Your Routine",
            desc="You're doing great! Keep up with your journaling and wellness practices.",
            icon="✨",
        ))

    return result[:MAX_SUGGESTIONS]


def build_dashboard(
    entries: Sequence[Entry],
    today=None,
    trend_days: int = 30,
    sleep_days: int = 14,
    top_limit: int = DEFAULT_TOP_EMOTIONS,
) -> Dashboard:
    """Compute every analytics view from one entry snapshot."""
    entries = list(entries)
    today = as_day(today)
    stats = summary_stats(entries, today)

    dashboard = Dashboard(
        generated_for=today,
        stats=stats,
        trend=tuple(trend(bucket(entries, trend_days, today))),
        distribution=tuple(distribute(entries)),
        top_emotions=tuple(top_emotions(entries, top_limit)),
        heatmap=year_heatmap(entries, today),
        life_balance=tuple(life_balance(entries)),
        sleep_mood=tuple(sleep_mood(entries, sleep_days, today)),
        suggestions=tuple(suggestions(entries, stats.average_mood)),
    )

    logger.debug(
        f"[ENGINE] Built dashboard for {today} from {len(entries)} entries: "
        f"streak={stats.streak}, avg_mood={stats.average_mood}"
    )
    return dashboard
