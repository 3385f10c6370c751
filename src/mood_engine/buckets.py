"""
Day bucketing and trend series.

Entries are assigned to local calendar days. A requested window always
produces one bucket per day, so gaps stay visible to the caller.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from .models import DayBucket, Entry, TrendPoint
from .scoring import score

logger = logging.getLogger(__name__)


def local_datetime(value) -> Optional[datetime]:
    """
    Convert a timestamp to a naive local datetime.

    Accepts datetimes (aware ones are converted to local time) and ISO-8601
    strings. Returns None for anything that cannot be read as a point in time.
    """
    if value is None:
        return None

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    return None


def local_day(value) -> Optional[date]:
    """Truncate a timestamp to its local calendar day."""
    moment = local_datetime(value)
    return moment.date() if moment else None


def as_day(value: Optional[object] = None) -> date:
    """Resolve an anchor (date, datetime or None for today) to a calendar day."""
    if value is None:
        return date.today()
    day = local_day(value)
    if day is None:
        raise ValueError(f"Invalid anchor date: {value!r}")
    return day


def bucket(entries: Iterable[Entry], window_days: int, anchor=None) -> List[DayBucket]:
    """
    Group entries into the ``window_days`` calendar days ending at ``anchor``.

    Args:
        entries: Entry snapshot in any order
        window_days: Number of days in the window, anchor included
        anchor: Last day of the window (defaults to today)

    Returns:
        One DayBucket per day, oldest first. Days without entries get an
        empty tuple. Entries outside the window or without a readable
        timestamp are left out.
    """
    if window_days < 1:
        return []

    end = as_day(anchor)
    start = end - timedelta(days=window_days - 1)

    grouped = {start + timedelta(days=i): [] for i in range(window_days)}
    skipped = 0

    for entry in entries:
        day = local_day(entry.timestamp)
        if day is None:
            skipped += 1
            continue
        if day in grouped:
            grouped[day].append(entry)

    if skipped:
        logger.debug(f"[ENGINE] Skipped {skipped} entries without a usable timestamp")

    return [DayBucket(day=day, entries=tuple(items)) for day, items in grouped.items()]


def trend(buckets: Iterable[DayBucket]) -> List[TrendPoint]:
    """
    Build the mood trend series from day buckets.

    Empty days yield ``mean_score=None``; a populated day whose entries are
    all "anger" yields 0.0, so the two cases never collide.
    """
    points = []
    for day_bucket in buckets:
        mean = None
        count = 0
        for entry in day_bucket.entries:
            value = score(entry.mood_label)
            mean = value if mean is None else (mean * count + value) / (count + 1)
            count += 1

        points.append(
            TrendPoint(
                day=day_bucket.day,
                label=day_bucket.label,
                mean_score=None if mean is None else float(mean),
                count=count,
            )
        )
    return points
