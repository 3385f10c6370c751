"""Calendar heatmap of entry counts per day."""

from collections import Counter
from datetime import date, timedelta
from typing import Dict, Iterable

from .buckets import as_day, local_day
from .models import Entry


def heatmap(entries: Iterable[Entry], start, end) -> Dict[str, int]:
    """
    Count entries per calendar day in ``[start, end]``.

    Every day in the range is present, keyed ``YYYY-MM-DD`` in chronological
    order; days without entries map to 0. Returns an empty mapping when
    ``start`` is after ``end``.
    """
    first = as_day(start)
    last = as_day(end)
    if first > last:
        return {}

    counts = Counter(local_day(e.timestamp) for e in entries)

    result = {}
    day = first
    while day <= last:
        result[day.isoformat()] = counts.get(day, 0)
        day += timedelta(days=1)
    return result


def year_heatmap(entries: Iterable[Entry], today=None) -> Dict[str, int]:
    """Heatmap from January 1st of the current year up to ``today``."""
    end = as_day(today)
    return heatmap(entries, date(end.year, 1, 1), end)
