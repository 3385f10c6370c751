"""
Check-in streak calculation.

A streak is the number of consecutive days, ending today, with at least one
entry. The run has to include today: a user who wrote yesterday but not yet
today has a streak of 0.
"""

from datetime import timedelta
from typing import Iterable

from .buckets import as_day, local_day
from .models import Entry


def streak(entries: Iterable[Entry], today=None) -> int:
    """
    Count consecutive check-in days ending today.

    Args:
        entries: Entry snapshot in any order
        today: Day to count back from (defaults to the current local date)

    Returns:
        Length of the unbroken run of days starting at ``today``. Several
        entries on one day count once; entries dated after ``today`` are
        ignored.
    """
    today = as_day(today)
    days = sorted(
        {day for day in (local_day(e.timestamp) for e in entries) if day and day <= today},
        reverse=True,
    )

    count = 0
    cursor = today
    for day in days:
        if day != cursor:
            break
        count += 1
        cursor = day - timedelta(days=1)

    return count
