"""
Unit tests for the check-in streak.

Usage:
    pytest tests/test_streak.py -v
"""
from datetime import datetime

from mood_engine import Entry, streak
from conftest import TODAY, make_entry


class TestStreak:
    """Test consecutive check-in days ending today."""

    def test_no_entries(self):
        assert streak([], TODAY) == 0

    def test_only_today(self):
        assert streak([make_entry(0)], TODAY) == 1

    def test_gap_stops_the_run(self):
        """today, yesterday and three days ago: the missing day 2 ends the run."""
        entries = [make_entry(0), make_entry(1), make_entry(3)]
        assert streak(entries, TODAY) == 2

    def test_consecutive_days(self):
        entries = [make_entry(offset) for offset in range(5)]
        assert streak(entries, TODAY) == 5

    def test_order_does_not_matter(self):
        entries = [make_entry(2), make_entry(0), make_entry(1)]
        assert streak(entries, TODAY) == 3

    def test_multiple_entries_same_day_count_once(self):
        entries = [make_entry(0, hour=8), make_entry(0, hour=20), make_entry(1), make_entry(1)]
        assert streak(entries, TODAY) == 2

    def test_time_of_day_ignored(self):
        entries = [make_entry(0, hour=0), make_entry(1, hour=23)]
        assert streak(entries, TODAY) == 2

    def test_future_entries_ignored(self):
        entries = [make_entry(-1), make_entry(0)]
        assert streak(entries, TODAY) == 1

    def test_invalid_timestamps_ignored(self):
        entries = [Entry(id="x", timestamp="garbage"), make_entry(0)]
        assert streak(entries, TODAY) == 1

    def test_today_accepts_datetime(self):
        assert streak([make_entry(0)], datetime(2024, 6, 15, 21, 30)) == 1


class TestStrictStreakRule:
    """
    A run must include today to count.

    Habit trackers often keep the streak alive while today is still open;
    this one does not. Someone who wrote yesterday and the day before, but
    not yet today, has a streak of 0. These tests pin that rule so any change
    to it is deliberate.
    """

    def test_entries_only_before_today(self):
        entries = [make_entry(1), make_entry(2), make_entry(3)]
        assert streak(entries, TODAY) == 0

    def test_yesterday_only(self):
        assert streak([make_entry(1)], TODAY) == 0
