"""
Unit tests for mood distribution and top emotions.

Usage:
    pytest tests/test_distribution.py -v
"""
import pytest

from mood_engine import distribute, top_emotions
from conftest import make_entry


class TestDistribute:
    """Test the share of each label among labeled entries."""

    def test_empty_input(self):
        assert distribute([]) == []

    def test_only_unlabeled_entries(self):
        """No labeled entries means no division and an empty result."""
        assert distribute([make_entry(0, None), make_entry(0, "happy")]) == []

    def test_unlabeled_entries_excluded_from_total(self):
        entries = [make_entry(0, "joy"), make_entry(0, None), make_entry(0, "unknown")]

        result = distribute(entries)

        assert len(result) == 1
        assert result[0].label == "joy"
        assert result[0].percent == 100
        assert result[0].count == 1

    def test_percentages_and_counts(self):
        entries = [make_entry(0, "joy")] * 3 + [make_entry(0, "sadness")]

        result = {s.label: s for s in distribute(entries)}

        assert result["joy"].percent == 75
        assert result["joy"].count == 3
        assert result["sadness"].percent == 25

    @pytest.mark.parametrize(
        "labels",
        [
            ["joy", "sadness", "anger"],
            ["joy", "joy", "fear", "surprise", "disgust", "neutral"],
            ["anger"] * 5 + ["joy"] * 2 + ["fear"],
        ],
    )
    def test_percentages_sum_to_about_100(self, labels):
        result = distribute([make_entry(0, label) for label in labels])

        assert abs(sum(s.percent for s in result) - 100) <= len(result)

    def test_order_is_first_seen(self):
        entries = [make_entry(0, label) for label in ["fear", "joy", "fear", "anger"]]

        assert [s.label for s in distribute(entries)] == ["fear", "joy", "anger"]

    def test_labels_are_case_insensitive(self):
        entries = [make_entry(0, "Joy"), make_entry(0, "JOY")]

        result = distribute(entries)

        assert len(result) == 1
        assert result[0].count == 2


class TestTopEmotions:
    """Test frequency ranking of emotions."""

    def test_tie_broken_by_first_occurrence(self):
        """anger and sadness tie at 2; anger appeared first so it ranks first."""
        labels = ["anger", "sadness", "joy", "sadness", "anger"]
        entries = [make_entry(0, label) for label in labels]

        result = top_emotions(entries)

        assert [(e.label, e.count) for e in result] == [("anger", 2), ("sadness", 2), ("joy", 1)]

    def test_limit_caps_result(self):
        labels = ["joy", "surprise", "neutral", "disgust", "sadness", "fear", "anger"]
        entries = [make_entry(0, label) for label in labels]

        assert len(top_emotions(entries)) == 7
        assert len(top_emotions(entries, limit=3)) == 3
        assert top_emotions(entries, limit=0) == []

    def test_descending_by_count(self):
        entries = [make_entry(0, "fear")] + [make_entry(0, "joy")] * 3 + [make_entry(0, "anger")] * 2

        assert [e.label for e in top_emotions(entries)] == ["joy", "anger", "fear"]

    def test_empty_input(self):
        assert top_emotions([]) == []
