"""
Unit tests for mood scoring.

Usage:
    pytest tests/test_scoring.py -v
"""
import pytest

from mood_engine import EMOTION_VOCABULARY, MOOD_SCORES, normalize_label, score, wellness_tip


class TestScore:
    """Test the label to score table."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("joy", 5),
            ("surprise", 4),
            ("neutral", 3),
            ("disgust", 2),
            ("sadness", 1),
            ("fear", 1),
            ("anger", 0),
        ],
    )
    def test_vocabulary_scores(self, label, expected):
        """Every vocabulary label maps to its fixed score."""
        assert score(label) == expected

    def test_case_insensitive(self):
        """Labels match regardless of case."""
        assert score("JOY") == 5
        assert score("Anger") == 0
        assert score("  Sadness ") == 1

    @pytest.mark.parametrize("label", [None, "", "happy", "love", "optimism", 42, ["joy"]])
    def test_unknown_or_missing_is_neutral(self, label):
        """Anything outside the vocabulary scores as neutral."""
        assert score(label) == 3

    def test_scores_within_range(self):
        """All scores stay on the 0-5 scale."""
        assert all(0 <= MOOD_SCORES[label] <= 5 for label in EMOTION_VOCABULARY)
        assert len(EMOTION_VOCABULARY) == 7


class TestNormalizeLabel:
    """Test label normalization."""

    def test_normalizes_known_label(self):
        assert normalize_label("Surprise") == "surprise"

    def test_unknown_label_is_none(self):
        assert normalize_label("excited") is None
        assert normalize_label(None) is None


class TestWellnessTip:
    """Test wellness tips for the latest mood."""

    def test_tip_for_known_mood(self):
        tip = wellness_tip("fear")
        assert tip.mood == "fear"
        assert tip.title == "Ground Yourself"
        assert "5-4-3-2-1" in tip.tip

    def test_unknown_mood_falls_back_to_neutral(self):
        tip = wellness_tip("bored")
        assert tip.mood == "neutral"
        assert tip.title == "Find Your Balance"

    def test_every_label_has_a_tip(self):
        for label in EMOTION_VOCABULARY:
            assert wellness_tip(label).mood == label
