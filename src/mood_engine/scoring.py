"""
Mood scoring for classifier labels.

The emotion classifier emits one of seven labels. Each label maps to a
fixed score on a 0-5 scale; anything else counts as neutral.
"""

from typing import Optional

from .models import WellnessTip

MOOD_SCORES = {
    "joy": 5,
    "surprise": 4,
    "neutral": 3,
    "disgust": 2,
    "sadness": 1,
    "fear": 1,
    "anger": 0,
}

EMOTION_VOCABULARY = tuple(MOOD_SCORES)

NEUTRAL_SCORE = MOOD_SCORES["neutral"]

WELLNESS_TIPS = {
    "joy": (
        "Maintain Your Joy!",
        "Keep doing what makes you happy! Consider journaling about what brought you joy today, "
        "and try to incorporate these activities into your daily routine. Share your positive "
        "energy with others and practice gratitude.",
    ),
    "surprise": (
        "Embrace the Unexpected!",
        "Life's surprises can be exciting! Take time to reflect on what surprised you and how it "
        "made you feel. Stay open to new experiences and consider how unexpected events can lead "
        "to growth.",
    ),
    "neutral": (
        "Find Your Balance",
        "A calm, neutral state is perfect for reflection. Try mindfulness meditation, deep "
        "breathing exercises, or a gentle walk in nature to maintain this peaceful state.",
    ),
    "disgust": (
        "Process Your Feelings",
        "Disgust is a natural protective emotion. Try to identify what specifically triggered "
        "this feeling. Consider journaling about it or talking to someone you trust.",
    ),
    "sadness": (
        "You're Not Alone",
        "It's okay to feel sad. Try talking to a trusted friend, listening to calming music, or "
        "engaging in gentle activities. Consider reaching out for support if sadness persists.",
    ),
    "fear": (
        "Ground Yourself",
        "Try a grounding exercise like 5-4-3-2-1: name 5 things you see, 4 you can touch, 3 you "
        "hear, 2 you smell, and 1 you taste. Break what's causing fear into smaller steps.",
    ),
    "anger": (
        "Channel Your Energy Positively",
        "Anger is a valid emotion. Try high-intensity exercise or writing down your feelings. "
        "Take deep breaths and count to 10 before responding, then look at the root cause.",
    ),
}


def normalize_label(label: Optional[str]) -> Optional[str]:
    """Return the vocabulary form of ``label``, or None if it is not one."""
    if not isinstance(label, str):
        return None
    cleaned = label.strip().lower()
    return cleaned if cleaned in MOOD_SCORES else None


def score(label: Optional[str]) -> int:
    """
    Map a mood label to its 0-5 score.

    Matching is case-insensitive. Missing or unknown labels score as neutral
    (3) so a bad classifier result never breaks an aggregate.
    """
    normalized = normalize_label(label)
    if normalized is None:
        return NEUTRAL_SCORE
    return MOOD_SCORES[normalized]


def wellness_tip(label: Optional[str]) -> WellnessTip:
    """Return the wellness tip for a mood, falling back to the neutral tip."""
    mood = normalize_label(label) or "neutral"
    title, tip = WELLNESS_TIPS[mood]
    return WellnessTip(mood=mood, title=title, tip=tip)
