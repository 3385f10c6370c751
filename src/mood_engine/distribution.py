"""Label frequency views: mood distribution and top emotions."""

import math
from typing import Dict, Iterable, List

from .models import DistributionSlice, EmotionCount, Entry
from .scoring import normalize_label

DEFAULT_TOP_EMOTIONS = 7


def count_labels(entries: Iterable[Entry]) -> Dict[str, int]:
    """Count recognized labels, keyed in first-seen order."""
    counts: Dict[str, int] = {}
    for entry in entries:
        label = normalize_label(entry.mood_label)
        if label is None:
            continue
        counts[label] = counts.get(label, 0) + 1
    return counts


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def distribute(entries: Iterable[Entry]) -> List[DistributionSlice]:
    """
    Share of each mood label among labeled entries.

    Entries without a recognized label are not part of the total. Returns an
    empty list when nothing is labeled.
    """
    counts = count_labels(entries)
    total = sum(counts.values())
    if total == 0:
        return []

    return [
        DistributionSlice(
            label=label,
            percent=_round_half_up(100 * count / total),
            count=count,
        )
        for label, count in counts.items()
    ]


def top_emotions(entries: Iterable[Entry], limit: int = DEFAULT_TOP_EMOTIONS) -> List[EmotionCount]:
    """
    Rank labels by frequency, most frequent first.

    Ties keep the order in which the labels first appeared in ``entries``.
    """
    if limit < 1:
        return []

    ranked = sorted(count_labels(entries).items(), key=lambda kv: -kv[1])
    return [EmotionCount(label=label, count=count) for label, count in ranked[:limit]]
