#!/usr/bin/env python3
"""
Seed the journal database with a demo history.

Writes a few weeks of diary entries for one user, with moods, sleep hours
and life-balance ratings, so the analytics dashboard has something to show.

Usage:
    python scripts/seed_entries.py --user demo --days 45
"""
import argparse
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

from dotenv import load_dotenv

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))
sys.path.insert(0, str(BASE_DIR / "src"))

load_dotenv()

from mood_engine import EMOTION_VOCABULARY, LIFE_AREAS  # noqa: E402
from server.dashboard_api.database import EntryStore  # noqa: E402

SAMPLE_TEXTS = {
    "joy": "Had a great walk with friends and finished my project.",
    "surprise": "Got an unexpected call from an old friend today.",
    "neutral": "Regular day at work, nothing special happened.",
    "disgust": "The commute was awful and the train was filthy.",
    "sadness": "Missing home a lot this week.",
    "fear": "Nervous about tomorrow's presentation.",
    "anger": "Argument with my manager left me fuming.",
}


def seed(store: EntryStore, user_id: str, days: int, skip_rate: float, rng: random.Random) -> int:
    """
    Write a demo history ending today.

    Args:
        store: Target entry store
        user_id: Owner of the seeded entries
        days: Number of days of history
        skip_rate: Probability of leaving a day without entries
        rng: Random source

    Returns:
        Number of entries written
    """
    now = datetime.now().replace(second=0, microsecond=0)
    written = 0

    for offset in range(days - 1, -1, -1):
        if offset > 0 and rng.random() < skip_rate:
            continue

        for _ in range(rng.choice([1, 1, 1, 2])):
            label = rng.choice(EMOTION_VOCABULARY)
            created_at = (now - timedelta(days=offset)).replace(hour=rng.randint(7, 22))
            if created_at > now:
                created_at = now
            store.add_entry(
                user_id=user_id,
                content=SAMPLE_TEXTS[label],
                created_at=created_at,
                mood_label=label,
                mood_confidence=round(rng.uniform(0.5, 0.99), 2),
                sleep_hours=round(rng.uniform(4.5, 9.0), 1) if rng.random() < 0.8 else None,
                life_balance={area: rng.randint(2, 10) for area in LIFE_AREAS} if rng.random() < 0.5 else None,
            )
            written += 1

    return written


def main():
    """Seed the journal database."""
    parser = argparse.ArgumentParser(description="Seed demo journal entries")
    parser.add_argument("--user", default="demo", help="User id to seed")
    parser.add_argument("--days", type=int, default=45, help="Days of history")
    parser.add_argument("--skip-rate", type=float, default=0.2, help="Share of days without entries")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--db", default=None, help="Database path (defaults to settings)")
    args = parser.parse_args()

    store = EntryStore(db_path=args.db)

    print("=" * 60)
    print("Mindsync Journal Seed Script")
    print("=" * 60)
    print(f"\nDatabase: {store.db_path}")
    print(f"User: {args.user}\n")

    count = seed(store, args.user, args.days, args.skip_rate, random.Random(args.seed))

    print(f"Entries written: {count}")
    print("=" * 60)


if __name__ == "__main__":
    main()
