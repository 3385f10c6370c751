"""SQLite storage for journal entries."""
import json
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Generator, Optional
import logging

from mood_engine import Entry
from mood_engine.buckets import local_datetime

from .config import get_settings
from .services.entry_feed import EntryFeed, entry_feed

log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS diary_entries (
    entry_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    created_at TEXT,
    content TEXT,
    mood_label TEXT,
    mood_confidence REAL,
    sleep_hours REAL,
    life_balance TEXT
)
"""

INDEX = "CREATE INDEX IF NOT EXISTS idx_diary_user ON diary_entries (user_id, created_at)"


def _row_to_entry(row) -> Entry:
    """Convert SQLite row to an engine Entry.

    Malformed timestamps or life-balance JSON degrade to None rather than
    failing the whole snapshot.
    """
    timestamp = None
    if row["created_at"]:
        try:
            timestamp = datetime.fromisoformat(row["created_at"])
        except ValueError:
            log.warning(f"[STORE] Unreadable timestamp on entry {row['entry_id']}: {row['created_at']!r}")

    life_balance = None
    if row["life_balance"]:
        try:
            life_balance = json.loads(row["life_balance"])
        except json.JSONDecodeError:
            log.warning(f"[STORE] Unreadable life balance on entry {row['entry_id']}")
        if not isinstance(life_balance, dict):
            life_balance = None

    def to_float(val):
        return float(val) if val not in (None, "") else None

    return Entry(
        id=row["entry_id"],
        user_id=row["user_id"],
        timestamp=timestamp,
        content=row["content"] or "",
        mood_label=row["mood_label"] or None,
        mood_confidence=to_float(row["mood_confidence"]),
        sleep_hours=to_float(row["sleep_hours"]),
        life_balance=life_balance,
    )


class EntryStore:
    """
    SQLite-backed store of diary entries.
    Opens a connection per operation and publishes each user's new
    snapshot to the entry feed after every write.
    """

    def __init__(self, db_path: Optional[str] = None, feed: Optional[EntryFeed] = None):
        self.db_path = db_path or get_settings().journal_db_path
        self.feed = feed or entry_feed
        self._schema_ready = False

    @contextmanager
    def get_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a connection to the journal database."""
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            if not self._schema_ready:
                conn.execute(SCHEMA)
                conn.execute(INDEX)
                conn.commit()
                self._schema_ready = True
            yield conn
        finally:
            conn.close()

    def add_entry(
        self,
        user_id: str,
        content: str = "",
        created_at: Optional[datetime] = None,
        mood_label: Optional[str] = None,
        mood_confidence: Optional[float] = None,
        sleep_hours: Optional[float] = None,
        life_balance: Optional[dict] = None,
        entry_id: Optional[str] = None,
    ) -> Entry:
        """Insert an entry and publish the user's updated snapshot."""
        entry_id = entry_id or str(uuid.uuid4())
        # Stored as naive local time so ISO text order matches time order.
        created_at = local_datetime(created_at) or datetime.now()

        with self.get_conn() as conn:
            conn.execute(
                """
                INSERT INTO diary_entries
                    (entry_id, user_id, created_at, content, mood_label,
                     mood_confidence, sleep_hours, life_balance)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    entry_id,
                    user_id,
                    created_at.isoformat(),
                    content,
                    mood_label,
                    mood_confidence,
                    sleep_hours,
                    json.dumps(life_balance) if life_balance is not None else None,
                ),
            )
            conn.commit()
            row = conn.execute(
                "SELECT * FROM diary_entries WHERE entry_id = ?", (entry_id,)
            ).fetchone()

        log.info(f"[STORE] Added entry {entry_id} for user {user_id}")
        self._publish(user_id)
        return _row_to_entry(row)

    def get_entry(self, user_id: str, entry_id: str) -> Optional[Entry]:
        """Fetch a single entry owned by the user."""
        with self.get_conn() as conn:
            row = conn.execute(
                "SELECT * FROM diary_entries WHERE entry_id = ? AND user_id = ?",
                (entry_id, user_id),
            ).fetchone()
        return _row_to_entry(row) if row else None

    def list_entries(self, user_id: str, limit: Optional[int] = None) -> list[Entry]:
        """Get a user's entries, newest first."""
        sql = "SELECT * FROM diary_entries WHERE user_id = ? ORDER BY created_at DESC"
        params: tuple = (user_id,)
        if limit is not None:
            sql += " LIMIT ?"
            params = (user_id, limit)

        with self.get_conn() as conn:
            rows = conn.execute(sql, params).fetchall()

        return [_row_to_entry(row) for row in rows]

    def delete_entry(self, user_id: str, entry_id: str) -> bool:
        """Delete an entry owned by the user; returns False when nothing matched."""
        with self.get_conn() as conn:
            cursor = conn.execute(
                "DELETE FROM diary_entries WHERE entry_id = ? AND user_id = ?",
                (entry_id, user_id),
            )
            conn.commit()
            deleted = cursor.rowcount > 0

        if deleted:
            log.info(f"[STORE] Deleted entry {entry_id} for user {user_id}")
            self._publish(user_id)
        return deleted

    def _publish(self, user_id: str) -> None:
        self.feed.publish(user_id, self.list_entries(user_id))


# Singleton instance
entry_store = EntryStore()


def get_entry_store() -> EntryStore:
    """FastAPI dependency returning the shared entry store."""
    return entry_store
