"""Thread-safe publish-subscribe feed of journal entry snapshots.

Every change to a user's entries is published as the user's full entry
list. Subscribers get either a callback invocation (for synchronous
consumers) or an item on an asyncio queue (for the SSE dashboard stream).
"""
import asyncio
import logging
import threading
from typing import AsyncIterator, Callable, Optional, Sequence

from mood_engine import Entry

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Sequence[Entry]], None]


class EntryFeed:
    """Delivers per-user entry snapshots to registered subscribers.

    Keeps the latest snapshot per user so that new stream subscribers can
    render immediately instead of waiting for the next change.
    """

    def __init__(self, queue_size: int = 16):
        """Initialize the feed.

        Args:
            queue_size: Capacity of each async subscriber queue.
        """
        self._callbacks: dict[str, list[SnapshotCallback]] = {}
        self._queues: dict[str, list[asyncio.Queue]] = {}
        self._latest: dict[str, tuple[Entry, ...]] = {}
        self._queue_size = queue_size
        self._lock = threading.Lock()
        self._stats = {
            "total_published": 0,
            "total_subscribers": 0,
        }

    def subscribe(self, user_id: str, callback: SnapshotCallback) -> Callable[[], None]:
        """Register a callback for a user's snapshots.

        Args:
            user_id: Owner of the entries to follow.
            callback: Called with the full entry tuple on every change.

        Returns:
            A function that removes the subscription.
        """
        with self._lock:
            self._callbacks.setdefault(user_id, []).append(callback)
            self._stats["total_subscribers"] += 1

        def unsubscribe() -> None:
            with self._lock:
                callbacks = self._callbacks.get(user_id, [])
                if callback in callbacks:
                    callbacks.remove(callback)
                if not callbacks:
                    self._callbacks.pop(user_id, None)

        return unsubscribe

    def publish(self, user_id: str, entries: Sequence[Entry]) -> None:
        """Publish a new snapshot for a user.

        Thread-safe; callbacks run on the publishing thread after the lock is
        released, so a callback may subscribe or unsubscribe.
        """
        snapshot = tuple(entries)

        with self._lock:
            # An empty snapshot is the same as no history; nothing is retained.
            if snapshot:
                self._latest[user_id] = snapshot
            else:
                self._latest.pop(user_id, None)
            self._stats["total_published"] += 1
            callbacks = list(self._callbacks.get(user_id, []))

            dead_queues = []
            for queue in self._queues.get(user_id, []):
                try:
                    queue.put_nowait(snapshot)
                except asyncio.QueueFull:
                    dead_queues.append(queue)

            for queue in dead_queues:
                self._queues[user_id].remove(queue)
                logger.warning(f"[FEED] Dropped slow stream subscriber for user {user_id}")
            if dead_queues and not self._queues[user_id]:
                del self._queues[user_id]

        for callback in callbacks:
            try:
                callback(snapshot)
            except Exception:
                logger.exception(f"[FEED] Snapshot callback failed for user {user_id}")

        logger.debug(
            f"[FEED] Published {len(snapshot)} entries for user {user_id} "
            f"to {len(callbacks)} callbacks"
        )

    async def stream(
        self,
        user_id: str,
        initial: Optional[Sequence[Entry]] = None,
    ) -> AsyncIterator[tuple[Entry, ...]]:
        """Subscribe to a user's snapshots via async generator.

        Args:
            user_id: Owner of the entries to follow.
            initial: Snapshot to yield first; defaults to the last published one.

        Yields:
            Entry tuples as they are published.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_size)

        with self._lock:
            self._queues.setdefault(user_id, []).append(queue)
            self._stats["total_subscribers"] += 1
            first = tuple(initial) if initial is not None else self._latest.get(user_id)
            if first is not None:
                queue.put_nowait(first)

        try:
            while True:
                snapshot = await queue.get()
                yield snapshot
        finally:
            with self._lock:
                queues = self._queues.get(user_id, [])
                if queue in queues:
                    queues.remove(queue)
                if not queues:
                    self._queues.pop(user_id, None)

    def latest(self, user_id: str) -> Optional[tuple[Entry, ...]]:
        """Return the last published snapshot for a user, if any."""
        with self._lock:
            return self._latest.get(user_id)

    def get_stats(self) -> dict:
        """Get feed statistics."""
        with self._lock:
            return {
                **self._stats,
                "current_callbacks": sum(len(c) for c in self._callbacks.values()),
                "current_streams": sum(len(q) for q in self._queues.values()),
                "users_tracked": len(self._latest),
            }


# Global singleton instance
entry_feed = EntryFeed()
