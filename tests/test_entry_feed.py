"""
Unit tests for the entry snapshot feed.

Usage:
    pytest tests/test_entry_feed.py -v
"""
import asyncio

import pytest

from server.dashboard_api.services.entry_feed import EntryFeed
from conftest import make_entry


class TestCallbacks:
    """Test synchronous snapshot subscribers."""

    def test_callback_receives_full_snapshot(self, feed):
        received = []
        feed.subscribe("alice", received.append)
        entries = [make_entry(0, "joy"), make_entry(1, "anger")]

        feed.publish("alice", entries)

        assert received == [tuple(entries)]

    def test_snapshots_are_per_user(self, feed):
        alice, bob = [], []
        feed.subscribe("alice", alice.append)
        feed.subscribe("bob", bob.append)

        feed.publish("alice", [make_entry(0, "joy")])

        assert len(alice) == 1
        assert bob == []

    def test_unsubscribe_stops_delivery(self, feed):
        received = []
        unsubscribe = feed.subscribe("alice", received.append)

        feed.publish("alice", [])
        unsubscribe()
        feed.publish("alice", [make_entry(0)])

        assert received == [()]

    def test_failing_callback_does_not_block_others(self, feed):
        received = []

        def broken(snapshot):
            raise RuntimeError("subscriber bug")

        feed.subscribe("alice", broken)
        feed.subscribe("alice", received.append)

        feed.publish("alice", [make_entry(0)])

        assert len(received) == 1

    def test_snapshot_is_immutable_copy(self, feed):
        received = []
        feed.subscribe("alice", received.append)
        entries = [make_entry(0)]

        feed.publish("alice", entries)
        entries.append(make_entry(1))

        assert len(received[0]) == 1
        assert isinstance(received[0], tuple)

    def test_latest_and_stats(self, feed):
        assert feed.latest("alice") is None

        unsubscribe = feed.subscribe("alice", lambda snapshot: None)
        feed.publish("alice", [make_entry(0)])

        assert len(feed.latest("alice")) == 1
        stats = feed.get_stats()
        assert stats["total_published"] == 1
        assert stats["current_callbacks"] == 1
        assert stats["users_tracked"] == 1

        unsubscribe()
        assert feed.get_stats()["current_callbacks"] == 0


class TestStream:
    """Test async snapshot streams."""

    @pytest.mark.asyncio
    async def test_initial_snapshot_first(self, feed):
        initial = [make_entry(0, "joy")]
        stream = feed.stream("alice", initial=initial)

        first = await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        assert first == tuple(initial)
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_receives_published_snapshots(self, feed):
        stream = feed.stream("alice", initial=[])
        await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        entry = make_entry(0, "surprise")
        feed.publish("alice", [entry])
        update = await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        assert update == (entry,)
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_starts_from_latest_published(self, feed):
        entry = make_entry(0, "fear")
        feed.publish("alice", [entry])

        stream = feed.stream("alice")
        first = await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        assert first == (entry,)
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_closing_stream_unregisters(self, feed):
        stream = feed.stream("alice", initial=[])
        await asyncio.wait_for(stream.__anext__(), timeout=1.0)
        assert feed.get_stats()["current_streams"] == 1

        await stream.aclose()

        assert feed.get_stats()["current_streams"] == 0

    @pytest.mark.asyncio
    async def test_slow_stream_dropped(self):
        feed = EntryFeed(queue_size=1)
        stream = feed.stream("alice", initial=[])
        await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        feed.publish("alice", [make_entry(0)])
        feed.publish("alice", [make_entry(0), make_entry(1)])

        assert feed.get_stats()["current_streams"] == 0
        await stream.aclose()


class TestCleanup:
    """Test that idle users do not linger in the feed."""

    def test_unsubscribe_removes_user(self, feed):
        unsubscribe = feed.subscribe("alice", lambda snapshot: None)

        unsubscribe()

        assert "alice" not in feed._callbacks
        assert feed.get_stats()["current_callbacks"] == 0

    def test_empty_snapshot_not_retained(self, feed):
        feed.publish("alice", [make_entry(0)])
        feed.publish("alice", [])

        assert feed.latest("alice") is None
        assert feed.get_stats()["users_tracked"] == 0

    @pytest.mark.asyncio
    async def test_closed_stream_removes_user(self, feed):
        stream = feed.stream("alice", initial=[])
        await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        await stream.aclose()

        assert "alice" not in feed._queues

    @pytest.mark.asyncio
    async def test_dropped_stream_removes_user(self):
        feed = EntryFeed(queue_size=1)
        stream = feed.stream("alice", initial=[])
        await asyncio.wait_for(stream.__anext__(), timeout=1.0)

        feed.publish("alice", [make_entry(0)])
        feed.publish("alice", [make_entry(1)])

        assert "alice" not in feed._queues
        await stream.aclose()
