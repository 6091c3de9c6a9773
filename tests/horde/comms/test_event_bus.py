"""Unit tests for EventBus: pub/sub messaging.

Tests subscribe/unsubscribe, topic filtering, publish/receive and queue
overflow (drop oldest).
"""
from __future__ import annotations

import queue

import pytest

from horde.comms.event_bus import EventBus


@pytest.mark.unit
class TestEventBusBasics:
    """Core subscribe/publish/unsubscribe functionality."""

    def test_subscribe_returns_queue(self):
        bus = EventBus()
        q = bus.subscribe()
        assert isinstance(q, queue.Queue)

    def test_publish_delivers_to_subscriber(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("spawn_command", {"monster_type": "goblin"})
        msg = q.get_nowait()
        assert msg["type"] == "spawn_command"
        assert msg["data"]["monster_type"] == "goblin"

    def test_publish_without_data(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("ping")
        msg = q.get_nowait()
        assert msg["type"] == "ping"
        assert "data" not in msg

    def test_multiple_subscribers(self):
        bus = EventBus()
        q1 = bus.subscribe()
        q2 = bus.subscribe()
        bus.publish("broadcast", {"msg": "hello"})
        assert q1.get_nowait()["type"] == "broadcast"
        assert q2.get_nowait()["type"] == "broadcast"

    def test_unsubscribe_stops_delivery(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.unsubscribe(q)
        bus.publish("after_unsub")
        assert q.empty()
        assert bus.subscriber_count() == 0

    def test_unsubscribe_nonexistent_is_safe(self):
        bus = EventBus()
        bus.unsubscribe(queue.Queue())  # Should not raise


@pytest.mark.unit
class TestEventBusTopics:
    def test_topic_subscription_filters(self):
        bus = EventBus()
        q = bus.subscribe("wave_advanced")
        bus.publish("spawn_command", {"x": 1})
        bus.publish("wave_advanced", {"wave_index": 2})
        msgs = EventBus.drain(q)
        assert [m["type"] for m in msgs] == ["wave_advanced"]

    def test_unfiltered_receives_everything(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("a")
        bus.publish("b")
        assert q.qsize() == 2

    def test_drain_empties_queue(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("a")
        bus.publish("b")
        assert len(EventBus.drain(q)) == 2
        assert EventBus.drain(q) == []


@pytest.mark.unit
class TestEventBusOverflow:
    """Queue overflow behavior: drop oldest message when full."""

    def test_default_maxsize_is_1000(self):
        bus = EventBus()
        assert bus.subscribe().maxsize == 1000

    def test_full_queue_drops_oldest(self):
        bus = EventBus(maxsize=3)
        q = bus.subscribe()
        for i in range(5):
            bus.publish("n", {"i": i})
        values = [m["data"]["i"] for m in EventBus.drain(q)]
        assert values == [2, 3, 4]
