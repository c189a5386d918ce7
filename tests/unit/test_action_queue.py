"""Unit tests for ActionQueue - FIFO per conversation, drain clears."""

from booking_agent.models.action import ActionType
from booking_agent.services.action_queue import ActionQueue


class TestPush:
    def test_push_without_conversation_is_noop(self):
        queue = ActionQueue()

        assert queue.push(None, ActionType.BOOKING_STARTED, {}) is None
        assert queue.push("", ActionType.BOOKING_STARTED, {}) is None
        assert queue.get_stats()["pending_actions"] == 0
        assert queue.buckets == {}

    def test_push_creates_bucket_lazily(self):
        queue = ActionQueue()
        queue.push("conv-1", ActionType.BOOKING_STARTED, {"sessionId": "s1"})

        assert len(queue.buckets["conv-1"]) == 1
        assert "conv-2" not in queue.buckets

    def test_action_carries_timestamp(self):
        queue = ActionQueue()
        action = queue.push("conv-1", ActionType.PURL_READY, {"purl": "x"})

        assert action.timestamp > 0
        assert action.to_dict() == {
            "type": "purl_ready",
            "data": {"purl": "x"},
            "timestamp": action.timestamp,
        }


class TestDrain:
    def test_drain_returns_fifo_order(self):
        queue = ActionQueue()
        queue.push("conv-1", ActionType.BOOKING_STARTED, {"n": 1})
        queue.push("conv-1", ActionType.SEARCH_RESULTS, {"n": 2})
        queue.push("conv-1", ActionType.PACKAGE_SELECTED, {"n": 3})

        drained = queue.drain_all("conv-1")

        assert [a.data["n"] for a in drained] == [1, 2, 3]
        assert [a.type for a in drained] == [
            ActionType.BOOKING_STARTED,
            ActionType.SEARCH_RESULTS,
            ActionType.PACKAGE_SELECTED,
        ]

    def test_second_drain_is_empty(self):
        queue = ActionQueue()
        queue.push("conv-1", ActionType.BOOKING_STARTED, {})

        assert len(queue.drain_all("conv-1")) == 1
        assert queue.drain_all("conv-1") == []

    def test_drain_deletes_bucket(self):
        queue = ActionQueue()
        queue.push("conv-1", ActionType.BOOKING_STARTED, {})
        queue.drain_all("conv-1")

        assert "conv-1" not in queue.buckets

    def test_conversations_are_independent(self):
        queue = ActionQueue()
        queue.push("conv-1", ActionType.BOOKING_STARTED, {"who": "a"})
        queue.push("conv-2", ActionType.BOOKING_STARTED, {"who": "b"})

        first = queue.drain_all("conv-1")

        assert [a.data["who"] for a in first] == ["a"]
        assert len(queue.buckets["conv-2"]) == 1

    def test_drain_unknown_or_missing(self):
        queue = ActionQueue()

        assert queue.drain_all("never-seen") == []
        assert queue.drain_all(None) == []

    def test_stats(self):
        queue = ActionQueue()
        queue.push("conv-1", ActionType.BOOKING_STARTED, {})
        queue.push("conv-1", ActionType.SEARCH_RESULTS, {})
        queue.push("conv-2", ActionType.BOOKING_STARTED, {})
        queue.drain_all("conv-1")

        stats = queue.get_stats()

        assert stats["pushed"] == 3
        assert stats["drained"] == 2
        assert stats["pending_conversations"] == 1
        assert stats["pending_actions"] == 1
