"""
Unit tests for the key-function priority queue.
"""

from dataclasses import dataclass

import pytest

from gridpath.errors import EmptyQueue
from gridpath.graph import PriorityQueue


@dataclass(eq=False)
class Item:
    label: str
    priority: float


def make_queue() -> PriorityQueue:
    return PriorityQueue(key=lambda item: item.priority)


class TestHeapOrder:
    """Test dequeue order and counts."""

    def test_dequeues_non_decreasing(self):
        """Dequeued priorities should never decrease."""
        queue = make_queue()
        for i, p in enumerate([5, 3, 8, 1, 9, 2, 7, 3, 0, 6]):
            queue.enqueue(Item(str(i), p))

        out = [queue.dequeue().priority for _ in range(len(queue))]
        assert out == sorted(out)

    def test_count_after_enqueue_and_dequeue(self):
        """count should equal enqueues minus dequeues."""
        queue = make_queue()
        for p in range(10):
            queue.enqueue(Item(str(p), p))
        for _ in range(4):
            queue.dequeue()
        assert queue.count == 6
        assert len(queue) == 6

    def test_key_read_at_comparison_time(self):
        """Order follows the key function, not insertion order."""
        queue = make_queue()
        queue.enqueue(Item("late", 2.0))
        queue.enqueue(Item("early", 1.0))
        assert queue.peek().label == "early"

    def test_equal_keys_sift_down_prefers_left(self):
        """Equal children: the left child moves up first."""
        queue = make_queue()
        queue.enqueue(Item("root", 0))
        queue.enqueue(Item("left", 2))
        queue.enqueue(Item("right", 2))
        queue.enqueue(Item("tail", 9))

        labels = [queue.dequeue().label for _ in range(4)]
        assert labels == ["root", "left", "right", "tail"]

    def test_equal_keys_last_item_moves_to_root(self):
        """With all keys equal the last item replaces the root and stays there."""
        queue = make_queue()
        for label in "abc":
            queue.enqueue(Item(label, 1))

        labels = [queue.dequeue().label for _ in range(3)]
        assert labels == ["a", "c", "b"]


class TestEmptyQueue:
    """Test operations on an empty queue."""

    def test_dequeue_empty_raises(self):
        """dequeue() on an empty queue should raise EmptyQueue."""
        with pytest.raises(EmptyQueue):
            make_queue().dequeue()

    def test_peek_empty_raises(self):
        """peek() on an empty queue should raise EmptyQueue."""
        with pytest.raises(EmptyQueue):
            make_queue().peek()

    def test_empty_queue_is_index_error(self):
        """EmptyQueue should be catchable as IndexError."""
        with pytest.raises(IndexError):
            make_queue().dequeue()

    def test_falsy_when_empty(self):
        """An empty queue should be falsy."""
        queue = make_queue()
        assert not queue
        queue.enqueue(Item("a", 1))
        assert queue


class TestMembershipAndViews:
    """Test contains() and non-mutating views."""

    def test_contains_by_identity(self):
        """contains() should match the same object only."""
        queue = make_queue()
        item = Item("a", 1)
        queue.enqueue(item)
        assert queue.contains(item)
        assert item in queue
        assert Item("a", 1) not in queue

    def test_contains_false_after_dequeue(self):
        """A dequeued item should no longer be contained."""
        queue = make_queue()
        item = Item("a", 1)
        queue.enqueue(item)
        queue.dequeue()
        assert item not in queue

    def test_iteration_does_not_mutate(self):
        """Iterating should leave the queue untouched."""
        queue = make_queue()
        for p in [3, 1, 2]:
            queue.enqueue(Item(str(p), p))

        seen = sorted(item.priority for item in queue)
        assert seen == [1, 2, 3]
        assert queue.count == 3
        assert queue.peek().priority == 1

    def test_to_list_is_a_copy(self):
        """to_list() should return a snapshot, not the backing list."""
        queue = make_queue()
        queue.enqueue(Item("a", 1))
        snapshot = queue.to_list()
        snapshot.clear()
        assert queue.count == 1

    def test_clear(self):
        """clear() should empty the queue."""
        queue = make_queue()
        queue.enqueue(Item("a", 1))
        queue.clear()
        assert queue.count == 0
