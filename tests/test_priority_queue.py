import random

import pytest

from minpath.exceptions import ConfigError
from minpath.priority_queue import HeapQueue, QueueEntry, SortedQueue, make_queue

STRATEGIES = [HeapQueue, SortedQueue]


@pytest.mark.parametrize("cls", STRATEGIES)
class TestPriorityQueue:
    def test_starts_empty(self, cls):
        q = cls()
        assert q.empty()
        assert len(q) == 0

    def test_push_makes_non_empty_and_pop_of_last_empties(self, cls):
        q = cls()
        q.push("a", 3)
        assert not q.empty()
        assert q.pop() == QueueEntry("a", 3)
        assert q.empty()

    def test_pop_returns_minimum(self, cls):
        q = cls()
        for node, cost in [("c", 5), ("a", 1), ("d", 7), ("b", 2)]:
            q.push(node, cost)
        assert [q.pop().node for _ in range(4)] == ["a", "b", "c", "d"]

    def test_duplicates_are_kept(self, cls):
        q = cls()
        q.push("x", 10)
        q.push("x", 3)
        assert len(q) == 2
        assert q.pop() == ("x", 3)
        assert q.pop() == ("x", 10)

    def test_ties_pop_in_insertion_order(self, cls):
        q = cls()
        for node in ["e", "g", "b"]:
            q.push(node, 2)
        assert [q.pop().node for _ in range(3)] == ["e", "g", "b"]

    def test_nodes_are_never_compared(self, cls):
        q = cls()
        q.push({"unorderable": 1}.items(), 1)
        q.push(object(), 1)
        q.pop()
        q.pop()
        assert q.empty()

    def test_pop_empty_raises(self, cls):
        with pytest.raises(IndexError):
            cls().pop()

    def test_interleaved_never_pops_above_resident(self, cls):
        rnd = random.Random(7)
        q = cls()
        resident = []
        for _ in range(500):
            if resident and rnd.random() < 0.4:
                entry = q.pop()
                assert entry.cost == min(resident)
                resident.remove(entry.cost)
            else:
                cost = rnd.randint(0, 50)
                q.push(rnd.choice("abcdef"), cost)
                resident.append(cost)
            assert len(q) == len(resident)

    def test_iteration_is_sorted_and_non_destructive(self, cls):
        q = cls()
        for node, cost in [("b", 2), ("a", 1), ("c", 3)]:
            q.push(node, cost)
        assert [e.node for e in q] == ["a", "b", "c"]
        assert len(q) == 3


def test_make_queue():
    assert isinstance(make_queue("heap"), HeapQueue)
    assert isinstance(make_queue("sorted"), SortedQueue)
    assert make_queue("heap") is not make_queue("heap")


def test_make_queue_unknown():
    with pytest.raises(ConfigError):
        make_queue("fibonacci")
