"""Min-priority queues consumed by the solver."""

from __future__ import annotations

import heapq
from bisect import insort
from itertools import count
from typing import Callable, Dict, Iterator, List, NamedTuple, Protocol, Tuple

from .exceptions import ConfigError
from .graph import Cost, NodeId


class QueueEntry(NamedTuple):
    """A ``(node, cost)`` pair held by a priority queue."""

    node: NodeId
    cost: Cost


# (cost, insertion sequence, node); the sequence keeps nodes from ever being
# compared and breaks cost ties in FIFO order.
_Slot = Tuple[Cost, int, NodeId]


class PriorityQueue(Protocol):
    """Protocol for min-priority queues of ``(node, cost)`` entries.

    Implementations never deduplicate: pushing a node that is already queued
    adds a second entry. ``pop`` always returns an entry whose cost is not
    greater than that of any entry still queued.
    """

    def push(self, node: NodeId, cost: Cost) -> None:
        """Insert a new entry."""
        ...

    def pop(self) -> QueueEntry:
        """Remove and return the minimum-cost entry."""
        ...

    def empty(self) -> bool:
        """Return ``True`` if no entries remain."""
        ...

    def __len__(self) -> int:
        ...


class HeapQueue:
    """Priority queue backed by a binary heap.

    ``push`` and ``pop`` are both ``O(log n)``.
    """

    def __init__(self) -> None:
        self._heap: List[_Slot] = []
        self._seq = count()

    def push(self, node: NodeId, cost: Cost) -> None:
        """Insert ``node`` with priority ``cost``."""
        heapq.heappush(self._heap, (cost, next(self._seq), node))

    def pop(self) -> QueueEntry:
        """Remove and return the minimum-cost entry.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        cost, _, node = heapq.heappop(self._heap)
        return QueueEntry(node, cost)

    def empty(self) -> bool:
        """Return ``True`` if no entries remain."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[QueueEntry]:
        """Iterate over queued entries in ascending cost order without popping."""
        for cost, _, node in sorted(self._heap):
            yield QueueEntry(node, cost)


class SortedQueue:
    """Priority queue that keeps its entries sorted on every insert.

    ``push`` is ``O(n)`` and ``pop`` is ``O(1)``. Entries are stored in
    descending order so the minimum sits at the end of the list.
    """

    def __init__(self) -> None:
        self._items: List[_Slot] = []
        self._seq = count()

    def push(self, node: NodeId, cost: Cost) -> None:
        """Insert ``node`` with priority ``cost``."""
        # Negated keys keep the list ascending for bisect while the minimum
        # ends up last.
        insort(self._items, (-cost, -next(self._seq), node))

    def pop(self) -> QueueEntry:
        """Remove and return the minimum-cost entry.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        neg_cost, _, node = self._items.pop()
        return QueueEntry(node, -neg_cost)

    def empty(self) -> bool:
        """Return ``True`` if no entries remain."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[QueueEntry]:
        """Iterate over queued entries in ascending cost order without popping."""
        for neg_cost, _, node in reversed(self._items):
            yield QueueEntry(node, -neg_cost)


QUEUES: Dict[str, Callable[[], PriorityQueue]] = {
    "heap": HeapQueue,
    "sorted": SortedQueue,
}


def make_queue(name: str) -> PriorityQueue:
    """Return a new, empty queue for the strategy ``name``.

    Raises:
        ConfigError: If ``name`` is not a known strategy.
    """
    try:
        factory = QUEUES[name]
    except KeyError:
        raise ConfigError(f"unknown queue '{name}' (expected one of {sorted(QUEUES)})") from None
    return factory()


__all__ = ["QueueEntry", "PriorityQueue", "HeapQueue", "SortedQueue", "QUEUES", "make_queue"]
