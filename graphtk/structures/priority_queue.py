"""Min-priority queue with O(1) membership lookup and O(log n) removal.

The queue keeps a binary heap of ``[priority, counter, item]`` entries and an
index mapping each item to its current heap slot. Every mutating operation
updates both, so ``item in queue`` always agrees with the heap contents.

Items must be hashable. They are never compared with each other; equal
priorities are ordered by an internal insertion counter, which is an
implementation detail callers should not rely on.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Dict, Hashable, Iterator, List, Tuple

from graphtk.types import Cost

# Heap entry layout
_PRIORITY = 0
_COUNTER = 1
_ITEM = 2


class PriorityQueueWithLookup:
    """Min-priority queue that rejects duplicate items.

    An item can be enqueued only once, regardless of priority. To change the
    priority of a queued item, ``remove`` it and ``enqueue`` it again (or use
    ``update``, which does exactly that).

    Example:
        >>> pq = PriorityQueueWithLookup()
        >>> pq.enqueue("x", 5)
        True
        >>> pq.enqueue("x", 1)
        False
        >>> pq.dequeue_with_priority()
        ('x', 5)
    """

    def __init__(self) -> None:
        self._heap: List[List[Any]] = []
        self._index: Dict[Hashable, int] = {}
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: Hashable) -> bool:
        return item in self._index

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over queued items in heap order (not sorted)."""
        return (entry[_ITEM] for entry in self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._heap)})"

    def clear(self) -> None:
        """Remove every item."""
        self._heap.clear()
        self._index.clear()

    def enqueue(self, item: Hashable, priority: Cost) -> bool:
        """Add ``item`` with ``priority``.

        Returns:
            True if the item was added, False if it is already queued. A
            rejected call leaves the existing priority untouched.
        """
        if item in self._index:
            return False
        self._heap.append([priority, next(self._counter), item])
        pos = len(self._heap) - 1
        self._index[item] = pos
        self._sift_up(pos)
        return True

    def dequeue(self) -> Hashable:
        """Remove and return the item with the lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        return self.dequeue_with_priority()[0]

    def dequeue_with_priority(self) -> Tuple[Hashable, Cost]:
        """Remove and return ``(item, priority)`` for the lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        entry = self._pop_at(0)
        return entry[_ITEM], entry[_PRIORITY]

    def peek(self) -> Hashable:
        """Return the lowest-priority item without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        return self.peek_with_priority()[0]

    def peek_with_priority(self) -> Tuple[Hashable, Cost]:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        entry = self._heap[0]
        return entry[_ITEM], entry[_PRIORITY]

    def priority(self, item: Hashable) -> Cost:
        """Return the priority ``item`` is queued with.

        Raises:
            KeyError: If the item is not queued.
        """
        return self._heap[self._index[item]][_PRIORITY]

    def remove(self, item: Hashable) -> bool:
        """Remove an arbitrary queued item.

        Returns:
            True if the item was queued and has been removed, False otherwise.
        """
        pos = self._index.get(item)
        if pos is None:
            return False
        self._pop_at(pos)
        return True

    def update(self, item: Hashable, priority: Cost) -> None:
        """Queue ``item`` with ``priority``, replacing any previous entry."""
        self.remove(item)
        self.enqueue(item, priority)

    def _pop_at(self, pos: int) -> List[Any]:
        heap = self._heap
        entry = heap[pos]
        del self._index[entry[_ITEM]]

        last = heap.pop()
        if pos < len(heap):
            # Fill the hole with the former last entry and restore heap order
            heap[pos] = last
            self._index[last[_ITEM]] = pos
            if pos > 0 and self._less(pos, (pos - 1) >> 1):
                self._sift_up(pos)
            else:
                self._sift_down(pos)
        return entry

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return (a[_PRIORITY], a[_COUNTER]) < (b[_PRIORITY], b[_COUNTER])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i][_ITEM]] = i
        self._index[heap[j][_ITEM]] = j

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) >> 1
            if not self._less(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        size = len(self._heap)
        while True:
            smallest = pos
            left = 2 * pos + 1
            right = left + 1
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == pos:
                return
            self._swap(pos, smallest)
            pos = smallest
