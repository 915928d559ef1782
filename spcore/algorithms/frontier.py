"""Priority frontier for the shortest-path relaxation loop.

Entries are ordered by ``(distance, label)``. Re-keying a member removes its
current entry and inserts a new one; removed entries stay in the heap marked
as stale and are skipped on extraction, which keeps ``push``, ``update`` and
``pop`` at O(log n) amortized.
"""

from __future__ import annotations

from heapq import heapify, heappop, heappush
from itertools import count
from typing import Dict, Iterable, List, Tuple

from spcore.types.base import Cost, Label

# Marker stored in the handle slot of a removed entry
_REMOVED = -1


class Frontier:
    """Min-priority queue of vertex handles keyed by ``(distance, label)``."""

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[int, list] = {}
        # Unique sequence number; keeps comparisons away from the handle slot
        self._counter = count()

    @classmethod
    def from_items(cls, items: Iterable[Tuple[int, Cost, Label]]) -> Frontier:
        """Build a frontier from ``(handle, distance, label)`` triples in O(n).

        Raises:
            ValueError: If a handle appears more than once.
        """
        frontier = cls()
        for handle, distance, label in items:
            if handle in frontier._entries:
                raise ValueError(f"duplicate frontier handle {handle}")
            entry = [distance, label, next(frontier._counter), handle]
            frontier._entries[handle] = entry
            frontier._heap.append(entry)
        heapify(frontier._heap)
        return frontier

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries

    def push(self, handle: int, distance: Cost, label: Label) -> None:
        """Insert ``handle``; an existing entry for it is replaced."""
        if handle in self._entries:
            self.remove(handle)
        entry = [distance, label, next(self._counter), handle]
        self._entries[handle] = entry
        heappush(self._heap, entry)

    def update(self, handle: int, distance: Cost, label: Label) -> None:
        """Re-position ``handle`` under a new key (remove, then reinsert)."""
        self.push(handle, distance, label)

    def remove(self, handle: int) -> None:
        """Remove ``handle`` from the frontier.

        Raises:
            KeyError: If ``handle`` is not a member.
        """
        entry = self._entries.pop(handle)
        entry[-1] = _REMOVED

    def pop(self) -> Tuple[int, Cost]:
        """Remove and return ``(handle, distance)`` with the smallest key.

        Raises:
            KeyError: If the frontier is empty.
        """
        while self._heap:
            distance, _label, _seq, handle = heappop(self._heap)
            if handle != _REMOVED:
                del self._entries[handle]
                return handle, distance
        raise KeyError("pop from an empty frontier")

    def peek(self) -> Tuple[int, Cost]:
        """Return ``(handle, distance)`` with the smallest key without removing it.

        Raises:
            KeyError: If the frontier is empty.
        """
        heap = self._heap
        while heap and heap[0][-1] == _REMOVED:
            heappop(heap)
        if not heap:
            raise KeyError("peek at an empty frontier")
        return heap[0][-1], heap[0][0]
